"""Выбор режима чтения и запуск бенчмарка"""

from pathlib import Path
from typing import Sequence

from .base import BenchmarkBase, RunResult
from .filesystem import DescriptorBenchmark
from .mapped import MmapBenchmark
from .workloads import BenchmarkConfig


def create_benchmark(config: BenchmarkConfig, file_paths: Sequence[Path]) -> BenchmarkBase:
    """Стратегия выбирается один раз на весь запуск"""
    if config.use_mmap:
        return MmapBenchmark(config, file_paths)
    return DescriptorBenchmark(config, file_paths)


def run_benchmark(config: BenchmarkConfig, file_paths: Sequence[Path]) -> RunResult:
    return create_benchmark(config, file_paths).run()
