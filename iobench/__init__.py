"""Random I/O latency benchmark: descriptor reads vs mmap, first vs repeated reads"""

from .base import (
    BenchmarkBase,
    BenchmarkError,
    BenchmarkSetupError,
    IOFailure,
    OutOfBoundsError,
    ReadResult,
    RunResult,
    ShortReadError,
    split_operations,
)
from .filesystem import DescriptorBenchmark, create_test_files, cleanup_test_files
from .mapped import MmapBenchmark
from .metrics import LatencyStatistics, MetricsCollector, analyze_results, calculate_statistics
from .patterns import Access, AccessKey, AccessPatternGenerator
from .runner import create_benchmark, run_benchmark
from .tracker import FirstTouchTracker
from .visualize import generate_all_plots
from .workloads import BenchmarkConfig, IOMode

__all__ = [
    'Access',
    'AccessKey',
    'AccessPatternGenerator',
    'BenchmarkBase',
    'BenchmarkConfig',
    'BenchmarkError',
    'BenchmarkSetupError',
    'DescriptorBenchmark',
    'FirstTouchTracker',
    'IOFailure',
    'IOMode',
    'LatencyStatistics',
    'MetricsCollector',
    'MmapBenchmark',
    'OutOfBoundsError',
    'ReadResult',
    'RunResult',
    'ShortReadError',
    'analyze_results',
    'calculate_statistics',
    'cleanup_test_files',
    'create_benchmark',
    'create_test_files',
    'generate_all_plots',
    'run_benchmark',
    'split_operations',
]
