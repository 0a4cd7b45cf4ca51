"""Базовые классы для бенчмарков"""

import logging
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from .patterns import AccessPatternGenerator
from .tracker import FirstTouchTracker
from .workloads import BenchmarkConfig

logger = logging.getLogger(__name__)


class BenchmarkError(Exception):
    """Ошибка отдельной операции чтения"""


class IOFailure(BenchmarkError):
    """Ошибка открытия, позиционирования или чтения файла"""


class OutOfBoundsError(BenchmarkError):
    """Запрошенный диапазон выходит за границы данных"""


class ShortReadError(OutOfBoundsError):
    """Прочитано меньше байт, чем запрошено"""


class BenchmarkSetupError(Exception):
    """Ошибка подготовки: запуск невозможен"""


@dataclass(frozen=True)
class ReadResult:
    """Одна выполненная операция"""
    latency_ns: int
    is_first_read: bool


@dataclass
class RunResult:
    """Результаты одного запуска"""
    mode: str
    results: List[ReadResult] = field(default_factory=list)
    errors: int = 0
    shares: List[int] = field(default_factory=list)
    total_time_sec: float = 0.0

    def first_reads(self) -> List[ReadResult]:
        return [r for r in self.results if r.is_first_read]

    def repeated_reads(self) -> List[ReadResult]:
        return [r for r in self.results if not r.is_first_read]


def split_operations(total: int, workers: int) -> List[int]:
    """Делит total операций на workers долей, отличающихся не более чем на 1"""
    base, remainder = divmod(total, workers)
    return [base + (1 if i < remainder else 0) for i in range(workers)]


class BenchmarkBase(ABC):
    """Базовый класс для всех режимов чтения"""

    def __init__(self, config: BenchmarkConfig, file_paths: Sequence[Path]):
        self.config = config
        self.file_paths = [Path(p) for p in file_paths]
        self.tracker = FirstTouchTracker()
        self.results: List[ReadResult] = []
        self.errors = 0
        self._merge_lock = threading.Lock()

    @abstractmethod
    def setup(self):
        """Подготовка перед тестом, выполняется до запуска потоков"""
        pass

    @abstractmethod
    def read_block(self, file_index: int, offset: int, handle=None) -> bytes:
        """
        Чтение одного блока.
        handle - результат prepare_read (например, открытый файл).
        Возвращает скопированные байты; время измеряется вокруг этого вызова.
        """
        pass

    @abstractmethod
    def cleanup(self):
        """Очистка после теста"""
        pass

    def prepare_read(self, file_index: int, offset: int):
        """Подготовка операции вне замеряемого участка"""
        return None

    def finish_read(self, handle):
        """Освобождение ресурсов, полученных в prepare_read"""
        pass

    def timed_read(self, file_index: int, offset: int) -> int:
        """Задержка одного чтения в наносекундах"""
        handle = self.prepare_read(file_index, offset)
        try:
            start = time.perf_counter_ns()
            self.read_block(file_index, offset, handle)
            return time.perf_counter_ns() - start
        finally:
            self.finish_read(handle)

    def run(self) -> RunResult:
        """Запуск всех потоков и сбор результатов"""
        config = self.config
        shares = split_operations(config.num_operations, config.worker_count)

        logger.info("Starting %s benchmark: %d operations on %d workers",
                    config.mode, config.num_operations, len(shares))

        if len(self.file_paths) != config.num_files:
            raise BenchmarkSetupError(
                f"Expected {config.num_files} test files, got {len(self.file_paths)}"
            )

        self.setup()
        self.results = []
        self.errors = 0
        worker_failures = []

        start_time = time.perf_counter()
        threads = []
        try:
            for worker_index, share in enumerate(shares):
                thread = threading.Thread(
                    target=self._worker,
                    args=(worker_index, share, worker_failures),
                    name=f"iobench-worker-{worker_index}",
                )
                thread.start()
                threads.append(thread)
        finally:
            # отображения закрываются только после завершения всех запущенных потоков
            for thread in threads:
                thread.join()
            self.cleanup()

        total_time = time.perf_counter() - start_time

        if worker_failures:
            raise worker_failures[0]

        logger.info("Finished %s benchmark: %d results, %d dropped, %.3f sec",
                    config.mode, len(self.results), self.errors, total_time)

        return RunResult(
            mode=config.mode,
            results=list(self.results),
            errors=self.errors,
            shares=shares,
            total_time_sec=total_time,
        )

    def _worker(self, worker_index: int, share: int, failures: list):
        generator = AccessPatternGenerator.for_worker(self.config, worker_index)
        local_results = []
        local_errors = 0

        try:
            for access in generator.accesses(share):
                is_first_read = self.tracker.mark_and_check(access.file_index, access.block_index)

                try:
                    latency = self.timed_read(access.file_index, access.offset)
                except BenchmarkError as e:
                    logger.debug("Worker %d dropped read %s: %s", worker_index, access, e)
                    local_errors += 1
                    continue

                local_results.append(ReadResult(latency, is_first_read))
        except Exception as e:
            logger.error("Worker %d failed: %s", worker_index, e)
            failures.append(e)

        with self._merge_lock:
            self.results.extend(local_results)
            self.errors += local_errors
