"""Генерация случайных шаблонов доступа для потоков"""

from typing import Iterator, NamedTuple

import numpy as np

from .workloads import BenchmarkConfig


class AccessKey(NamedTuple):
    """Логический блок: (индекс файла, индекс блока)"""
    file_index: int
    block_index: int


class Access(NamedTuple):
    """Одно обращение к блоку"""
    file_index: int
    block_index: int
    offset: int

    @property
    def key(self) -> AccessKey:
        return AccessKey(self.file_index, self.block_index)


class AccessPatternGenerator:
    """
    Детерминированная последовательность (файл, блок, смещение) для одного потока.

    Генератор инициализируется значением seed + worker_index, поэтому
    потоки не согласуют между собой состояние, а повторный запуск с тем же
    seed дает те же последовательности.
    """

    def __init__(self, seed: int, worker_index: int, num_files: int,
                 file_size: int, block_size: int):
        self.seed = seed + worker_index
        self.worker_index = worker_index
        self.num_files = num_files
        self.block_size = block_size
        self.blocks_per_file = file_size // block_size
        self.rng = np.random.default_rng(self.seed)

    @classmethod
    def for_worker(cls, config: BenchmarkConfig, worker_index: int) -> "AccessPatternGenerator":
        return cls(
            seed=config.seed,
            worker_index=worker_index,
            num_files=config.num_files,
            file_size=config.file_size,
            block_size=config.block_size,
        )

    def accesses(self, count: int) -> Iterator[Access]:
        """Выдает до count обращений; при нуле блоков в файле операции пропускаются"""
        if self.num_files == 0:
            return

        for _ in range(count):
            file_index = int(self.rng.integers(0, self.num_files))

            if self.blocks_per_file == 0:
                continue

            block_index = int(self.rng.integers(0, self.blocks_per_file))
            yield Access(file_index, block_index, block_index * self.block_size)
