"""Чтение через отображение файлов в память (mmap)"""

import logging
import mmap

from .base import BenchmarkBase, BenchmarkSetupError, OutOfBoundsError

logger = logging.getLogger(__name__)


class MmapBenchmark(BenchmarkBase):
    """Бенчмарк копирования блока из отображенного в память файла"""

    def __init__(self, config, file_paths):
        super().__init__(config, file_paths)
        self.mmaps = []

    def setup(self):
        """Отображение всех файлов только для чтения до запуска потоков"""
        self.cleanup()
        try:
            for path in self.file_paths:
                with open(path, 'rb') as f:
                    # отображение остается валидным после закрытия файла
                    self.mmaps.append(mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ))
        except (OSError, ValueError) as e:
            self.cleanup()
            raise BenchmarkSetupError(f"Cannot map test file {path}: {e}") from e

        for path, mapped in zip(self.file_paths, self.mmaps):
            if len(mapped) < self.config.file_size:
                size = len(mapped)
                self.cleanup()
                raise BenchmarkSetupError(
                    f"Test file {path} has {size} bytes, expected {self.config.file_size}"
                )

        logger.debug("Mapped %d files", len(self.mmaps))

    def read_block(self, file_index: int, offset: int, handle=None) -> bytes:
        mapped = self.mmaps[file_index]
        end = offset + self.config.block_size
        if end > len(mapped):
            raise OutOfBoundsError(
                f"Read {offset}..{end} beyond mapped length {len(mapped)}"
            )

        # срез копирует данные и вызывает реальное обращение к памяти
        return mapped[offset:end]

    def cleanup(self):
        """Закрытие отображений"""
        for mapped in self.mmaps:
            mapped.close()
        self.mmaps = []
