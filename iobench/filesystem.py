"""Чтение через файловый дескриптор и подготовка тестовых файлов"""

import logging
import os
from pathlib import Path
from typing import List, Sequence

from .base import BenchmarkBase, BenchmarkSetupError, IOFailure, ShortReadError
from .workloads import BenchmarkConfig

logger = logging.getLogger(__name__)

FILL_BYTE = 0xAB


def data_file_path(directory: Path, prefix: str, index: int) -> Path:
    return Path(directory) / f"{prefix}_{index}.dat"


def create_test_files(config: BenchmarkConfig, directory: Path = Path(".")) -> List[Path]:
    """
    Создание config.num_files файлов по config.file_size байт.
    Данные сбрасываются на диск до начала замеров.
    """
    directory = Path(directory)
    test_data = bytes([FILL_BYTE]) * config.file_size
    file_paths = []

    try:
        directory.mkdir(parents=True, exist_ok=True)
        for i in range(config.num_files):
            file_path = data_file_path(directory, config.file_prefix, i)
            with open(file_path, 'wb') as f:
                f.write(test_data)
                f.flush()
                os.fsync(f.fileno())
            file_paths.append(file_path)
    except OSError as e:
        cleanup_test_files(file_paths)
        raise BenchmarkSetupError(f"Cannot create test files in {directory}: {e}") from e

    logger.info("Created %d files of %d bytes in %s", len(file_paths), config.file_size, directory)
    return file_paths


def cleanup_test_files(file_paths: Sequence[Path]):
    """Удаление тестовых файлов"""
    for file_path in file_paths:
        path = Path(file_path)
        if path.exists():
            path.unlink()


class DescriptorBenchmark(BenchmarkBase):
    """Чтение блока через open + seek + read"""

    def setup(self):
        """Проверка, что все файлы на месте и нужного размера"""
        for path in self.file_paths:
            try:
                size = path.stat().st_size
            except OSError as e:
                raise BenchmarkSetupError(f"Test file unavailable: {path}: {e}") from e
            if size < self.config.file_size:
                raise BenchmarkSetupError(
                    f"Test file {path} has {size} bytes, expected {self.config.file_size}"
                )

    def prepare_read(self, file_index: int, offset: int):
        try:
            f = open(self.file_paths[file_index], 'rb', buffering=0)
        except OSError as e:
            raise IOFailure(str(e)) from e

        try:
            f.seek(offset)
        except OSError as e:
            f.close()
            raise IOFailure(str(e)) from e
        return f

    def finish_read(self, handle):
        if handle is not None:
            handle.close()

    def read_block(self, file_index: int, offset: int, handle=None) -> bytes:
        if handle is None:
            handle = self.prepare_read(file_index, offset)
            try:
                return self._read_exact(handle)
            finally:
                handle.close()
        return self._read_exact(handle)

    def _read_exact(self, f) -> bytes:
        try:
            data = f.read(self.config.block_size)
        except OSError as e:
            raise IOFailure(str(e)) from e

        if data is None or len(data) < self.config.block_size:
            got = 0 if data is None else len(data)
            raise ShortReadError(f"Read {got} of {self.config.block_size} bytes")
        return data

    def cleanup(self):
        pass
