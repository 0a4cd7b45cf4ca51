"""Параметры запуска бенчмарка"""

from dataclasses import dataclass, asdict


class Defaults:
    """Значения по умолчанию"""

    NUM_FILES = 10
    FILE_SIZE = 1 * 1024 * 1024  # 1 MB
    WAIT_TIME = 1  # секунды
    NUM_THREADS = 4
    SEED = 42
    BLOCK_SIZE = 4 * 1024  # 4 KB
    NUM_OPERATIONS = 1000
    FILE_PREFIX = "testfile"


class IOMode:
    """Режимы чтения"""
    DESCRIPTOR = "descriptor"
    MMAP = "mmap"


@dataclass(frozen=True)
class BenchmarkConfig:
    """Неизменяемые параметры одного запуска"""
    num_files: int = Defaults.NUM_FILES
    file_size: int = Defaults.FILE_SIZE
    wait_time: float = Defaults.WAIT_TIME
    num_threads: int = Defaults.NUM_THREADS
    seed: int = Defaults.SEED
    block_size: int = Defaults.BLOCK_SIZE
    num_operations: int = Defaults.NUM_OPERATIONS
    use_mmap: bool = False
    file_prefix: str = Defaults.FILE_PREFIX

    def __post_init__(self):
        for field_name in ("num_files", "file_size", "num_threads", "num_operations"):
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must be non-negative")
        if self.block_size <= 0:
            raise ValueError("block_size must be positive")
        if self.seed < 0:
            raise ValueError("seed must be non-negative")
        if self.wait_time < 0:
            raise ValueError("wait_time must be non-negative")

    @property
    def mode(self) -> str:
        return IOMode.MMAP if self.use_mmap else IOMode.DESCRIPTOR

    @property
    def blocks_per_file(self) -> int:
        """Число адресуемых блоков в файле (0 - чтений не будет)"""
        return self.file_size // self.block_size

    @property
    def worker_count(self) -> int:
        """
        Фактическое число потоков.
        Ноль потоков или потоков больше, чем операций, сводится к
        max(1, min(num_threads, num_operations)).
        """
        return max(1, min(self.num_threads, self.num_operations))

    @classmethod
    def from_args(cls, args) -> "BenchmarkConfig":
        """Сборка конфигурации из argparse.Namespace"""
        return cls(
            num_files=args.num_files,
            file_size=args.file_size,
            wait_time=args.wait_time,
            num_threads=args.num_threads,
            seed=args.seed,
            block_size=args.block_size,
            num_operations=args.num_operations,
            use_mmap=args.use_mmap,
            file_prefix=args.file_prefix,
        )

    def to_dict(self):
        data = asdict(self)
        data["mode"] = self.mode
        return data
