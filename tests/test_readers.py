"""
Tests for the descriptor and mmap read strategies.
"""
import pytest

from iobench import (
    BenchmarkConfig,
    BenchmarkSetupError,
    DescriptorBenchmark,
    IOFailure,
    MmapBenchmark,
    OutOfBoundsError,
    ShortReadError,
    create_benchmark,
    create_test_files,
    cleanup_test_files,
)
from iobench.filesystem import FILL_BYTE


class TestFileSetup:
    """Test creation and cleanup of benchmark files."""

    def test_create_test_files(self, small_config, tmp_path):
        paths = create_test_files(small_config, tmp_path)
        assert len(paths) == 2
        assert paths[0].name == "iotest_0.dat"
        for path in paths:
            data = path.read_bytes()
            assert len(data) == small_config.file_size
            assert set(data) == {FILL_BYTE}

    def test_cleanup_test_files(self, small_files):
        cleanup_test_files(small_files)
        assert not any(p.exists() for p in small_files)
        # повторная очистка не падает
        cleanup_test_files(small_files)

    def test_create_in_unwritable_location(self, small_config, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_bytes(b"x")
        with pytest.raises(BenchmarkSetupError):
            create_test_files(small_config, blocker)


class TestDescriptorBenchmark:
    """Test descriptor-based reads."""

    def test_read_block(self, small_config, small_files):
        bench = DescriptorBenchmark(small_config, small_files)
        bench.setup()
        data = bench.read_block(1, 4096)
        assert data == bytes([FILL_BYTE]) * 4096

    def test_timed_read(self, small_config, small_files):
        bench = DescriptorBenchmark(small_config, small_files)
        assert bench.timed_read(0, 0) >= 0

    def test_short_read(self, small_config, small_files):
        bench = DescriptorBenchmark(small_config, small_files)
        with pytest.raises(ShortReadError):
            bench.read_block(0, small_config.file_size - 100)

    def test_short_read_is_out_of_bounds(self, small_config, small_files):
        bench = DescriptorBenchmark(small_config, small_files)
        with pytest.raises(OutOfBoundsError):
            bench.timed_read(0, small_config.file_size)

    def test_missing_file_is_io_failure(self, small_config, small_files):
        bench = DescriptorBenchmark(small_config, small_files)
        small_files[0].unlink()
        with pytest.raises(IOFailure):
            bench.timed_read(0, 0)

    def test_setup_rejects_missing_file(self, small_config, tmp_path):
        bench = DescriptorBenchmark(small_config, [tmp_path / "missing.dat"])
        with pytest.raises(BenchmarkSetupError):
            bench.setup()

    def test_setup_rejects_short_file(self, small_config, tmp_path):
        path = tmp_path / "short.dat"
        path.write_bytes(b"\0" * 100)
        bench = DescriptorBenchmark(small_config, [path])
        with pytest.raises(BenchmarkSetupError):
            bench.setup()


class TestMmapBenchmark:
    """Test memory-mapped reads."""

    def test_read_block(self, small_config, small_files):
        bench = MmapBenchmark(small_config, small_files)
        bench.setup()
        try:
            data = bench.read_block(0, 8192)
            assert isinstance(data, bytes)
            assert data == bytes([FILL_BYTE]) * 4096
        finally:
            bench.cleanup()
        assert bench.mmaps == []

    def test_last_block_is_readable(self, small_config, small_files):
        bench = MmapBenchmark(small_config, small_files)
        bench.setup()
        try:
            offset = small_config.file_size - small_config.block_size
            assert len(bench.read_block(1, offset)) == small_config.block_size
        finally:
            bench.cleanup()

    @pytest.mark.parametrize("offset", [65536 - 4095, 65536 - 1, 65536, 10 * 65536])
    def test_out_of_bounds(self, small_config, small_files, offset):
        """offset + block_size > mapped length never yields a truncated read."""
        bench = MmapBenchmark(small_config, small_files)
        bench.setup()
        try:
            with pytest.raises(OutOfBoundsError):
                bench.timed_read(0, offset)
        finally:
            bench.cleanup()

    def test_setup_failure_is_fatal(self, small_config, small_files, tmp_path):
        empty = tmp_path / "empty.dat"
        empty.write_bytes(b"")
        bench = MmapBenchmark(small_config, [small_files[0], empty])
        with pytest.raises(BenchmarkSetupError):
            bench.setup()
        assert bench.mmaps == []

    def test_setup_missing_file(self, small_config, tmp_path):
        bench = MmapBenchmark(small_config, [tmp_path / "missing.dat"])
        with pytest.raises(BenchmarkSetupError):
            bench.setup()


def test_create_benchmark_selects_strategy(small_files):
    assert isinstance(create_benchmark(BenchmarkConfig(use_mmap=True), small_files), MmapBenchmark)
    assert isinstance(create_benchmark(BenchmarkConfig(), small_files), DescriptorBenchmark)
