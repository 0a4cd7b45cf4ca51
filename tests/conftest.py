"""
Pytest configuration and shared fixtures for all tests.
"""
import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from iobench import BenchmarkConfig, create_test_files


@pytest.fixture
def small_config():
    """Small configuration: 2 files × 64 KB, 4 KB blocks."""
    return BenchmarkConfig(
        num_files=2,
        file_size=64 * 1024,
        wait_time=0,
        num_threads=2,
        seed=42,
        block_size=4096,
        num_operations=200,
        file_prefix="iotest",
    )


@pytest.fixture
def small_files(small_config, tmp_path):
    """Test files for small_config."""
    return create_test_files(small_config, tmp_path)


@pytest.fixture
def scenario_config():
    """4 files × 1 MB, block 4096, 1000 operations, 4 threads, seed 42."""
    return BenchmarkConfig(
        num_files=4,
        file_size=1024 * 1024,
        wait_time=0,
        num_threads=4,
        seed=42,
        block_size=4096,
        num_operations=1000,
        file_prefix="scenario",
    )
