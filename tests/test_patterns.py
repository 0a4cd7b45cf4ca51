"""
Tests for iobench.patterns module.
"""
import numpy as np

from iobench import AccessPatternGenerator, BenchmarkConfig
from iobench.patterns import Access, AccessKey


class TestAccessPatternGenerator:
    """Test per-worker access patterns."""

    def test_same_seed_same_sequence(self):
        """Two generators with the same seed and worker index agree."""
        a = AccessPatternGenerator(42, 3, num_files=4, file_size=1 << 20, block_size=4096)
        b = AccessPatternGenerator(42, 3, num_files=4, file_size=1 << 20, block_size=4096)
        assert list(a.accesses(500)) == list(b.accesses(500))

    def test_seed_is_base_plus_worker_index(self):
        """Worker seed is seed + worker_index."""
        gen = AccessPatternGenerator(42, 3, num_files=4, file_size=1 << 20, block_size=4096)
        assert gen.seed == 45

        # seed 40 for worker 5 yields the same stream as seed 42 for worker 3
        other = AccessPatternGenerator(40, 5, num_files=4, file_size=1 << 20, block_size=4096)
        assert list(gen.accesses(100)) == list(other.accesses(100))

    def test_draw_order_is_file_then_block(self):
        """File index is drawn before block index from one generator."""
        gen = AccessPatternGenerator(7, 0, num_files=3, file_size=40960, block_size=4096)
        rng = np.random.default_rng(7)
        for access in gen.accesses(50):
            assert access.file_index == int(rng.integers(0, 3))
            assert access.block_index == int(rng.integers(0, 10))

    def test_workers_get_different_streams(self):
        config = BenchmarkConfig(num_files=4, file_size=1 << 20, block_size=4096)
        first = list(AccessPatternGenerator.for_worker(config, 0).accesses(100))
        second = list(AccessPatternGenerator.for_worker(config, 1).accesses(100))
        assert first != second

    def test_accesses_in_range(self):
        gen = AccessPatternGenerator(1, 0, num_files=4, file_size=65536, block_size=4096)
        accesses = list(gen.accesses(1000))
        assert len(accesses) == 1000
        for access in accesses:
            assert 0 <= access.file_index < 4
            assert 0 <= access.block_index < 16
            assert access.offset == access.block_index * 4096
            assert access.offset + 4096 <= 65536

    def test_zero_blocks_skips_operations(self):
        """Block larger than file: no accesses are produced."""
        gen = AccessPatternGenerator(42, 0, num_files=4, file_size=1000, block_size=4096)
        assert list(gen.accesses(100)) == []

    def test_no_files(self):
        gen = AccessPatternGenerator(42, 0, num_files=0, file_size=65536, block_size=4096)
        assert list(gen.accesses(10)) == []

    def test_access_key(self):
        access = Access(file_index=2, block_index=5, offset=5 * 4096)
        assert access.key == AccessKey(2, 5)
        assert access.key == (2, 5)
