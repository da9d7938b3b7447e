"""Tests for the trial data model and trial matrix."""

import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from iobench.base import IOStrategy, Operation, TrialRecord
from iobench.workloads import WorkloadConfig, build_trial_matrix


class TestDataModel(unittest.TestCase):
    """Test TrialRecord and IOStrategy."""

    def test_strategy_flags(self):
        """Each strategy maps to exactly one (buffered, blockwise) pair."""
        pairs = {(s.buffered, s.blockwise) for s in IOStrategy}
        self.assertEqual(len(IOStrategy), 4)
        self.assertEqual(len(pairs), 4)
        self.assertTrue(IOStrategy.BLOCK_BY_BLOCK_WITH_BUFFERED_STREAM.buffered)
        self.assertTrue(IOStrategy.BLOCK_BY_BLOCK_WITH_BUFFERED_STREAM.blockwise)
        self.assertFalse(IOStrategy.BYTE_BY_BYTE_WITHOUT_BUFFERED_STREAM.buffered)
        self.assertFalse(IOStrategy.BYTE_BY_BYTE_WITHOUT_BUFFERED_STREAM.blockwise)

    def test_record_value_equality(self):
        a = TrialRecord(Operation.WRITE, IOStrategy.BYTE_BY_BYTE_WITH_BUFFERED_STREAM, 0, 10, 3)
        b = TrialRecord(Operation.WRITE, IOStrategy.BYTE_BY_BYTE_WITH_BUFFERED_STREAM, 0, 10, 3)
        self.assertEqual(a, b)

    def test_record_is_immutable(self):
        record = TrialRecord(Operation.READ, IOStrategy.BLOCK_BY_BLOCK_WITH_BUFFERED_STREAM, 5, 10, 3)
        with self.assertRaises(AttributeError):
            record.duration_in_ms = 7

    def test_record_validation(self):
        strategy = IOStrategy.BLOCK_BY_BLOCK_WITH_BUFFERED_STREAM
        with self.assertRaises(ValueError):
            TrialRecord(Operation.WRITE, strategy, -1, 10, 0)
        with self.assertRaises(ValueError):
            TrialRecord(Operation.WRITE, strategy, 5, 0, 0)
        with self.assertRaises(ValueError):
            TrialRecord(Operation.WRITE, strategy, 5, 10, -1)

    def test_to_dict(self):
        record = TrialRecord(Operation.READ, IOStrategy.BLOCK_BY_BLOCK_WITHOUT_BUFFERED_STREAM, 50, 1024, 12)
        self.assertEqual(record.to_dict(), {
            'operation': 'READ',
            'strategy': 'BlockByBlockWithoutBufferedStream',
            'block_size': 50,
            'file_size_in_bytes': 1024,
            'duration_in_ms': 12,
        })


class TestTrialMatrix(unittest.TestCase):
    """Test the fixed trial matrix."""

    def test_default_matrix_size(self):
        matrix = build_trial_matrix()
        self.assertEqual(len(matrix), 16)
        self.assertEqual(len(set(matrix)), 16)

    def test_writes_before_reads(self):
        operations = [op for op, _, _ in build_trial_matrix()]
        self.assertEqual(operations, [Operation.WRITE] * 8 + [Operation.READ] * 8)

    def test_write_order(self):
        matrix = build_trial_matrix()[:8]
        self.assertEqual(matrix[0], (Operation.WRITE, IOStrategy.BLOCK_BY_BLOCK_WITH_BUFFERED_STREAM, 500))
        self.assertEqual(matrix[3], (Operation.WRITE, IOStrategy.BYTE_BY_BYTE_WITH_BUFFERED_STREAM, 0))
        self.assertEqual(matrix[4], (Operation.WRITE, IOStrategy.BLOCK_BY_BLOCK_WITHOUT_BUFFERED_STREAM, 500))
        self.assertEqual(matrix[7], (Operation.WRITE, IOStrategy.BYTE_BY_BYTE_WITHOUT_BUFFERED_STREAM, 0))

    def test_bytewise_strategies_use_block_size_zero(self):
        for _, strategy, block_size in build_trial_matrix():
            if strategy.blockwise:
                self.assertIn(block_size, WorkloadConfig.BLOCK_SIZES)
            else:
                self.assertEqual(block_size, 0)

    def test_custom_block_sizes(self):
        matrix = build_trial_matrix([4096])
        self.assertEqual(len(matrix), 8)


if __name__ == '__main__':
    unittest.main()
