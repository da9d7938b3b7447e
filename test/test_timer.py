"""Tests for the millisecond timer."""

import os
import sys
import time

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from iobench.timer import Timer


class TestTimer:
    """Test cases for Timer."""

    def test_elapsed_before_start_raises(self):
        """Should refuse to measure without a start mark."""
        with pytest.raises(RuntimeError):
            Timer().elapsed_millis()

    def test_elapsed_is_non_negative(self):
        timer = Timer()
        timer.start()
        assert timer.elapsed_millis() >= 0

    def test_elapsed_reflects_wall_clock(self):
        """Should measure at least the time slept."""
        timer = Timer()
        timer.start()
        time.sleep(0.05)
        assert timer.elapsed_millis() >= 45

    def test_elapsed_rearms_mark(self):
        """Consecutive calls should measure consecutive intervals."""
        timer = Timer()
        timer.start()
        time.sleep(0.05)
        first = timer.elapsed_millis()
        second = timer.elapsed_millis()
        assert first >= 45
        assert 0 <= second < first

    def test_start_replaces_previous_mark(self):
        timer = Timer()
        timer.start()
        time.sleep(0.05)
        timer.start()
        assert timer.elapsed_millis() < 45
