"""Unit tests for clock and randomness sources."""

import time

import pytest

from core.sources import FixedClock, OsRandomSource, SequenceRandomSource, SystemClock


class TestRandomSources:
    """Tests for random byte sources."""

    def test_os_random_length(self):
        """OsRandomSource returns the requested number of bytes."""
        assert len(OsRandomSource().read(16)) == 16

    def test_os_random_varies(self):
        """OsRandomSource does not repeat itself."""
        source = OsRandomSource()
        assert source.read(16) != source.read(16)

    def test_sequence_cycles(self):
        """SequenceRandomSource repeats its pattern across reads."""
        source = SequenceRandomSource(b"\x01\x02\x03")
        assert source.read(4) == b"\x01\x02\x03\x01"
        assert source.read(2) == b"\x02\x03"

    def test_sequence_rejects_empty_pattern(self):
        """An empty pattern cannot fill any bytes."""
        with pytest.raises(ValueError):
            SequenceRandomSource(b"")


class TestClocks:
    """Tests for clocks."""

    def test_system_clock(self):
        """SystemClock follows time.time."""
        before = time.time()
        assert before <= SystemClock().now() <= time.time()

    def test_fixed_clock_advance(self):
        """FixedClock only moves when advanced."""
        clock = FixedClock(100)
        assert clock.now() == 100
        clock.advance(5)
        assert clock.now() == 105
