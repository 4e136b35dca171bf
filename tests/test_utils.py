"""Unit tests for utility modules."""

import pytest

from core.errors import TimestampBeforeEpochError, TimestampOutOfRangeError
from utils.timestamp import (
    KSUID_EPOCH,
    MAX_KSUID_SECONDS,
    format_timestamp,
    format_unix_seconds,
    now_micros,
    to_ksuid_seconds,
    to_unix_seconds,
)


class TestTimestamp:
    """Tests for timestamp utilities."""

    def test_format_timestamp_iso_format(self):
        """Timestamp is ISO 8601 format."""
        ts = format_timestamp()
        assert "T" in ts
        assert ts.endswith("Z")

    def test_format_timestamp_has_microseconds(self):
        """Timestamp includes microseconds."""
        ts = format_timestamp()
        decimal_part = ts.split(".")[1].rstrip("Z")
        assert len(decimal_part) == 6

    def test_format_timestamp_explicit(self):
        """Explicit microseconds are formatted in UTC."""
        assert format_timestamp(1_400_000_000_500_000) == "2014-05-13T16:53:20.500000Z"

    def test_now_micros_reasonable_value(self):
        """now_micros returns reasonable timestamp."""
        micros = now_micros()
        assert isinstance(micros, int)
        assert micros > 1577836808000000  # 2020-01-01

    def test_format_unix_seconds(self):
        """Whole seconds are formatted without a fraction."""
        assert format_unix_seconds(KSUID_EPOCH) == "2014-05-13T16:53:20Z"


class TestEpochConversion:
    """Tests for KSUID epoch conversions."""

    def test_epoch_is_zero(self):
        """The KSUID epoch maps to 0."""
        assert to_ksuid_seconds(KSUID_EPOCH) == 0
        assert to_unix_seconds(0) == KSUID_EPOCH

    def test_fractions_are_floored(self):
        """Fractional seconds truncate towards the past."""
        assert to_ksuid_seconds(KSUID_EPOCH + 41.9) == 41
        with pytest.raises(TimestampBeforeEpochError):
            to_ksuid_seconds(KSUID_EPOCH - 0.5)

    def test_before_epoch(self):
        """Pre-epoch times raise, or clamp to 0."""
        with pytest.raises(TimestampBeforeEpochError):
            to_ksuid_seconds(0)
        assert to_ksuid_seconds(0, clamp=True) == 0

    def test_past_range(self):
        """Times past 32 bits raise, or clamp to the maximum."""
        late = KSUID_EPOCH + MAX_KSUID_SECONDS + 1
        with pytest.raises(TimestampOutOfRangeError):
            to_ksuid_seconds(late)
        assert to_ksuid_seconds(late, clamp=True) == MAX_KSUID_SECONDS

    def test_last_second(self):
        """The last representable second is accepted."""
        assert to_ksuid_seconds(KSUID_EPOCH + MAX_KSUID_SECONDS) == MAX_KSUID_SECONDS
