"""Timestamp utilities and KSUID epoch conversions."""

import math
import time
from datetime import datetime, timezone

from core.errors import TimestampBeforeEpochError, TimestampOutOfRangeError

# KSUID epoch: 2014-05-13T16:53:20Z
KSUID_EPOCH = 1_400_000_000
MAX_KSUID_SECONDS = 0xFFFFFFFF


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return int(time.time() * 1_000_000)


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"


def format_unix_seconds(unix_seconds):
    """Format whole Unix seconds as ISO 8601 in UTC."""
    dt = datetime.fromtimestamp(unix_seconds, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S") + "Z"


def to_ksuid_seconds(unix_seconds, clamp=False):
    """Convert Unix seconds to whole seconds since the KSUID epoch.

    With ``clamp`` the result saturates to the 32-bit range, otherwise
    out of range values raise.
    """
    seconds = math.floor(unix_seconds) - KSUID_EPOCH

    if seconds < 0:
        if clamp:
            return 0
        raise TimestampBeforeEpochError(
            f"{unix_seconds} is before the KSUID epoch {KSUID_EPOCH}", timestamp=unix_seconds
        )

    if seconds > MAX_KSUID_SECONDS:
        if clamp:
            return MAX_KSUID_SECONDS
        raise TimestampOutOfRangeError(
            f"{unix_seconds} is past the last representable KSUID second", timestamp=unix_seconds
        )

    return seconds


def to_unix_seconds(ksuid_seconds):
    """Convert seconds since the KSUID epoch back to Unix seconds."""
    return ksuid_seconds + KSUID_EPOCH
