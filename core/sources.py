"""Time and randomness sources used when generating KSUIDs."""

import os
import time


class RandomSource:
    """Supplies random bytes for KSUID payloads."""

    def read(self, n):
        raise NotImplementedError


class OsRandomSource(RandomSource):
    """Cryptographically secure bytes from the operating system."""

    def read(self, n):
        return os.urandom(n)


class SequenceRandomSource(RandomSource):
    """Deterministic source cycling through a fixed byte pattern."""

    def __init__(self, pattern=b"\x00"):
        if not pattern:
            raise ValueError("pattern must not be empty")
        self._pattern = bytes(pattern)
        self._offset = 0

    def read(self, n):
        out = bytearray()
        while len(out) < n:
            take = min(n - len(out), len(self._pattern) - self._offset)
            out += self._pattern[self._offset:self._offset + take]
            self._offset = (self._offset + take) % len(self._pattern)
        return bytes(out)


class Clock:
    """Supplies wall-clock time in Unix seconds."""

    def now(self):
        raise NotImplementedError


class SystemClock(Clock):
    def now(self):
        return time.time()


class FixedClock(Clock):
    """Clock frozen at a given Unix time; ``advance`` moves it forward."""

    def __init__(self, unix_seconds):
        self.unix_seconds = unix_seconds

    def now(self):
        return self.unix_seconds

    def advance(self, seconds):
        self.unix_seconds += seconds


DEFAULT_RANDOM_SOURCE = OsRandomSource()
DEFAULT_CLOCK = SystemClock()
