"""
KSUID - K-Sortable Unique Identifier.

Time-sortable, globally unique IDs without coordination.
Format: 4 bytes timestamp + 16 bytes random = 27 char base62 string.
"""

from datetime import datetime, timezone

from codec import base62
from codec.hexadecimal import decode_hex, encode_hex
from core.errors import InvalidLengthError, TimestampOutOfRangeError
from core.sources import DEFAULT_CLOCK, DEFAULT_RANDOM_SOURCE
from internal.logging import get_logger
from utils.timestamp import (
    KSUID_EPOCH,
    MAX_KSUID_SECONDS,
    format_unix_seconds,
    to_ksuid_seconds,
    to_unix_seconds,
)

BYTE_LENGTH = 20
TIMESTAMP_LENGTH = 4
PAYLOAD_LENGTH = 16


class Ksuid:
    """An immutable 20-byte identifier ordered by creation second.

    The first 4 bytes are a big-endian unsigned timestamp relative to the
    KSUID epoch (1.4e9 seconds after the Unix epoch); the remaining 16 bytes
    are a random payload. Instances compare and hash by their bytes.
    """

    __slots__ = ("_raw",)

    MIN = None
    MAX = None

    def __init__(self, raw):
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes, got {type(raw).__name__}")
        raw = bytes(raw)
        if len(raw) != BYTE_LENGTH:
            raise InvalidLengthError(f"{BYTE_LENGTH} bytes", len(raw), what="binary ksuid")
        object.__setattr__(self, "_raw", raw)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Construction

    @classmethod
    def new(cls, timestamp, payload):
        """Build from raw KSUID-epoch seconds and a 16-byte payload."""
        if not 0 <= timestamp <= MAX_KSUID_SECONDS:
            raise TimestampOutOfRangeError(
                f"timestamp {timestamp} does not fit in 32 bits", timestamp=timestamp
            )
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes payload, got {type(payload).__name__}")
        payload = bytes(payload)
        if len(payload) != PAYLOAD_LENGTH:
            raise InvalidLengthError(f"{PAYLOAD_LENGTH} bytes", len(payload), what="payload")
        return cls(timestamp.to_bytes(TIMESTAMP_LENGTH, byteorder="big") + payload)

    @classmethod
    def generate(cls, clock=None, random_source=None):
        """Generate a KSUID for the current second with a random payload."""
        random_source = random_source or DEFAULT_RANDOM_SOURCE
        return cls.with_payload(random_source.read(PAYLOAD_LENGTH), clock=clock)

    @classmethod
    def with_payload(cls, payload, clock=None):
        """Current timestamp with the given payload.

        Clocks outside the representable range saturate instead of failing.
        """
        now = (clock or DEFAULT_CLOCK).now()
        timestamp = to_ksuid_seconds(now, clamp=True)
        if timestamp == 0 and now < KSUID_EPOCH:
            get_logger().warn("Clock is before the KSUID epoch, clamping timestamp to 0", clock=now)
        elif timestamp == MAX_KSUID_SECONDS and now - KSUID_EPOCH > MAX_KSUID_SECONDS:
            get_logger().warn("Clock is past the KSUID range, clamping timestamp", clock=now)
        return cls.new(timestamp, payload)

    @classmethod
    def from_unix(cls, unix_seconds, payload=None, random_source=None):
        """Build from a standard Unix timestamp; pre-epoch times raise."""
        if payload is None:
            payload = (random_source or DEFAULT_RANDOM_SOURCE).read(PAYLOAD_LENGTH)
        return cls.new(to_ksuid_seconds(unix_seconds), payload)

    @classmethod
    def from_datetime(cls, dt, payload=None, random_source=None):
        if dt.tzinfo is None:
            raise ValueError("Expected a timezone-aware datetime")
        return cls.from_unix(dt.timestamp(), payload=payload, random_source=random_source)

    @classmethod
    def from_bytes(cls, raw):
        return cls(raw)

    @classmethod
    def parse(cls, text):
        """Parse a 27 character Base62 string."""
        return cls(base62.decode(text))

    from_base62 = parse

    @classmethod
    def from_hex(cls, text):
        return cls(decode_hex(text))

    # Accessors

    @property
    def timestamp(self):
        """Seconds since the KSUID epoch."""
        return int.from_bytes(self._raw[:TIMESTAMP_LENGTH], byteorder="big")

    @property
    def unix_timestamp(self):
        return to_unix_seconds(self.timestamp)

    @property
    def datetime(self):
        return datetime.fromtimestamp(self.unix_timestamp, tz=timezone.utc)

    @property
    def payload(self):
        return self._raw[TIMESTAMP_LENGTH:]

    # Formatting

    def to_bytes(self):
        return self._raw

    def to_base62(self):
        return base62.encode(self._raw)

    def to_hex(self):
        return encode_hex(self._raw)

    def to_dict(self):
        """Inspection view: representations and components."""
        return {
            "string": self.to_base62(),
            "raw": self.to_hex(),
            "time": format_unix_seconds(self.unix_timestamp),
            "timestamp": self.timestamp,
            "unix_timestamp": self.unix_timestamp,
            "payload": self.payload.hex().upper(),
        }

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self.to_base62()

    def __repr__(self):
        return f"Ksuid('{self.to_base62()}')"

    # Ordering

    def __eq__(self, other):
        if not isinstance(other, Ksuid):
            return NotImplemented
        return self._raw == other._raw

    def __ne__(self, other):
        if not isinstance(other, Ksuid):
            return NotImplemented
        return self._raw != other._raw

    def __lt__(self, other):
        if not isinstance(other, Ksuid):
            return NotImplemented
        return self._raw < other._raw

    def __le__(self, other):
        if not isinstance(other, Ksuid):
            return NotImplemented
        return self._raw <= other._raw

    def __gt__(self, other):
        if not isinstance(other, Ksuid):
            return NotImplemented
        return self._raw > other._raw

    def __ge__(self, other):
        if not isinstance(other, Ksuid):
            return NotImplemented
        return self._raw >= other._raw

    def __hash__(self):
        return hash(self._raw)

    def __reduce__(self):
        return (type(self), (self._raw,))


Ksuid.MIN = Ksuid(bytes(BYTE_LENGTH))
Ksuid.MAX = Ksuid(b"\xff" * BYTE_LENGTH)


def generate_ksuid():
    """Generate a 27-character sortable unique ID."""
    return Ksuid.generate().to_base62()
