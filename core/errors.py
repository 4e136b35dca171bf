"""Errors raised while building, parsing and decoding KSUIDs."""


class KsuidError(ValueError):
    """Base error carrying a machine-readable kind and context."""

    kind = "ksuid_error"

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.context = context or {}
        self.cause = cause

    def to_dict(self):
        return {"error": self.kind, "msg": str(self), "context": self.context}


class InvalidLengthError(KsuidError):
    """Input buffer or string is not the fixed required size."""

    kind = "invalid_length"

    def __init__(self, expected, actual, what="input", **kwargs):
        context = kwargs.pop("context", {})
        context.update({"expected": expected, "actual": actual, "what": what})
        super().__init__(f"{what} must be {expected} long, got {actual}", context=context, **kwargs)
        self.expected = expected
        self.actual = actual


class InvalidCharacterError(KsuidError):
    """Text input contains a symbol outside the accepted alphabet."""

    kind = "invalid_character"

    def __init__(self, char, position, **kwargs):
        context = kwargs.pop("context", {})
        context.update({"char": char, "position": position})
        super().__init__(f"invalid character {char!r} at position {position}", context=context, **kwargs)
        self.char = char
        self.position = position


class Base62OverflowError(KsuidError):
    """Decoded value does not fit in 160 bits."""

    kind = "overflow"


class TimestampOutOfRangeError(KsuidError):
    """Timestamp cannot be stored in the unsigned 32-bit field."""

    kind = "timestamp_out_of_range"

    def __init__(self, message, timestamp=None, **kwargs):
        context = kwargs.pop("context", {})
        if timestamp is not None:
            context["timestamp"] = timestamp
        super().__init__(message, context=context, **kwargs)
        self.timestamp = timestamp


class TimestampBeforeEpochError(TimestampOutOfRangeError):
    """Standard timestamp is earlier than the KSUID epoch."""

    kind = "timestamp_before_epoch"
