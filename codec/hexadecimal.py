"""Hex representation of a binary KSUID, as printed by inspect."""

from core.errors import InvalidCharacterError, InvalidLengthError

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
BYTE_LENGTH = 20
HEX_LENGTH = BYTE_LENGTH * 2


def encode_hex(raw):
    """Encode 20 raw bytes as 40 upper-case hex digits."""
    if len(raw) != BYTE_LENGTH:
        raise InvalidLengthError(f"{BYTE_LENGTH} bytes", len(raw), what="binary ksuid")
    return bytes(raw).hex().upper()


def decode_hex(text):
    """Decode 40 hex digits (any case) into 20 raw bytes."""
    if len(text) != HEX_LENGTH:
        raise InvalidLengthError(f"{HEX_LENGTH} characters", len(text), what="hex ksuid")

    for position, char in enumerate(text):
        if char not in HEX_DIGITS:
            raise InvalidCharacterError(char, position)

    return bytes.fromhex(text)
