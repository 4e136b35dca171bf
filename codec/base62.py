"""
Base62 codec for 160-bit KSUIDs.

Converts between 20 raw bytes (a big-endian unsigned integer) and a
fixed-width 27 character string. The alphabet is in ascending ASCII order
and output is always left-padded, so string order matches numeric order.
"""

from types import MappingProxyType

from core.errors import Base62OverflowError, InvalidCharacterError, InvalidLengthError

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
ALPHABET_INDEX = MappingProxyType({char: index for index, char in enumerate(ALPHABET)})
BASE = len(ALPHABET)

BYTE_LENGTH = 20
ENCODED_LENGTH = 27
MAX_VALUE = (1 << (BYTE_LENGTH * 8)) - 1
# encode(b"\xff" * 20)
MAX_ENCODED = "aWgEPTl1tmebfsQzFP4bxwgy80V"


def encode(raw):
    """Encode 20 raw bytes as a 27 character Base62 string."""
    if len(raw) != BYTE_LENGTH:
        raise InvalidLengthError(f"{BYTE_LENGTH} bytes", len(raw), what="binary ksuid")

    n = int.from_bytes(bytes(raw), byteorder="big")

    chars = []
    while n > 0 and len(chars) < ENCODED_LENGTH:
        n, remainder = divmod(n, BASE)
        chars.append(ALPHABET[remainder])

    return "".join(reversed(chars)).rjust(ENCODED_LENGTH, ALPHABET[0])


def decode(text):
    """Decode a 27 character Base62 string into 20 raw bytes."""
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("latin-1")

    if len(text) != ENCODED_LENGTH:
        raise InvalidLengthError(f"{ENCODED_LENGTH} characters", len(text), what="base62 ksuid")

    n = 0
    for position, char in enumerate(text):
        index = ALPHABET_INDEX.get(char)
        if index is None:
            raise InvalidCharacterError(char, position)
        n = n * BASE + index

    if n > MAX_VALUE:
        raise Base62OverflowError(
            f"{text!r} exceeds the largest 160-bit value {MAX_ENCODED!r}",
            context={"value": text, "max": MAX_ENCODED},
        )

    return n.to_bytes(BYTE_LENGTH, byteorder="big")
