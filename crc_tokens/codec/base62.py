"""Base62 transform of a byte string read as a big-endian integer.

Digits are ``0-9``, then ``a-z``, then ``A-Z``. Leading zero bytes do not
survive a round trip: ``b"\\x00\\x01"`` and ``b"\\x01"`` encode to the same
text, and ``base62_decode`` returns the shortest big-endian representation.
Callers that need exact length must carry it separately.
"""

from __future__ import annotations

from ..errors import Base62ParseError
from .alphabet import BASE, BASE62_DIGITS

_DIGIT_VALUES = {char: index for index, char in enumerate(BASE62_DIGITS)}


def base62_encode(data: bytes) -> str:
    """Encode bytes as base62 text. Empty input encodes as ``"0"``."""
    value = int.from_bytes(data, "big")
    if value == 0:
        return BASE62_DIGITS[0]
    digits: list[str] = []
    while value:
        value, rem = divmod(value, BASE)
        digits.append(BASE62_DIGITS[rem])
    return "".join(reversed(digits))


def base62_decode(text: str) -> bytes:
    """Decode base62 text back to big-endian bytes.

    Raises ``Base62ParseError`` for empty input or any character outside
    the alphabet.
    """
    if not text:
        raise Base62ParseError(text)
    value = 0
    for char in text:
        digit = _DIGIT_VALUES.get(char)
        if digit is None:
            raise Base62ParseError(text)
        value = value * BASE + digit
    return value.to_bytes((value.bit_length() + 7) // 8, "big")
