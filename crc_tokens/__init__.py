"""CRC Tokens package.

Generates opaque random tokens carrying a CRC32 decimal checksum and an
optional static prefix, and validates them from raw or base62 text.
"""

from .checksum import crc_checksum
from .codec import base62_decode, base62_encode, generate_payload
from .errors import (
    Base62ParseError,
    InvalidChecksumError,
    InvalidLengthError,
    InvalidPrefixError,
    RandomSourceError,
    TokenError,
)
from .token import (
    Token,
    TokenConfig,
    TokenFactory,
    new_token,
    new_token_factory,
    token_from_base62,
    token_from_string,
)

__all__ = [
    "Token",
    "TokenConfig",
    "TokenFactory",
    "new_token_factory",
    "new_token",
    "token_from_string",
    "token_from_base62",
    "crc_checksum",
    "base62_encode",
    "base62_decode",
    "generate_payload",
    "TokenError",
    "RandomSourceError",
    "InvalidLengthError",
    "InvalidPrefixError",
    "InvalidChecksumError",
    "Base62ParseError",
]
