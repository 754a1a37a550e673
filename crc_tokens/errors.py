"""Error kinds attached to generated or parsed tokens."""

from __future__ import annotations


class TokenError(Exception):
    """Base class for token generation and validation failures."""

    reason = "token_error"


class RandomSourceError(TokenError):
    """The operating system entropy source could not supply random bytes."""

    reason = "random_source_unavailable"


class InvalidLengthError(TokenError):
    reason = "invalid_length"

    def __init__(self, message: str = "invalid length") -> None:
        super().__init__(message)


class InvalidPrefixError(TokenError):
    reason = "invalid_prefix"

    def __init__(self, message: str = "invalid prefix") -> None:
        super().__init__(message)


class InvalidChecksumError(TokenError):
    reason = "invalid_checksum"

    def __init__(self, message: str = "invalid checksum") -> None:
        super().__init__(message)


class Base62ParseError(TokenError):
    """Input contained a character outside the base62 alphabet."""

    reason = "base62_parse_failed"

    def __init__(self, value: str) -> None:
        super().__init__(f"cannot parse base62: {value!r}")
        self.value = value
