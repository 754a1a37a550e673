"""Token configuration and token value types."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Optional

from ..codec.base62 import base62_encode
from ..errors import TokenError

BODY_ENCODING = "utf-8"
BODY_ERRORS = "surrogateescape"


def body_to_bytes(body: str) -> bytes:
    """Return the raw bytes behind a token body.

    Escaped bytes from ``body_from_bytes`` are restored exactly. Any other
    lone surrogate in caller input is passed through as its UTF-8 form.
    """
    try:
        return body.encode(BODY_ENCODING, BODY_ERRORS)
    except UnicodeEncodeError:
        return body.encode(BODY_ENCODING, "surrogatepass")


def body_from_bytes(raw: bytes) -> str:
    """Return token body text for raw bytes, keeping non UTF-8 bytes intact."""
    return raw.decode(BODY_ENCODING, BODY_ERRORS)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


@dataclass(frozen=True)
class TokenConfig:
    """Shape of the tokens a factory produces and accepts."""

    payload_length: int = 30
    checksum_length: int = 6
    prefix: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.payload_length, int) or self.payload_length <= 0:
            raise ValueError("payload_length must be a positive integer.")
        if not isinstance(self.checksum_length, int) or self.checksum_length <= 0:
            raise ValueError("checksum_length must be a positive integer.")
        if not isinstance(self.prefix, str):
            raise ValueError("prefix must be a string.")

    @classmethod
    def default(cls) -> "TokenConfig":
        """30 payload characters, 6 checksum digits, no prefix."""
        return cls()

    @classmethod
    def from_env(cls) -> "TokenConfig":
        """Build a config from ``CRC_TOKENS_*`` environment variables."""
        defaults = cls()
        return cls(
            payload_length=_env_int("CRC_TOKENS_PAYLOAD_LENGTH", defaults.payload_length),
            checksum_length=_env_int("CRC_TOKENS_CHECKSUM_LENGTH", defaults.checksum_length),
            prefix=os.getenv("CRC_TOKENS_PREFIX", defaults.prefix),
        )

    @property
    def body_length(self) -> int:
        return self.payload_length + self.checksum_length

    @property
    def token_length(self) -> int:
        return len(self.prefix) + self.body_length

    def pattern(self) -> re.Pattern[str]:
        """Regex matched by every well-formed raw token of this shape."""
        return re.compile(
            rf"^{re.escape(self.prefix)}[A-Za-z0-9]{{{self.payload_length}}}[0-9]{{{self.checksum_length}}}$"
        )


@dataclass(frozen=True)
class Token:
    """A generated or parsed token.

    ``valid`` is True only when the shape matched the factory config and the
    checksum verified. Otherwise ``error`` names the first check that failed.
    Rejected tokens keep the text they were parsed from, so ``str(token)``
    still returns the caller's input.
    """

    prefix: str
    body: str = field(repr=False)
    payload: Optional[bytes] = field(default=None, repr=False)
    checksum: Optional[str] = None
    valid: bool = False
    error: Optional[TokenError] = None

    def __str__(self) -> str:
        return self.prefix + self.body

    def __len__(self) -> int:
        """Length in bytes of the token text."""
        return len(body_to_bytes(str(self)))

    def base62(self) -> str:
        """Prefix followed by the base62 form of payload and checksum."""
        return self.prefix + base62_encode(body_to_bytes(self.body))

    def unwrap(self) -> "Token":
        """Return this token if valid, otherwise raise its error."""
        if self.valid:
            return self
        if self.error is not None:
            raise self.error
        raise TokenError("token is not valid")
