"""Token factory: generation and checksum-verified parsing."""

from __future__ import annotations

import hmac
import logging
from typing import Callable, Optional

from ..checksum import crc_checksum
from ..codec.base62 import base62_decode
from ..codec.payload import generate_payload
from ..errors import (
    Base62ParseError,
    InvalidChecksumError,
    InvalidLengthError,
    InvalidPrefixError,
    RandomSourceError,
    TokenError,
)
from .types import Token, TokenConfig, body_from_bytes, body_to_bytes

logger = logging.getLogger(__name__)

BodyParser = Callable[[str], bytes]


class TokenFactory:
    """Produce and validate tokens of one fixed shape.

    The factory holds only its immutable config, so one instance can be
    shared freely between threads.
    """

    def __init__(self, config: Optional[TokenConfig] = None) -> None:
        self._config = config or TokenConfig.default()

    @property
    def config(self) -> TokenConfig:
        return self._config

    def new_token(self) -> Token:
        """Generate a fresh token. Entropy failures are attached, not raised."""
        try:
            payload = generate_payload(self._config.payload_length)
        except RandomSourceError as exc:
            logger.error("Token generation failed: %s", exc)
            return Token(prefix="", body="", error=exc)

        checksum = self.checksum(payload)
        return Token(
            prefix=self._config.prefix,
            body=payload.decode("ascii") + checksum,
            payload=payload,
            checksum=checksum,
            valid=True,
        )

    def from_string(self, value: str) -> Token:
        """Parse a raw token (prefix + payload + checksum) and verify it."""
        return self._make_token(value, body_to_bytes)

    def from_base62(self, value: str) -> Token:
        """Parse a token whose body is base62 encoded and verify it."""
        return self._make_token(value, base62_decode)

    def checksum(self, data: bytes) -> str:
        return crc_checksum(data, self._config.checksum_length)

    def validate(self, token: Token) -> bool:
        """Recompute the checksum over ``token.payload`` and compare."""
        if token.payload is None or token.checksum is None:
            return False
        expected = self.checksum(token.payload).encode("ascii")
        return hmac.compare_digest(expected, body_to_bytes(token.checksum))

    def _make_token(self, value: str, parse: BodyParser) -> Token:
        cfg = self._config
        prefix_len = len(cfg.prefix)
        if len(value) < prefix_len:
            return self._reject(Token(prefix=value, body=""), InvalidLengthError())

        candidate = Token(prefix=value[:prefix_len], body=value[prefix_len:])
        try:
            raw = parse(candidate.body)
        except Base62ParseError as exc:
            return self._reject(candidate, exc)

        if len(raw) != cfg.body_length:
            return self._reject(candidate, InvalidLengthError())
        if candidate.prefix != cfg.prefix:
            return self._reject(candidate, InvalidPrefixError())

        parsed = Token(
            prefix=candidate.prefix,
            body=body_from_bytes(raw),
            payload=raw[: cfg.payload_length],
            checksum=body_from_bytes(raw[cfg.payload_length :]),
        )
        if not self.validate(parsed):
            return self._reject(parsed, InvalidChecksumError())
        return Token(
            prefix=parsed.prefix,
            body=parsed.body,
            payload=parsed.payload,
            checksum=parsed.checksum,
            valid=True,
        )

    def _reject(self, token: Token, error: TokenError) -> Token:
        logger.debug("Rejected token (prefix=%r): %s", self._config.prefix, error.reason)
        return Token(
            prefix=token.prefix,
            body=token.body,
            payload=token.payload,
            checksum=token.checksum,
            valid=False,
            error=error,
        )


def new_token_factory(config: Optional[TokenConfig] = None) -> TokenFactory:
    """Create a factory for ``config``, or for the default shape."""
    return TokenFactory(config)


def new_token(config: Optional[TokenConfig] = None) -> Token:
    return TokenFactory(config).new_token()


def token_from_string(value: str, config: Optional[TokenConfig] = None) -> Token:
    return TokenFactory(config).from_string(value)


def token_from_base62(value: str, config: Optional[TokenConfig] = None) -> Token:
    return TokenFactory(config).from_base62(value)
