"""Checksummed token generation and validation."""

from .factory import TokenFactory, new_token, new_token_factory, token_from_base62, token_from_string
from .types import Token, TokenConfig

__all__ = [
    "Token",
    "TokenConfig",
    "TokenFactory",
    "new_token_factory",
    "new_token",
    "token_from_string",
    "token_from_base62",
]
