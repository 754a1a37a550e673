"""Cryptographically secure random payload generation."""

from __future__ import annotations

import secrets

from ..errors import RandomSourceError
from .alphabet import ALPHABET_BYTES, BASE


def generate_payload(n: int) -> bytes:
    """Return ``n`` random alphanumeric ASCII bytes.

    Each byte from the OS entropy source is mapped onto the alphabet with
    ``byte % 62``. Since 256 is not a multiple of 62 the first eight
    characters (``0``-``7``) are slightly more likely than the rest. The
    mapping is kept as is so tokens stay compatible with existing issuers.

    Raises ``RandomSourceError`` when the entropy source is unavailable.
    """
    if n <= 0:
        raise ValueError("payload length must be a positive integer")
    try:
        raw = secrets.token_bytes(n)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError(f"secure random source unavailable: {exc}") from exc
    return bytes(ALPHABET_BYTES[value % BASE] for value in raw)
