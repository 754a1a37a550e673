"""Alphabets for payload generation and base62 digits."""

from __future__ import annotations

from typing import Final

ALPHABET: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
ALPHABET_BYTES: Final[bytes] = ALPHABET.encode("ascii")
BASE: Final[int] = len(ALPHABET)

# Digit values for base62 text: lowercase letters come before uppercase.
BASE62_DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
