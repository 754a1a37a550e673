"""Random payload and base62 codec primitives."""

from .alphabet import ALPHABET, BASE, BASE62_DIGITS
from .base62 import base62_decode, base62_encode
from .payload import generate_payload

__all__ = ["ALPHABET", "BASE", "BASE62_DIGITS", "base62_encode", "base62_decode", "generate_payload"]
