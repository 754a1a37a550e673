"""CRC32 decimal checksum helpers."""

from __future__ import annotations

import zlib


def crc_checksum(data: bytes, width: int) -> str:
    """Return the first ``width`` digits of the zero-padded CRC-32 of ``data``.

    The unsigned CRC is rendered in decimal, left-padded with zeros to at
    least ``width`` digits, then cut to the leading ``width`` characters.
    A CRC-32 has at most 10 decimal digits, so widths above that only add
    leading zeros.
    """
    if width <= 0:
        raise ValueError("checksum width must be a positive integer")
    crc = zlib.crc32(data) & 0xFFFFFFFF
    return f"{crc:0{width}d}"[:width]
