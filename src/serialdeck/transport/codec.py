"""Hex and printable-text codecs for serial payloads."""

from __future__ import annotations

import string

from serialdeck.exceptions import HexDecodeError

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_bytes(text: str) -> bytes:
    """Decode hex text such as ``"48 65 6C"`` or ``"48656C"`` to bytes.

    Whitespace anywhere in the input is ignored.

    Raises:
        HexDecodeError: On a non-hex character or an odd number of digits.
    """
    digits = "".join(text.split())
    for position, char in enumerate(digits):
        if char not in _HEX_DIGITS:
            raise HexDecodeError(f"Invalid hex character {char!r} at position {position}")
    if len(digits) % 2:
        raise HexDecodeError(f"Hex input must have an even number of digits, got {len(digits)}")
    return bytes.fromhex(digits)


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as upper-case two-digit groups separated by spaces."""
    return " ".join(f"{b:02X}" for b in data)


def bytes_to_text(data: bytes) -> str:
    """Render bytes as ASCII, escaping anything unprintable as ``\\xNN``."""
    return "".join(chr(b) if 32 <= b < 127 else f"\\x{b:02X}" for b in data)
