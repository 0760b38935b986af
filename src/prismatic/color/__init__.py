"""
Color codec: color values, the legacy palette, resolution and sequences.
"""

from .types import (
    Color,
    ColorToken,
    FormatToken,
    LegacyToken,
    ModernToken,
    Token,
    LEADS,
    NATIVE_LEAD,
    SHORTHAND_LEAD,
    HEX_CODES,
    FORMAT_CODES,
    RESET_CODE,
    EXTENDED_CODE,
)
from .palette import PALETTE, LEGACY_TOKENS, BY_CODE, WHITE, nearest
from .resolve import resolve, from_hex, parse_token
from .sequence import gradient, rainbow

__all__ = [
    # Types
    "Color",
    "ColorToken",
    "FormatToken",
    "LegacyToken",
    "ModernToken",
    "Token",
    # Marker alphabet
    "LEADS",
    "NATIVE_LEAD",
    "SHORTHAND_LEAD",
    "HEX_CODES",
    "FORMAT_CODES",
    "RESET_CODE",
    "EXTENDED_CODE",
    # Palette
    "PALETTE",
    "LEGACY_TOKENS",
    "BY_CODE",
    "WHITE",
    "nearest",
    # Resolution
    "resolve",
    "from_hex",
    "parse_token",
    # Sequences
    "gradient",
    "rainbow",
]
