"""
Color resolution: turning colors and color strings into marker tokens.

In legacy mode a color is quantized to the 16-color palette, in modern
mode it is kept at full precision as an extended marker.
"""

from __future__ import annotations

from .palette import BY_CODE, WHITE, nearest
from .types import (
    EXTENDED_CODE,
    FORMAT_CODES,
    HEX_CODES,
    LEADS,
    Color,
    ColorToken,
    FormatToken,
    ModernToken,
    Token,
)


def resolve(color: Color, legacy: bool) -> ColorToken:
    """
    Resolve a color to a token for the requested output mode.

    Args:
        color: Color to resolve
        legacy: True to quantize to the legacy palette

    Returns:
        LegacyToken when legacy, otherwise ModernToken carrying the exact color

    Raises:
        ValueError: If a channel is outside 0-255
    """
    color.validate()
    return nearest(color) if legacy else ModernToken(color)


def from_hex(value: str, legacy: bool) -> ColorToken:
    """
    Parse a hex color string and resolve it.

    Raises:
        FormatError: If value is not a valid hex color
    """
    return resolve(Color.from_hex(value), legacy)


def parse_token(value: str) -> Token:
    """
    Leniently parse a marker or color code into a token.

    Accepts single codes with or without a lead ("&a", "§l", "c"),
    extended markers ("&x&f&f&8&8&0&0") and bare six-digit hex ("ff8800").
    Anything else resolves to white.

    Args:
        value: Code to parse

    Returns:
        LegacyToken, FormatToken or ModernToken
    """
    code = value
    if len(code) >= 2 and code[0] in LEADS and code[1].lower() == EXTENDED_CODE:
        code = code[2:]
    code = "".join(c for c in code if c not in LEADS)

    if len(code) == 1:
        char = code.lower()
        if char in BY_CODE:
            return BY_CODE[char]
        if char in FORMAT_CODES:
            return FormatToken(char)

    if len(code) == 6 and all(c in HEX_CODES for c in code.lower()):
        return ModernToken(Color.from_hex(code))

    return WHITE
