"""
The fixed 16-color legacy palette and nearest-color quantization.

Usage:
    from prismatic.color.palette import nearest, PALETTE

    nearest(Color(250, 90, 80))   # LegacyToken(code='c', ...)
    PALETTE[Color(0, 0, 0)]       # LegacyToken(code='0', ...)

The palette is built once on import and is read-only afterwards.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .types import Color, LegacyToken

# Enumeration order matters: ties resolve to the first entry listed here.
_BUILTINS: tuple[tuple[str, int], ...] = (
    ("0", 0x000000),  # black
    ("1", 0x0000AA),  # dark blue
    ("2", 0x00AA00),  # dark green
    ("3", 0x00AAAA),  # dark aqua
    ("4", 0xAA0000),  # dark red
    ("5", 0xAA00AA),  # dark purple
    ("6", 0xFFAA00),  # gold
    ("7", 0xAAAAAA),  # gray
    ("8", 0x555555),  # dark gray
    ("9", 0x5555FF),  # blue
    ("a", 0x55FF55),  # green
    ("b", 0x55FFFF),  # aqua
    ("c", 0xFF5555),  # red
    ("d", 0xFF55FF),  # light purple
    ("e", 0xFFFF55),  # yellow
    ("f", 0xFFFFFF),  # white
)

LEGACY_TOKENS: tuple[LegacyToken, ...] = tuple(
    LegacyToken(code, Color.from_int(rgb)) for code, rgb in _BUILTINS
)

PALETTE: Mapping[Color, LegacyToken] = MappingProxyType(
    {token.color: token for token in LEGACY_TOKENS}
)

BY_CODE: Mapping[str, LegacyToken] = MappingProxyType(
    {token.code: token for token in LEGACY_TOKENS}
)

WHITE = BY_CODE["f"]


def nearest(color: Color) -> LegacyToken:
    """
    Find the palette token closest to a color.

    Distance is the sum of squared channel differences. Only a strictly
    smaller distance replaces the current best, so equal distances keep
    the earlier palette entry.

    Args:
        color: Any 24-bit color

    Returns:
        The closest legacy token (never None)
    """
    best = LEGACY_TOKENS[0]
    best_distance = float("inf")

    for token in LEGACY_TOKENS:
        c = token.color
        distance = (
            (color.red - c.red) ** 2
            + (color.blue - c.blue) ** 2
            + (color.green - c.green) ** 2
        )
        if distance < best_distance:
            best = token
            best_distance = distance

    return best
