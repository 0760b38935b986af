"""
Core data structures for the color codec.

This module contains the value types shared by every other module:
- Color: 24-bit RGB value
- LegacyToken: one of the 16 fixed palette colors, identified by a code character
- ModernToken: a full 24-bit color written as an extended marker
- FormatToken: a non-color formatting marker (bold, italic, reset...)

It also defines the marker alphabet (lead characters and designators).
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass
from typing import NamedTuple, Union

from ..errors import FormatError

# Marker leads: the shorthand users type and the native escape character.
SHORTHAND_LEAD = "&"
NATIVE_LEAD = "§"
LEADS = SHORTHAND_LEAD + NATIVE_LEAD

# Designators (the character after a lead)
HEX_CODES = "0123456789abcdef"
FORMAT_CODES = "klmnor"
RESET_CODE = "r"
EXTENDED_CODE = "x"

_MAX_RGB = 0xFFFFFF


class Color(NamedTuple):
    """
    RGB color with 8-bit channels (0-255).

    Equality and hashing are by channel values, so colors can be used as
    mapping keys.
    """
    red: int
    green: int
    blue: int

    @classmethod
    def from_int(cls, value: int) -> "Color":
        """Build a color from a packed 0xRRGGBB integer."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """
        Parse a hexadecimal color numeral.

        Args:
            value: Hex string like "ff8800", "#FF8800" or "aa" (leading zeros implied)

        Returns:
            Parsed Color

        Raises:
            FormatError: If value is not a hex numeral or exceeds 0xFFFFFF
        """
        digits = value.strip()
        if digits.startswith("#"):
            digits = digits[1:]
        if not digits or any(c not in HEX_CODES for c in digits.lower()):
            raise FormatError(f"Invalid hex color: {value!r}")

        packed = int(digits, 16)
        if packed > _MAX_RGB:
            raise FormatError(f"Hex color out of range: {value!r}")
        return cls.from_int(packed)

    @classmethod
    def from_hsb(cls, hue: float, saturation: float, brightness: float) -> "Color":
        """
        Convert hue/saturation/brightness (all 0.0-1.0) to RGB.

        Channels are rounded to the nearest integer, and the hue wraps
        around the color wheel.
        """
        r, g, b = colorsys.hsv_to_rgb(hue % 1.0, saturation, brightness)
        return cls(int(r * 255 + 0.5), int(g * 255 + 0.5), int(b * 255 + 0.5))

    @property
    def in_range(self) -> bool:
        """True if every channel fits in 8 bits (0-255)."""
        return all(0 <= channel <= 255 for channel in self)

    def validate(self) -> "Color":
        """
        Return self if every channel is within 0-255.

        Raises:
            ValueError: If a channel is out of range
        """
        if not self.in_range:
            raise ValueError(f"Color channels must be within 0-255, got {tuple(self)}")
        return self

    @property
    def hex(self) -> str:
        """Lowercase six-digit hex form, e.g. "ff8800"."""
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"

    def __str__(self) -> str:
        return f"#{self.hex}"


@dataclass(frozen=True)
class LegacyToken:
    """
    A member of the 16-color legacy palette.

    Attributes:
        code: Identifying character, 0-9 or a-f
        color: The palette color this code stands for
    """
    code: str
    color: Color

    @property
    def marker(self) -> str:
        """Native two-character marker, e.g. "§a"."""
        return NATIVE_LEAD + self.code

    def __str__(self) -> str:
        return self.marker


@dataclass(frozen=True)
class ModernToken:
    """A full 24-bit color, written as the extended 14-character marker."""
    color: Color

    def __post_init__(self):
        self.color.validate()

    @property
    def marker(self) -> str:
        """Native extended marker, e.g. "§x§f§f§8§8§0§0"."""
        digits = "".join(NATIVE_LEAD + c for c in self.color.hex)
        return NATIVE_LEAD + EXTENDED_CODE + digits

    def __str__(self) -> str:
        return self.marker


@dataclass(frozen=True)
class FormatToken:
    """A non-color formatting marker: k (magic), l (bold), m, n, o, r (reset)."""
    code: str

    @property
    def marker(self) -> str:
        return NATIVE_LEAD + self.code

    @property
    def is_reset(self) -> bool:
        return self.code == RESET_CODE

    def __str__(self) -> str:
        return self.marker


ColorToken = Union[LegacyToken, ModernToken]
Token = Union[LegacyToken, ModernToken, FormatToken]
