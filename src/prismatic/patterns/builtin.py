"""
Built-in color patterns.

Syntax:
    {#ff8800} or &#ff8800          single color, applies to the text after it
    <#ff0000>text</#0000ff>        gradient from the first to the second color
    <r:80>text</r>                 rainbow with 80% saturation/brightness

Hex digits are case-insensitive. Malformed tags are left as plain text.
"""

from __future__ import annotations

import re

from ..color.resolve import resolve
from ..color.types import Color
from ..text.annotate import apply_gradient, apply_rainbow

_HEX = "[0-9a-f]{6}"


def _remove(pattern: re.Pattern, text: str) -> str:
    """Delete matches repeatedly until the text stops changing."""
    while True:
        stripped = pattern.sub("", text)
        if stripped == text:
            return text
        text = stripped


class SingleColorPattern:
    """Replaces `{#rrggbb}` and `&#rrggbb` with one color marker."""

    name = "single"

    _pattern = re.compile(f"\\{{#({_HEX})\\}}|&#({_HEX})", re.IGNORECASE)

    def apply(self, text: str, legacy: bool) -> str:
        def replace(match: re.Match) -> str:
            hex_digits = match.group(1) or match.group(2)
            return str(resolve(Color.from_hex(hex_digits), legacy))

        return self._pattern.sub(replace, text)

    def strip(self, text: str) -> str:
        return _remove(self._pattern, text)


class GradientPattern:
    """Expands `<#start>text</#end>` into a per-character gradient."""

    name = "gradient"

    _pattern = re.compile(
        f"<#({_HEX})>(.*?)</#({_HEX})>", re.IGNORECASE | re.DOTALL
    )
    _tags = re.compile(f"</?#{_HEX}>", re.IGNORECASE)

    def apply(self, text: str, legacy: bool) -> str:
        def replace(match: re.Match) -> str:
            start = Color.from_hex(match.group(1))
            end = Color.from_hex(match.group(3))
            return apply_gradient(match.group(2), start, end, legacy)

        return self._pattern.sub(replace, text)

    def strip(self, text: str) -> str:
        return _remove(self._tags, text)


class RainbowPattern:
    """Expands `<r:NN>text</r>` into a rainbow, NN being a 0-100 percentage."""

    name = "rainbow"

    _pattern = re.compile(r"<r:(\d{1,3})>(.*?)</r>", re.IGNORECASE | re.DOTALL)
    _tags = re.compile(r"<r:\d{1,3}>|</r>", re.IGNORECASE)

    def apply(self, text: str, legacy: bool) -> str:
        def replace(match: re.Match) -> str:
            # Percentages above 100 are clamped
            saturation = min(int(match.group(1)), 100) / 100
            return apply_rainbow(match.group(2), saturation, legacy)

        return self._pattern.sub(replace, text)

    def strip(self, text: str) -> str:
        return _remove(self._tags, text)
