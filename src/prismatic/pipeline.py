"""
Colorize and strip pipeline.

Ties the registered color patterns to the shorthand marker translation:

    colorize("<#ff0000>Hello</#0000ff> &lworld")
    # 1. every registered pattern expands its own syntax
    # 2. "&" leads in front of a designator become "§"

Every entry point takes an optional `patterns` sequence; when omitted the
global registry is used in registration order.
"""

from __future__ import annotations

import re
from typing import Sequence

from .color.types import (
    EXTENDED_CODE,
    FORMAT_CODES,
    HEX_CODES,
    NATIVE_LEAD,
    SHORTHAND_LEAD,
)
from .patterns.base import ColorPattern
from .patterns.registry import registered_patterns
from .text.markers import first_marker, last_marker, strip_colors, strip_format

_SHORTHAND_MARKER = re.compile(
    f"{re.escape(SHORTHAND_LEAD)}(?=[{HEX_CODES}{FORMAT_CODES}{EXTENDED_CODE}])",
    re.IGNORECASE,
)


def _patterns(patterns: Sequence[ColorPattern] | None) -> Sequence[ColorPattern]:
    return registered_patterns() if patterns is None else patterns


def translate_markers(text: str) -> str:
    """
    Replace the shorthand lead with the native lead.

    Only leads followed by a recognized designator are translated, so a
    plain "&" in prose is kept.
    """
    return _SHORTHAND_MARKER.sub(NATIVE_LEAD, text)


def colorize(
    text: str,
    legacy: bool = False,
    patterns: Sequence[ColorPattern] | None = None,
) -> str:
    """
    Expand all color syntax in text into native markers.

    Args:
        text: Marked-up text
        legacy: True to restrict output to the 16-color palette
        patterns: Patterns to run (defaults to the registry)

    Returns:
        Text using native markers only
    """
    for pattern in _patterns(patterns):
        text = pattern.apply(text, legacy)
    return translate_markers(text)


def strip_rgb(text: str, patterns: Sequence[ColorPattern] | None = None) -> str:
    """Remove every pattern's custom syntax, without translating markers."""
    for pattern in _patterns(patterns):
        text = pattern.strip(text)
    return text


def strip_all(text: str, patterns: Sequence[ColorPattern] | None = None) -> str:
    """
    Remove all color and format markup.

    Format markers, color markers and pattern syntax are stripped in that
    order, repeating until the text stops changing.
    """
    patterns = _patterns(patterns)
    while True:
        stripped = strip_rgb(strip_colors(strip_format(text)), patterns)
        if stripped == text:
            return text
        text = stripped


def start_color(
    text: str,
    legacy: bool = False,
    patterns: Sequence[ColorPattern] | None = None,
) -> str | None:
    """
    Get the marker the colorized text starts with.

    Returns:
        The marker text, or None if the colorized text does not begin with one
    """
    span = first_marker(colorize(text, legacy, patterns))
    if span is None or span.start != 0:
        return None
    return span.text


def end_color(
    text: str,
    legacy: bool = False,
    patterns: Sequence[ColorPattern] | None = None,
) -> str | None:
    """Get the last marker anywhere in the colorized text, or None."""
    span = last_marker(colorize(text, legacy, patterns))
    return span.text if span else None


def starts_with_color(
    text: str,
    legacy: bool = False,
    patterns: Sequence[ColorPattern] | None = None,
) -> bool:
    """Check if the colorized text begins with a marker."""
    if not text or text.isspace():
        return False
    return start_color(text, legacy, patterns) is not None
