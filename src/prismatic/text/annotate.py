"""
Per-character color annotation.

Walks a marked-up string, separates two-character markers from visible
characters, and prefixes every visible character with its own color token
followed by the formatting markers (bold, italic...) active at that point.

Example:
    apply_gradient("&lHi!", Color(255, 0, 0), Color(0, 0, 255), legacy=False)
    # -> "§x§f§f§0§0§0§0&lH" + "§x§8§0§0§0§7§f&li" + "§x§0§1§0§0§f§e&l!"
"""

from __future__ import annotations

from typing import Iterator, Sequence

from ..color.resolve import resolve
from ..color.sequence import gradient, rainbow
from ..color.types import LEADS, RESET_CODE, Color, ColorToken
from ..errors import PreconditionViolation


def _walk(text: str) -> Iterator[tuple[str, str | None]]:
    """
    Split text into markers and visible characters.

    Yields (lead + designator, None) for each marker and (char, char) for
    each visible character. A lead in the last position is visible since
    it cannot start a marker.
    """
    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char in LEADS and i + 1 < length:
            yield text[i:i + 2], None
            i += 2
        else:
            yield char, char
            i += 1


def count_visible(text: str) -> int:
    """Count the characters of text that are not part of a marker."""
    return sum(1 for _, visible in _walk(text) if visible is not None)


def apply_tokens(text: str, tokens: Sequence[ColorToken]) -> str:
    """
    Apply one color token per visible character.

    Formatting markers found in the text accumulate and are re-emitted after
    each color, until a lowercase reset marker ("&r" or "§r") clears them.
    An uppercase "&R" is kept like any other format marker.

    Args:
        text: Source text, may contain markers
        tokens: Exactly one token per visible character of text

    Returns:
        Annotated text. Empty or whitespace-only text is returned unchanged.

    Raises:
        PreconditionViolation: If len(tokens) differs from the visible character count
    """
    if not text or text.isspace():
        return text

    visible = count_visible(text)
    if len(tokens) != visible:
        raise PreconditionViolation(
            f"Got {len(tokens)} tokens for {visible} visible characters"
        )

    formats: list[str] = []
    out: list[str] = []
    index = 0

    for chunk, char in _walk(text):
        if char is None:
            if chunk[1] == RESET_CODE:
                formats.clear()
            else:
                formats.append(chunk)
            continue

        out.append(str(tokens[index]))
        out.extend(formats)
        out.append(char)
        index += 1

    return "".join(out)


def apply_color(color: Color, text: str, legacy: bool) -> str:
    """Prefix text with a single resolved color marker."""
    return str(resolve(color, legacy)) + text


def apply_gradient(text: str, start: Color, end: Color, legacy: bool) -> str:
    """
    Color text with a gradient from start to end.

    Text with fewer than two visible characters is returned verbatim.
    """
    visible = count_visible(text)
    if visible <= 1:
        return text
    return apply_tokens(text, gradient(start, end, visible, legacy))


def apply_rainbow(text: str, saturation: float, legacy: bool) -> str:
    """
    Color text with a full hue rotation.

    Args:
        text: Source text
        saturation: Saturation and brightness of the rainbow (0.0-1.0)
        legacy: True to quantize to the legacy palette

    Returns:
        Annotated text, or text verbatim if it has no visible characters
    """
    visible = count_visible(text)
    if visible == 0:
        return text
    return apply_tokens(text, rainbow(visible, saturation, legacy))
