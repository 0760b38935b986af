"""
Marker scanning and stripping.

Three scan families work on raw text, all case-insensitive and accepting
either lead character:
- format markers: lead + k, l, m, n, o, r or x
- color markers: lead + 0-9, a-f or x
- any recognized marker: an extended run (lead x + six lead/hex pairs)
  or a single lead + hex/format designator

The combined scan keeps an explicit cursor: at every lead it tries the
extended form first and, on success, jumps past the whole run, so the
hex-digit markers inside an extended run are never reported on their own.
Markers that follow an extended lead within five hex pairs are skipped
even when the run never completes.
"""

from __future__ import annotations

import re
from enum import Enum, auto
from typing import Iterator, NamedTuple

from ..color.types import EXTENDED_CODE, FORMAT_CODES, HEX_CODES, LEADS

_LEAD_CLASS = f"[{re.escape(LEADS)}]"

_FORMAT_MARKER = re.compile(
    f"{_LEAD_CLASS}[{FORMAT_CODES}{EXTENDED_CODE}]", re.IGNORECASE
)
_COLOR_MARKER = re.compile(
    f"{_LEAD_CLASS}[{HEX_CODES}{EXTENDED_CODE}]", re.IGNORECASE
)

# The same lead must be used for the whole run
_EXTENDED_MARKER = re.compile(
    f"({_LEAD_CLASS}){EXTENDED_CODE}(?:\\1[{HEX_CODES}]){{6}}", re.IGNORECASE
)
_SINGLE_MARKER = re.compile(
    f"{_LEAD_CLASS}[{HEX_CODES}{FORMAT_CODES}]", re.IGNORECASE
)

# An extended lead followed by up to five hex pairs, ending right before a
# candidate offset. Markers there belong to an (incomplete) extended run.
_EXTENDED_PREFIX = re.compile(
    f"({_LEAD_CLASS}){EXTENDED_CODE}(?:\\1[{HEX_CODES}]){{0,5}}\\Z", re.IGNORECASE
)
_PREFIX_WINDOW = 12


class MarkerKind(Enum):
    """What a located marker looks like."""

    SINGLE = auto()  # lead + one designator
    EXTENDED = auto()  # lead x + six lead/hex-digit pairs


class MarkerSpan(NamedTuple):
    """A marker found in a text."""
    start: int
    text: str
    kind: MarkerKind

    @property
    def end(self) -> int:
        """Offset just past the marker."""
        return self.start + len(self.text)


def _inside_extended_run(text: str, i: int) -> bool:
    """Check if offset i is preceded by an extended lead and at most five hex pairs."""
    return _EXTENDED_PREFIX.search(text, max(0, i - _PREFIX_WINDOW), i) is not None


def _is_blank(text: str) -> bool:
    return not text or text.isspace()


def strip_format(text: str) -> str:
    """Remove format markers (bold, italic, reset...) and extended leads."""
    if _is_blank(text):
        return text
    return _FORMAT_MARKER.sub("", text)


def strip_colors(text: str) -> str:
    """Remove single-character color markers and extended leads."""
    if _is_blank(text):
        return text
    return _COLOR_MARKER.sub("", text)


def iter_markers(text: str) -> Iterator[MarkerSpan]:
    """
    Scan text for markers, left to right, without overlaps.

    Args:
        text: Text to scan

    Yields:
        MarkerSpan for each extended run or single marker, in order
    """
    i = 0
    length = len(text)
    while i < length:
        if text[i] not in LEADS:
            i += 1
            continue

        if _inside_extended_run(text, i):
            i += 1
            continue

        match = _EXTENDED_MARKER.match(text, i)
        if match:
            yield MarkerSpan(i, match.group(), MarkerKind.EXTENDED)
            i = match.end()
            continue

        match = _SINGLE_MARKER.match(text, i)
        if match:
            yield MarkerSpan(i, match.group(), MarkerKind.SINGLE)
            i = match.end()
            continue

        i += 1


def find_markers(text: str) -> list[MarkerSpan]:
    """Return every marker in text (see iter_markers)."""
    return list(iter_markers(text))


def first_marker(text: str) -> MarkerSpan | None:
    """Return the first marker in text, or None."""
    return next(iter_markers(text), None)


def last_marker(text: str) -> MarkerSpan | None:
    """Return the last marker in text, or None."""
    span = None
    for span in iter_markers(text):
        pass
    return span
