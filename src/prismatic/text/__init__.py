"""
Text processing: per-character annotation and marker scanning.
"""

from .annotate import (
    apply_tokens,
    apply_color,
    apply_gradient,
    apply_rainbow,
    count_visible,
)
from .markers import (
    MarkerKind,
    MarkerSpan,
    strip_format,
    strip_colors,
    iter_markers,
    find_markers,
    first_marker,
    last_marker,
)

__all__ = [
    # Annotation
    "apply_tokens",
    "apply_color",
    "apply_gradient",
    "apply_rainbow",
    "count_visible",
    # Scanning
    "MarkerKind",
    "MarkerSpan",
    "strip_format",
    "strip_colors",
    "iter_markers",
    "find_markers",
    "first_marker",
    "last_marker",
]
