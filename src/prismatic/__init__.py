"""
Prismatic: text color annotation.

Converts color specifications (single colors, gradients, rainbows and
inline legacy markers) into marker-annotated text, and detects, extracts
and strips those markers again.

Example:
    from prismatic import colorize, strip_all

    text = colorize("<#ff0000>Hello</#0000ff> &lworld")
    strip_all(text)  # "Hello world"

    # 16-color output for renderers without 24-bit support
    colorize("<r:100>Rainbow</r>", legacy=True)
"""

# Colors
from .color import (
    Color,
    ColorToken,
    FormatToken,
    LegacyToken,
    ModernToken,
    PALETTE,
    nearest,
    resolve,
    from_hex,
    parse_token,
    gradient,
    rainbow,
)

# Text
from .text import (
    MarkerKind,
    MarkerSpan,
    apply_tokens,
    apply_color,
    apply_gradient,
    apply_rainbow,
    count_visible,
    strip_format,
    strip_colors,
    find_markers,
)

# Patterns
from .patterns import (
    ColorPattern,
    register_pattern,
    unregister_pattern,
    get_pattern,
    list_patterns,
)

# Pipeline
from .pipeline import (
    colorize,
    translate_markers,
    strip_rgb,
    strip_all,
    start_color,
    end_color,
    starts_with_color,
)

from .errors import PrismaticError, FormatError, PreconditionViolation

__all__ = [
    # Colors
    "Color",
    "ColorToken",
    "FormatToken",
    "LegacyToken",
    "ModernToken",
    "PALETTE",
    "nearest",
    "resolve",
    "from_hex",
    "parse_token",
    "gradient",
    "rainbow",
    # Text
    "MarkerKind",
    "MarkerSpan",
    "apply_tokens",
    "apply_color",
    "apply_gradient",
    "apply_rainbow",
    "count_visible",
    "strip_format",
    "strip_colors",
    "find_markers",
    # Patterns
    "ColorPattern",
    "register_pattern",
    "unregister_pattern",
    "get_pattern",
    "list_patterns",
    # Pipeline
    "colorize",
    "translate_markers",
    "strip_rgb",
    "strip_all",
    "start_color",
    "end_color",
    "starts_with_color",
    # Errors
    "PrismaticError",
    "FormatError",
    "PreconditionViolation",
]
