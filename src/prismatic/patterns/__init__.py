"""
Pluggable color pattern syntaxes.

Provides the ColorPattern contract, the built-in patterns and the
global registry the pipeline runs.
"""

from .base import ColorPattern
from .builtin import GradientPattern, RainbowPattern, SingleColorPattern
from .registry import (
    COLOR_PATTERNS,
    register_pattern,
    unregister_pattern,
    get_pattern,
    list_patterns,
    registered_patterns,
)

__all__ = [
    "ColorPattern",
    # Built-ins
    "GradientPattern",
    "RainbowPattern",
    "SingleColorPattern",
    # Registry
    "COLOR_PATTERNS",
    "register_pattern",
    "unregister_pattern",
    "get_pattern",
    "list_patterns",
    "registered_patterns",
]
