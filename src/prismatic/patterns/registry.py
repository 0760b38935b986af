"""
Color pattern registry with built-in patterns.

Usage:
    from prismatic.patterns.registry import register_pattern, list_patterns

    register_pattern(MyPattern(), name="mine")
    print(list_patterns())  # ['single', 'gradient', 'rainbow', 'mine']

Patterns run in registration order. The single color pattern runs first so
that colors nested inside gradients and rainbows are already native markers.
"""

from __future__ import annotations

import logging

from .base import ColorPattern
from .builtin import GradientPattern, RainbowPattern, SingleColorPattern

logger = logging.getLogger(__name__)

# Global pattern registry (insertion ordered)
COLOR_PATTERNS: dict[str, ColorPattern] = {}


def register_pattern(pattern: ColorPattern, name: str | None = None) -> None:
    """
    Register a pattern in the global registry.

    Args:
        pattern: Object with apply(text, legacy) and strip(text)
        name: Registry key; defaults to the pattern's `name` attribute or class name

    Raises:
        TypeError: If pattern does not implement apply and strip
    """
    if not isinstance(pattern, ColorPattern):
        raise TypeError(f"{pattern!r} does not implement apply() and strip()")

    key = name or getattr(pattern, "name", None) or type(pattern).__name__
    if key in COLOR_PATTERNS:
        logger.warning("Replacing color pattern %r", key)
    COLOR_PATTERNS[key] = pattern
    logger.debug("Registered color pattern %r", key)


def unregister_pattern(name: str) -> ColorPattern | None:
    """Remove a pattern from the registry and return it, or None if absent."""
    return COLOR_PATTERNS.pop(name, None)


def get_pattern(name: str) -> ColorPattern | None:
    """Get a pattern by name."""
    return COLOR_PATTERNS.get(name)


def list_patterns() -> list[str]:
    """Get list of all registered pattern names, in run order."""
    return list(COLOR_PATTERNS.keys())


def registered_patterns() -> list[ColorPattern]:
    """Get the registered patterns, in run order."""
    return list(COLOR_PATTERNS.values())


# Register all built-in patterns on module import
for _builtin in (SingleColorPattern(), GradientPattern(), RainbowPattern()):
    register_pattern(_builtin)
