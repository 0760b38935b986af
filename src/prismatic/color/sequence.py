"""
Color sequence generation for gradients and rainbows.

Each generator returns one token per step, ready to be applied
one-per-visible-character by prismatic.text.annotate.
"""

from __future__ import annotations

from .resolve import resolve
from .types import Color, ColorToken
from ..errors import PreconditionViolation


def gradient(start: Color, end: Color, steps: int, legacy: bool) -> list[ColorToken]:
    """
    Build a linear gradient between two colors.

    Per-channel step sizes use floor division, so the last token does not
    necessarily land exactly on `end`.

    Args:
        start: First color (token 0 is exactly this color)
        end: Color the gradient moves towards
        steps: Number of tokens to produce (>= 1)
        legacy: True to quantize each step to the legacy palette

    Returns:
        List of `steps` tokens

    Raises:
        PreconditionViolation: If steps < 1
    """
    if steps < 1:
        raise PreconditionViolation(f"Gradient needs at least one step, got {steps}")

    intervals = steps - 1
    step_sizes = [
        abs(a - b) // intervals if intervals else 0
        for a, b in zip(start, end)
    ]
    directions = [1 if a < b else -1 for a, b in zip(start, end)]

    tokens = []
    for i in range(steps):
        channels = (
            channel + size * i * direction
            for channel, size, direction in zip(start, step_sizes, directions)
        )
        tokens.append(resolve(Color(*channels), legacy))
    return tokens


def rainbow(steps: int, saturation: float, legacy: bool) -> list[ColorToken]:
    """
    Build a rainbow by rotating the hue once around the color wheel.

    Step i uses hue i / steps; saturation and brightness are both set to
    `saturation`.

    Args:
        steps: Number of tokens to produce (>= 1)
        saturation: Saturation and brightness (0.0-1.0)
        legacy: True to quantize each step to the legacy palette

    Returns:
        List of `steps` tokens

    Raises:
        PreconditionViolation: If steps < 1 or saturation is outside 0.0-1.0
    """
    if steps < 1:
        raise PreconditionViolation(f"Rainbow needs at least one step, got {steps}")
    if not 0.0 <= saturation <= 1.0:
        raise PreconditionViolation(f"Saturation must be within 0.0-1.0, got {saturation}")

    hue_step = 1.0 / steps
    return [
        resolve(Color.from_hsb(hue_step * i, saturation, saturation), legacy)
        for i in range(steps)
    ]
