"""Configuration dataclasses."""

from dataclasses import dataclass, field

from ..color.types import Color
from ..errors import FormatError
from ..patterns.base import ColorPattern
from ..patterns.registry import COLOR_PATTERNS, list_patterns


def _default_patterns() -> list[str]:
    return list_patterns()


@dataclass
class PrismaticConfig:
    """Defaults used by the command line front end."""
    legacy: bool = False  # Restrict output to the 16-color palette
    rainbow_saturation: float = 1.0  # 0.0-1.0
    fallback_color: str = "ffffff"  # Used when a color argument can't be parsed
    patterns: list[str] = field(default_factory=_default_patterns)

    def __post_init__(self):
        if not 0.0 <= self.rainbow_saturation <= 1.0:
            raise ValueError(
                f"rainbow_saturation must be within 0.0-1.0, got {self.rainbow_saturation}"
            )
        try:
            Color.from_hex(self.fallback_color)
        except FormatError as e:
            raise ValueError(f"Invalid fallback_color: {e}") from e

    @property
    def fallback(self) -> Color:
        """The fallback color as a Color."""
        return Color.from_hex(self.fallback_color)

    def enabled_patterns(self) -> list[ColorPattern]:
        """Get the enabled patterns, in registry order."""
        return [
            pattern
            for name, pattern in COLOR_PATTERNS.items()
            if name in self.patterns
        ]
