"""Configuration file loading and saving."""

import logging
from pathlib import Path
from typing import Any

import yaml

from ..patterns.registry import list_patterns
from .schema import PrismaticConfig

logger = logging.getLogger(__name__)


def load_config(config_path: Path) -> PrismaticConfig:
    """
    Load configuration from a YAML file.

    Missing keys take their defaults. Unknown pattern names are dropped
    with a warning.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a value is malformed
    """
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {config_path}")

    # Parse pattern selection
    known = list_patterns()
    names = data.get("patterns")
    if names is None:
        patterns = known
    else:
        patterns = []
        for name in names:
            if name in known:
                patterns.append(name)
            else:
                logger.warning("Unknown color pattern %r in %s", name, config_path)

    return PrismaticConfig(
        legacy=bool(data.get("legacy", False)),
        rainbow_saturation=float(data.get("rainbow_saturation", 1.0)),
        fallback_color=str(data.get("fallback_color", "ffffff")),
        patterns=patterns,
    )


def save_config(config: PrismaticConfig, config_path: Path) -> None:
    """Save configuration to a YAML file."""
    data: dict[str, Any] = {
        "legacy": config.legacy,
        "rainbow_saturation": config.rainbow_saturation,
        "fallback_color": config.fallback_color,
        "patterns": list(config.patterns),
    }

    with open(config_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
