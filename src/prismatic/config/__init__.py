"""Configuration schema and loading."""

from .schema import PrismaticConfig
from .loader import load_config, save_config

__all__ = [
    "PrismaticConfig",
    "load_config",
    "save_config",
]
