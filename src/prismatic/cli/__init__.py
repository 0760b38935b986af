"""
CLI entry point for prismatic.

Contains the `prismatic` executable:
- colorize / strip / gradient / rainbow / inspect sub-commands
"""

from .main import main

__all__ = [
    "main",
]
