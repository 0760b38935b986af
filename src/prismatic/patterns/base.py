"""
The color pattern contract.

A color pattern recognizes its own custom markup (for example
"<#ff0000>text</#0000ff>") and expands it into native markers. Any object
with matching `apply` and `strip` methods can be registered.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ColorPattern(Protocol):
    """
    Custom color syntax that expands into native markers.

    Methods:
        apply: Expand every occurrence of the syntax in text. `legacy`
            selects palette-quantized output over full 24-bit markers.
        strip: Remove the syntax from text, keeping any enclosed content.
            Must be idempotent.
    """

    def apply(self, text: str, legacy: bool) -> str:
        ...

    def strip(self, text: str) -> str:
        ...
