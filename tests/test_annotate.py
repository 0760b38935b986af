# tests/test_annotate.py

import pytest

from prismatic.color import BY_CODE, Color
from prismatic.errors import PreconditionViolation
from prismatic.text import (
    apply_color,
    apply_gradient,
    apply_rainbow,
    apply_tokens,
    count_visible,
)

RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)
C = BY_CODE["c"]
NINE = BY_CODE["9"]


class TestCountVisible:
    @pytest.mark.parametrize("text, expected", [
        ("", 0),
        ("Hi", 2),
        ("&lHi", 2),
        ("§aH&li", 2),
        ("ab&", 3),
        ("§x§f§f§0§0§0§0Hi", 2),
        ("Tom & Jerry", 9),
    ])
    def test_counts(self, text, expected):
        assert count_visible(text) == expected


class TestApplyTokens:
    def test_empty_and_blank_unchanged(self):
        assert apply_tokens("", []) == ""
        assert apply_tokens("", [C, NINE]) == ""
        assert apply_tokens("   ", [C]) == "   "

    def test_one_token_per_character(self):
        assert apply_tokens("ab", [C, NINE]) == "§ca§9b"

    def test_format_is_repeated_after_each_color(self):
        assert apply_tokens("&lab", [C, NINE]) == "§c&la§9&lb"

    def test_formats_stack(self):
        assert apply_tokens("&l§oab", [C, NINE]) == "§c&l§oa§9&l§ob"

    @pytest.mark.parametrize("reset", ["&r", "§r"])
    def test_reset_clears_formats(self, reset):
        assert apply_tokens(f"&la{reset}b", [C, NINE]) == "§c&la§9b"

    def test_uppercase_reset_is_remembered(self):
        assert apply_tokens("&la&Rb", [C, NINE]) == "§c&la§9&l&Rb"

    def test_trailing_lead_is_visible(self):
        assert apply_tokens("a&", [C, NINE]) == "§ca§9&"

    @pytest.mark.parametrize("tokens", [[C], [C, NINE, C]])
    def test_token_count_mismatch(self, tokens):
        with pytest.raises(PreconditionViolation):
            apply_tokens("ab", tokens)


class TestEffects:
    def test_apply_color(self):
        assert apply_color(RED, "Hi", legacy=True) == "§4Hi"
        assert apply_color(RED, "Hi", legacy=False) == "§x§f§f§0§0§0§0Hi"

    @pytest.mark.parametrize("text", ["", "A", "&lA", "&a"])
    def test_gradient_passes_short_text_through(self, text):
        assert apply_gradient(text, RED, BLUE, legacy=False) == text

    def test_gradient(self):
        assert apply_gradient("Hi!", RED, BLUE, legacy=False) == (
            "§x§f§f§0§0§0§0H"
            "§x§8§0§0§0§7§fi"
            "§x§0§1§0§0§f§e!"
        )

    def test_gradient_keeps_bold(self):
        result = apply_gradient("&lHi", RED, BLUE, legacy=True)
        assert result == "§4&lH§1&li"

    def test_rainbow_empty(self):
        assert apply_rainbow("", 1.0, legacy=False) == ""
        assert apply_rainbow("&l", 1.0, legacy=False) == "&l"

    def test_rainbow_single_character(self):
        assert apply_rainbow("A", 1.0, legacy=False) == "§x§f§f§0§0§0§0A"

    def test_rainbow(self):
        assert apply_rainbow("ab", 1.0, legacy=False) == "§x§f§f§0§0§0§0a§x§0§0§f§f§f§fb"
