# tests/test_resolve.py

import pytest

from prismatic.color import (
    BY_CODE,
    WHITE,
    Color,
    FormatToken,
    LegacyToken,
    ModernToken,
    from_hex,
    parse_token,
    resolve,
)
from prismatic.errors import FormatError


class TestColor:
    def test_from_hex(self):
        assert Color.from_hex("ff8800") == Color(255, 136, 0)
        assert Color.from_hex("#FFAA00") == Color(255, 170, 0)
        assert Color.from_hex("aa") == Color(0, 0, 170)

    @pytest.mark.parametrize("value", ["", "#", "zz", "12 34", "-1", "1000000", "0x12"])
    def test_from_hex_rejects_bad_input(self, value):
        with pytest.raises(FormatError):
            Color.from_hex(value)

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            Color.from_hex("nope")

    def test_hex_and_str(self):
        color = Color(18, 52, 86)
        assert color.hex == "123456"
        assert str(color) == "#123456"

    def test_from_hsb(self):
        assert Color.from_hsb(0.0, 1.0, 1.0) == Color(255, 0, 0)
        assert Color.from_hsb(0.5, 1.0, 1.0) == Color(0, 255, 255)
        assert Color.from_hsb(0.0, 0.0, 1.0) == Color(255, 255, 255)
        assert Color.from_hsb(0.0, 0.5, 0.5) == Color(128, 64, 64)

    def test_in_range(self):
        assert Color(0, 128, 255).in_range
        assert not Color(300, 0, -1).in_range


class TestResolve:
    def test_modern_keeps_exact_color(self):
        token = resolve(Color(18, 52, 86), legacy=False)
        assert token == ModernToken(Color(18, 52, 86))
        assert str(token) == "§x§1§2§3§4§5§6"

    def test_legacy_quantizes(self):
        token = resolve(Color(18, 52, 86), legacy=True)
        assert isinstance(token, LegacyToken)

    @pytest.mark.parametrize("legacy", [False, True])
    def test_rejects_out_of_range_channels(self, legacy):
        with pytest.raises(ValueError):
            resolve(Color(300, 0, -1), legacy=legacy)

    def test_modern_token_rejects_out_of_range_channels(self):
        with pytest.raises(ValueError):
            ModernToken(Color(256, 0, 0))

    def test_from_hex(self):
        assert from_hex("ff0000", legacy=True) is BY_CODE["4"]
        assert from_hex("#ff8800", legacy=False).color == Color(255, 136, 0)

    def test_from_hex_invalid(self):
        with pytest.raises(FormatError):
            from_hex("not-a-color", legacy=False)


class TestParseToken:
    def test_single_codes(self):
        assert parse_token("&a") is BY_CODE["a"]
        assert parse_token("§B") is BY_CODE["b"]
        assert parse_token("7") is BY_CODE["7"]

    def test_format_codes(self):
        assert parse_token("&l") == FormatToken("l")
        assert parse_token("§R").is_reset

    def test_extended_marker(self):
        assert parse_token("&x&f&f&8&8&0&0") == ModernToken(Color(255, 136, 0))

    def test_bare_hex(self):
        assert parse_token("00ff00") == ModernToken(Color(0, 255, 0))

    @pytest.mark.parametrize("value", ["", "nope", "&z", "zzzzzz", "12345"])
    def test_unrecognized_is_white(self, value):
        assert parse_token(value) is WHITE
