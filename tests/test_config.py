# tests/test_config.py

import logging

import pytest

from prismatic.color import Color
from prismatic.config import PrismaticConfig, load_config, save_config
from prismatic.patterns import RainbowPattern, SingleColorPattern


def test_defaults():
    config = PrismaticConfig()
    assert config.legacy is False
    assert config.fallback == Color(255, 255, 255)
    assert config.patterns[:3] == ["single", "gradient", "rainbow"]


def test_enabled_patterns_follow_registry_order():
    config = PrismaticConfig(patterns=["rainbow", "single"])
    enabled = config.enabled_patterns()
    assert [type(p) for p in enabled] == [SingleColorPattern, RainbowPattern]


@pytest.mark.parametrize("kwargs", [
    {"rainbow_saturation": 1.5},
    {"rainbow_saturation": -0.1},
    {"fallback_color": "white"},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        PrismaticConfig(**kwargs)


def test_load_config(tmp_path, caplog):
    path = tmp_path / "prismatic.yaml"
    path.write_text(
        "legacy: true\n"
        "rainbow_saturation: 0.5\n"
        "fallback_color: '00ff00'\n"
        "patterns:\n"
        "  - gradient\n"
        "  - sparkle\n"
    )

    with caplog.at_level(logging.WARNING):
        config = load_config(path)

    assert config.legacy is True
    assert config.rainbow_saturation == 0.5
    assert config.fallback == Color(0, 255, 0)
    assert config.patterns == ["gradient"]
    assert "sparkle" in caplog.text


def test_load_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == PrismaticConfig()


def test_load_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- legacy\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_save_then_load(tmp_path):
    path = tmp_path / "saved.yaml"
    config = PrismaticConfig(legacy=True, rainbow_saturation=0.25, patterns=["rainbow"])
    save_config(config, path)
    assert load_config(path) == config


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")
