"""Tests for JSON settings and lightbox configuration."""

import json
from pathlib import Path

import pytest

from core.config import DEFAULT_FALLBACK_TITLE, DEFAULT_SWIPE_THRESHOLD, LightboxConfig
from infrastructure.settings import JsonSettings


def _settings(tmp_path: Path, data: dict) -> JsonSettings:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return JsonSettings(path)


def test_dotted_get(tmp_path: Path) -> None:
    settings = _settings(tmp_path, {"lightbox": {"swipe_threshold": 70}})
    assert settings.get("lightbox.swipe_threshold") == 70
    assert settings.get("lightbox.missing", "d") == "d"
    assert settings.get("lightbox.swipe_threshold.deeper") is None


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        JsonSettings(tmp_path / "nope.json")


def test_load_or_default(tmp_path: Path) -> None:
    settings = JsonSettings.load_or_default(tmp_path / "nope.json")
    assert settings.get("anything", 1) == 1


def test_resolve_path_is_relative_to_settings_file(tmp_path: Path) -> None:
    settings = _settings(tmp_path, {"content": {"portfolio_path": "data/p.json"}})
    assert settings.resolve_path("content.portfolio_path") == tmp_path / "data" / "p.json"
    assert settings.resolve_path("content.other") is None


def test_config_defaults() -> None:
    config = LightboxConfig.from_settings(None)
    assert config.swipe_threshold == DEFAULT_SWIPE_THRESHOLD
    assert config.enable_thumbnail_key
    assert config.fallback_title == DEFAULT_FALLBACK_TITLE


def test_config_from_settings(tmp_path: Path) -> None:
    settings = _settings(
        tmp_path,
        {
            "lightbox": {
                "swipe_threshold": "80",
                "enable_thumbnail_key": False,
                "fallback_title": "Work",
            }
        },
    )
    config = LightboxConfig.from_settings(settings)
    assert config.swipe_threshold == 80.0
    assert not config.enable_thumbnail_key
    assert config.fallback_title == "Work"


@pytest.mark.parametrize("bad", [-5, 0, "wide", None])
def test_config_invalid_threshold_falls_back(tmp_path: Path, bad, log_messages) -> None:
    settings = _settings(tmp_path, {"lightbox": {"swipe_threshold": bad}})
    assert LightboxConfig.from_settings(settings).swipe_threshold == DEFAULT_SWIPE_THRESHOLD
    assert any("swipe_threshold" in m for m in log_messages)


def test_load_or_default_on_non_object_root(tmp_path: Path, log_messages) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    settings = JsonSettings.load_or_default(path)
    assert settings.path == path
    assert settings.get("lightbox.swipe_threshold") is None
    assert any("Using default settings" in m for m in log_messages)


def test_from_dict_skips_file_and_anchors_paths(tmp_path: Path) -> None:
    settings = JsonSettings.from_dict(
        {"content": {"portfolio_path": "p.json"}}, tmp_path / "settings.json"
    )
    assert not (tmp_path / "settings.json").exists()
    assert settings.resolve_path("content.portfolio_path") == tmp_path / "p.json"


def test_from_dict_rejects_non_object() -> None:
    with pytest.raises(ValueError):
        JsonSettings.from_dict(["not", "a", "dict"])  # type: ignore[arg-type]
