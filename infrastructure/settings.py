"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access.

    Example `settings.json`::

        {"lightbox": {"swipe_threshold": 50}, "content": {"portfolio_path": "content.json"}}

    When `data` is given the file is not read; `settings_path` then only
    anchors relative paths.
    """

    def __init__(self, settings_path: str | Path, data: dict[str, Any] | None = None) -> None:
        self._path = Path(settings_path)
        if data is None:
            if not self._path.exists():
                raise FileNotFoundError(f"settings.json not found: {self._path}")
            with self._path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"settings root must be an object: {self._path}")
        self._data: dict[str, Any] = data

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], settings_path: str | Path = "settings.json"
    ) -> JsonSettings:
        return cls(settings_path, data)

    @classmethod
    def load_or_default(cls, settings_path: str | Path) -> JsonSettings:
        """Load settings, or start empty when the file is missing or unreadable."""
        try:
            return cls(settings_path)
        except (OSError, ValueError) as ex:
            logger.warning("Using default settings ({}): {}", settings_path, ex)
            return cls.from_dict({}, settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        node: Any = self._data
        for part in key.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    def resolve_path(self, key: str) -> Path | None:
        """Return a path setting resolved relative to the settings file."""
        raw = self.get(key)
        if not isinstance(raw, str) or not raw:
            return None
        p = Path(raw)
        return p if p.is_absolute() else self._path.parent / p
