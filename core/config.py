"""Lightbox tuning values with settings-backed overrides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger

DEFAULT_SWIPE_THRESHOLD: float = 50.0
DEFAULT_FALLBACK_TITLE: str = "Portfolio Image"


@dataclass(frozen=True)
class LightboxConfig:
    """Behavioural knobs for the lightbox input and presentation layers."""

    swipe_threshold: float = DEFAULT_SWIPE_THRESHOLD
    enable_thumbnail_key: bool = True
    fallback_title: str = DEFAULT_FALLBACK_TITLE

    @classmethod
    def from_settings(cls, settings: Any | None) -> LightboxConfig:
        """Read `lightbox.*` keys from a settings object with `get(key, default)`."""
        if settings is None:
            return cls()

        threshold = DEFAULT_SWIPE_THRESHOLD
        raw = settings.get("lightbox.swipe_threshold", DEFAULT_SWIPE_THRESHOLD)
        try:
            threshold = float(raw)
            if threshold <= 0:
                raise ValueError("threshold must be positive")
        except (TypeError, ValueError) as ex:
            logger.warning("Invalid lightbox.swipe_threshold {!r} ({}), using default", raw, ex)
            threshold = DEFAULT_SWIPE_THRESHOLD

        enable_thumbs = settings.get("lightbox.enable_thumbnail_key", True)
        if not isinstance(enable_thumbs, bool):
            logger.warning(
                "Invalid lightbox.enable_thumbnail_key {!r}, using default", enable_thumbs
            )
            enable_thumbs = True

        title = settings.get("lightbox.fallback_title", DEFAULT_FALLBACK_TITLE)
        if not isinstance(title, str) or not title.strip():
            title = DEFAULT_FALLBACK_TITLE

        return cls(
            swipe_threshold=threshold,
            enable_thumbnail_key=enable_thumbs,
            fallback_title=title,
        )
