"""View model exposing a `LightboxSession` to bindings."""

from __future__ import annotations

from loguru import logger

from core.models import ImageDescriptor
from core.services.input_adapter import Command
from core.services.lightbox_session import LightboxSession


class LightboxVM:
    """Presentation-friendly wrapper around a session.

    All intent handlers treat rejected commands as no-ops and return whether
    the visible state changed, so views never need to catch lightbox errors.
    """

    def __init__(self, session: LightboxSession) -> None:
        self._session = session

    @property
    def session(self) -> LightboxSession:
        return self._session

    @property
    def is_open(self) -> bool:
        return self._session.is_open

    @property
    def current_image(self) -> ImageDescriptor | None:
        return self._session.current_image

    @property
    def has_multiple_images(self) -> bool:
        return self._session.image_count > 1

    @property
    def headline(self) -> str:
        """Per-image caption, else the session title, else the fallback title."""
        img = self._session.current_image
        if img is not None and img.caption:
            return img.caption
        return self._session.title or self._session.config.fallback_title

    @property
    def body_text(self) -> str:
        img = self._session.current_image
        if img is not None and img.description:
            return img.description
        return self._session.description or ""

    @property
    def counter_text(self) -> str:
        """e.g. "Image 2 of 3"; empty for single-image galleries."""
        index = self._session.current_index
        if index is None or not self.has_multiple_images:
            return ""
        return f"Image {index + 1} of {self._session.image_count}"

    @property
    def zoom_button_label(self) -> str:
        return "Zoom out" if self._session.is_zoomed else "Zoom in"

    @property
    def thumbnail_labels(self) -> list[str]:
        image_set = self._session.image_set
        if image_set is None:
            return []
        return [f"Go to image {i + 1} of {len(image_set)}" for i in range(len(image_set))]

    # Intents
    def handle_key(self, key: str) -> bool:
        return self._apply(self._session.input.on_key(key))

    def begin_swipe(self, x: float) -> None:
        self._session.input.on_touch_start(x)

    def end_swipe(self, x: float) -> bool:
        """Finish a gesture; sub-threshold gestures count as an image tap."""
        command = self._session.input.on_touch_end(x)
        if command is not None:
            return self._apply(command)
        if self._session.input.last_gesture_was_tap:
            return self.handle_image_tap()
        return False

    def handle_swipe(self, start_x: float, end_x: float) -> bool:
        self.begin_swipe(start_x)
        return self.end_swipe(end_x)

    def handle_image_tap(self) -> bool:
        return self._apply(self._session.input.on_image_tap())

    def select_thumbnail(self, index: int) -> bool:
        return self._apply(self._session.input.on_thumbnail_selected(index))

    def next(self) -> bool:
        return self._apply(self._session.input.on_next_control())

    def previous(self) -> bool:
        return self._apply(self._session.input.on_previous_control())

    def toggle_thumbnails(self) -> bool:
        return self._apply(self._session.input.on_thumbnails_control())

    def backdrop_clicked(self) -> bool:
        return self._apply(self._session.input.on_backdrop_click())

    def close(self) -> bool:
        if not self._session.is_open:
            return False
        logger.debug("Lightbox closed from view at index {}", self._session.current_index)
        self._session.close()
        return True

    def _apply(self, command: Command | None) -> bool:
        return self._session.try_apply(command)
