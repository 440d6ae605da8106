"""View model for an inline image slider on a card (no modal, no effects)."""

from __future__ import annotations

from collections.abc import Iterable

from core.config import DEFAULT_SWIPE_THRESHOLD
from core.errors import IndexOutOfRange
from core.models import ImageDescriptor, ImageSet
from core.services.input_adapter import SwipeOutcome, classify_swipe
from core.services.navigation import NavigationState


class CardSliderVM:
    """Wrap-around slider over a card's images.

    Shares navigation and swipe rules with the lightbox but holds no scroll
    lock or key listener. An empty slider is allowed and shows nothing.
    """

    def __init__(
        self, images: Iterable[ImageDescriptor], swipe_threshold: float = DEFAULT_SWIPE_THRESHOLD
    ) -> None:
        self._images = ImageSet.of(images)
        self._threshold = swipe_threshold
        self._navigation = NavigationState(len(self._images)) if len(self._images) else None
        self._touch_start_x: float | None = None

    @property
    def images(self) -> ImageSet:
        return self._images

    @property
    def current_index(self) -> int | None:
        return self._navigation.current_index if self._navigation is not None else None

    @property
    def current_image(self) -> ImageDescriptor | None:
        index = self.current_index
        return self._images.at(index) if index is not None else None

    @property
    def has_multiple_images(self) -> bool:
        return len(self._images) > 1

    @property
    def dot_labels(self) -> list[str]:
        count = len(self._images)
        return [f"Go to image {i + 1} of {count}" for i in range(count)]

    def next(self) -> bool:
        if self._navigation is None or not self.has_multiple_images:
            return False
        self._navigation.next()
        return True

    def previous(self) -> bool:
        if self._navigation is None or not self.has_multiple_images:
            return False
        self._navigation.previous()
        return True

    def go_to(self, index: int) -> bool:
        if self._navigation is None:
            return False
        try:
            self._navigation.jump_to(index)
        except IndexOutOfRange:
            return False
        return True

    def begin_swipe(self, x: float) -> None:
        self._touch_start_x = x

    def end_swipe(self, x: float) -> SwipeOutcome | None:
        """Finish a gesture; swipes move the slider, a tap is reported to the caller."""
        if self._touch_start_x is None:
            return None
        outcome = classify_swipe(self._touch_start_x, x, self._threshold)
        self._touch_start_x = None
        if outcome is SwipeOutcome.NEXT:
            self.next()
        elif outcome is SwipeOutcome.PREVIOUS:
            self.previous()
        return outcome
