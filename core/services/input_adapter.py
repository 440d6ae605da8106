"""Translate keyboard, swipe and click input into lightbox commands.

The adapter is decoupled from any UI toolkit: views hand it plain key names
(``"ArrowRight"``, ``"Escape"``, ``"z"``...) and horizontal pointer
coordinates. Commands are returned one per discrete user action, in the order
the events arrive; nothing is queued, merged or reordered here.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from core.config import DEFAULT_SWIPE_THRESHOLD


class CommandKind(Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    JUMP_TO = "jump_to"
    CLOSE = "close"
    TOGGLE_ZOOM = "toggle_zoom"
    TOGGLE_THUMBNAILS = "toggle_thumbnails"


@dataclass(frozen=True)
class Command:
    """A normalized user intent. `index` is only set for `JUMP_TO`."""

    kind: CommandKind
    index: int | None = None

    @property
    def is_navigation(self) -> bool:
        return self.kind in (CommandKind.NEXT, CommandKind.PREVIOUS, CommandKind.JUMP_TO)


NEXT = Command(CommandKind.NEXT)
PREVIOUS = Command(CommandKind.PREVIOUS)
CLOSE = Command(CommandKind.CLOSE)
TOGGLE_ZOOM = Command(CommandKind.TOGGLE_ZOOM)
TOGGLE_THUMBNAILS = Command(CommandKind.TOGGLE_THUMBNAILS)


def jump_to(index: int) -> Command:
    """Command selecting the image at `index` (range is checked on apply)."""
    return Command(CommandKind.JUMP_TO, index)


_KEY_COMMANDS: dict[str, Command] = {
    "ArrowRight": NEXT,
    "ArrowLeft": PREVIOUS,
    "Escape": CLOSE,
    "z": TOGGLE_ZOOM,
    "Z": TOGGLE_ZOOM,
    "t": TOGGLE_THUMBNAILS,
    "T": TOGGLE_THUMBNAILS,
}


def command_for_key(
    key: str, image_count: int, enable_thumbnail_key: bool = True
) -> Command | None:
    """Map a key name to a command, or None when the key is not bound.

    The thumbnail toggle is only produced for galleries with more than one image.
    """
    command = _KEY_COMMANDS.get(key)
    if command is TOGGLE_THUMBNAILS and (image_count <= 1 or not enable_thumbnail_key):
        return None
    return command


class SwipeOutcome(Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    TAP = "tap"


def classify_swipe(
    start_x: float, end_x: float, threshold: float = DEFAULT_SWIPE_THRESHOLD
) -> SwipeOutcome:
    """Classify a horizontal gesture.

    A leftward movement larger than `threshold` means next, a rightward one
    means previous. Anything at or below the threshold is a tap.
    """
    delta = start_x - end_x
    if delta > threshold:
        return SwipeOutcome.NEXT
    if -delta > threshold:
        return SwipeOutcome.PREVIOUS
    return SwipeOutcome.TAP


class InputAdapter:
    """Stateful front door for raw input events.

    Args:
        image_count: Callable returning the size of the current image set.
        swipe_threshold: Minimum horizontal displacement for a swipe.
        enable_thumbnail_key: Whether `t`/`T` toggles the thumbnail strip.
    """

    def __init__(
        self,
        image_count: Callable[[], int],
        swipe_threshold: float = DEFAULT_SWIPE_THRESHOLD,
        enable_thumbnail_key: bool = True,
    ) -> None:
        self._image_count = image_count
        self._threshold = swipe_threshold
        self._enable_thumbnail_key = enable_thumbnail_key
        self._touch_start_x: float | None = None
        self.last_gesture_was_tap = False

    @property
    def swipe_threshold(self) -> float:
        return self._threshold

    def on_key(self, key: str) -> Command | None:
        return command_for_key(key, self._image_count(), self._enable_thumbnail_key)

    def on_touch_start(self, x: float) -> None:
        self._touch_start_x = x
        self.last_gesture_was_tap = False

    def on_touch_end(self, x: float) -> Command | None:
        """Finish a gesture; returns a navigation command for real swipes only."""
        if self._touch_start_x is None:
            # End without a start (e.g. press began outside the lightbox)
            return None
        outcome = classify_swipe(self._touch_start_x, x, self._threshold)
        self._touch_start_x = None
        self.last_gesture_was_tap = outcome is SwipeOutcome.TAP
        if outcome is SwipeOutcome.NEXT:
            return NEXT
        if outcome is SwipeOutcome.PREVIOUS:
            return PREVIOUS
        return None

    def cancel_touch(self) -> None:
        self._touch_start_x = None
        self.last_gesture_was_tap = False

    def on_thumbnail_selected(self, index: int) -> Command:
        return jump_to(index)

    def on_next_control(self) -> Command:
        return NEXT

    def on_previous_control(self) -> Command:
        return PREVIOUS

    def on_image_tap(self) -> Command:
        return TOGGLE_ZOOM

    def on_backdrop_click(self) -> Command:
        return CLOSE

    def on_thumbnails_control(self) -> Command:
        # The on-screen button works regardless of enable_thumbnail_key
        return TOGGLE_THUMBNAILS
