"""Tab-order containment for modal overlays, independent of any toolkit."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class FocusTrap(Generic[T]):
    """Cycles keyboard focus within an ordered list of focusable controls.

    Controls are opaque hashable handles (widget references, element ids...).
    The element focused before activation is remembered so it can be handed
    back when the overlay closes.
    """

    def __init__(self, controls: Sequence[T] = ()) -> None:
        self._controls: list[T] = list(controls)
        self._return_target: T | None = None
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def controls(self) -> list[T]:
        return list(self._controls)

    def set_controls(self, controls: Sequence[T]) -> None:
        """Replace the focus order (e.g. when the thumbnail strip appears)."""
        self._controls = list(controls)

    def activate(self, previously_focused: T | None = None) -> T | None:
        """Start trapping; returns the control that should receive focus first."""
        if not self._active:
            self._return_target = previously_focused
        self._active = True
        return self.first()

    def deactivate(self) -> T | None:
        """Stop trapping; returns the element focus should be restored to."""
        if not self._active:
            return None
        self._active = False
        target, self._return_target = self._return_target, None
        return target

    def first(self) -> T | None:
        return self._controls[0] if self._controls else None

    def last(self) -> T | None:
        return self._controls[-1] if self._controls else None

    def next_focus(self, current: T | None, backwards: bool = False) -> T | None:
        """Control that Tab (or Shift+Tab when `backwards`) moves to from `current`.

        Focus outside the trap is pulled back to the first (or last) control.
        """
        if not self._controls:
            return None
        if current not in self._controls:
            return self.last() if backwards else self.first()
        pos = self._controls.index(current)
        step = -1 if backwards else 1
        return self._controls[(pos + step) % len(self._controls)]
