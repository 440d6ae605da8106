"""Wrap-around carousel navigation over a fixed-size image set.

The state is a single position inside `[0, size - 1]`. Construction rejects
empty sets and out-of-range start indices, so no public transition can reach
an invalid position.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from core.errors import EmptyImageSet, IndexOutOfRange


@dataclass
class NavigationState:
    """Current position plus the size it is valid for.

    `on_change` is invoked with the new index after every successful
    transition (including wrap-around back onto the same index).
    """

    size: int
    current_index: int = 0
    on_change: Callable[[int], None] | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise EmptyImageSet()
        if not 0 <= self.current_index < self.size:
            raise IndexOutOfRange(self.current_index, self.size)

    def next(self) -> int:
        """Advance one position, wrapping from the last image to the first."""
        return self._move_to((self.current_index + 1) % self.size)

    def previous(self) -> int:
        """Step back one position, wrapping from the first image to the last."""
        return self._move_to((self.current_index - 1 + self.size) % self.size)

    def jump_to(self, index: int) -> int:
        """Move directly to `index`; out-of-range values are rejected, not clamped."""
        if not 0 <= index < self.size:
            raise IndexOutOfRange(index, self.size)
        return self._move_to(index)

    @property
    def is_first(self) -> bool:
        return self.current_index == 0

    @property
    def is_last(self) -> bool:
        return self.current_index == self.size - 1

    def _move_to(self, index: int) -> int:
        self.current_index = index
        if self.on_change is not None:
            self.on_change(index)
        return index
