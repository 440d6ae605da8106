"""Inline image slider widget driven by `CardSliderVM`."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeyEvent, QPixmap
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from app.viewmodels.slider_vm import CardSliderVM
from app.views.constants import SLIDER_DOT_PX, SLIDER_IMAGE_PX
from app.views.lightbox_dialog import SwipeSurface
from core.services.input_adapter import SwipeOutcome


class CardSlider(QWidget):
    """Image with previous/next arrows and position dots.

    Swipes and arrows move the slider; a tap or Enter emits `activated` with
    the current index so the host can open the lightbox there.
    """

    activated = Signal(int)

    def __init__(self, vm: CardSliderVM, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._vm = vm
        self._dots: list[QPushButton] = []
        self.setFocusPolicy(Qt.StrongFocus)

        layout = QVBoxLayout(self)
        row = QHBoxLayout()
        self._prev_button = QPushButton("‹")
        self._prev_button.setAccessibleName("Previous image")
        self._prev_button.clicked.connect(lambda: self._step(self._vm.previous))
        self._surface = SwipeSurface()
        self._surface.setFixedSize(SLIDER_IMAGE_PX, SLIDER_IMAGE_PX)
        self._surface.pressed.connect(self._vm.begin_swipe)
        self._surface.released.connect(self._on_released)
        self._next_button = QPushButton("›")
        self._next_button.setAccessibleName("Next image")
        self._next_button.clicked.connect(lambda: self._step(self._vm.next))
        row.addWidget(self._prev_button)
        row.addWidget(self._surface, 1)
        row.addWidget(self._next_button)
        layout.addLayout(row)

        dots = QHBoxLayout()
        dots.addStretch()
        for i, label in enumerate(self._vm.dot_labels):
            dot = QPushButton()
            dot.setCheckable(True)
            dot.setFixedSize(SLIDER_DOT_PX, SLIDER_DOT_PX)
            dot.setAccessibleName(label)
            dot.clicked.connect(lambda _checked=False, idx=i: self._go_to(idx))
            dots.addWidget(dot)
            self._dots.append(dot)
        dots.addStretch()
        layout.addLayout(dots)

        multi = self._vm.has_multiple_images
        self._prev_button.setVisible(multi)
        self._next_button.setVisible(multi)
        for dot in self._dots:
            dot.setVisible(multi)
        self._render()

    def _step(self, move) -> None:
        if move():
            self._render()

    def _go_to(self, index: int) -> None:
        if self._vm.go_to(index):
            self._render()

    def _on_released(self, x: float) -> None:
        outcome = self._vm.end_swipe(x)
        if outcome is SwipeOutcome.TAP:
            self._emit_activated()
        elif outcome is not None:
            self._render()

    def _emit_activated(self) -> None:
        index = self._vm.current_index
        if index is not None:
            self.activated.emit(index)

    def _render(self) -> None:
        img = self._vm.current_image
        if img is None:
            self._surface.setText("No images")
            return
        self._surface.setAccessibleName(img.accessible_label)
        self._surface.setToolTip(img.caption or img.accessible_label)
        pm = QPixmap(img.source) if Path(img.source).exists() else QPixmap()
        if pm.isNull():
            self._surface.setPixmap(QPixmap())
            self._surface.setText(img.caption or img.accessible_label)
        else:
            self._surface.setPixmap(
                pm.scaled(self._surface.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation)
            )
        for i, dot in enumerate(self._dots):
            dot.setChecked(i == self._vm.current_index)

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        key = event.key()
        if key == Qt.Key_Left:
            self._step(self._vm.previous)
        elif key == Qt.Key_Right:
            self._step(self._vm.next)
        elif key in (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Space):
            self._emit_activated()
        else:
            super().keyPressEvent(event)
            return
        event.accept()
