"""Qt implementations of the lightbox effect interfaces."""

from __future__ import annotations

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import QAbstractScrollArea, QApplication
from loguru import logger

from core.services.interfaces import IKeyEventHost, IScrollTarget, KeyListener

_QT_KEY_NAMES: dict[int, str] = {
    int(Qt.Key_Right): "ArrowRight",
    int(Qt.Key_Left): "ArrowLeft",
    int(Qt.Key_Up): "ArrowUp",
    int(Qt.Key_Down): "ArrowDown",
    int(Qt.Key_Escape): "Escape",
    int(Qt.Key_Tab): "Tab",
}


def key_name(event: QKeyEvent) -> str:
    """Map a Qt key event to the key names understood by the input adapter."""
    name = _QT_KEY_NAMES.get(int(event.key()))
    if name is not None:
        return name
    return event.text() or ""


class QtScrollTarget(QObject, IScrollTarget):
    """Suspends scrolling of a scroll area by swallowing wheel/scroll-key input."""

    _BLOCKED = {QEvent.Wheel, QEvent.Scroll}

    def __init__(self, area: QAbstractScrollArea) -> None:
        super().__init__(area)
        self._area = area
        self._bar_was_enabled = True

    def suspend_scroll(self) -> None:
        self._bar_was_enabled = self._area.verticalScrollBar().isEnabled()
        self._area.viewport().installEventFilter(self)
        self._area.verticalScrollBar().setEnabled(False)

    def restore_scroll(self) -> None:
        self._area.viewport().removeEventFilter(self)
        self._area.verticalScrollBar().setEnabled(self._bar_was_enabled)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # noqa: N802
        return event.type() in self._BLOCKED


class QtKeyEventHost(QObject, IKeyEventHost):
    """Application-wide key source backed by a QApplication event filter."""

    def __init__(self, app: QApplication | None = None) -> None:
        super().__init__()
        self._app = app or QApplication.instance()
        self._listeners: list[KeyListener] = []
        self._installed = False

    def add_key_listener(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            return
        self._listeners.append(listener)
        if not self._installed and self._app is not None:
            self._app.installEventFilter(self)
            self._installed = True

    def remove_key_listener(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
        if not self._listeners and self._installed and self._app is not None:
            self._app.removeEventFilter(self)
            self._installed = False

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # noqa: N802
        if event.type() != QEvent.KeyPress or not self._listeners:
            return False
        name = key_name(event)  # type: ignore[arg-type]
        if not name or name == "Tab":
            return False
        handled = False
        for listener in list(self._listeners):
            try:
                handled = bool(listener(name)) or handled
            except Exception as ex:  # pragma: no cover - GUI callback
                logger.error("Key listener failed for {}: {}", name, ex)
        return handled
