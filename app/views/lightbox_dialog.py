"""Modal lightbox dialog rendering a `LightboxSession`.

The dialog never mutates session state itself. Every user action is routed
through `LightboxVM`, and the dialog re-renders from the snapshots the session
publishes.
"""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QEvent, QPoint, Qt, Signal
from PySide6.QtGui import QMouseEvent, QPixmap
from PySide6.QtWidgets import (
    QDialog,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)
from loguru import logger

from app.viewmodels.lightbox_vm import LightboxVM
from app.views.constants import (
    LIGHTBOX_BACKDROP_STYLE,
    LIGHTBOX_NAV_BUTTON_PX,
    LIGHTBOX_THUMB_PX,
)
from core.services.focus_trap import FocusTrap
from core.services.lightbox_session import LightboxSnapshot


class SwipeSurface(QLabel):
    """Image label reporting horizontal press/release positions.

    Mouse and touch input both end up as `pressed(x)` / `released(x)` so the
    swipe classifier sees a single event stream.
    """

    pressed = Signal(float)
    released = Signal(float)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setAttribute(Qt.WA_AcceptTouchEvents, True)
        self._touch_active = False

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() == Qt.LeftButton and not self._touch_active:
            self.pressed.emit(event.position().x())
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() == Qt.LeftButton and not self._touch_active:
            self.released.emit(event.position().x())
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def event(self, event: QEvent) -> bool:
        et = event.type()
        if et in (QEvent.TouchBegin, QEvent.TouchEnd, QEvent.TouchCancel):
            points = event.points()  # type: ignore[attr-defined]
            x = points[0].position().x() if points else 0.0
            if et == QEvent.TouchBegin:
                # Qt also synthesizes mouse events from touches; ignore those
                self._touch_active = True
                self.pressed.emit(x)
            elif et == QEvent.TouchEnd:
                self.released.emit(x)
                self._touch_active = False
            else:
                self._touch_active = False
            event.accept()
            return True
        return super().event(event)


class LightboxDialog(QDialog):
    """Full-window modal image viewer."""

    def __init__(self, vm: LightboxVM, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._vm = vm
        self._focus_trap: FocusTrap[QWidget] = FocusTrap()
        self._thumb_buttons: list[QPushButton] = []
        self._rendered_images: tuple = ()
        self._pixmap: QPixmap | None = None

        self.setModal(True)
        self.setWindowFlag(Qt.FramelessWindowHint, True)
        self.setStyleSheet(LIGHTBOX_BACKDROP_STYLE)
        self.setAccessibleName("Lightbox")

        self._setup_ui()
        self._unsubscribe = vm.session.subscribe(self._render)

    def _setup_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 16, 24, 16)

        # Header: title, counter, toggles, close
        header = QHBoxLayout()
        self._title_label = QLabel()
        self._title_label.setObjectName("lightboxTitle")
        self._counter_label = QLabel()
        self._zoom_button = QPushButton()
        self._zoom_button.clicked.connect(self._vm.handle_image_tap)
        self._thumbs_button = QPushButton("Thumbnails")
        self._thumbs_button.setAccessibleName("Toggle thumbnails")
        self._thumbs_button.clicked.connect(self._vm.toggle_thumbnails)
        self._close_button = QPushButton("✕")
        self._close_button.setAccessibleName("Close lightbox")
        self._close_button.clicked.connect(self._vm.close)
        header.addWidget(self._title_label)
        header.addWidget(self._counter_label)
        header.addStretch()
        header.addWidget(self._zoom_button)
        header.addWidget(self._thumbs_button)
        header.addWidget(self._close_button)
        root.addLayout(header)

        # Content frame; clicks outside it count as backdrop clicks
        self._content = QFrame()
        content_layout = QHBoxLayout(self._content)
        content_layout.setContentsMargins(0, 0, 0, 0)

        self._prev_button = QPushButton("‹")
        self._prev_button.setAccessibleName("Previous image")
        self._prev_button.setFixedSize(LIGHTBOX_NAV_BUTTON_PX, LIGHTBOX_NAV_BUTTON_PX)
        # Buttons accept their own clicks, so the surface's tap handler never sees them
        self._prev_button.clicked.connect(self._vm.previous)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._scroll.setAlignment(Qt.AlignCenter)
        self._surface = SwipeSurface()
        self._surface.pressed.connect(self._vm.begin_swipe)
        self._surface.released.connect(self._vm.end_swipe)
        self._scroll.setWidget(self._surface)

        self._next_button = QPushButton("›")
        self._next_button.setAccessibleName("Next image")
        self._next_button.setFixedSize(LIGHTBOX_NAV_BUTTON_PX, LIGHTBOX_NAV_BUTTON_PX)
        self._next_button.clicked.connect(self._vm.next)

        content_layout.addWidget(self._prev_button)
        content_layout.addWidget(self._scroll, 1)
        content_layout.addWidget(self._next_button)
        root.addWidget(self._content, 1)

        self._caption_label = QLabel()
        self._caption_label.setAlignment(Qt.AlignCenter)
        self._caption_label.setWordWrap(True)
        root.addWidget(self._caption_label)

        self._thumb_strip = QWidget()
        self._thumb_layout = QHBoxLayout(self._thumb_strip)
        self._thumb_layout.setContentsMargins(0, 8, 0, 0)
        root.addWidget(self._thumb_strip)

        hint = QLabel("Press Esc or click outside to close")
        hint.setAlignment(Qt.AlignCenter)
        root.addWidget(hint)

    # Public API
    def present(self, opener: QWidget | None = None) -> None:
        """Show the dialog for an already-open session."""
        snap = self._vm.session.snapshot()
        if not snap.is_open:
            logger.debug("present() called on a closed lightbox session")
            return
        self._render(snap)
        first = self._focus_trap.activate(opener)
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.window().geometry())
        self.show()
        if first is not None:
            first.setFocus(Qt.TabFocusReason)

    # Rendering
    def _render(self, snap: LightboxSnapshot) -> None:
        if not snap.is_open:
            self._finish()
            return

        image_set = self._vm.session.image_set
        images = tuple(image_set) if image_set is not None else ()
        if images != self._rendered_images:
            self._rebuild_thumbnails(images)
            self._rendered_images = images

        img = snap.current_image
        self._title_label.setText(snap.title or "")
        self._counter_label.setText(self._vm.counter_text)
        self._caption_label.setText(
            f"{self._vm.headline}\n{self._vm.body_text}".strip()
        )
        self._zoom_button.setText(self._vm.zoom_button_label)
        self._zoom_button.setAccessibleName(self._vm.zoom_button_label)

        multi = self._vm.has_multiple_images
        self._prev_button.setVisible(multi)
        self._next_button.setVisible(multi)
        self._thumbs_button.setVisible(multi)
        self._thumb_strip.setVisible(multi and snap.show_thumbnail_strip)
        for i, btn in enumerate(self._thumb_buttons):
            btn.setChecked(i == snap.current_index)

        if img is not None:
            self._show_image(img.source, img.accessible_label, snap.is_zoomed)
        self._focus_trap.set_controls(self._focusable_controls())

    def _show_image(self, source: str, label: str, zoomed: bool) -> None:
        self._surface.setAccessibleName(label)
        self._surface.setToolTip(label)
        pm = QPixmap(source) if Path(source).exists() else QPixmap()
        if pm.isNull():
            self._pixmap = None
            self._surface.setPixmap(QPixmap())
            self._surface.setText(label or source)
            return
        self._pixmap = pm
        self._scroll.setWidgetResizable(not zoomed)
        if zoomed:
            self._surface.setPixmap(pm)
            self._surface.adjustSize()
        else:
            viewport = self._scroll.viewport().size()
            self._surface.setPixmap(
                pm.scaled(viewport, Qt.KeepAspectRatio, Qt.SmoothTransformation)
            )

    def _rebuild_thumbnails(self, images: tuple) -> None:
        for btn in self._thumb_buttons:
            self._thumb_layout.removeWidget(btn)
            btn.deleteLater()
        self._thumb_buttons = []
        labels = self._vm.thumbnail_labels
        for i, img in enumerate(images):
            btn = QPushButton(str(i + 1))
            btn.setCheckable(True)
            btn.setFixedSize(LIGHTBOX_THUMB_PX, LIGHTBOX_THUMB_PX)
            btn.setAccessibleName(labels[i] if i < len(labels) else img.accessible_label)
            btn.clicked.connect(lambda _checked=False, idx=i: self._vm.select_thumbnail(idx))
            self._thumb_layout.addWidget(btn)
            self._thumb_buttons.append(btn)
        self._thumb_layout.addStretch()

    def _focusable_controls(self) -> list[QWidget]:
        controls: list[QWidget] = [self._close_button, self._zoom_button]
        if self._vm.has_multiple_images:
            controls += [self._thumbs_button, self._prev_button, self._next_button]
            if self._thumb_strip.isVisibleTo(self):
                controls += self._thumb_buttons
        return controls

    def _finish(self) -> None:
        restore = self._focus_trap.deactivate()
        self._rendered_images = ()
        if self.isVisible():
            self.hide()
        if restore is not None:
            restore.setFocus(Qt.OtherFocusReason)

    # Qt overrides
    def focusNextPrevChild(self, next: bool) -> bool:  # noqa: N802,A002
        target = self._focus_trap.next_focus(self.focusWidget(), backwards=not next)
        if target is None:
            return super().focusNextPrevChild(next)
        target.setFocus(Qt.BacktabFocusReason if not next else Qt.TabFocusReason)
        return True

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        pos = event.position().toPoint()
        if not self._content.geometry().contains(pos) and not self._is_over_chrome(pos):
            self._vm.backdrop_clicked()
            event.accept()
            return
        super().mousePressEvent(event)

    def _is_over_chrome(self, pos: QPoint) -> bool:
        child = self.childAt(pos)
        return child is not None and child is not self

    def reject(self) -> None:
        # Esc normally reaches the session's key listener first; this covers
        # platforms that route it straight to the dialog.
        self._vm.close()

    def closeEvent(self, event) -> None:  # noqa: N802
        self._vm.close()
        super().closeEvent(event)

    def cleanup(self) -> None:
        """Detach from the session (window teardown)."""
        self._unsubscribe()
