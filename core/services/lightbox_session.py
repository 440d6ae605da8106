"""Lightbox session: lifecycle, navigation and scoped side effects.

A session is either closed (no images, no navigation) or open over a
non-empty `ImageSet`. Every public operation is synchronous: it either
applies completely or raises a `LightboxError` leaving the session untouched.

While open, the session holds two process-wide effects: a background scroll
lock and a global key listener. They are acquired on `open`, released on
every exit path (`close`, `dispose`, leaving a `with` block) and never held
twice.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from loguru import logger

from core.config import LightboxConfig
from core.errors import EmptyImageSet, InvalidCommandWhileClosed, LightboxError
from core.models import ImageDescriptor, ImageSet
from core.services.effects import KeyListenerRegistration, ScrollLock
from core.services.input_adapter import Command, CommandKind, InputAdapter
from core.services.interfaces import IKeyEventHost, IScrollTarget
from core.services.navigation import NavigationState


@dataclass(frozen=True)
class LightboxSnapshot:
    """Immutable view of a session for rendering."""

    is_open: bool
    current_index: int | None
    image_count: int
    current_image: ImageDescriptor | None
    is_zoomed: bool
    show_thumbnail_strip: bool
    title: str | None
    description: str | None


class LightboxSession:
    """Owns one modal image viewer.

    Args:
        scroll_target: Optional target whose scrolling is suspended while open.
        key_host: Optional global key source; a listener is attached while open.
        config: Input tuning (swipe threshold, thumbnail key).
    """

    def __init__(
        self,
        scroll_target: IScrollTarget | None = None,
        key_host: IKeyEventHost | None = None,
        config: LightboxConfig | None = None,
    ) -> None:
        self._config = config or LightboxConfig()
        self._image_set: ImageSet | None = None
        self._navigation: NavigationState | None = None
        self._is_zoomed = False
        self._show_thumbnail_strip = False
        self._title: str | None = None
        self._description: str | None = None
        self._listeners: list[Callable[[LightboxSnapshot], None]] = []

        self.input = InputAdapter(
            image_count=lambda: self.image_count,
            swipe_threshold=self._config.swipe_threshold,
            enable_thumbnail_key=self._config.enable_thumbnail_key,
        )
        self._scroll_lock = ScrollLock(scroll_target)
        self._key_registration = KeyListenerRegistration(key_host, self.handle_key)

    # Lifecycle
    def open(
        self,
        images: ImageSet | Iterable[ImageDescriptor],
        start_index: int = 0,
        title: str | None = None,
        description: str | None = None,
    ) -> LightboxSession:
        """Open over `images` positioned at `start_index`.

        Raises:
            EmptyImageSet: `images` is empty.
            IndexOutOfRange: `start_index` is outside the set.
        """
        image_set = images if isinstance(images, ImageSet) else ImageSet.of(images)
        if len(image_set) == 0:
            raise EmptyImageSet()
        # Built before any state change so a bad start index leaves us untouched
        navigation = NavigationState(
            size=len(image_set), current_index=start_index, on_change=self._on_navigation_changed
        )

        self._image_set = image_set
        self._navigation = navigation
        self._is_zoomed = False
        self._show_thumbnail_strip = False
        self._title = title
        self._description = description
        self._scroll_lock.acquire()
        self._key_registration.acquire()
        logger.info(
            "Lightbox opened: {} image(s) at index {} title={!r}",
            len(image_set),
            start_index,
            title,
        )
        self._notify()
        return self

    def close(self) -> LightboxSession:
        """Close the session and release held effects; no-op when already closed."""
        if not self.is_open:
            self._release_effects()
            return self
        self._image_set = None
        self._navigation = None
        self._is_zoomed = False
        self._show_thumbnail_strip = False
        self._title = None
        self._description = None
        self._release_effects()
        logger.info("Lightbox closed")
        self._notify()
        return self

    def bind_effects(
        self, scroll_target: IScrollTarget | None = None, key_host: IKeyEventHost | None = None
    ) -> None:
        """Attach effect targets once the hosting view exists (closed sessions only)."""
        if self.is_open:
            raise RuntimeError("Cannot rebind effects while the lightbox is open")
        self._scroll_lock = ScrollLock(scroll_target)
        self._key_registration = KeyListenerRegistration(key_host, self.handle_key)

    def dispose(self) -> None:
        """Tear down on unmount or when the hosting page is left."""
        self.close()
        self._listeners.clear()

    def __enter__(self) -> LightboxSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    # Commands
    def apply(self, command: Command) -> LightboxSession:
        """Apply a single command.

        Raises:
            InvalidCommandWhileClosed: the session is not open.
            IndexOutOfRange: `JUMP_TO` with an index outside the set.
        """
        if self._navigation is None:
            raise InvalidCommandWhileClosed(command)

        kind = command.kind
        if kind is CommandKind.NEXT:
            self._navigation.next()
        elif kind is CommandKind.PREVIOUS:
            self._navigation.previous()
        elif kind is CommandKind.JUMP_TO:
            self._navigation.jump_to(command.index if command.index is not None else -1)
        elif kind is CommandKind.TOGGLE_ZOOM:
            self._is_zoomed = not self._is_zoomed
        elif kind is CommandKind.TOGGLE_THUMBNAILS:
            if self.image_count <= 1:
                return self
            self._show_thumbnail_strip = not self._show_thumbnail_strip
        elif kind is CommandKind.CLOSE:
            return self.close()
        else:  # pragma: no cover - exhaustive over CommandKind
            raise ValueError(f"Unsupported command: {command!r}")

        self._notify()
        return self

    def try_apply(self, command: Command | None) -> bool:
        """Apply `command` treating rejections as no-ops; returns True if applied."""
        if command is None:
            return False
        try:
            self.apply(command)
        except LightboxError as ex:
            logger.debug("Lightbox command ignored: {}", ex)
            return False
        return True

    def handle_key(self, key: str) -> bool:
        """Global key listener entry point."""
        if not self.is_open:
            logger.warning("Key {!r} delivered to a closed lightbox", key)
            return False
        return self.try_apply(self.input.on_key(key))

    # Observation
    def subscribe(self, listener: Callable[[LightboxSnapshot], None]) -> Callable[[], None]:
        """Register a change listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    @property
    def is_open(self) -> bool:
        return self._navigation is not None

    @property
    def image_set(self) -> ImageSet | None:
        return self._image_set

    @property
    def image_count(self) -> int:
        return len(self._image_set) if self._image_set is not None else 0

    @property
    def current_index(self) -> int | None:
        return self._navigation.current_index if self._navigation is not None else None

    @property
    def current_image(self) -> ImageDescriptor | None:
        if self._image_set is None or self._navigation is None:
            return None
        return self._image_set.at(self._navigation.current_index)

    @property
    def is_zoomed(self) -> bool:
        return self._is_zoomed

    @property
    def show_thumbnail_strip(self) -> bool:
        return self._show_thumbnail_strip

    @property
    def title(self) -> str | None:
        return self._title

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def config(self) -> LightboxConfig:
        return self._config

    @property
    def holds_scroll_lock(self) -> bool:
        return self._scroll_lock.is_held

    @property
    def holds_key_listener(self) -> bool:
        return self._key_registration.is_held

    def snapshot(self) -> LightboxSnapshot:
        return LightboxSnapshot(
            is_open=self.is_open,
            current_index=self.current_index,
            image_count=self.image_count,
            current_image=self.current_image,
            is_zoomed=self._is_zoomed,
            show_thumbnail_strip=self._show_thumbnail_strip,
            title=self._title,
            description=self._description,
        )

    # Internals
    def _on_navigation_changed(self, index: int) -> None:
        # Zoom is scoped to a single image
        self._is_zoomed = False
        logger.debug("Lightbox navigated to index {}", index)

    def _release_effects(self) -> None:
        self._key_registration.release()
        self._scroll_lock.release()

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception:  # noqa: BLE001
                logger.exception("Lightbox subscriber {!r} failed", listener)


def open_lightbox(
    images: ImageSet | Iterable[ImageDescriptor],
    start_index: int = 0,
    title: str | None = None,
    description: str | None = None,
    *,
    scroll_target: IScrollTarget | None = None,
    key_host: IKeyEventHost | None = None,
    config: LightboxConfig | None = None,
) -> LightboxSession:
    """Create a session and open it in one step."""
    session = LightboxSession(scroll_target=scroll_target, key_host=key_host, config=config)
    return session.open(images, start_index, title, description)


def apply(session: LightboxSession, command: Command) -> LightboxSession:
    return session.apply(command)


def is_open(session: LightboxSession) -> bool:
    return session.is_open


def current_image(session: LightboxSession) -> ImageDescriptor | None:
    return session.current_image
