"""Scoped acquisition of process-wide effects (scroll lock, key listener).

Both resources are idempotent to acquire and released at most once per
acquisition: acquiring twice does not double-suspend, and releasing when not
held is a no-op.
"""

from __future__ import annotations

from loguru import logger

from core.services.interfaces import IKeyEventHost, IScrollTarget, KeyListener


class ScrollLock:
    """Suspends background scrolling on an `IScrollTarget` while held."""

    def __init__(self, target: IScrollTarget | None) -> None:
        self._target = target
        self._held = False

    @property
    def is_held(self) -> bool:
        return self._held

    def acquire(self) -> None:
        if self._held or self._target is None:
            return
        self._target.suspend_scroll()
        self._held = True
        logger.debug("Background scroll suspended")

    def release(self) -> None:
        if not self._held:
            return
        self._held = False
        if self._target is not None:
            self._target.restore_scroll()
        logger.debug("Background scroll restored")

    def __enter__(self) -> ScrollLock:
        self.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


class KeyListenerRegistration:
    """Keeps a single key listener attached to an `IKeyEventHost` while held."""

    def __init__(self, host: IKeyEventHost | None, listener: KeyListener) -> None:
        self._host = host
        self._listener = listener
        self._held = False

    @property
    def is_held(self) -> bool:
        return self._held

    def acquire(self) -> None:
        if self._held or self._host is None:
            return
        self._host.add_key_listener(self._listener)
        self._held = True

    def release(self) -> None:
        if not self._held:
            return
        self._held = False
        if self._host is not None:
            self._host.remove_key_listener(self._listener)

    def __enter__(self) -> KeyListenerRegistration:
        self.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()
