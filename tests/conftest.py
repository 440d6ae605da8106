"""Shared test fixtures."""

from dataclasses import dataclass, field

from loguru import logger
import pytest

from core.models import ImageDescriptor
from core.services.interfaces import IKeyEventHost, IScrollTarget, KeyListener
from core.services.lightbox_session import LightboxSession


@dataclass
class FakeScrollTarget(IScrollTarget):
    """Counts suspend/restore calls and tracks the effective state."""

    suspended: bool = False
    suspend_calls: int = 0
    restore_calls: int = 0

    def suspend_scroll(self) -> None:
        self.suspend_calls += 1
        self.suspended = True

    def restore_scroll(self) -> None:
        self.restore_calls += 1
        self.suspended = False


@dataclass
class FakeKeyHost(IKeyEventHost):
    """In-memory key event source."""

    listeners: list[KeyListener] = field(default_factory=list)

    def add_key_listener(self, listener: KeyListener) -> None:
        self.listeners.append(listener)

    def remove_key_listener(self, listener: KeyListener) -> None:
        self.listeners.remove(listener)

    def press(self, key: str) -> None:
        for listener in list(self.listeners):
            listener(key)


def make_images(count: int) -> list[ImageDescriptor]:
    return [
        ImageDescriptor(
            source=f"images/look-{i}.jpg",
            accessible_label=f"Look {i}",
            caption=f"Caption {i}",
            description=f"Description {i}",
        )
        for i in range(count)
    ]


@pytest.fixture
def scroll_target() -> FakeScrollTarget:
    return FakeScrollTarget()


@pytest.fixture
def key_host() -> FakeKeyHost:
    return FakeKeyHost()


@pytest.fixture
def session(scroll_target: FakeScrollTarget, key_host: FakeKeyHost) -> LightboxSession:
    return LightboxSession(scroll_target=scroll_target, key_host=key_host)


@pytest.fixture
def log_messages():
    """Capture loguru output as a list of formatted messages."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
