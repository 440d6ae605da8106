"""Tests for the image set model and scoped effects."""

from pathlib import Path

from loguru import logger
import pytest

from core.errors import IndexOutOfRange
from core.models import ImageDescriptor, ImageSet, at, size_of
from core.services.effects import KeyListenerRegistration, ScrollLock
from infrastructure.logging import find_latest_log_file, init_logging
from tests.conftest import FakeKeyHost, FakeScrollTarget, make_images


def test_image_set_lookup() -> None:
    images = make_images(3)
    image_set = ImageSet.of(images)
    assert size_of(image_set) == 3
    assert at(image_set, 2) == images[2]
    assert list(image_set) == images
    with pytest.raises(IndexOutOfRange):
        at(image_set, 3)
    with pytest.raises(IndexOutOfRange):
        image_set.at(-1)


def test_empty_image_set_is_valid() -> None:
    assert size_of(ImageSet()) == 0
    with pytest.raises(IndexOutOfRange):
        ImageSet().at(0)


def test_image_set_is_not_mutated_by_merging() -> None:
    base = ImageSet.of(make_images(2))
    extra = ImageDescriptor("extra.jpg", "Extra")
    assert [i.source for i in base.with_leading([extra])][0] == "extra.jpg"
    assert [i.source for i in base.with_trailing([extra])][-1] == "extra.jpg"
    assert len(base) == 2


def test_empty_label_warns(log_messages) -> None:
    ImageSet.of([ImageDescriptor("a.jpg", "")])
    assert any("empty accessible label" in m for m in log_messages)


def test_scroll_lock_is_idempotent() -> None:
    target = FakeScrollTarget()
    lock = ScrollLock(target)
    lock.release()
    assert target.restore_calls == 0

    lock.acquire()
    lock.acquire()
    assert target.suspend_calls == 1
    lock.release()
    lock.release()
    assert target.restore_calls == 1


def test_scroll_lock_context_manager() -> None:
    target = FakeScrollTarget()
    with ScrollLock(target) as lock:
        assert lock.is_held
        assert target.suspended
    assert not target.suspended


def test_scroll_lock_without_target() -> None:
    lock = ScrollLock(None)
    lock.acquire()
    assert not lock.is_held
    lock.release()


def test_key_registration_attaches_once() -> None:
    host = FakeKeyHost()
    pressed: list[str] = []
    registration = KeyListenerRegistration(host, pressed.append)
    registration.acquire()
    registration.acquire()
    host.press("z")
    assert pressed == ["z"]
    registration.release()
    registration.release()
    host.press("z")
    assert pressed == ["z"]
    assert not host.listeners


def test_init_logging_writes_rotating_file(tmp_path: Path) -> None:
    log_dir = init_logging(str(tmp_path), level="DEBUG")
    logger.info("hello portfolio")
    logger.complete()
    logger.remove()
    latest = find_latest_log_file(str(log_dir))
    assert latest is not None
    assert "hello portfolio" in latest.read_text(encoding="utf-8")


def test_find_latest_log_file_missing_dir(tmp_path: Path) -> None:
    assert find_latest_log_file(str(tmp_path / "none")) is None
