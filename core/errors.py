"""Error hierarchy for lightbox and content operations.

All errors are raised synchronously and leave the originating object in the
state it was in before the call.
"""

from __future__ import annotations


class LightboxError(Exception):
    """Base class for lightbox precondition violations."""


class EmptyImageSet(LightboxError):
    """Raised when a lightbox is opened (or navigation built) with no images."""

    def __init__(self) -> None:
        super().__init__("Cannot open a lightbox with an empty image set")


class IndexOutOfRange(LightboxError, IndexError):
    """Raised when an index is outside `[0, size - 1]`.

    Attributes:
        index: The rejected index.
        size: Size of the image set at the time of the call.
    """

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for image set of size {size}")


class InvalidCommandWhileClosed(LightboxError):
    """Raised when a command is applied to a closed session."""

    def __init__(self, command: object) -> None:
        self.command = command
        super().__init__(f"Cannot apply {command!r} while the lightbox is closed")


class UnknownPage(ValueError):
    """Raised when routing to a page that does not exist."""

    def __init__(self, page: str) -> None:
        self.page = page
        super().__init__(f"Unknown page: {page!r}")


class ContentValidationError(ValueError):
    """Raised by content decoders when `throw_on_error` is requested."""

    def __init__(self, content_type: str, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(f"{content_type} validation failed: {', '.join(errors)}")
