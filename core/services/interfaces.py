"""Core service interfaces for side effects owned by a lightbox session.

The session never touches a toolkit directly; views provide implementations
of these interfaces (a Qt scroll area, a document body, a test fake...).
"""

from __future__ import annotations

from collections.abc import Callable

KeyListener = Callable[[str], object]


class IScrollTarget:
    """Something whose background scrolling can be suspended."""

    def suspend_scroll(self) -> None:
        """Stop the target from scrolling."""
        raise NotImplementedError

    def restore_scroll(self) -> None:
        """Restore scrolling to the state it had before suspension."""
        raise NotImplementedError


class IKeyEventHost:
    """Global key event source (document, application-wide filter...)."""

    def add_key_listener(self, listener: KeyListener) -> None:
        """Start delivering key names to `listener`."""
        raise NotImplementedError

    def remove_key_listener(self, listener: KeyListener) -> None:
        """Stop delivering key names to `listener`."""
        raise NotImplementedError


class IContentSource:
    """Supplier of portfolio entries and page copy for the gallery views."""

    def load_portfolio(self) -> list:
        """Return decoded `PortfolioEntry` objects."""
        raise NotImplementedError

    def load_homepage(self):
        """Return decoded `HomepageContent`."""
        raise NotImplementedError

    def load_about_page(self):
        """Return decoded `AboutPageContent`."""
        raise NotImplementedError
