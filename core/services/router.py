"""Page routing as an explicit finite-state value.

The site has three pages. Transitions are pure functions returning a new
`RouterState`; callers decide what to do with side effects such as updating
the window title or disposing an open lightbox.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import UnknownPage

HOME = "home"
ABOUT = "about"
PORTFOLIO = "portfolio"

PAGES: tuple[str, ...] = (HOME, ABOUT, PORTFOLIO)

PAGE_NAMES: dict[str, str] = {
    HOME: "Home",
    ABOUT: "About Ash Shaw",
    PORTFOLIO: "Portfolio - Makeup Artistry Work",
}

SITE_TITLE = "Ash Shaw - Makeup Artist Portfolio"
SITE_SUFFIX = "Ash Shaw - Makeup Artist"


@dataclass(frozen=True)
class RouterState:
    page: str = HOME
    # Optional anchor within the page, e.g. "fusion-nails" on the portfolio page
    section: str | None = None


@dataclass(frozen=True)
class NavigateTo:
    page: str
    section: str | None = None


def navigate(state: RouterState, event: NavigateTo) -> RouterState:
    """Return the state after `event`; raises `UnknownPage` for unknown targets."""
    if event.page not in PAGES:
        raise UnknownPage(event.page)
    if state.page == event.page and state.section == event.section:
        return state
    return RouterState(page=event.page, section=event.section)


def page_name(state: RouterState) -> str:
    return PAGE_NAMES.get(state.page, state.page)


def document_title(state: RouterState) -> str:
    """Window/document title for the current page."""
    if state.page == HOME:
        return SITE_TITLE
    return f"{page_name(state)} | {SITE_SUFFIX}"


def announcement(state: RouterState) -> str:
    """Text for the screen-reader live region after a page change."""
    return f"Navigated to {page_name(state)}"


def left_page(before: RouterState, after: RouterState, page: str) -> bool:
    """True when a transition moves away from `page`."""
    return before.page == page and after.page != page
