"""ViewModel for page routing, site content and the active lightbox."""

from __future__ import annotations

from loguru import logger

from app.viewmodels.lightbox_vm import LightboxVM
from app.viewmodels.portfolio_vm import PortfolioCardVM
from app.viewmodels.slider_vm import CardSliderVM
from core.errors import LightboxError, UnknownPage
from core.models import AboutPageContent, HomepageContent, PortfolioEntry
from core.services.interfaces import IContentSource
from core.services.lightbox_session import LightboxSession
from core.services.router import (
    PORTFOLIO,
    NavigateTo,
    RouterState,
    announcement,
    document_title,
    left_page,
    navigate,
)

HERO_LIGHTBOX_TITLE = "Ash Shaw Makeup Artistry"


class MainVM:
    """Main application view-model.

    Mediates between a content source, the page router and a single
    lightbox session shared by all gallery views.
    """

    def __init__(self, content: IContentSource, session: LightboxSession | None = None) -> None:
        """Create a MainVM.

        Args:
            content: Source of portfolio entries and homepage/about copy.
            session: Lightbox session to drive (a bare one is created if omitted).
        """
        self._content = content
        self.session = session or LightboxSession()
        self.lightbox = LightboxVM(self.session)
        self.router = RouterState()
        self.entries: list[PortfolioEntry] = []
        self.homepage = HomepageContent()
        self.about = AboutPageContent()
        self.hero_slider = CardSliderVM([], self.session.config.swipe_threshold)
        self.last_announcement = ""

    def load_content(self) -> None:
        """Load portfolio entries and page copy from the content source."""
        self.entries = list(self._content.load_portfolio())
        self.homepage = self._content.load_homepage()
        self.about = self._content.load_about_page()
        self.hero_slider = CardSliderVM(
            self.homepage.hero_images, self.session.config.swipe_threshold
        )
        logger.info(
            "Loaded {} portfolio entries and {} hero image(s)",
            len(self.entries),
            len(self.homepage.hero_images),
        )

    @property
    def cards(self) -> list[PortfolioCardVM]:
        return [PortfolioCardVM(e) for e in self.entries]

    @property
    def featured_cards(self) -> list[PortfolioCardVM]:
        return [PortfolioCardVM(e) for e in self.entries if e.is_featured]

    @property
    def window_title(self) -> str:
        return document_title(self.router)

    def navigate(self, page: str, section: str | None = None) -> bool:
        """Route to `page`; returns False for unknown pages.

        Leaving the portfolio page tears down any open lightbox.
        """
        before = self.router
        try:
            after = navigate(before, NavigateTo(page, section))
        except UnknownPage as ex:
            logger.warning("Navigation ignored: {}", ex)
            return False
        if after == before:
            return False
        if left_page(before, after, PORTFOLIO) and self.session.is_open:
            self.session.close()
        self.router = after
        self.last_announcement = announcement(after)
        logger.info("Navigated from {} to {}", before.page, after.page)
        return True

    def find_entry(self, entry_id: str) -> PortfolioEntry | None:
        for entry in self.entries:
            if entry.entry_id == entry_id:
                return entry
        return None

    def open_entry(self, entry_id: str, start_index: int = 0) -> bool:
        """Open the lightbox on an entry's images; returns False if it cannot open."""
        entry = self.find_entry(entry_id)
        if entry is None:
            logger.warning("Portfolio entry {} not found", entry_id)
            return False
        try:
            self.session.open(
                entry.lightbox_images(),
                start_index,
                title=entry.title,
                description=entry.description,
            )
        except LightboxError as ex:
            logger.warning("Cannot open lightbox for {}: {}", entry_id, ex)
            return False
        return True

    def open_hero_gallery(self) -> bool:
        """Open the lightbox on the homepage hero images at the slider position."""
        start = self.hero_slider.current_index
        if start is None:
            logger.warning("Homepage has no hero images to show")
            return False
        try:
            self.session.open(self.hero_slider.images, start, title=HERO_LIGHTBOX_TITLE)
        except LightboxError as ex:
            logger.warning("Cannot open hero gallery: {}", ex)
            return False
        return True

    def close_lightbox(self) -> None:
        self.session.close()

    def shutdown(self) -> None:
        """Release every effect held by the lightbox (window close/unmount)."""
        self.session.dispose()
