"""Portfolio and page content loading from a JSON CMS export, with static fallback.

The export is a JSON object with an ``items`` array of portfolio entries in
delivery-API shape, plus optional ``homepage`` and ``aboutPage`` singletons.
Every entry goes through the matching decoder; invalid portfolio entries are
logged and skipped.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import json
from pathlib import Path
from typing import Any, TypeVar

from loguru import logger

from core.models import AboutPageContent, HomepageContent, PortfolioEntry
from core.services.content_validation import (
    batch_decode,
    decode_about_page,
    decode_homepage,
    entry_id_of,
)
from core.services.interfaces import IContentSource
from infrastructure.static_content import (
    STATIC_ABOUT_PAGE,
    STATIC_HOMEPAGE,
    STATIC_PORTFOLIO_ENTRIES,
)

T = TypeVar("T")


def _sort_entries(entries: Iterable[PortfolioEntry]) -> list[PortfolioEntry]:
    return sorted(entries, key=lambda e: (e.display_order, e.title.lower()))


def decode_entries(raw_entries: list[Any]) -> list[PortfolioEntry]:
    """Decode raw payload entries into sorted, valid `PortfolioEntry` objects."""
    batch = batch_decode(raw_entries)
    for raw, result in zip(raw_entries, batch.results):
        if not result.is_valid:
            logger.error("Portfolio entry {} rejected: {}", entry_id_of(raw), result.errors)
    logger.info(
        "Decoded {} portfolio entries ({} invalid, {} warning(s))",
        len(batch.valid),
        len(batch.invalid),
        batch.total_warnings,
    )
    return _sort_entries(batch.valid)


class JsonContentRepository(IContentSource):
    """Load portfolio entries and page copy from a JSON export file.

    Every loader raises `OSError` when the file cannot be read and
    `ValueError` when it is not valid JSON or lacks the requested section.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_payload(self) -> dict[str, Any]:
        with self._path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise ValueError(f"Content export root must be an object: {self._path}")
        return payload

    def load_portfolio(self) -> list[PortfolioEntry]:
        items = self._read_payload().get("items")
        if not isinstance(items, list):
            raise ValueError(f"Content export missing 'items' array: {self._path}")
        return decode_entries(items)

    def load_homepage(self) -> HomepageContent:
        raw = self._section("homepage")
        return decode_homepage(raw, throw_on_error=True).data

    def load_about_page(self) -> AboutPageContent:
        raw = self._section("aboutPage")
        return decode_about_page(raw, throw_on_error=True).data

    def _section(self, key: str) -> Any:
        payload = self._read_payload()
        if key not in payload:
            raise ValueError(f"Content export has no '{key}' entry: {self._path}")
        return payload[key]


class StaticContentSource(IContentSource):
    """Built-in content bundled with the application."""

    def __init__(
        self,
        raw_entries: list[Any] | None = None,
        homepage: dict[str, Any] | None = None,
        about_page: dict[str, Any] | None = None,
    ) -> None:
        self._raw = raw_entries if raw_entries is not None else STATIC_PORTFOLIO_ENTRIES
        self._homepage = homepage if homepage is not None else STATIC_HOMEPAGE
        self._about_page = about_page if about_page is not None else STATIC_ABOUT_PAGE

    def load_portfolio(self) -> list[PortfolioEntry]:
        return decode_entries(self._raw)

    def load_homepage(self) -> HomepageContent:
        result = decode_homepage(self._homepage)
        return result.data if result.is_valid else HomepageContent()

    def load_about_page(self) -> AboutPageContent:
        result = decode_about_page(self._about_page)
        return result.data if result.is_valid else AboutPageContent()


class FallbackContentSource(IContentSource):
    """Try `primary` first; fall back to static content on failure or no data.

    `used_fallback` reports the most recent load; `fallback_sections` names the
    sections currently served from the fallback.
    """

    def __init__(
        self, primary: IContentSource | None, fallback: IContentSource | None = None
    ) -> None:
        self._primary = primary
        self._fallback = fallback or StaticContentSource()
        self.used_fallback = False
        self.fallback_sections: set[str] = set()

    def load_portfolio(self) -> list[PortfolioEntry]:
        return self._load("portfolio", lambda src: src.load_portfolio(), bool)

    def load_homepage(self) -> HomepageContent:
        return self._load("homepage", lambda src: src.load_homepage())

    def load_about_page(self) -> AboutPageContent:
        return self._load("about page", lambda src: src.load_about_page())

    def _load(
        self,
        section: str,
        loader: Callable[[IContentSource], T],
        usable: Callable[[T], bool] = lambda value: value is not None,
    ) -> T:
        if self._primary is not None:
            try:
                value = loader(self._primary)
            except (OSError, ValueError) as ex:
                logger.warning(
                    "Content source unavailable for {}, using static data: {}", section, ex
                )
            else:
                if usable(value):
                    self.used_fallback = False
                    self.fallback_sections.discard(section)
                    return value
                logger.warning("Content source returned no valid {}, using static data", section)
        self.used_fallback = True
        self.fallback_sections.add(section)
        return loader(self._fallback)
