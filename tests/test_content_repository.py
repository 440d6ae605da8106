"""Tests for content loading with static fallback."""

import json
from pathlib import Path

import pytest

from core.models import AboutPageContent, HomepageContent, PortfolioEntry
from infrastructure.content_repository import (
    FallbackContentSource,
    JsonContentRepository,
    StaticContentSource,
)
from infrastructure.static_content import STATIC_PORTFOLIO_ENTRIES


def _write(tmp_path: Path, payload) -> Path:
    path = tmp_path / "portfolio.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def _raw(entry_id: str, title: str, order: int) -> dict:
    return {
        "sys": {"id": entry_id},
        "fields": {
            "title": title,
            "description": "d",
            "category": "c",
            "displayOrder": order,
            "images": [{"src": f"{entry_id}.jpg", "alt": title}],
        },
    }


def test_json_repository_decodes_and_sorts(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {
            "items": [
                _raw("b", "Beta", 2),
                _raw("a", "Alpha", 2),
                _raw("z", "Zeta", 1),
                {"sys": {"id": "broken"}, "fields": {"title": "No category"}},
            ]
        },
    )
    entries = JsonContentRepository(path).load_portfolio()
    assert [e.entry_id for e in entries] == ["z", "a", "b"]


def test_json_repository_rejects_missing_items(tmp_path: Path) -> None:
    path = _write(tmp_path, {"entries": []})
    with pytest.raises(ValueError):
        JsonContentRepository(path).load_portfolio()


def test_static_source_decodes_bundled_entries() -> None:
    entries = StaticContentSource().load_portfolio()
    assert len(entries) == len(STATIC_PORTFOLIO_ENTRIES)
    assert all(isinstance(e, PortfolioEntry) for e in entries)
    assert all(e.images for e in entries)


def test_fallback_used_when_file_missing(tmp_path: Path) -> None:
    source = FallbackContentSource(JsonContentRepository(tmp_path / "missing.json"))
    entries = source.load_portfolio()
    assert source.used_fallback
    assert entries[0].title == "Festival Glam"


def test_fallback_used_when_file_is_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "portfolio.json"
    path.write_text("{not json", encoding="utf-8")
    source = FallbackContentSource(JsonContentRepository(path))
    assert source.load_portfolio()
    assert source.used_fallback


def test_fallback_used_when_nothing_valid(tmp_path: Path) -> None:
    path = _write(tmp_path, {"items": [{"sys": {"id": "x"}, "fields": {}}]})
    source = FallbackContentSource(JsonContentRepository(path))
    source.load_portfolio()
    assert source.used_fallback


def test_primary_preferred_when_available(tmp_path: Path) -> None:
    path = _write(tmp_path, {"items": [_raw("a", "Alpha", 1)]})
    source = FallbackContentSource(JsonContentRepository(path))
    entries = source.load_portfolio()
    assert [e.entry_id for e in entries] == ["a"]
    assert not source.used_fallback


def test_no_primary_uses_static() -> None:
    source = FallbackContentSource(None, StaticContentSource([_raw("s", "Static", 0)]))
    assert [e.entry_id for e in source.load_portfolio()] == ["s"]
    assert source.used_fallback


@pytest.mark.parametrize("bad_sys", ["oops", None, 42, ["id"]])
def test_fallback_used_when_sys_is_not_a_mapping(tmp_path: Path, bad_sys) -> None:
    path = _write(tmp_path, {"items": [{"sys": bad_sys, "fields": {}}]})
    source = FallbackContentSource(JsonContentRepository(path))
    entries = source.load_portfolio()
    assert source.used_fallback
    assert [e.title for e in entries][0] == "Festival Glam"


def test_malformed_entries_are_logged_with_placeholder_id(tmp_path: Path, log_messages) -> None:
    path = _write(tmp_path, {"items": [{"sys": "oops", "fields": {}}, "junk", _raw("a", "A", 1)]})
    entries = JsonContentRepository(path).load_portfolio()
    assert [e.entry_id for e in entries] == ["a"]
    assert sum("Portfolio entry ? rejected" in m for m in log_messages) == 2


def test_json_repository_loads_page_sections(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {
            "items": [],
            "homepage": {"fields": {"heroTitle": "Hello", "heroCta": "Look"}},
            "aboutPage": {"fields": {"philosophyQuote": "Colour is a conversation."}},
        },
    )
    repo = JsonContentRepository(path)
    assert repo.load_homepage().hero_title == "Hello"
    assert repo.load_homepage().hero_cta == "Look"
    assert repo.load_about_page().philosophy_quote == "Colour is a conversation."


def test_json_repository_rejects_missing_or_malformed_sections(tmp_path: Path) -> None:
    repo = JsonContentRepository(_write(tmp_path, {"items": [], "aboutPage": "text"}))
    with pytest.raises(ValueError):
        repo.load_homepage()
    with pytest.raises(ValueError):
        repo.load_about_page()


def test_static_source_page_copy() -> None:
    source = StaticContentSource()
    home = source.load_homepage()
    about = source.load_about_page()
    assert home.hero_title == "Hi, I'm Ash Shaw"
    assert len(home.hero_images) == 3
    assert [c.title for c in home.philosophy_cards] == ["Colour", "Energy", "Connection"]
    assert about.journey_sections
    assert about.services


def test_static_source_uses_defaults_for_unusable_pages() -> None:
    source = StaticContentSource(homepage={"fields": "broken"}, about_page={})
    assert source.load_homepage() == HomepageContent()
    assert source.load_about_page() == AboutPageContent()


def test_fallback_per_section(tmp_path: Path) -> None:
    path = _write(
        tmp_path, {"items": [_raw("a", "Alpha", 1)], "homepage": {"fields": {"heroTitle": "Live"}}}
    )
    source = FallbackContentSource(JsonContentRepository(path))
    assert [e.entry_id for e in source.load_portfolio()] == ["a"]
    assert source.load_homepage().hero_title == "Live"
    assert not source.used_fallback

    about = source.load_about_page()
    assert source.used_fallback
    assert about.journey_sections
    assert source.fallback_sections == {"about page"}


def test_sample_export_decodes() -> None:
    path = Path(__file__).resolve().parent.parent / "samples" / "portfolio.json"
    repo = JsonContentRepository(path)
    assert repo.load_portfolio()
    assert len(repo.load_homepage().hero_images) == 2
    about = repo.load_about_page()
    assert about.journey_sections[0].body == "Where it all began."
    assert [s.title for s in about.services] == ["Bridal Makeup", "Special Effects"]
