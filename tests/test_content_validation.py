"""Tests for CMS payload decoding."""

import pytest

from core.errors import ContentValidationError
from core.models import BlogPost, HomepageContent, ImageDescriptor, TextCard
from core.services.content_validation import (
    ValidationResult,
    asset_to_image,
    batch_decode,
    decode_about_page,
    decode_blog_post,
    decode_homepage,
    decode_portfolio_entry,
    entry_id_of,
    is_blog_post,
    is_portfolio_entry,
    rich_text_to_plain,
    validate_array,
    validate_asset,
    validate_boolean,
    validate_number,
    validate_optional_string,
    validate_required_string,
    validate_rich_text,
    validation_summary,
)


def _asset(url: str | None, title: str | None = None, description: str | None = None) -> dict:
    fields: dict = {}
    if title is not None:
        fields["title"] = title
    if description is not None:
        fields["description"] = description
    if url is not None:
        fields["file"] = {"url": url}
    return {"fields": fields}


def _entry(**fields) -> dict:
    base = {
        "title": "Bridal",
        "description": "Soft glam",
        "category": "Bridal",
        "images": [_asset("//cdn/a.jpg", "A", "First look")],
    }
    base.update(fields)
    return {"sys": {"id": "entry-1"}, "fields": base}


def test_required_string() -> None:
    assert validate_required_string("x", "title").data == "x"
    missing = validate_required_string(None, "title")
    assert not missing.is_valid
    assert missing.errors == ['Field "title" is required']
    wrong = validate_required_string(3, "title")
    assert not wrong.is_valid
    empty = validate_required_string("  ", "title")
    assert empty.is_valid
    assert empty.warnings == ['Field "title" is empty']


def test_optional_and_typed_defaults() -> None:
    assert validate_optional_string(None, "f", "d").data == "d"
    bad = validate_optional_string(1, "f", "d")
    assert bad.data == "d"
    assert bad.warnings == ['Field "f" should be a string, got number. Using default.']

    assert validate_boolean(None, "b").data is False
    assert validate_boolean("yes", "b", True).data is True
    assert validate_number(True, "n", 5).data == 5
    assert validate_number(2.5, "n").data == 2.5
    assert validate_array("x", "a").warnings
    assert validate_array(("a", "b"), "a").data == ["a", "b"]


def test_asset_validation() -> None:
    assert validate_asset(None, "img").data is None
    assert not validate_asset(None, "img", required=True).is_valid
    no_fields = validate_asset({"sys": {}}, "img")
    assert no_fields.is_valid
    assert no_fields.warnings == ['Asset "img" is missing required fields structure']
    no_url = validate_asset(_asset(None, "t"), "img")
    assert no_url.warnings == ['Asset "img" is missing file URL']


def test_asset_to_image_from_cms_and_static_shapes() -> None:
    img = asset_to_image(_asset("//cdn/a.jpg", "Eyes", "Close-up"), "fallback")
    assert img == ImageDescriptor("https://cdn/a.jpg", "Close-up", "Eyes", "Close-up")

    static = asset_to_image({"src": "a.jpg", "alt": "Alt text"}, "fallback")
    assert static == ImageDescriptor("a.jpg", "Alt text")

    assert asset_to_image(_asset("//cdn/a.jpg"), "Entry title").accessible_label == "Entry title"
    assert asset_to_image(_asset(None), "x") is None
    assert asset_to_image("nope", "x") is None


def test_decode_valid_entry() -> None:
    result = decode_portfolio_entry(
        _entry(
            featuredImage=_asset("//cdn/f.jpg", "Featured"),
            tags=["bridal", 3],
            featured=True,
            displayOrder=2,
        ),
        log_warnings=False,
    )
    assert result.is_valid
    entry = result.data
    assert entry.entry_id == "entry-1"
    assert entry.title == "Bridal"
    assert [i.source for i in entry.images] == ["https://cdn/a.jpg"]
    assert entry.featured_image.source == "https://cdn/f.jpg"
    assert entry.tags == ["bridal"]
    assert entry.is_featured
    assert entry.display_order == 2


def test_decode_missing_required_field() -> None:
    raw = _entry()
    del raw["fields"]["category"]
    result = decode_portfolio_entry(raw, log_warnings=False)
    assert not result.is_valid
    assert result.data is None
    assert 'Field "category" is required' in result.errors


def test_decode_throw_on_error() -> None:
    raw = _entry(title=None)
    with pytest.raises(ContentValidationError) as info:
        decode_portfolio_entry(raw, log_warnings=False, throw_on_error=True)
    assert 'Field "title" is required' in info.value.errors


def test_decode_no_images_warns(log_messages) -> None:
    result = decode_portfolio_entry(_entry(images=[]))
    assert result.is_valid
    assert "Portfolio entry has no images - this may affect display" in result.warnings
    assert any("validation warnings" in m for m in log_messages)


def test_decode_skips_unusable_images() -> None:
    result = decode_portfolio_entry(
        _entry(images=[_asset(None), _asset("//cdn/b.jpg")]), log_warnings=False
    )
    assert [i.source for i in result.data.images] == ["https://cdn/b.jpg"]
    assert "Image 0 has no usable source and was skipped" in result.warnings


def test_decode_malformed_entry() -> None:
    result = decode_portfolio_entry({"fields": {}}, log_warnings=False)
    assert not result.is_valid
    assert not is_portfolio_entry({"fields": {}})
    assert is_portfolio_entry(_entry())


def test_batch_decode() -> None:
    bad = _entry(title=None)
    batch = batch_decode([_entry(), bad], log_warnings=False)
    assert len(batch.valid) == 1
    assert batch.invalid == [bad]
    assert batch.total_errors == 1
    assert len(batch.results) == 2


def test_validation_summary() -> None:
    assert validation_summary(ValidationResult(True)) == "Validation passed"
    assert (
        validation_summary(ValidationResult(False, errors=["e"], warnings=["w", "w"]))
        == "Validation failed - 1 error(s) - 2 warning(s)"
    )


def test_entry_id_of_tolerates_malformed_entries() -> None:
    assert entry_id_of({"sys": {"id": "abc"}}) == "abc"
    assert entry_id_of({"sys": "oops"}) == "?"
    assert entry_id_of({"sys": None}) == "?"
    assert entry_id_of(["sys"]) == "?"
    assert entry_id_of({"sys": {}}, default="unknown") == "unknown"


def test_rich_text_validation() -> None:
    assert validate_rich_text("plain", "body").data == "plain"
    assert validate_rich_text(None, "body").data == ""
    missing = validate_rich_text(None, "body", required=True)
    assert not missing.is_valid
    assert missing.errors == ['Required rich text field "body" is missing']

    document = {"nodeType": "document", "content": []}
    assert validate_rich_text(document, "body").warnings == []
    broken = validate_rich_text({"nodeType": "paragraph"}, "body")
    assert broken.is_valid
    assert broken.warnings == [
        'Rich text field "body" has invalid structure',
        'Rich text field "body" is missing content array',
    ]
    wrong = validate_rich_text(12, "body", required=True)
    assert not wrong.is_valid
    assert wrong.data == ""


def test_rich_text_to_plain() -> None:
    document = {
        "nodeType": "document",
        "content": [
            {
                "nodeType": "paragraph",
                "content": [
                    {"nodeType": "text", "value": "Colour is "},
                    {"nodeType": "text", "value": "a conversation."},
                ],
            },
            {"nodeType": "paragraph", "content": [{"nodeType": "text", "value": "Second."}]},
        ],
    }
    assert rich_text_to_plain(document) == "Colour is a conversation.\nSecond."
    assert rich_text_to_plain("as is") == "as is"
    assert rich_text_to_plain(None) == ""


def test_decode_homepage_defaults_for_empty_fields() -> None:
    result = decode_homepage({"fields": {}}, log_warnings=False)
    assert result.is_valid
    assert result.data == HomepageContent()
    assert result.data.hero_title == "Hi, I'm Ash Shaw"
    assert result.data.hero_cta == "Explore My Portfolio"


def test_decode_homepage_values_and_bad_types() -> None:
    result = decode_homepage(
        {
            "sys": {"id": "home"},
            "fields": {
                "heroTitle": "Hello",
                "heroSubtitle": 42,
                "heroImages": [_asset("//cdn/a.jpg", "A"), {"fields": {}}],
                "philosophyCards": [
                    {"fields": {"title": "Colour", "description": "Bold"}},
                    {"title": "Energy", "body": "Movement"},
                    "Connection",
                    {"fields": {"description": "No title"}},
                ],
            },
        },
        log_warnings=False,
    )
    home = result.data
    assert home.hero_title == "Hello"
    assert home.hero_subtitle == "makeup artist"
    assert [i.source for i in home.hero_images] == ["https://cdn/a.jpg"]
    assert home.hero_image_set().at(0).caption == "A"
    assert home.philosophy_cards == [
        TextCard("Colour", "Bold"),
        TextCard("Energy", "Movement"),
        TextCard("Connection"),
    ]
    assert 'Field "heroSubtitle" should be a string, got number. Using default.' in result.warnings
    assert "Hero image 1 has no usable source and was skipped" in result.warnings
    assert any("philosophyCards" in w for w in result.warnings)


def test_decode_homepage_structure_error() -> None:
    assert not decode_homepage("nope").is_valid
    with pytest.raises(ContentValidationError):
        decode_homepage({"fields": None}, throw_on_error=True)


def test_decode_about_page() -> None:
    result = decode_about_page(
        {
            "fields": {
                "journeySections": [
                    {
                        "fields": {
                            "title": "Festivals",
                            "content": {
                                "nodeType": "document",
                                "content": [
                                    {
                                        "nodeType": "paragraph",
                                        "content": [{"nodeType": "text", "value": "Began here."}],
                                    }
                                ],
                            },
                        }
                    }
                ],
                "serviceList": "not a list",
                "philosophyQuote": "Colour is a conversation.",
                "heroImage": _asset("//cdn/me.jpg", description="Portrait of Ash"),
            }
        },
        log_warnings=False,
    )
    about = result.data
    assert result.is_valid
    assert about.hero_title == "About Ash Shaw"
    assert about.journey_sections == [TextCard("Festivals", "Began here.")]
    assert about.services == []
    assert about.services_title == "What I Do"
    assert about.philosophy_quote == "Colour is a conversation."
    assert about.hero_image.accessible_label == "Portrait of Ash"
    assert about.philosophy_image is None
    assert 'Field "serviceList" should be an array, got string. Using default.' in result.warnings


def _blog(**overrides) -> dict:
    fields = {
        "title": "Festival prep",
        "slug": "festival-prep",
        "excerpt": "How I get ready",
        "content": {"nodeType": "document", "content": []},
    }
    fields.update(overrides)
    return {"sys": {"id": "post-1"}, "fields": fields}


def test_decode_blog_post() -> None:
    result = decode_blog_post(
        _blog(author={"fields": {"name": "Ash"}}, readingTime="long", tags=["a", 3]),
        log_warnings=False,
    )
    post = result.data
    assert isinstance(post, BlogPost)
    assert post.entry_id == "post-1"
    assert post.category == "general"
    assert post.reading_time == 5
    assert post.author == "Ash"
    assert post.tags == ["a"]
    assert not post.published
    assert is_blog_post(_blog())


def test_decode_blog_post_requires_core_fields() -> None:
    result = decode_blog_post(_blog(slug=None, content=None), log_warnings=False)
    assert not result.is_valid
    assert result.data is None
    assert 'Field "slug" is required' in result.errors
    assert 'Required rich text field "content" is missing' in result.errors
    assert not is_blog_post(_blog(excerpt=None))
    assert not is_blog_post({"fields": {}})
    with pytest.raises(ContentValidationError):
        decode_blog_post(_blog(title=None), log_warnings=False, throw_on_error=True)


def test_blog_author_without_name_only_warns() -> None:
    result = decode_blog_post(_blog(author={"fields": {}}), log_warnings=False)
    assert result.is_valid
    assert result.data.author is None
    assert 'Field "author.name" is required' in result.warnings


def test_batch_decode_with_blog_decoder() -> None:
    batch = batch_decode([_blog(), _blog(title=None)], decode_blog_post, log_warnings=False)
    assert [p.slug for p in batch.valid] == ["festival-prep"]
    assert batch.total_errors == 1
