"""Decode-or-default validation for headless CMS payloads.

Payloads follow the usual delivery API shape::

    {"sys": {"id": "..."}, "fields": {"title": "...", "images": [asset, ...]}}

where an asset is ``{"fields": {"title": ..., "description": ...,
"file": {"url": "//cdn/..."}}}``. Static fallback data may instead give images
as ``{"src": ..., "alt": ..., "caption": ..., "description": ...}``.

Besides portfolio entries there are two page singletons (homepage, about
page) whose fields are all optional, and blog posts whose text may be a rich
text document instead of a string.

Field validators never raise. They return a `ValidationResult` carrying errors
(the entry is unusable), warnings (a default was substituted) and the
sanitized value. Only the entry decoders turn errors into an exception, and
only when asked to.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from core.errors import ContentValidationError
from core.models import (
    AboutPageContent,
    BlogPost,
    HomepageContent,
    ImageDescriptor,
    PortfolioEntry,
    TextCard,
)


@dataclass
class ValidationResult:
    """Outcome of validating a field or an entry.

    Attributes:
        is_valid: False when at least one error was found.
        errors: Problems that make the value unusable.
        warnings: Problems that were repaired with defaults.
        data: Sanitized value (None when invalid).
    """

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    data: Any = None


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    return "object"


def validate_required_string(value: Any, field_name: str) -> ValidationResult:
    if value is None:
        return ValidationResult(False, errors=[f'Field "{field_name}" is required'])
    if not isinstance(value, str):
        return ValidationResult(
            False,
            errors=[f'Field "{field_name}" must be a string, got {_type_name(value)}'],
        )
    warnings = [f'Field "{field_name}" is empty'] if not value.strip() else []
    return ValidationResult(True, warnings=warnings, data=value)


def validate_optional_string(value: Any, field_name: str, default: str = "") -> ValidationResult:
    if value is None:
        return ValidationResult(True, data=default)
    if not isinstance(value, str):
        return ValidationResult(
            True,
            warnings=[
                f'Field "{field_name}" should be a string, got {_type_name(value)}. Using default.'
            ],
            data=default,
        )
    return ValidationResult(True, data=value)


def validate_boolean(value: Any, field_name: str, default: bool = False) -> ValidationResult:
    if value is None:
        return ValidationResult(True, data=default)
    if not isinstance(value, bool):
        return ValidationResult(
            True,
            warnings=[
                f'Field "{field_name}" should be a boolean, got {_type_name(value)}. Using default.'
            ],
            data=default,
        )
    return ValidationResult(True, data=value)


def validate_number(value: Any, field_name: str, default: float = 0) -> ValidationResult:
    if value is None:
        return ValidationResult(True, data=default)
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return ValidationResult(
            True,
            warnings=[
                f'Field "{field_name}" should be a number, got {_type_name(value)}. Using default.'
            ],
            data=default,
        )
    return ValidationResult(True, data=value)


def validate_array(value: Any, field_name: str, default: list | None = None) -> ValidationResult:
    fallback = list(default) if default is not None else []
    if value is None:
        return ValidationResult(True, data=fallback)
    if not isinstance(value, (list, tuple)):
        return ValidationResult(
            True,
            warnings=[
                f'Field "{field_name}" should be an array, got {_type_name(value)}. Using default.'
            ],
            data=fallback,
        )
    return ValidationResult(True, data=list(value))


def validate_asset(value: Any, field_name: str, required: bool = False) -> ValidationResult:
    """Check an asset link; a missing optional asset decodes to None."""
    if value is None:
        if required:
            return ValidationResult(False, errors=[f'Asset "{field_name}" is required'])
        return ValidationResult(True, data=None)

    fields = value.get("fields") if isinstance(value, Mapping) else None
    if not isinstance(fields, Mapping):
        return ValidationResult(
            not required,
            warnings=[f'Asset "{field_name}" is missing required fields structure'],
            data=None if required else value,
        )

    warnings: list[str] = []
    file_info = fields.get("file")
    if not isinstance(file_info, Mapping) or not file_info.get("url"):
        warnings.append(f'Asset "{field_name}" is missing file URL')
    return ValidationResult(True, warnings=warnings, data=value)


def _normalize_url(url: str) -> str:
    # Delivery APIs return protocol-relative URLs
    return f"https:{url}" if url.startswith("//") else url


def asset_to_image(asset: Any, fallback_label: str) -> ImageDescriptor | None:
    """Convert an asset (or static image mapping) into an `ImageDescriptor`.

    Returns None when no usable source URL is present.
    """
    if not isinstance(asset, Mapping):
        return None

    if "src" in asset:
        src = asset.get("src")
        if not isinstance(src, str) or not src:
            return None
        alt = asset.get("alt")
        return ImageDescriptor(
            source=src,
            accessible_label=alt if isinstance(alt, str) else fallback_label,
            caption=asset.get("caption") if isinstance(asset.get("caption"), str) else None,
            description=(
                asset.get("description") if isinstance(asset.get("description"), str) else None
            ),
        )

    fields = asset.get("fields")
    if not isinstance(fields, Mapping):
        return None
    file_info = fields.get("file")
    url = file_info.get("url") if isinstance(file_info, Mapping) else None
    if not isinstance(url, str) or not url:
        return None
    title = fields.get("title") if isinstance(fields.get("title"), str) else None
    description = fields.get("description") if isinstance(fields.get("description"), str) else None
    return ImageDescriptor(
        source=_normalize_url(url),
        accessible_label=description or title or fallback_label,
        caption=title,
        description=description,
    )


def validate_rich_text(value: Any, field_name: str, required: bool = False) -> ValidationResult:
    """Accept plain strings or rich text documents (``{"nodeType": "document", ...}``)."""
    if value is None:
        if required:
            return ValidationResult(
                False, errors=[f'Required rich text field "{field_name}" is missing']
            )
        return ValidationResult(True, data="")
    if isinstance(value, str):
        return ValidationResult(True, data=value)
    if isinstance(value, Mapping):
        warnings = []
        if value.get("nodeType") != "document":
            warnings.append(f'Rich text field "{field_name}" has invalid structure')
        if not isinstance(value.get("content"), list):
            warnings.append(f'Rich text field "{field_name}" is missing content array')
        return ValidationResult(True, warnings=warnings, data=dict(value))
    return ValidationResult(
        not required,
        warnings=[f'Rich text field "{field_name}" has unexpected type: {_type_name(value)}'],
        data="" if required else value,
    )


def rich_text_to_plain(value: Any) -> str:
    """Flatten a rich text document (or plain string) into its text content."""
    if isinstance(value, str):
        return value
    if not isinstance(value, Mapping):
        return ""
    if value.get("nodeType") == "text":
        text = value.get("value")
        return text if isinstance(text, str) else ""
    children = value.get("content")
    if not isinstance(children, list):
        return ""
    parts = [rich_text_to_plain(child) for child in children]
    joiner = "\n" if value.get("nodeType") == "document" else ""
    return joiner.join(p for p in parts if p)


class _Collector:
    """Accumulates errors and warnings from field validators."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def __call__(self, result: ValidationResult) -> Any:
        self.errors.extend(result.errors)
        self.warnings.extend(result.warnings)
        return result.data

    def finish(
        self, content_type: str, label: str, data: Any, log_warnings: bool, throw_on_error: bool
    ) -> ValidationResult:
        is_valid = not self.errors
        if log_warnings and self.warnings:
            logger.warning(
                "{} validation warnings for {!r}: {}", content_type, label, self.warnings
            )
        if throw_on_error and not is_valid:
            raise ContentValidationError(content_type, self.errors)
        return ValidationResult(
            is_valid, errors=self.errors, warnings=self.warnings, data=data if is_valid else None
        )


def _entry_parts(entry: Any) -> tuple[str, Mapping[str, Any]] | None:
    if not isinstance(entry, Mapping):
        return None
    sys_info = entry.get("sys")
    fields = entry.get("fields")
    if not isinstance(sys_info, Mapping) or not isinstance(fields, Mapping):
        return None
    return str(sys_info.get("id", "")), fields


def _structure_error(content_type: str, throw_on_error: bool) -> ValidationResult:
    errors = ["Entry is missing sys/fields structure"]
    if throw_on_error:
        raise ContentValidationError(content_type, errors)
    return ValidationResult(False, errors=errors)


def entry_id_of(entry: Any, default: str = "?") -> str:
    """Best-effort entry id for log messages; never raises on malformed payloads."""
    if not isinstance(entry, Mapping):
        return default
    sys_info = entry.get("sys")
    if not isinstance(sys_info, Mapping):
        return default
    raw_id = sys_info.get("id")
    return str(raw_id) if raw_id not in (None, "") else default


def decode_portfolio_entry(
    entry: Any, log_warnings: bool = True, throw_on_error: bool = False
) -> ValidationResult:
    """Validate a portfolio entry and decode it into a `PortfolioEntry`.

    Raises:
        ContentValidationError: only when `throw_on_error` and the entry is invalid.
    """
    parts = _entry_parts(entry)
    if parts is None:
        return _structure_error("Portfolio entry", throw_on_error)
    entry_id, fields = parts
    collect = _Collector()

    title = collect(validate_required_string(fields.get("title"), "title"))
    description = collect(validate_required_string(fields.get("description"), "description"))
    category = collect(validate_required_string(fields.get("category"), "category"))
    raw_images = collect(validate_array(fields.get("images"), "images", []))
    featured_raw = collect(validate_asset(fields.get("featuredImage"), "featuredImage", False))
    collect(validate_rich_text(fields.get("detailedDescription"), "detailedDescription"))
    tags = collect(validate_array(fields.get("tags"), "tags", []))
    is_featured = collect(validate_boolean(fields.get("featured"), "featured", False))
    display_order = collect(validate_number(fields.get("displayOrder"), "displayOrder", 0))

    label = title if isinstance(title, str) and title.strip() else "Portfolio image"
    images: list[ImageDescriptor] = []
    for pos, raw in enumerate(raw_images or []):
        img = asset_to_image(raw, label)
        if img is None:
            collect.warnings.append(f"Image {pos} has no usable source and was skipped")
            continue
        images.append(img)
    if not images:
        collect.warnings.append("Portfolio entry has no images - this may affect display")

    featured_image = asset_to_image(featured_raw, label) if featured_raw is not None else None

    data = None
    if not collect.errors:
        data = PortfolioEntry(
            entry_id=entry_id,
            title=title,
            description=description,
            category=category,
            images=images,
            featured_image=featured_image,
            tags=[t for t in tags if isinstance(t, str)],
            is_featured=is_featured,
            display_order=display_order,
        )
    return collect.finish("Portfolio entry", title or entry_id, data, log_warnings, throw_on_error)


def _singleton_fields(entry: Any) -> Mapping[str, Any] | None:
    # Page singletons may come without a sys block (static data)
    if not isinstance(entry, Mapping):
        return None
    fields = entry.get("fields")
    return fields if isinstance(fields, Mapping) else None


def _text_card(raw: Any) -> TextCard | None:
    """Read a card from a linked entry, a plain mapping or a bare string."""
    if isinstance(raw, str):
        return TextCard(title=raw) if raw.strip() else None
    if not isinstance(raw, Mapping):
        return None
    source = raw.get("fields") if isinstance(raw.get("fields"), Mapping) else raw
    title = source.get("title")
    if not isinstance(title, str) or not title.strip():
        return None
    body = ""
    for key in ("description", "content", "body"):
        if source.get(key) is not None:
            body = rich_text_to_plain(source.get(key))
            break
    return TextCard(title=title, body=body)


def _text_cards(items: list[Any], field_name: str, collect: _Collector) -> list[TextCard]:
    cards: list[TextCard] = []
    for pos, raw in enumerate(items or []):
        card = _text_card(raw)
        if card is None:
            collect.warnings.append(f'Item {pos} of "{field_name}" has no title and was skipped')
            continue
        cards.append(card)
    return cards


def _optional_image(
    value: Any, field_name: str, label: str, collect: _Collector
) -> ImageDescriptor | None:
    raw = collect(validate_asset(value, field_name, False))
    return asset_to_image(raw, label) if raw is not None else None


def decode_homepage(
    entry: Any, log_warnings: bool = True, throw_on_error: bool = False
) -> ValidationResult:
    """Decode the homepage singleton into `HomepageContent`.

    Nothing on the homepage is required; missing or mistyped fields fall back
    to the defaults of `HomepageContent`.
    """
    fields = _singleton_fields(entry)
    if fields is None:
        return _structure_error("Homepage", throw_on_error)
    defaults = HomepageContent()
    collect = _Collector()

    def text(key: str, default: str) -> str:
        return collect(validate_optional_string(fields.get(key), key, default))

    hero_title = text("heroTitle", defaults.hero_title)
    hero_images: list[ImageDescriptor] = []
    for pos, raw in enumerate(collect(validate_array(fields.get("heroImages"), "heroImages"))):
        img = asset_to_image(raw, hero_title)
        if img is None:
            collect.warnings.append(f"Hero image {pos} has no usable source and was skipped")
            continue
        hero_images.append(img)

    content = HomepageContent(
        hero_title=hero_title,
        hero_subtitle=text("heroSubtitle", defaults.hero_subtitle),
        hero_description=text("heroDescription", defaults.hero_description),
        hero_cta=text("heroCta", defaults.hero_cta),
        hero_images=hero_images,
        featured_title=text("featuredTitle", defaults.featured_title),
        featured_description=text("featuredDescription", defaults.featured_description),
        philosophy_title=text("philosophyTitle", defaults.philosophy_title),
        philosophy_cards=_text_cards(
            collect(validate_array(fields.get("philosophyCards"), "philosophyCards")),
            "philosophyCards",
            collect,
        ),
    )
    return collect.finish("Homepage", entry_id_of(entry), content, log_warnings, throw_on_error)


def decode_about_page(
    entry: Any, log_warnings: bool = True, throw_on_error: bool = False
) -> ValidationResult:
    """Decode the about page singleton into `AboutPageContent` (all fields optional)."""
    fields = _singleton_fields(entry)
    if fields is None:
        return _structure_error("About page", throw_on_error)
    defaults = AboutPageContent()
    collect = _Collector()

    def text(key: str, default: str) -> str:
        return collect(validate_optional_string(fields.get(key), key, default))

    hero_title = text("heroTitle", defaults.hero_title)
    philosophy_title = text("philosophyTitle", defaults.philosophy_title)
    content = AboutPageContent(
        hero_title=hero_title,
        hero_subtitle=text("heroSubtitle", defaults.hero_subtitle),
        hero_description=text("heroDescription", defaults.hero_description),
        hero_image=_optional_image(fields.get("heroImage"), "heroImage", hero_title, collect),
        journey_title=text("journeyTitle", defaults.journey_title),
        journey_sections=_text_cards(
            collect(validate_array(fields.get("journeySections"), "journeySections")),
            "journeySections",
            collect,
        ),
        services_title=text("servicesTitle", defaults.services_title),
        services_description=text("servicesDescription", defaults.services_description),
        services=_text_cards(
            collect(validate_array(fields.get("serviceList"), "serviceList")),
            "serviceList",
            collect,
        ),
        philosophy_title=philosophy_title,
        philosophy_content=text("philosophyContent", defaults.philosophy_content),
        philosophy_quote=text("philosophyQuote", defaults.philosophy_quote),
        philosophy_image=_optional_image(
            fields.get("philosophyImage"), "philosophyImage", philosophy_title, collect
        ),
    )
    return collect.finish("About page", entry_id_of(entry), content, log_warnings, throw_on_error)


def decode_blog_post(
    entry: Any, log_warnings: bool = True, throw_on_error: bool = False
) -> ValidationResult:
    """Decode a blog post; title, slug, excerpt and content are required."""
    parts = _entry_parts(entry)
    if parts is None:
        return _structure_error("Blog post", throw_on_error)
    entry_id, fields = parts
    collect = _Collector()

    title = collect(validate_required_string(fields.get("title"), "title"))
    slug = collect(validate_required_string(fields.get("slug"), "slug"))
    excerpt = collect(validate_required_string(fields.get("excerpt"), "excerpt"))
    body = collect(validate_rich_text(fields.get("content"), "content", required=True))
    category = collect(validate_optional_string(fields.get("category"), "category", "general"))
    tags = collect(validate_array(fields.get("tags"), "tags", []))
    published = collect(validate_boolean(fields.get("published"), "published", False))
    reading_time = collect(validate_number(fields.get("readingTime"), "readingTime", 5))
    featured_image = _optional_image(
        fields.get("featuredImage"), "featuredImage", title or "Blog image", collect
    )

    author = None
    raw_author = fields.get("author")
    if isinstance(raw_author, Mapping) and isinstance(raw_author.get("fields"), Mapping):
        # A nameless author is tolerated; report it as a warning only
        name_result = validate_required_string(raw_author["fields"].get("name"), "author.name")
        collect.warnings.extend(name_result.warnings + name_result.errors)
        author = name_result.data or None
    elif isinstance(raw_author, str) and raw_author.strip():
        author = raw_author

    data = None
    if not collect.errors:
        data = BlogPost(
            entry_id=entry_id,
            title=title,
            slug=slug,
            excerpt=excerpt,
            content=body,
            category=category,
            tags=[t for t in tags if isinstance(t, str)],
            published=published,
            reading_time=reading_time,
            featured_image=featured_image,
            author=author,
        )
    return collect.finish("Blog post", title or entry_id, data, log_warnings, throw_on_error)


@dataclass
class BatchResult:
    """Aggregated outcome of decoding many entries."""

    valid: list[Any]
    invalid: list[Any]
    total_errors: int
    total_warnings: int
    results: list[ValidationResult]


def batch_decode(
    entries: list[Any],
    decoder: Callable[..., ValidationResult] = decode_portfolio_entry,
    **options: Any,
) -> BatchResult:
    """Decode every entry; `valid` holds decoded data, `invalid` the raw entries."""
    results = [decoder(entry, **options) for entry in entries]
    return BatchResult(
        valid=[r.data for r in results if r.is_valid],
        invalid=[entry for entry, r in zip(entries, results) if not r.is_valid],
        total_errors=sum(len(r.errors) for r in results),
        total_warnings=sum(len(r.warnings) for r in results),
        results=results,
    )


def is_portfolio_entry(entry: Any) -> bool:
    """True when `entry` decodes into a valid portfolio entry."""
    if _entry_parts(entry) is None:
        return False
    return decode_portfolio_entry(entry, log_warnings=False).is_valid


def is_blog_post(entry: Any) -> bool:
    """True when `entry` decodes into a valid blog post."""
    if _entry_parts(entry) is None:
        return False
    return decode_blog_post(entry, log_warnings=False).is_valid


def validation_summary(result: ValidationResult) -> str:
    """Human-readable one-liner, e.g. "Validation passed - 2 warning(s)"."""
    parts = ["Validation passed" if result.is_valid else "Validation failed"]
    if result.errors:
        parts.append(f"{len(result.errors)} error(s)")
    if result.warnings:
        parts.append(f"{len(result.warnings)} warning(s)")
    return " - ".join(parts)
