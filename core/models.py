"""Core domain models for portfolio images and entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from loguru import logger

from core.errors import IndexOutOfRange


@dataclass(frozen=True)
class ImageDescriptor:
    """A single image shown in the lightbox."""

    source: str
    accessible_label: str
    caption: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ImageSet:
    """Ordered, read-only collection of images for one lightbox session."""

    images: tuple[ImageDescriptor, ...] = ()

    @classmethod
    def of(cls, images: Iterable[ImageDescriptor]) -> ImageSet:
        """Build a set from any iterable, warning about unlabeled images."""
        items = tuple(images)
        for pos, img in enumerate(items):
            if not (img.accessible_label or "").strip():
                logger.warning("Image {} ({}) has an empty accessible label", pos, img.source)
        return cls(images=items)

    def __len__(self) -> int:
        return len(self.images)

    def __iter__(self) -> Iterator[ImageDescriptor]:
        return iter(self.images)

    def at(self, index: int) -> ImageDescriptor:
        """Return the image at `index` or raise `IndexOutOfRange`."""
        if not 0 <= index < len(self.images):
            raise IndexOutOfRange(index, len(self.images))
        return self.images[index]

    def with_leading(self, extra: Iterable[ImageDescriptor]) -> ImageSet:
        """Return a new set with `extra` placed before the current images."""
        return ImageSet.of([*extra, *self.images])

    def with_trailing(self, extra: Iterable[ImageDescriptor]) -> ImageSet:
        """Return a new set with `extra` appended after the current images."""
        return ImageSet.of([*self.images, *extra])


def size_of(image_set: ImageSet) -> int:
    """Number of images in `image_set` (0 is valid)."""
    return len(image_set)


def at(image_set: ImageSet, index: int) -> ImageDescriptor:
    """Lookup by index; raises `IndexOutOfRange` outside `[0, size - 1]`."""
    return image_set.at(index)


@dataclass
class PortfolioEntry:
    """A decoded portfolio entry as delivered by the content layer."""

    entry_id: str
    title: str
    description: str
    category: str
    images: list[ImageDescriptor] = field(default_factory=list)
    featured_image: ImageDescriptor | None = None
    tags: list[str] = field(default_factory=list)
    is_featured: bool = False
    display_order: float = 0

    def lightbox_images(self) -> ImageSet:
        """Images to show when the entry is opened: featured image first.

        Images sharing a source with an earlier one are skipped.
        """
        base = ImageSet.of(self.images)
        if self.featured_image is not None:
            base = base.with_leading([self.featured_image])
        seen: set[str] = set()
        unique: list[ImageDescriptor] = []
        for img in base:
            if img.source in seen:
                continue
            seen.add(img.source)
            unique.append(img)
        return ImageSet(images=tuple(unique))


@dataclass(frozen=True)
class TextCard:
    """Heading plus body text (philosophy cards, journey steps, services)."""

    title: str
    body: str = ""


@dataclass
class HomepageContent:
    """Landing page copy. Every field has a default so the page always renders."""

    hero_title: str = "Hi, I'm Ash Shaw"
    hero_subtitle: str = "makeup artist"
    hero_description: str = ""
    hero_cta: str = "Explore My Portfolio"
    hero_images: list[ImageDescriptor] = field(default_factory=list)
    featured_title: str = "Featured Work"
    featured_description: str = ""
    philosophy_title: str = "Why I Do Makeup"
    philosophy_cards: list[TextCard] = field(default_factory=list)

    def hero_image_set(self) -> ImageSet:
        return ImageSet.of(self.hero_images)


@dataclass
class AboutPageContent:
    hero_title: str = "About Ash Shaw"
    hero_subtitle: str = "makeup artist"
    hero_description: str = ""
    hero_image: ImageDescriptor | None = None
    journey_title: str = "My Journey"
    journey_sections: list[TextCard] = field(default_factory=list)
    services_title: str = "What I Do"
    services_description: str = ""
    services: list[TextCard] = field(default_factory=list)
    philosophy_title: str = "My Approach"
    philosophy_content: str = ""
    philosophy_quote: str = ""
    philosophy_image: ImageDescriptor | None = None


@dataclass
class BlogPost:
    """A decoded blog post. `content` is plain text or a rich text document."""

    entry_id: str
    title: str
    slug: str
    excerpt: str
    content: str | dict
    category: str = "general"
    tags: list[str] = field(default_factory=list)
    published: bool = False
    reading_time: float = 5
    featured_image: ImageDescriptor | None = None
    author: str | None = None
