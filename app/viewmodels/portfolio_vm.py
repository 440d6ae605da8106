"""Lightweight view model wrapper around `PortfolioEntry`."""

from __future__ import annotations

from dataclasses import dataclass

from core.models import ImageDescriptor, PortfolioEntry


@dataclass
class PortfolioCardVM:
    """Expose convenient properties for portfolio card bindings."""

    entry: PortfolioEntry

    @property
    def entry_id(self) -> str:
        return self.entry.entry_id

    @property
    def title(self) -> str:
        return self.entry.title

    @property
    def category(self) -> str:
        return self.entry.category

    @property
    def cover_image(self) -> ImageDescriptor | None:
        """First image the lightbox would show, if any."""
        images = self.entry.lightbox_images()
        return images.at(0) if len(images) else None

    @property
    def image_count(self) -> int:
        return len(self.entry.lightbox_images())

    @property
    def accessible_label(self) -> str:
        count = self.image_count
        label = f"View {self.entry.title} portfolio entry in lightbox."
        if count > 1:
            label += f" {count} images available. Use arrow keys to navigate or swipe on mobile."
        return label
