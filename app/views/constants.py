"""
UI/view constants centralized for reuse across view modules.

Only sizes and style strings live here; behavioural values (swipe threshold,
fallback title) come from `LightboxConfig`.
"""

from __future__ import annotations

WINDOW_DEFAULT_SIZE: tuple[int, int] = (1200, 800)

NAV_PAGES: list[tuple[str, str]] = [
    ("home", "Home"),
    ("about", "About"),
    ("portfolio", "Portfolio"),
]

# Portfolio grid
CARD_THUMB_PX: int = 240
GRID_COLUMNS: int = 3
GRID_SPACING_PX: int = 12

# Lightbox
LIGHTBOX_NAV_BUTTON_PX: int = 48
LIGHTBOX_THUMB_PX: int = 56
LIGHTBOX_BACKDROP_STYLE: str = (
    "QDialog { background-color: rgba(0, 0, 0, 242); }"
    " QLabel { color: white; }"
    " QLabel#lightboxTitle { font-size: 20px; font-weight: 600; }"
)

# Card slider
SLIDER_IMAGE_PX: int = 320
SLIDER_DOT_PX: int = 12

# Page copy
HERO_TITLE_STYLE: str = "font-size: 32px; font-weight: 700;"
SECTION_TITLE_STYLE: str = "font-size: 22px; font-weight: 600; margin-top: 16px;"
CARD_TITLE_STYLE: str = "font-size: 16px; font-weight: 600;"
QUOTE_STYLE: str = "font-style: italic; font-size: 18px;"
