"""Built-in portfolio entries and page copy used when no CMS export is available.

Entries use the same payload shape as the CMS so they go through the same
decoder as live content.
"""

from __future__ import annotations

from typing import Any

STATIC_PORTFOLIO_ENTRIES: list[dict[str, Any]] = [
    {
        "sys": {"id": "static-festival-glam"},
        "fields": {
            "title": "Festival Glam",
            "description": "Bold, colourful festival looks built to last all weekend.",
            "category": "Creative",
            "displayOrder": 1,
            "featured": True,
            "tags": ["festival", "colour"],
            "images": [
                {
                    "src": "images/festival-glam-1.jpg",
                    "alt": "Model with iridescent festival eye makeup",
                    "caption": "Iridescent Eyes",
                    "description": "Layered duochrome pigments over a cut crease.",
                },
                {
                    "src": "images/festival-glam-2.jpg",
                    "alt": "Close-up of gem and glitter placement along the cheekbone",
                    "caption": "Gem Detail",
                },
                {
                    "src": "images/festival-glam-3.jpg",
                    "alt": "Full face festival look under stage lights",
                },
            ],
        },
    },
    {
        "sys": {"id": "static-editorial-beauty"},
        "fields": {
            "title": "Editorial Beauty",
            "description": "Clean skin and sculpted light for print and campaign work.",
            "category": "Editorial",
            "displayOrder": 2,
            "tags": ["editorial"],
            "images": [
                {
                    "src": "images/editorial-1.jpg",
                    "alt": "Soft-focus portrait with dewy skin finish",
                    "caption": "Dewy Finish",
                },
                {
                    "src": "images/editorial-2.jpg",
                    "alt": "Black and white portrait with graphic liner",
                    "caption": "Graphic Liner",
                },
            ],
        },
    },
    {
        "sys": {"id": "static-fusion-nails"},
        "fields": {
            "title": "Fusion Nails",
            "description": "Hand-painted nail art designed to match each look.",
            "category": "Nails",
            "displayOrder": 3,
            "tags": ["nails"],
            "images": [
                {
                    "src": "images/fusion-nails-1.jpg",
                    "alt": "Hand-painted floral nail art in pastel tones",
                    "caption": "Pastel Florals",
                }
            ],
        },
    },
]

STATIC_HOMEPAGE: dict[str, Any] = {
    "sys": {"id": "static-homepage"},
    "fields": {
        "heroTitle": "Hi, I'm Ash Shaw",
        "heroSubtitle": "Makeup that shines with colour, energy, and connection.",
        "heroDescription": (
            "Makeup is my art, my joy, and my way of bringing people together. From festivals "
            "to the dance floor, I use colour and light to create looks that make people feel "
            "radiant, confident, and alive. This portfolio is a growing collection of that journey."
        ),
        "heroCta": "Explore My Portfolio",
        "heroImages": [
            {
                "src": "images/hero-1.jpg",
                "alt": "Festival look with pink and violet glitter",
                "caption": "Festival Glow",
            },
            {
                "src": "images/hero-2.jpg",
                "alt": "Editorial portrait with sculpted highlight",
                "caption": "Editorial Light",
            },
            {
                "src": "images/hero-3.jpg",
                "alt": "Hand-painted nails matched to a rainbow eye look",
                "caption": "Fusion Nails",
            },
        ],
        "featuredTitle": "Featured Work",
        "featuredDescription": "A few recent looks I keep coming back to.",
        "philosophyTitle": "Why I Do Makeup",
        "philosophyCards": [
            {
                "title": "Colour",
                "description": "Bold palettes that bring out personality instead of hiding it.",
            },
            {
                "title": "Energy",
                "description": "Looks that move with you, from the first set to the last.",
            },
            {
                "title": "Connection",
                "description": "Every look starts with a conversation about who you are.",
            },
        ],
    },
}

STATIC_ABOUT_PAGE: dict[str, Any] = {
    "sys": {"id": "static-about"},
    "fields": {
        "heroTitle": "About Ash Shaw",
        "heroSubtitle": "makeup artist",
        "heroDescription": (
            "A makeup artist working across festival, editorial and nail art, "
            "with a love for colour that never switches off."
        ),
        "journeyTitle": "My Journey",
        "journeySections": [
            {
                "title": "Festivals",
                "description": "Painting faces in fields and tents is where it all began.",
            },
            {
                "title": "Editorial",
                "description": "Studio work taught me patience, light and restraint.",
            },
            {
                "title": "Fusion Nails",
                "description": "Nail art became the finishing touch that ties a look together.",
            },
        ],
        "servicesTitle": "What I Do",
        "servicesDescription": "Makeup and nails for events, shoots and celebrations.",
        "serviceList": [
            {"title": "Festival & Event Makeup", "description": "Long-wear, high-colour looks."},
            {"title": "Editorial & Photoshoots", "description": "Camera-ready skin and detail."},
            {"title": "Fusion Nails", "description": "Hand-painted nail art to match a look."},
        ],
        "philosophyTitle": "My Approach",
        "philosophyContent": "Makeup should make you feel more like yourself, not less.",
        "philosophyQuote": "Colour is a conversation.",
    },
}
