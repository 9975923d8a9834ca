"""
typography.py — Font pairing selection and modular type scales.

  - 8 curated Google Fonts pairings, each tagged with personality traits
  - Pairing selection by trait overlap with the typography style and industry
  - Modular scale (xs → 6xl) as rem strings
  - Line-height bands, CSS custom properties, advisory accessibility checks
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from html import escape
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import quote_plus

from .models import FontPairingNames, TypographySystem

logger = logging.getLogger(__name__)

ROOT_FONT_SIZE = 16  # px per rem

# Scale key → exponent of the ratio
SCALE_STEPS: Mapping[str, int] = MappingProxyType({
    "xs": -2,
    "sm": -1,
    "base": 0,
    "lg": 1,
    "xl": 2,
    "2xl": 3,
    "3xl": 4,
    "4xl": 5,
    "5xl": 6,
    "6xl": 7,
})

FONT_WEIGHTS: Mapping[str, int] = MappingProxyType({
    "light": 300,
    "normal": 400,
    "medium": 500,
    "semibold": 600,
    "bold": 700,
})


@dataclass(frozen=True)
class FontSpec:
    family: str
    weights: Tuple[int, ...]
    category: str  # serif / sans-serif / display / monospace


@dataclass(frozen=True)
class FontPairing:
    name: str
    heading: FontSpec
    body: FontSpec
    description: str
    personality: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TypeScale:
    name: str
    ratio: float
    base_size: int
    description: str


@dataclass
class TypographyReport:
    valid: bool
    issues: List[str]
    suggestions: List[str]


def _pairing(name, heading, heading_weights, heading_cat, body, body_weights, body_cat,
             description, personality) -> FontPairing:
    return FontPairing(
        name=name,
        heading=FontSpec(heading, heading_weights, heading_cat),
        body=FontSpec(body, body_weights, body_cat),
        description=description,
        personality=personality,
    )


# Catalog order is significant: ties in selection go to the earlier entry.
FONT_PAIRINGS: Tuple[FontPairing, ...] = (
    _pairing("Modern Professional",
             "Inter", (400, 500, 600, 700), "sans-serif",
             "Inter", (400, 500), "sans-serif",
             "Clean, highly legible, and versatile for modern interfaces",
             ("modern", "clean", "professional", "tech")),
    _pairing("Editorial Classic",
             "Playfair Display", (400, 500, 600, 700), "serif",
             "Source Sans Pro", (400, 500), "sans-serif",
             "Elegant serif headlines with clean sans-serif body text",
             ("elegant", "editorial", "luxury", "classic")),
    _pairing("Tech Startup",
             "Space Grotesk", (400, 500, 600, 700), "sans-serif",
             "Inter", (400, 500), "sans-serif",
             "Distinctive geometric headlines with reliable body text",
             ("tech", "startup", "modern", "innovative")),
    _pairing("Creative Studio",
             "Fraunces", (400, 500, 600, 700), "serif",
             "Inter", (400, 500), "sans-serif",
             "Expressive variable serif with modern sans-serif",
             ("creative", "artistic", "unique", "expressive")),
    _pairing("Corporate Reliable",
             "Roboto", (400, 500, 600, 700), "sans-serif",
             "Roboto", (400, 500), "sans-serif",
             "Trustworthy and familiar, excellent for corporate applications",
             ("corporate", "reliable", "friendly", "accessible")),
    _pairing("Minimal Geometric",
             "DM Sans", (400, 500, 600, 700), "sans-serif",
             "DM Sans", (400, 500), "sans-serif",
             "Low-contrast geometric with excellent readability",
             ("minimal", "geometric", "clean", "modern")),
    _pairing("Warm Humanist",
             "Libre Baskerville", (400, 700), "serif",
             "Open Sans", (400, 500), "sans-serif",
             "Warm serif headlines with friendly sans-serif body",
             ("warm", "friendly", "approachable", "human")),
    _pairing("Bold Statement",
             "Oswald", (400, 500, 600, 700), "sans-serif",
             "Nunito Sans", (400, 500), "sans-serif",
             "Strong condensed headlines with rounded body text",
             ("bold", "impactful", "strong", "confident")),
)

TYPE_SCALES: Tuple[TypeScale, ...] = (
    TypeScale("Minor Second", 1.067, 16, "Subtle, close harmony - good for text-heavy designs"),
    TypeScale("Major Second", 1.125, 16, "Balanced and versatile - most common choice"),
    TypeScale("Minor Third", 1.2, 16, "Gentle contrast - readable and pleasant"),
    TypeScale("Major Third", 1.25, 16, "Strong hierarchy - good for marketing sites"),
    TypeScale("Perfect Fourth", 1.333, 16, "Clear distinction - excellent for landing pages"),
    TypeScale("Golden Ratio", 1.618, 16, "Dramatic contrast - bold and attention-grabbing"),
)

STYLE_TRAITS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "professional": ("modern", "clean", "professional", "corporate"),
    "creative":     ("creative", "artistic", "unique", "expressive"),
    "technical":    ("tech", "modern", "clean", "minimal"),
    "friendly":     ("warm", "friendly", "approachable", "human"),
})

INDUSTRY_TRAITS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "tech":       ("tech", "startup", "modern", "innovative"),
    "finance":    ("corporate", "reliable", "professional", "clean"),
    "healthcare": ("friendly", "approachable", "clean", "reliable"),
    "creative":   ("creative", "artistic", "unique", "expressive"),
    "education":  ("friendly", "approachable", "warm", "accessible"),
    "ecommerce":  ("modern", "clean", "friendly", "accessible"),
})


# ── Selection ─────────────────────────────────────────────────────────────────

def select_font_pairing(style: str, industry: str) -> FontPairing:
    """
    Score every catalog pairing by how many of its personality tags appear in
    the style traits plus the industry traits. The first highest scorer wins.
    """
    if style not in STYLE_TRAITS:
        logger.debug(f"Unknown typography style {style!r}, using professional traits")
    desired = set(STYLE_TRAITS.get(style, STYLE_TRAITS["professional"]))
    desired.update(INDUSTRY_TRAITS.get(industry, ()))

    best, best_score = FONT_PAIRINGS[0], 0
    for pairing in FONT_PAIRINGS:
        score = sum(1 for trait in pairing.personality if trait in desired)
        if score > best_score:
            best, best_score = pairing, score

    return best


def find_pairing(heading: str, body: str) -> Optional[FontPairing]:
    """Catalog entry for a heading/body family combination, if any."""
    return next(
        (p for p in FONT_PAIRINGS if p.heading.family == heading and p.body.family == body),
        None,
    )


# ── Scale ─────────────────────────────────────────────────────────────────────

def generate_modular_scale(base_size: float, ratio: float) -> Dict[str, str]:
    """
    Geometric size progression, ``base_size * ratio ** step`` for steps -2…7,
    rendered in rem to 3 decimals.

    Raises ValueError unless base_size > 0 and ratio > 1 (both finite),
    so every step is larger than the one before.
    """
    if not (math.isfinite(base_size) and base_size > 0):
        raise ValueError(f"Base font size must be a positive number of pixels, got {base_size}")
    if not (math.isfinite(ratio) and ratio > 1):
        raise ValueError(f"Type-scale ratio must be greater than 1, got {ratio}")
    return {
        key: f"{base_size * ratio ** step / ROOT_FONT_SIZE:.3f}rem"
        for key, step in SCALE_STEPS.items()
    }


def _rem(value: Union[str, float]) -> float:
    if isinstance(value, str):
        return float(value.strip().removesuffix("rem"))
    return float(value)


def calculate_line_height(font_size: Union[str, float]) -> str:
    """Line-height ratio for a font size in rem. Larger type sits tighter."""
    size = _rem(font_size)
    if size <= 1.125:
        return "1.5"   # body text
    if size <= 1.5:
        return "1.4"   # large body / small headings
    if size <= 2.25:
        return "1.3"   # medium headings
    return "1.2"       # display headings


def generate_typography_system(
    style: str,
    industry: str,
    scale_ratio: float = 1.25,
    base_size: float = ROOT_FONT_SIZE,
) -> TypographySystem:
    pairing = select_font_pairing(style, industry)
    return TypographySystem(
        font_pairings=FontPairingNames(heading=pairing.heading.family, body=pairing.body.family),
        scale=generate_modular_scale(base_size, scale_ratio),
        weights=dict(FONT_WEIGHTS),
    )


# ── Output helpers ────────────────────────────────────────────────────────────

def _family_param(family: str, weights: Sequence[int]) -> str:
    return f"{quote_plus(family)}:wght@{';'.join(str(w) for w in sorted(set(weights)))}"


def generate_google_fonts_url(pairing: FontPairing) -> str:
    """Google Fonts css2 URL loading both families of a pairing."""
    if pairing.heading.family == pairing.body.family:
        families = [_family_param(pairing.heading.family, pairing.heading.weights + pairing.body.weights)]
    else:
        families = [
            _family_param(pairing.heading.family, pairing.heading.weights),
            _family_param(pairing.body.family, pairing.body.weights),
        ]
    return f"https://fonts.googleapis.com/css2?family={'&family='.join(families)}&display=swap"


def google_fonts_url_for(system: TypographySystem) -> str:
    """Google Fonts URL for the families selected in a typography system."""
    names = system.font_pairings
    pairing = find_pairing(names.heading, names.body)
    if pairing is None:
        default_weights = (400, 500, 600, 700)
        pairing = FontPairing(
            name="Custom",
            heading=FontSpec(names.heading, default_weights, "sans-serif"),
            body=FontSpec(names.body, (400, 500), "sans-serif"),
            description="",
        )
    return generate_google_fonts_url(pairing)


def generate_google_fonts_links(system: TypographySystem, indent: str = "  ") -> str:
    """Preconnect hints plus the stylesheet link, one tag per line."""
    tags = [
        '<link rel="preconnect" href="https://fonts.googleapis.com">',
        '<link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>',
        f'<link rel="stylesheet" href="{escape(google_fonts_url_for(system))}">',
    ]
    return "\n".join(indent + tag for tag in tags)


def generate_css_properties(system: TypographySystem) -> Dict[str, str]:
    properties = {
        "--font-heading": system.font_pairings.heading,
        "--font-body": system.font_pairings.body,
    }
    for key, value in system.scale.items():
        properties[f"--font-size-{key}"] = value
        properties[f"--line-height-{key}"] = calculate_line_height(value)
    for key, value in system.weights.items():
        properties[f"--font-weight-{key}"] = str(value)
    return properties


def validate_accessibility(system: TypographySystem) -> TypographyReport:
    """Advisory readability checks. Never blocks generation."""
    issues: List[str] = []
    suggestions: List[str] = []

    if _rem(system.scale["base"]) < 1:
        issues.append("Base font size is below 16px, which may be difficult to read")
        suggestions.append("Consider increasing base font size to at least 1rem (16px)")

    if _rem(system.scale["sm"]) < 0.875:
        issues.append("Small text is below 14px, which may fail accessibility standards")
        suggestions.append("Increase small text size to at least 0.875rem (14px)")

    if system.weights.get("normal", 400) < 400:
        issues.append("Normal weight is below 400, which may appear too light")
        suggestions.append("Set normal weight to at least 400 for better readability")

    return TypographyReport(valid=not issues, issues=issues, suggestions=suggestions)
