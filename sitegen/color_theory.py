"""
color_theory.py — Color-space math, harmonies, WCAG contrast and
industry-driven palette synthesis.

HSL values use the CSS ranges (H: 0–360, S/L: 0–100). Conversions keep
full float precision; hex output is always lowercase ``#rrggbb``.

Usage:
    from sitegen.color_theory import generate_industry_palette, ensure_accessibility

    palette = ensure_accessibility(generate_industry_palette("finance", style="classic"))
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

from .models import ColorPalette, SemanticColors

logger = logging.getLogger(__name__)

WHITE = "#ffffff"
BLACK = "#000000"

# WCAG AA, normal text
AA_CONTRAST = 4.5


@dataclass(frozen=True)
class HSLColor:
    h: float  # hue 0–360
    s: float  # saturation 0–100
    l: float  # lightness 0–100

    def rounded(self) -> Tuple[int, int, int]:
        return round(self.h), round(self.s), round(self.l)

    def css(self) -> str:
        h, s, l = self.rounded()
        return f"hsl({h}, {s}%, {l}%)"


@dataclass(frozen=True)
class ColorHarmony:
    name: str
    colors: List[HSLColor]
    description: str


# ── Industry color psychology ─────────────────────────────────────────────────

INDUSTRY_COLORS: Dict[str, HSLColor] = {
    "tech":        HSLColor(220, 70, 50),   # blue: trust, innovation
    "healthcare":  HSLColor(200, 60, 55),   # light blue: health, cleanliness
    "finance":     HSLColor(240, 45, 35),   # dark blue: trust, stability
    "creative":    HSLColor(280, 80, 60),   # purple: creativity
    "ecommerce":   HSLColor(350, 65, 55),   # red-pink: energy, action
    "education":   HSLColor(25, 70, 55),    # orange: enthusiasm, learning
    "corporate":   HSLColor(210, 40, 40),   # professional blue
    "food":        HSLColor(30, 85, 60),    # orange: appetite, warmth
    "real_estate": HSLColor(120, 30, 45),   # green: growth, stability
    "default":     HSLColor(220, 60, 50),
}

# (saturation delta, lightness delta) per style direction
STYLE_ADJUSTMENTS: Dict[str, Tuple[int, int]] = {
    "modern":  (0, 0),
    "minimal": (-20, 10),
    "bold":    (20, -10),
    "classic": (-10, -5),
    "playful": (30, 15),
}

SEMANTIC_COLORS: Dict[str, HSLColor] = {
    "success": HSLColor(120, 50, 50),
    "warning": HSLColor(45, 85, 60),
    "error":   HSLColor(0, 70, 55),
    "info":    HSLColor(200, 60, 60),
}


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def _round(value: float) -> int:
    # half-up, matching browser rounding of .5 channels
    return math.floor(value + 0.5)


# ── Conversions ───────────────────────────────────────────────────────────────

def hex_to_rgb(hex_str: str) -> Tuple[int, int, int]:
    h = hex_str.lstrip("#")
    if len(h) == 3:
        h = h[0] * 2 + h[1] * 2 + h[2] * 2
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return "#{:02x}{:02x}{:02x}".format(
        int(_clamp(r, 0, 255)), int(_clamp(g, 0, 255)), int(_clamp(b, 0, 255))
    )


def hex_to_hsl(hex_str: str) -> HSLColor:
    """hex → HSL (H: 0–360, S: 0–100, L: 0–100)"""
    r, g, b = (c / 255 for c in hex_to_rgb(hex_str))
    mx, mn = max(r, g, b), min(r, g, b)
    l = (mx + mn) / 2
    h = s = 0.0

    if mx != mn:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif mx == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return HSLColor(h * 360, s * 100, l * 100)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_hex(color: HSLColor) -> str:
    """HSL (H: 0–360, S: 0–100, L: 0–100) → hex"""
    h = (color.h % 360) / 360
    s = _clamp(color.s, 0, 100) / 100
    l = _clamp(color.l, 0, 100) / 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return rgb_to_hex(_round(r * 255), _round(g * 255), _round(b * 255))


# ── Harmonies ─────────────────────────────────────────────────────────────────

def generate_complementary(base: HSLColor) -> ColorHarmony:
    return ColorHarmony(
        name="Complementary",
        colors=[base, replace(base, h=(base.h + 180) % 360)],
        description="Colors opposite on the color wheel, creating high contrast and vibrant look",
    )


def generate_triadic(base: HSLColor) -> ColorHarmony:
    return ColorHarmony(
        name="Triadic",
        colors=[
            base,
            replace(base, h=(base.h + 120) % 360),
            replace(base, h=(base.h + 240) % 360),
        ],
        description="Three colors evenly spaced on the color wheel, offering vibrant yet balanced contrast",
    )


def generate_analogous(base: HSLColor) -> ColorHarmony:
    s = max(base.s - 10, 20)
    return ColorHarmony(
        name="Analogous",
        colors=[
            base,
            HSLColor((base.h + 30) % 360, s, base.l),
            HSLColor((base.h - 30 + 360) % 360, s, base.l),
        ],
        description="Colors adjacent on the color wheel, creating serene and comfortable designs",
    )


def generate_monochromatic(base: HSLColor) -> List[HSLColor]:
    """Five lightness steps of one hue, lightest first."""
    return [
        replace(base, l=min(base.l + 40, 95)),
        replace(base, l=min(base.l + 20, 90)),
        base,
        replace(base, l=max(base.l - 20, 10)),
        replace(base, l=max(base.l - 40, 5)),
    ]


# ── Contrast ──────────────────────────────────────────────────────────────────

def relative_luminance(hex_str: str) -> float:
    """WCAG 2.0 relative luminance of an sRGB color."""
    def _linear(c: int) -> float:
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (_linear(c) for c in hex_to_rgb(hex_str))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def get_contrast_ratio(color_a: str, color_b: str) -> float:
    """WCAG contrast ratio, 1.0 (identical) to 21.0 (black on white)."""
    lum_a = relative_luminance(color_a)
    lum_b = relative_luminance(color_b)
    brightest, darkest = max(lum_a, lum_b), min(lum_a, lum_b)
    return (brightest + 0.05) / (darkest + 0.05)


def best_contrast(hex_str: str) -> float:
    """Higher of the contrasts against pure white and pure black."""
    return max(get_contrast_ratio(hex_str, WHITE), get_contrast_ratio(hex_str, BLACK))


def get_accessible_text_color(background: str) -> str:
    """Pick white or black text for a background, preferring white."""
    white_contrast = get_contrast_ratio(background, WHITE)
    black_contrast = get_contrast_ratio(background, BLACK)
    if white_contrast >= AA_CONTRAST:
        return WHITE
    if black_contrast >= AA_CONTRAST:
        return BLACK

    hsl = hex_to_hsl(background)
    shifted_l = max(hsl.l - 30, 0) if white_contrast > black_contrast else min(hsl.l + 30, 100)
    adjusted = hsl_to_hex(replace(hsl, l=shifted_l))
    return WHITE if get_contrast_ratio(adjusted, WHITE) >= AA_CONTRAST else BLACK


def darken_color(hex_str: str, percent: float) -> str:
    """Subtract ``percent`` of full scale from every RGB channel."""
    amount = _round(2.55 * percent)
    r, g, b = hex_to_rgb(hex_str)
    return rgb_to_hex(r - amount, g - amount, b - amount)


# ── Palettes ──────────────────────────────────────────────────────────────────

def generate_industry_palette(
    industry: str,
    base_color: Optional[str] = None,
    style: str = "modern",
) -> ColorPalette:
    """
    Derive a full palette from an industry's base color.

    Args:
        industry:   Industry key; unknown industries use the "default" entry
        base_color: Optional hex that replaces the industry base color
        style:      Style direction; unknown styles apply no adjustment

    Returns:
        ColorPalette (not yet accessibility-checked)
    """
    if base_color:
        base = hex_to_hsl(base_color)
    elif industry in INDUSTRY_COLORS:
        base = INDUSTRY_COLORS[industry]
    else:
        logger.debug(f"No base color for industry {industry!r}, using default")
        base = INDUSTRY_COLORS["default"]

    if style not in STYLE_ADJUSTMENTS:
        logger.debug(f"Unknown style {style!r}, using modern adjustments")
    ds, dl = STYLE_ADJUSTMENTS.get(style, STYLE_ADJUSTMENTS["modern"])
    adjusted = HSLColor(
        base.h,
        _clamp(base.s + ds, 10, 100),
        _clamp(base.l + dl, 10, 90),
    )

    complementary = generate_complementary(adjusted)
    analogous = generate_analogous(adjusted)

    return ColorPalette(
        primary=hsl_to_hex(adjusted),
        secondary=hsl_to_hex(complementary.colors[1]),
        accent=hsl_to_hex(analogous.colors[1]),
        neutral=hsl_to_hex(HSLColor(adjusted.h, 10, 70)),
        semantic=SemanticColors(**{
            name: hsl_to_hex(color) for name, color in SEMANTIC_COLORS.items()
        }),
    )


def _ensure_contrast(hex_str: str, min_ratio: float) -> str:
    # Single corrective shift; the result is not re-tested.
    if best_contrast(hex_str) >= min_ratio:
        return hex_str
    hsl = hex_to_hsl(hex_str)
    shifted_l = max(hsl.l - 20, 20) if hsl.l > 50 else min(hsl.l + 20, 80)
    adjusted = hsl_to_hex(replace(hsl, l=shifted_l))
    logger.debug(f"Contrast below {min_ratio}: {hex_str} → {adjusted}")
    return adjusted


def ensure_accessibility(palette: ColorPalette, min_ratio: float = AA_CONTRAST) -> ColorPalette:
    """
    Run one accessibility pass over the palette.

    Every color except neutral is checked against white and black; a color
    whose better contrast is below ``min_ratio`` gets one 20-point lightness
    shift. Colors are not re-checked after the shift, so extreme inputs may
    still fall short.
    """
    semantic = palette.semantic
    return ColorPalette(
        primary=_ensure_contrast(palette.primary, min_ratio),
        secondary=_ensure_contrast(palette.secondary, min_ratio),
        accent=_ensure_contrast(palette.accent, min_ratio),
        neutral=palette.neutral,
        semantic=SemanticColors(
            success=_ensure_contrast(semantic.success, min_ratio),
            warning=_ensure_contrast(semantic.warning, min_ratio),
            error=_ensure_contrast(semantic.error, min_ratio),
            info=_ensure_contrast(semantic.info, min_ratio),
        ),
    )
