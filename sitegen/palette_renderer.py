"""
palette_renderer.py — Render a template's color palette as a strip image.

Format:
  ┌──────┬──────┬──────┬─────┬──────┐
  │ROLE  │ROLE  │ROLE  │     │ROLE  │  ← role name (top, inside strip)
  │      │      │      │ ... │      │  ← tall color fill
  ├──────┼──────┼──────┼─────┼──────┤
  │#HEX  │#HEX  │#HEX  │     │#HEX  │  ← hex + WCAG rating (footer)
  │AA 5.2│AAA 9 │...   │     │      │
  └──────┴──────┴──────┴─────┴──────┘

One strip per palette role: primary, secondary, accent, neutral, success,
warning, error, info.

Usage:
    from sitegen.palette_renderer import render_palette

    path = render_palette(tokens.colors, output_path="outputs/site/palette.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .color_theory import (
    BLACK,
    WHITE,
    get_accessible_text_color,
    get_contrast_ratio,
    hex_to_rgb,
)
from .models import ColorPalette

# ── Font helpers ────────────────────────────────────────────────────────────

_FONT_CANDIDATES = [
    "/System/Library/Fonts/Helvetica.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
]

_FONT_BOLD_CANDIDATES = [
    "/System/Library/Fonts/HelveticaNeue.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
]


def _load_font(size: int, bold: bool = False) -> ImageFont.ImageFont:
    candidates = _FONT_BOLD_CANDIDATES if bold else _FONT_CANDIDATES
    for path in candidates:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    return ImageFont.load_default()


def _text_height(draw: ImageDraw.ImageDraw, text: str, font) -> int:
    bb = draw.textbbox((0, 0), text, font=font)
    return bb[3] - bb[1]


# ── Contrast labels ─────────────────────────────────────────────────────────

def wcag_rating(ratio: float) -> str:
    if ratio >= 7:
        return "AAA"
    if ratio >= 4.5:
        return "AA"
    if ratio >= 3:
        return "AA Large"
    return "Fail"


def contrast_label(hex_str: str) -> str:
    """e.g. 'AA 5.17:1 on white' for the better of white and black text."""
    on_white = get_contrast_ratio(hex_str, WHITE)
    on_black = get_contrast_ratio(hex_str, BLACK)
    ratio, against = (on_white, "white") if on_white >= on_black else (on_black, "black")
    return f"{wcag_rating(ratio)} {ratio:.2f}:1 on {against}"


def _footer_bg(rgb: Tuple[int, int, int]) -> Tuple[int, int, int]:
    """Slightly darker footer band in the strip's own hue."""
    return tuple(int(c * 0.85) for c in rgb)


# ── Core renderer ───────────────────────────────────────────────────────────

def render_palette_image(
    palette: ColorPalette,
    width: int = 1600,
    height: int = 480,
    gap: int = 2,
) -> Image.Image:
    """
    Render the palette as vertical strips.

    Args:
        palette: ColorPalette from the design tokens
        width:   Total image width in pixels
        height:  Total image height in pixels
        gap:     Pixel gap between strips

    Returns:
        PIL Image in RGB mode, exactly width × height.
    """
    roles = list(palette.roles().items())
    n = len(roles)

    footer_h = max(64, int(height * 0.22))
    pad = max(8, width // 160)
    total_gap = gap * (n - 1)
    strip_w = (width - total_gap) // n
    remainder = width - total_gap - strip_w * n

    img = Image.new("RGB", (width, height), (12, 12, 16))
    draw = ImageDraw.Draw(img)

    font_role = _load_font(max(10, min(24, int(strip_w * 0.10))), bold=True)
    font_hex = _load_font(max(10, min(20, int(strip_w * 0.09))))
    font_rating = _load_font(max(8, min(14, int(strip_w * 0.065))))

    for i, (role, hex_val) in enumerate(roles):
        rgb = hex_to_rgb(hex_val)
        footer = _footer_bg(rgb)
        text_col = hex_to_rgb(get_accessible_text_color(hex_val))
        footer_text_col = hex_to_rgb(get_accessible_text_color("#{:02x}{:02x}{:02x}".format(*footer)))

        sw = strip_w + (remainder if i == n - 1 else 0)
        sx = i * (strip_w + gap)

        draw.rectangle([sx, 0, sx + sw - 1, height - footer_h - 1], fill=rgb)
        draw.rectangle([sx, height - footer_h, sx + sw - 1, height - 1], fill=footer)

        draw.text((sx + pad, pad), role.upper(), fill=text_col, font=font_role)

        footer_y = height - footer_h + pad
        draw.text((sx + pad, footer_y), hex_val.upper(), fill=footer_text_col, font=font_hex)
        footer_y += _text_height(draw, hex_val, font_hex) + 6
        draw.text((sx + pad, footer_y), contrast_label(hex_val), fill=footer_text_col, font=font_rating)

    return img


# ── Standalone export ───────────────────────────────────────────────────────

def render_palette(
    palette: ColorPalette,
    output_path: Union[str, Path],
    width: int = 1600,
    height: int = 480,
) -> Path:
    """Render the palette strip and save it as PNG. Returns the saved path."""
    img = render_palette_image(palette, width=width, height=height)

    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    img.save(str(out), "PNG")
    return out
