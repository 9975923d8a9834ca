"""
design_system.py — Design token builder.

Takes validated ProjectRequirements and produces the complete DesignTokens
bundle every component renders from:
  - Color palette (industry base → style adjustment → harmonies → one
    accessibility pass)
  - Typography system (pairing + modular scale + weights)
  - Spacing scale (8pt grid)
  - Border radius and shadow tables per style direction

Also renders the tokens as CSS custom properties for the `:root` block.

Usage:
    from sitegen.design_system import build_design_tokens, generate_token_css

    tokens = build_design_tokens(requirements)
    css = generate_token_css(tokens)
"""

from __future__ import annotations

import logging
from typing import Dict, List

from .color_theory import AA_CONTRAST, ensure_accessibility, generate_industry_palette
from .models import DesignTokens, ProjectRequirements
from .typography import ROOT_FONT_SIZE, generate_css_properties, generate_typography_system

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "modern"


# ── Token tables ───────────────────────────────────────────────────────────────

SPACING: Dict[str, str] = {
    "xs":  "0.5rem",   # 8px
    "sm":  "1rem",     # 16px
    "md":  "1.5rem",   # 24px
    "lg":  "2rem",     # 32px
    "xl":  "3rem",     # 48px
    "2xl": "4rem",     # 64px
    "3xl": "6rem",     # 96px
    "4xl": "8rem",     # 128px
}

BORDER_RADIUS: Dict[str, Dict[str, str]] = {
    "modern":  {"sm": "0.375rem", "md": "0.5rem",   "lg": "0.75rem", "xl": "1rem"},
    "minimal": {"sm": "0.25rem",  "md": "0.375rem", "lg": "0.5rem",  "xl": "0.75rem"},
    "bold":    {"sm": "0.5rem",   "md": "0.75rem",  "lg": "1rem",    "xl": "1.5rem"},
    "classic": {"sm": "0.25rem",  "md": "0.5rem",   "lg": "0.75rem", "xl": "1rem"},
    "playful": {"sm": "0.75rem",  "md": "1rem",     "lg": "1.5rem",  "xl": "2rem"},
}

# classic and playful share the modern shadows
SHADOWS: Dict[str, Dict[str, str]] = {
    "modern": {
        "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
        "md": "0 4px 6px -1px rgb(0 0 0 / 0.1)",
        "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1)",
        "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1)",
    },
    "minimal": {
        "sm": "0 1px 2px 0 rgb(0 0 0 / 0.02)",
        "md": "0 2px 4px -1px rgb(0 0 0 / 0.05)",
        "lg": "0 4px 6px -1px rgb(0 0 0 / 0.05)",
        "xl": "0 8px 10px -2px rgb(0 0 0 / 0.05)",
    },
    "bold": {
        "sm": "0 2px 4px 0 rgb(0 0 0 / 0.1)",
        "md": "0 8px 12px -2px rgb(0 0 0 / 0.15)",
        "lg": "0 16px 24px -4px rgb(0 0 0 / 0.15)",
        "xl": "0 32px 40px -8px rgb(0 0 0 / 0.15)",
    },
}

ROLE_USAGE: Dict[str, str] = {
    "primary":   "Main brand actions, headlines, primary buttons",
    "secondary": "Supporting elements, hover states, secondary buttons",
    "accent":    "Highlights, badges, active indicators, links",
    "neutral":   "Borders, dividers, muted surfaces",
    "success":   "Confirmation messages and positive states",
    "warning":   "Cautionary messages and pending states",
    "error":     "Validation errors and destructive actions",
    "info":      "Informational notices and hints",
}


def generate_spacing_tokens() -> Dict[str, str]:
    return dict(SPACING)


def generate_border_radius_tokens(style: str = DEFAULT_STYLE) -> Dict[str, str]:
    if style not in BORDER_RADIUS:
        logger.debug(f"No radius table for style {style!r}, using {DEFAULT_STYLE}")
    return dict(BORDER_RADIUS.get(style, BORDER_RADIUS[DEFAULT_STYLE]))


def generate_shadow_tokens(style: str = DEFAULT_STYLE) -> Dict[str, str]:
    return dict(SHADOWS.get(style, SHADOWS[DEFAULT_STYLE]))


# ── Main builder ───────────────────────────────────────────────────────────────

def build_design_tokens(
    requirements: ProjectRequirements,
    scale_ratio: float = 1.25,
    min_contrast: float = AA_CONTRAST,
    base_font_size: float = ROOT_FONT_SIZE,
) -> DesignTokens:
    """
    Build the complete token bundle for one project.

    Args:
        requirements:   Validated project requirements
        scale_ratio:    Modular type-scale ratio
        min_contrast:   Threshold for the palette accessibility pass
        base_font_size: Modular-scale base in px

    Returns:
        DesignTokens ready for component rendering
    """
    style = requirements.style_direction

    palette = generate_industry_palette(
        requirements.industry,
        requirements.color_preferences.base_color,
        style,
    )
    palette = ensure_accessibility(palette, min_ratio=min_contrast)

    typography = generate_typography_system(
        requirements.typography_style or "professional",
        requirements.industry,
        scale_ratio=scale_ratio,
        base_size=base_font_size,
    )

    return DesignTokens(
        colors=palette,
        typography=typography,
        spacing=generate_spacing_tokens(),
        border_radius=generate_border_radius_tokens(style),
        shadows=generate_shadow_tokens(style),
    )


# ── CSS output ─────────────────────────────────────────────────────────────────

def font_stack(family: str, generic: str = "sans-serif") -> str:
    """CSS font-family value for a single web font with a generic fallback."""
    return f"'{family}', {generic}"


def token_properties(tokens: DesignTokens) -> Dict[str, str]:
    """Flat custom-property name → value map for every token."""
    properties: Dict[str, str] = {}

    for role, hex_val in tokens.colors.roles().items():
        properties[f"--color-{role}"] = hex_val

    for name, value in generate_css_properties(tokens.typography).items():
        if name in ("--font-heading", "--font-body"):
            value = font_stack(value)
        properties[name] = value

    for key, value in tokens.spacing.items():
        properties[f"--spacing-{key}"] = value
    for key, value in tokens.border_radius.items():
        properties[f"--radius-{key}"] = value
    for key, value in tokens.shadows.items():
        properties[f"--shadow-{key}"] = value

    return properties


def generate_token_css(tokens: DesignTokens) -> str:
    lines: List[str] = [":root {"]
    lines += [f"  {name}: {value};" for name, value in token_properties(tokens).items()]
    lines.append("}")
    return "\n".join(lines)


def generate_reset_css() -> str:
    return """\
* {
  margin: 0;
  padding: 0;
  box-sizing: border-box;
}

body {
  line-height: 1.6;
  color: #333;
  font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Roboto', sans-serif;
}

img {
  max-width: 100%;
  height: auto;
}"""
