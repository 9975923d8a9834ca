from sitegen.design_system import (
    BORDER_RADIUS,
    SHADOWS,
    build_design_tokens,
    generate_border_radius_tokens,
    generate_reset_css,
    generate_shadow_tokens,
    generate_spacing_tokens,
    generate_token_css,
    token_properties,
)
from sitegen.models import ColorPreferences


def test_spacing_tokens():
    assert generate_spacing_tokens() == {
        "xs": "0.5rem", "sm": "1rem", "md": "1.5rem", "lg": "2rem",
        "xl": "3rem", "2xl": "4rem", "3xl": "6rem", "4xl": "8rem",
    }


def test_radius_and_shadow_tables_by_style():
    assert generate_border_radius_tokens("playful") == {"sm": "0.75rem", "md": "1rem", "lg": "1.5rem", "xl": "2rem"}
    assert generate_shadow_tokens("bold")["xl"] == "0 32px 40px -8px rgb(0 0 0 / 0.15)"
    # classic has its own radius table but shares the modern shadows
    assert generate_border_radius_tokens("classic") == BORDER_RADIUS["classic"]
    assert generate_shadow_tokens("classic") == SHADOWS["modern"]


def test_unknown_style_falls_back_to_modern():
    assert generate_border_radius_tokens("retro") == BORDER_RADIUS["modern"]
    assert generate_shadow_tokens("retro") == SHADOWS["modern"]


def test_build_design_tokens(make_requirements):
    tokens = build_design_tokens(make_requirements(style_direction="minimal"))
    assert tokens.border_radius == BORDER_RADIUS["minimal"]
    assert tokens.shadows == SHADOWS["minimal"]
    assert tokens.typography.font_pairings.heading == "Inter"
    assert tokens.typography.scale["base"] == "1.000rem"


def test_build_design_tokens_options(make_requirements):
    req = make_requirements(color_preferences=ColorPreferences(type="brand", values=("#ff3333",)))
    tokens = build_design_tokens(req, scale_ratio=1.5, min_contrast=7.0)
    assert tokens.typography.scale["lg"] == "1.500rem"
    assert tokens.colors.primary == "#cc0000"


def test_token_css(make_requirements):
    tokens = build_design_tokens(make_requirements())
    css = generate_token_css(tokens)

    assert css.startswith(":root {")
    assert css.endswith("}")
    assert f"--color-primary: {tokens.colors.primary};" in css
    assert f"--color-neutral: {tokens.colors.neutral};" in css
    assert f"--color-success: {tokens.colors.semantic.success};" in css
    assert "--font-heading: 'Inter', sans-serif;" in css
    assert "--font-size-base: 1.000rem;" in css
    assert "--spacing-4xl: 8rem;" in css
    assert "--radius-md: 0.5rem;" in css
    assert "--shadow-sm: 0 1px 2px 0 rgb(0 0 0 / 0.05);" in css


def test_token_properties_cover_every_role(make_requirements):
    props = token_properties(build_design_tokens(make_requirements()))
    for role in ("primary", "secondary", "accent", "neutral", "success", "warning", "error", "info"):
        assert f"--color-{role}" in props


def test_reset_css():
    css = generate_reset_css()
    assert "box-sizing: border-box;" in css
    assert "max-width: 100%;" in css
