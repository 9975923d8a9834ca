import pytest

from sitegen.color_theory import (
    BLACK,
    INDUSTRY_COLORS,
    STYLE_ADJUSTMENTS,
    WHITE,
    HSLColor,
    best_contrast,
    darken_color,
    ensure_accessibility,
    generate_analogous,
    generate_complementary,
    generate_industry_palette,
    generate_monochromatic,
    generate_triadic,
    get_accessible_text_color,
    get_contrast_ratio,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
)
from sitegen.models import ColorPalette, SemanticColors


def test_hex_to_rgb_short_and_long_forms():
    assert hex_to_rgb("#fff") == (255, 255, 255)
    assert hex_to_rgb("#1a2b3c") == (26, 43, 60)
    assert hex_to_rgb("1A2B3C") == (26, 43, 60)


def test_hex_to_hsl_primaries():
    red = hex_to_hsl("#ff0000")
    assert (red.h, red.s, red.l) == (0, 100, 50)
    gray = hex_to_hsl("#808080")
    assert gray.h == 0 and gray.s == 0


@pytest.mark.parametrize("hex_str", [
    "#000000", "#ffffff", "#2662d9", "#ff3333", "#777777", "#1e40af", "#f59e0b", "#10b981", "#7c3aed",
])
def test_round_trip_within_one_unit_per_channel(hex_str):
    back = hsl_to_hex(hex_to_hsl(hex_str))
    for a, b in zip(hex_to_rgb(hex_str), hex_to_rgb(back)):
        assert abs(a - b) <= 1


def test_hsl_to_hex_reference_values():
    assert hsl_to_hex(HSLColor(220, 70, 50)) == "#2662d9"
    assert hsl_to_hex(HSLColor(220, 60, 50)) == "#3366cc"
    assert hsl_to_hex(HSLColor(0, 100, 40)) == "#cc0000"
    # hue wraps, out-of-range saturation/lightness clamp
    assert hsl_to_hex(HSLColor(580, 60, 50)) == "#3366cc"
    assert hsl_to_hex(HSLColor(0, 0, 150)) == WHITE


def test_contrast_reference_values():
    assert get_contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)
    assert get_contrast_ratio("#777777", WHITE) == pytest.approx(4.48, abs=0.01)
    assert get_contrast_ratio("#abcdef", "#abcdef") == pytest.approx(1.0)


@pytest.mark.parametrize("a,b", [("#2662d9", "#ffffff"), ("#ff3333", "#000000"), ("#123456", "#fedcba")])
def test_contrast_is_symmetric_and_at_least_one(a, b):
    assert get_contrast_ratio(a, b) == pytest.approx(get_contrast_ratio(b, a))
    assert get_contrast_ratio(a, b) >= 1


def test_accessible_text_color():
    assert get_accessible_text_color(WHITE) == BLACK
    assert get_accessible_text_color(BLACK) == WHITE
    assert get_accessible_text_color("#2662d9") == WHITE


def test_darken_color_clamps_at_zero():
    assert darken_color("#ffffff", 10) == "#e5e5e5"
    assert darken_color("#101010", 10) == "#000000"


def test_harmonies():
    base = HSLColor(350, 25, 50)
    assert generate_complementary(base).colors[1].h == 170
    triadic = generate_triadic(base).colors
    assert [c.h for c in triadic] == [350, 110, 230]

    analogous = generate_analogous(base).colors
    assert [c.h for c in analogous] == [350, 20, 320]
    # saturation drops by 10 with a floor of 20
    assert analogous[1].s == 20


def test_monochromatic_lightness_steps_are_clamped():
    steps = generate_monochromatic(HSLColor(200, 50, 70))
    assert [c.l for c in steps] == [95, 90, 70, 50, 30]
    dark = generate_monochromatic(HSLColor(200, 50, 10))
    assert dark[-1].l == 5


def test_industry_palette_is_deterministic():
    first = generate_industry_palette("tech", None, "modern")
    second = generate_industry_palette("tech", None, "modern")
    assert first == second
    assert first.primary == "#2662d9"


def test_unknown_industry_and_style_use_defaults():
    palette = generate_industry_palette("unknown_xyz", None, "retro")
    assert palette.primary == hsl_to_hex(INDUSTRY_COLORS["default"])
    assert round(hex_to_hsl(palette.primary).h) == 220


def test_base_color_overrides_industry():
    palette = generate_industry_palette("finance", "#10b981", "modern")
    for a, b in zip(hex_to_rgb(palette.primary), hex_to_rgb("#10b981")):
        assert abs(a - b) <= 1


def test_palette_structure():
    palette = generate_industry_palette("creative", style="playful")
    base = hex_to_hsl(palette.primary)
    secondary = hex_to_hsl(palette.secondary)
    assert abs(((secondary.h - base.h) % 360) - 180) <= 2
    neutral = hex_to_hsl(palette.neutral)
    assert round(neutral.s) == 10 and round(neutral.l) == 70
    assert palette.semantic.success == hsl_to_hex(HSLColor(120, 50, 50))


@pytest.mark.parametrize("industry", sorted(INDUSTRY_COLORS))
@pytest.mark.parametrize("style", sorted(STYLE_ADJUSTMENTS))
def test_every_palette_color_meets_aa_after_pass(industry, style):
    palette = ensure_accessibility(generate_industry_palette(industry, None, style))
    for role, hex_val in palette.roles().items():
        if role != "neutral":
            assert best_contrast(hex_val) >= 4.5


def _palette(primary, secondary, accent="#000000", neutral="#777777"):
    semantic = SemanticColors(success=BLACK, warning=BLACK, error=BLACK, info=BLACK)
    return ColorPalette(primary=primary, secondary=secondary, accent=accent, neutral=neutral, semantic=semantic)


def test_accessibility_pass_is_single_shot():
    checked = ensure_accessibility(_palette("#ff3333", "#777777"), min_ratio=7.0)

    # lightness 60 → 40: still short of 7:1, and not shifted again
    assert checked.primary == "#cc0000"
    assert best_contrast(checked.primary) < 7.0

    # lightness 46.7 → 66.7: now passes
    assert checked.secondary == "#aaaaaa"
    assert best_contrast(checked.secondary) >= 7.0

    # passing colors and neutral are untouched
    assert checked.accent == "#000000"
    assert checked.neutral == "#777777"
