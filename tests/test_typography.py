import pytest

from sitegen.typography import (
    FONT_PAIRINGS,
    SCALE_STEPS,
    calculate_line_height,
    find_pairing,
    generate_css_properties,
    generate_google_fonts_links,
    generate_google_fonts_url,
    generate_modular_scale,
    generate_typography_system,
    google_fonts_url_for,
    select_font_pairing,
    validate_accessibility,
)


@pytest.mark.parametrize("style,industry,expected", [
    ("technical", "tech", "Tech Startup"),
    # tie at 4 with Tech Startup, catalog order wins
    ("professional", "tech", "Modern Professional"),
    ("creative", "creative", "Creative Studio"),
    ("friendly", "education", "Warm Humanist"),
    ("professional", "finance", "Modern Professional"),
    ("unknown", "unknown", "Modern Professional"),
])
def test_select_font_pairing(style, industry, expected):
    assert select_font_pairing(style, industry).name == expected


def test_selection_is_deterministic():
    assert select_font_pairing("technical", "tech") is select_font_pairing("technical", "tech")


def test_find_pairing():
    assert find_pairing("Space Grotesk", "Inter").name == "Tech Startup"
    assert find_pairing("Comic Sans", "Inter") is None


def test_modular_scale_values():
    scale = generate_modular_scale(16, 1.25)
    assert list(scale) == list(SCALE_STEPS)
    assert scale["base"] == "1.000rem"
    assert scale["sm"] == "0.800rem"
    assert scale["xs"] == "0.640rem"
    assert scale["lg"] == "1.250rem"


@pytest.mark.parametrize("base,ratio", [(16, 1.25), (18, 1.2), (14, 1.618), (16, 1.067)])
def test_modular_scale_strictly_increasing(base, ratio):
    sizes = [float(v[:-3]) for v in generate_modular_scale(base, ratio).values()]
    assert sizes == sorted(sizes)
    assert len(set(sizes)) == len(sizes)
    assert generate_modular_scale(base, ratio)["base"] == f"{base / 16:.3f}rem"


@pytest.mark.parametrize("size,expected", [
    ("1.000rem", "1.5"),
    ("1.125rem", "1.5"),
    ("1.250rem", "1.4"),
    ("1.953rem", "1.3"),
    ("2.441rem", "1.2"),
    (0.8, "1.5"),
])
def test_line_height_bands(size, expected):
    assert calculate_line_height(size) == expected


def test_typography_system():
    system = generate_typography_system("technical", "tech")
    assert system.font_pairings.heading == "Space Grotesk"
    assert system.font_pairings.body == "Inter"
    assert system.weights == {"light": 300, "normal": 400, "medium": 500, "semibold": 600, "bold": 700}
    assert system.scale == generate_modular_scale(16, 1.25)


def test_google_fonts_url_dedupes_single_family():
    modern = FONT_PAIRINGS[0]
    url = generate_google_fonts_url(modern)
    assert url == "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap"


def test_google_fonts_url_two_families():
    system = generate_typography_system("technical", "tech")
    url = google_fonts_url_for(system)
    assert "family=Space+Grotesk:wght@400;500;600;700" in url
    assert "&family=Inter:wght@400;500" in url
    assert url.endswith("&display=swap")


def test_google_fonts_links():
    links = generate_google_fonts_links(generate_typography_system("technical", "tech"))
    lines = links.splitlines()
    assert len(lines) == 3
    assert lines[0] == '  <link rel="preconnect" href="https://fonts.googleapis.com">'
    assert "crossorigin" in lines[1]
    # ampersands between families are escaped inside the attribute
    assert "Space+Grotesk:wght@400;500;600;700&amp;family=Inter" in lines[2]


def test_css_properties():
    props = generate_css_properties(generate_typography_system("professional", "tech"))
    assert props["--font-heading"] == "Inter"
    assert props["--font-size-base"] == "1.000rem"
    assert props["--line-height-base"] == "1.5"
    assert props["--line-height-6xl"] == "1.2"
    assert props["--font-weight-bold"] == "700"


def test_default_scale_flags_small_text():
    report = validate_accessibility(generate_typography_system("professional", "tech"))
    assert not report.valid
    assert len(report.issues) == 1
    assert "14px" in report.issues[0]
    assert len(report.suggestions) == 1


def test_gentle_scale_passes_checks():
    report = validate_accessibility(generate_typography_system("professional", "tech", scale_ratio=1.125))
    assert report.valid
    assert report.issues == []


def test_small_base_is_flagged():
    report = validate_accessibility(generate_typography_system("professional", "tech", base_size=14))
    assert any("16px" in issue for issue in report.issues)


def test_catalog_is_read_only():
    pairing = select_font_pairing("technical", "tech")
    with pytest.raises(AttributeError):
        pairing.personality.append("retro")
    with pytest.raises(AttributeError):
        pairing.heading.weights.append(900)
    with pytest.raises(TypeError):
        SCALE_STEPS["7xl"] = 8


@pytest.mark.parametrize("base,ratio", [(16, 0), (16, -1.25), (16, 1), (0, 1.25), (-16, 1.25), (16, float("inf"))])
def test_modular_scale_rejects_flat_or_negative_scales(base, ratio):
    with pytest.raises(ValueError):
        generate_modular_scale(base, ratio)
