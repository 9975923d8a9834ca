import pytest
from PIL import Image

from sitegen.color_theory import generate_industry_palette, hex_to_rgb
from sitegen.palette_renderer import contrast_label, render_palette, render_palette_image, wcag_rating


@pytest.fixture
def palette():
    return generate_industry_palette("healthcare", style="minimal")


def test_render_palette_image_size_and_fill(palette):
    img = render_palette_image(palette, width=800, height=240)
    assert img.size == (800, 240)
    assert img.mode == "RGB"
    # middle of the first strip, below the role label and above the footer
    assert img.getpixel((49, 120)) == hex_to_rgb(palette.primary)


def test_render_palette_saves_png(tmp_path, palette):
    out = render_palette(palette, tmp_path / "nested" / "palette.png", width=640, height=200)
    assert out.exists()
    with Image.open(out) as img:
        assert img.size == (640, 200)


@pytest.mark.parametrize("ratio,rating", [(21, "AAA"), (7.0, "AAA"), (5.2, "AA"), (3.5, "AA Large"), (2.0, "Fail")])
def test_wcag_rating(ratio, rating):
    assert wcag_rating(ratio) == rating


def test_contrast_label():
    assert contrast_label("#000000") == "AAA 21.00:1 on white"
    assert contrast_label("#ffffff") == "AAA 21.00:1 on black"
