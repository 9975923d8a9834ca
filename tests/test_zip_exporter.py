import json
import zipfile

import pytest
from PIL import Image

from sitegen.generator import generate_template
from sitegen.zip_exporter import create_template_zip, slugify, write_template_files


@pytest.fixture
def template(make_requirements):
    return generate_template(make_requirements(required_sections=("hero", "contact")))


@pytest.mark.parametrize("name,expected", [
    ("Modern Landing Template", "modern-landing-template"),
    ("Acme & Sons, Ltd.", "acme-sons-ltd"),
    ("!!!", "template"),
])
def test_slugify(name, expected):
    assert slugify(name) == expected


def test_write_template_files(tmp_path, template):
    out = tmp_path / "site"
    files = write_template_files(template, out)

    assert files.html.read_text(encoding="utf-8") == template.html
    assert files.css.read_text(encoding="utf-8") == template.css

    tokens = json.loads(files.tokens.read_text(encoding="utf-8"))
    assert tokens["colors"]["primary"] == template.design_tokens.colors.primary
    assert "borderRadius" in tokens

    data = json.loads(files.template.read_text(encoding="utf-8"))
    assert data["id"] == template.id
    assert "designTokens" in data

    with Image.open(files.palette_png) as img:
        assert img.format == "PNG"


def test_write_without_preview(tmp_path, template):
    files = write_template_files(template, tmp_path, with_preview=False)
    assert files.palette_png is None
    assert not (tmp_path / "palette.png").exists()


def test_create_template_zip(tmp_path, template):
    files = write_template_files(template, tmp_path)
    zip_path = create_template_zip(template, tmp_path, files)

    assert zip_path == tmp_path / "modern-landing-template.zip"
    with zipfile.ZipFile(zip_path) as zf:
        assert sorted(zf.namelist()) == [
            "preview/palette.png",
            "site/index.html",
            "site/styles.css",
            "tokens/design-tokens.json",
            "tokens/template.json",
        ]


def test_zip_failure_returns_none(tmp_path, template):
    files = write_template_files(template, tmp_path / "site", with_preview=False)
    assert create_template_zip(template, tmp_path / "missing" / "dir", files) is None
