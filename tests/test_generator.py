import json
import logging
import re

import pytest

from sitegen.color_theory import darken_color, hex_to_hsl, hex_to_rgb
from sitegen.generator import (
    PROJECT_TYPE_SECTIONS,
    active_sections,
    generate_template,
)
from sitegen.models import ColorPreferences, ProjectRequirements


def _ids(template):
    return [c.id for c in template.components]


def _section_positions(html, *names):
    return [html.index(f'<section class="{name}"') for name in names]


def test_landing_with_hero_and_contact(make_requirements):
    template = generate_template(make_requirements(required_sections=("hero", "contact")))

    assert _ids(template) == ["button", "heading", "hero", "contact"]
    hero_at, contact_at = _section_positions(template.html, "hero", "contact")
    assert hero_at < contact_at
    for absent in ("about", "services", "pricing", "team"):
        assert f'<section class="{absent}"' not in template.html
    assert "--color-primary" in template.css


def test_unknown_industry_uses_tech_copy_and_default_hue(make_requirements):
    template = generate_template(make_requirements(industry="unknown_xyz", required_sections=("hero",)))

    assert "Transform your business with cutting-edge technology" in template.html
    assert template.design_tokens.colors.primary == "#3366cc"
    assert round(hex_to_hsl(template.design_tokens.colors.primary).h) == 220


def test_business_name_personalizes_copy(make_requirements):
    template = generate_template(make_requirements(business_name="Acme", required_sections=("about",)))
    assert "About Acme's Technology" in template.html
    assert "<title>Acme</title>" in template.html


def test_copy_is_html_escaped(make_requirements):
    template = generate_template(make_requirements(business_name="A&B <Co>", required_sections=("about",)))
    assert "A&amp;B &lt;Co&gt;" in template.html
    assert "<Co>" not in template.html


def test_components_follow_request_order_and_html_follows_page_order(make_requirements):
    req = make_requirements(required_sections=("contact", "hero", "hero", "bogus", "pricing"))
    template = generate_template(req)

    assert _ids(template) == ["button", "heading", "contact", "hero", "pricing"]
    hero_at, pricing_at, contact_at = _section_positions(template.html, "hero", "pricing", "contact")
    assert hero_at < pricing_at < contact_at


def test_project_type_defaults(make_requirements):
    template = generate_template(make_requirements(project_type="saas"))

    assert _ids(template)[2:] == PROJECT_TYPE_SECTIONS["saas"]
    positions = _section_positions(template.html, "hero", "services", "testimonials", "pricing", "contact")
    assert positions == sorted(positions)


def test_unknown_project_type_uses_landing_sections(make_requirements):
    req = make_requirements(project_type="intranet")
    assert active_sections(req) == PROJECT_TYPE_SECTIONS["landing"]


def test_only_unknown_sections_falls_back_to_showcase(make_requirements):
    template = generate_template(make_requirements(required_sections=("bogus",)))

    assert _ids(template) == ["button", "heading"]
    assert 'class="component-showcase"' in template.html
    assert 'data-component="button"' in template.html


def test_interactive_elements(make_requirements):
    req = make_requirements(
        required_sections=("contact",),
        interactive_elements=("chat_widget", "contact_form", "newsletter"),
    )
    template = generate_template(req)

    assert _ids(template) == ["button", "heading", "contact", "contact_form"]
    assert template.component("contact_form").type == "molecule"
    assert '<form class="contact-form"' in template.html


def test_atoms(make_requirements):
    template = generate_template(make_requirements(required_sections=("hero",)))
    button = template.component("button")
    heading = template.component("heading")

    assert button.type == "atom"
    assert [v.name for v in button.variants] == ["primary", "secondary", "outline"]
    assert [v.name for v in heading.variants] == ["h1", "h2", "h3"]
    assert darken_color(template.design_tokens.colors.primary, 10) in button.css


def test_hero_uses_cta_text(make_requirements):
    req = make_requirements(
        purpose="Generate leads and conversions",
        target_audience="Business professionals (B2B)",
        required_sections=("hero",),
    )
    html = generate_template(req).component("hero").html
    assert '<button class="btn btn-primary">Try It Free</button>' in html
    assert '<button class="btn btn-secondary">View Plans</button>' in html


def test_pricing_highlights_one_plan(make_requirements):
    html = generate_template(make_requirements(required_sections=("pricing",))).component("pricing").html
    assert html.count("pricing-card-highlighted") == 1
    assert html.count('<article class="pricing-card') == 3


def test_every_section_renders(make_requirements):
    sections = ("hero", "about", "services", "portfolio", "testimonials", "team", "pricing", "contact")
    for industry in ("tech", "finance", "healthcare", "education", "creative", "corporate"):
        template = generate_template(make_requirements(industry=industry, required_sections=sections))
        assert _ids(template)[2:] == list(sections)
        for component in template.components[2:]:
            assert component.type == "organism"
            assert component.css.strip()


def test_css_concatenates_component_css_in_order(make_requirements):
    template = generate_template(make_requirements(required_sections=("contact", "hero")))
    css = template.css
    assert css.index("box-sizing: border-box") < css.index(":root {") < css.index(".btn {")
    assert css.index(".contact {") < css.index(".hero {")


def test_name_description_and_id(make_requirements):
    req = make_requirements(
        project_type="portfolio",
        industry="creative",
        style_direction="bold",
        color_preferences=ColorPreferences(type="brand", values=("#ff6600",)),
    )
    template = generate_template(req)

    assert template.name == "Bold Portfolio Template"
    assert template.description == "A bold portfolio template designed for creative with brand color scheme."
    assert re.fullmatch(r"template-\d+-[0-9a-z]{9}", template.id)


def test_brand_color_seeds_primary(make_requirements):
    req = make_requirements(color_preferences=ColorPreferences(type="brand", values=("#2563EB",)))
    primary = generate_template(req).design_tokens.colors.primary
    for a, b in zip(hex_to_rgb(primary), hex_to_rgb("#2563eb")):
        assert abs(a - b) <= 1


def test_output_is_deterministic_except_id(make_requirements):
    req = make_requirements(required_sections=("hero", "services", "contact"))
    first, second = generate_template(req), generate_template(req)

    assert first.html == second.html
    assert first.css == second.css
    assert first.design_tokens == second.design_tokens


def test_accepts_camel_case_mapping():
    template = generate_template({"projectType": "blog", "industry": "education"})
    assert template.name == "Modern Blog Template"
    assert _ids(template)[2:] == PROJECT_TYPE_SECTIONS["blog"]


def test_template_is_json_serializable(make_requirements):
    template = generate_template(make_requirements())
    data = json.loads(template.model_dump_json(by_alias=True))

    assert set(data) == {"id", "name", "description", "html", "css", "designTokens", "components"}
    assert "borderRadius" in data["designTokens"]
    assert data["designTokens"]["typography"]["fontPairings"]["heading"] == "Inter"
    assert ProjectRequirements.model_validate({"projectType": "landing", "industry": "tech"})


def test_typography_advisories_are_logged(make_requirements, caplog):
    caplog.set_level(logging.WARNING, logger="sitegen.generator")
    generate_template(make_requirements())
    assert any("14px" in r.getMessage() for r in caplog.records)


def test_document_shell(make_requirements):
    html = generate_template(make_requirements()).html
    assert html.startswith("<!DOCTYPE html>")
    assert "fonts.googleapis.com/css2?family=Inter" in html
    assert '<meta name="description" content="A modern landing template' in html
    assert html.rstrip().endswith("</html>")


@pytest.mark.parametrize("field", ["project_type", "industry"])
def test_blank_required_fields_are_rejected(field):
    data = {"project_type": "landing", "industry": "tech", field: "  "}
    with pytest.raises(ValueError):
        ProjectRequirements(**data)
