"""
Generator — turns ProjectRequirements into a complete GeneratedTemplate.

One linear, synchronous pipeline:

  1. design system  — palette, typography, spacing, radius, shadows
  2. components     — 2 atoms, one organism per active section, interactive
                      molecules
  3. html           — full document, sections in canonical page order
  4. css            — reset + :root tokens + every component's CSS

Output is deterministic for equal input except for the template id.
"""

from __future__ import annotations

import logging
import random
import string
import time
from html import escape
from typing import Dict, List, Optional, Union

from .color_theory import AA_CONTRAST
from .components import generate_atoms, render_interactive, render_section
from .design_system import build_design_tokens, generate_reset_css, generate_token_css
from .models import ComponentDefinition, DesignTokens, GeneratedTemplate, ProjectRequirements
from .typography import ROOT_FONT_SIZE, generate_google_fonts_links, validate_accessibility

logger = logging.getLogger(__name__)

# Page order of organisms, independent of the order sections were requested in
SECTION_ORDER = (
    "hero", "about", "services", "portfolio", "testimonials", "team", "pricing", "contact",
)

DEFAULT_PROJECT_TYPE = "landing"

PROJECT_TYPE_SECTIONS: Dict[str, List[str]] = {
    "landing":   ["hero", "about", "services", "contact"],
    "portfolio": ["hero", "about", "portfolio", "testimonials", "contact"],
    "ecommerce": ["hero", "services", "testimonials", "pricing", "contact"],
    "saas":      ["hero", "services", "pricing", "testimonials", "contact"],
    "blog":      ["hero", "about", "contact"],
    "corporate": ["hero", "about", "services", "team", "testimonials", "contact"],
}

_ID_ALPHABET = string.digits + string.ascii_lowercase


# ── Pipeline steps ─────────────────────────────────────────────────────────────

def generate_design_system(
    requirements: ProjectRequirements,
    scale_ratio: float = 1.25,
    min_contrast: float = AA_CONTRAST,
    base_font_size: float = ROOT_FONT_SIZE,
) -> DesignTokens:
    tokens = build_design_tokens(
        requirements,
        scale_ratio=scale_ratio,
        min_contrast=min_contrast,
        base_font_size=base_font_size,
    )

    report = validate_accessibility(tokens.typography)
    for issue in report.issues:
        logger.warning(f"Typography: {issue}")

    return tokens


def active_sections(requirements: ProjectRequirements) -> List[str]:
    """
    Sections to render: the requested ones in request order (duplicates
    dropped), or the project type's default list when none were requested.
    """
    if requirements.required_sections:
        return list(dict.fromkeys(requirements.required_sections))

    project_type = requirements.project_type
    if project_type not in PROJECT_TYPE_SECTIONS:
        logger.debug(f"No default sections for project type {project_type!r}, using {DEFAULT_PROJECT_TYPE}")
    return list(PROJECT_TYPE_SECTIONS.get(project_type, PROJECT_TYPE_SECTIONS[DEFAULT_PROJECT_TYPE]))


def generate_components(
    requirements: ProjectRequirements,
    tokens: DesignTokens,
) -> List[ComponentDefinition]:
    components = generate_atoms(tokens)

    for section_id in active_sections(requirements):
        component = render_section(section_id, requirements, tokens)
        if component:
            components.append(component)

    for element_id in requirements.interactive_elements:
        component = render_interactive(element_id, requirements, tokens)
        if component:
            components.append(component)

    return components


def generate_css(tokens: DesignTokens, components: List[ComponentDefinition]) -> str:
    parts = [generate_reset_css(), generate_token_css(tokens)]
    parts += [c.css for c in components]
    return "\n\n".join(parts)


def _component_showcase(components: List[ComponentDefinition]) -> str:
    items = "\n".join(
        f'  <div class="showcase-item" data-component="{escape(c.id)}">\n'
        f'    <h2 class="heading">{escape(c.name, quote=False)}</h2>\n'
        f"{c.html}\n"
        f"  </div>"
        for c in components
    )
    return f'<main class="component-showcase">\n{items}\n</main>'


def _page_body(requirements: ProjectRequirements, components: List[ComponentDefinition]) -> str:
    by_id = {c.id: c for c in components}
    active = set(active_sections(requirements))

    sections = [by_id[s].html for s in SECTION_ORDER if s in active and s in by_id]
    if not sections:
        sections = [c.html for c in components if c.type == "organism"]
    if not sections:
        return _component_showcase(components)

    molecules = [c.html for c in components if c.type == "molecule"]
    return "\n\n".join(sections + molecules)


def generate_html(
    requirements: ProjectRequirements,
    components: List[ComponentDefinition],
    tokens: DesignTokens,
    title: str = "",
    description: str = "",
) -> str:
    page_title = requirements.business_name or title or f"{requirements.industry} {requirements.project_type}"

    return f"""\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="description" content="{escape(description)}">
  <title>{escape(page_title, quote=False)}</title>
{generate_google_fonts_links(tokens.typography)}
  <style>
{generate_css(tokens, components)}
  </style>
</head>
<body>
{_page_body(requirements, components)}
</body>
</html>"""


# ── Naming helpers ─────────────────────────────────────────────────────────────

def generate_id() -> str:
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"template-{int(time.time() * 1000)}-{suffix}"


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def generate_template_name(requirements: ProjectRequirements) -> str:
    style = requirements.style_direction or "modern"
    project_type = requirements.project_type or "website"
    return f"{_capitalize(style)} {_capitalize(project_type)} Template"


def generate_description(requirements: ProjectRequirements) -> str:
    return (
        f"A {requirements.style_direction or 'modern'} {requirements.project_type or 'website'} "
        f"template designed for {requirements.industry or 'business'} "
        f"with {requirements.color_preferences.type} color scheme."
    )


# ── Entry point ────────────────────────────────────────────────────────────────

def generate_template(
    requirements: Union[ProjectRequirements, dict],
    scale_ratio: float = 1.25,
    min_contrast: float = AA_CONTRAST,
    base_font_size: float = ROOT_FONT_SIZE,
) -> GeneratedTemplate:
    """
    Generate a complete website template.

    Args:
        requirements:   ProjectRequirements (or a dict with the same fields,
                        camelCase or snake_case)
        scale_ratio:    Modular type-scale ratio
        min_contrast:   Threshold for the palette accessibility pass
        base_font_size: Modular-scale base in px

    Returns:
        GeneratedTemplate with html, css, design tokens and components
    """
    if isinstance(requirements, dict):
        requirements = ProjectRequirements.model_validate(requirements)

    tokens = generate_design_system(
        requirements,
        scale_ratio=scale_ratio,
        min_contrast=min_contrast,
        base_font_size=base_font_size,
    )
    components = generate_components(requirements, tokens)

    name = generate_template_name(requirements)
    description = generate_description(requirements)
    html = generate_html(requirements, components, tokens, title=name, description=description)
    css = generate_css(tokens, components)

    template = GeneratedTemplate(
        id=generate_id(),
        name=name,
        description=description,
        html=html,
        css=css,
        design_tokens=tokens,
        components=components,
    )
    logger.info(f"Generated {template.id}: {len(components)} component(s)")
    return template
