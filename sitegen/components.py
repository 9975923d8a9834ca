"""
components.py — HTML/CSS renderers for template components.

  atoms      — button, heading
  organisms  — hero, about, services, portfolio, testimonials, team,
               pricing, contact (one page section each)
  molecules  — contact_form (the only interactive element with markup)

Every renderer is a pure function of (requirements, tokens). Section copy
comes from the industry content library; every free-text string goes
through generate_personalized_content and is HTML-escaped before it is
placed in markup. CSS is scoped by a per-component class prefix and
interpolates token values directly.

Usage:
    from sitegen.components import render_section

    hero = render_section("hero", requirements, tokens)
"""

from __future__ import annotations

import logging
from html import escape
from typing import Callable, Dict, List, Optional

from .color_theory import darken_color, get_accessible_text_color
from .content_strategy import generate_cta_text, generate_personalized_content
from .design_system import font_stack
from .industry_content import get_section_content
from .models import ComponentDefinition, ComponentVariant, DesignTokens, ProjectRequirements
from .typography import calculate_line_height

logger = logging.getLogger(__name__)

MUTED_TEXT = "#6b7280"
SURFACE = "#f9fafb"

SectionRenderer = Callable[[ProjectRequirements, DesignTokens], ComponentDefinition]


def _copy(requirements: ProjectRequirements, text: str) -> str:
    """Personalize then escape one piece of free text."""
    return escape(generate_personalized_content(text, requirements), quote=False)


def _attr(text: str) -> str:
    return escape(text, quote=True)


def _section_header(prefix: str, title: str, subtitle: str) -> str:
    return (
        f'    <div class="{prefix}-header">\n'
        f'      <h2 class="{prefix}-title">{title}</h2>\n'
        f'      <p class="{prefix}-subtitle">{subtitle}</p>\n'
        f"    </div>"
    )


def _section_header_css(prefix: str, tokens: DesignTokens) -> str:
    typo = tokens.typography
    return f"""\
.{prefix}-header {{
  text-align: center;
  max-width: 720px;
  margin: 0 auto {tokens.spacing['xl']};
}}

.{prefix}-title {{
  font-family: {font_stack(typo.font_pairings.heading)};
  font-size: {typo.scale['4xl']};
  font-weight: {typo.weights['bold']};
  line-height: {calculate_line_height(typo.scale['4xl'])};
  color: {tokens.colors.primary};
  margin-bottom: {tokens.spacing['sm']};
}}

.{prefix}-subtitle {{
  font-size: {typo.scale['lg']};
  color: {MUTED_TEXT};
}}"""


def _section_shell_css(prefix: str, tokens: DesignTokens, background: str = "transparent") -> str:
    return f"""\
.{prefix} {{
  padding: {tokens.spacing['3xl']} {tokens.spacing['sm']};
  background: {background};
}}

.{prefix}-container {{
  max-width: 1200px;
  margin: 0 auto;
}}"""


# ── Atoms ──────────────────────────────────────────────────────────────────────

def button(tokens: DesignTokens) -> ComponentDefinition:
    colors = tokens.colors
    typo = tokens.typography
    css = f"""\
.btn {{
  display: inline-flex;
  align-items: center;
  justify-content: center;
  padding: 0.75rem 1.5rem;
  font-family: {font_stack(typo.font_pairings.body)};
  font-weight: {typo.weights['medium']};
  font-size: {typo.scale['base']};
  line-height: 1.5;
  border: none;
  border-radius: {tokens.border_radius['md']};
  cursor: pointer;
  transition: all 0.2s ease-in-out;
  text-decoration: none;
}}

.btn-primary {{
  background-color: {colors.primary};
  color: {get_accessible_text_color(colors.primary)};
  box-shadow: {tokens.shadows['sm']};
}}

.btn-primary:hover {{
  background-color: {darken_color(colors.primary, 10)};
  box-shadow: {tokens.shadows['md']};
  transform: translateY(-1px);
}}

.btn-secondary {{
  background-color: {colors.secondary};
  color: {get_accessible_text_color(colors.secondary)};
  box-shadow: {tokens.shadows['sm']};
}}

.btn-outline {{
  background-color: transparent;
  color: {colors.primary};
  border: 2px solid {colors.primary};
}}"""

    return ComponentDefinition(
        id="button",
        name="Button",
        type="atom",
        html='<button class="btn btn-primary">{{text}}</button>',
        css=css,
        variants=[
            ComponentVariant(name="primary", properties={"class": "btn-primary"}),
            ComponentVariant(name="secondary", properties={"class": "btn-secondary"}),
            ComponentVariant(name="outline", properties={"class": "btn-outline"}),
        ],
    )


def heading(tokens: DesignTokens) -> ComponentDefinition:
    typo = tokens.typography
    css = f"""\
.heading {{
  font-family: {font_stack(typo.font_pairings.heading)};
  font-weight: {typo.weights['semibold']};
  line-height: 1.2;
  color: {tokens.colors.primary};
  margin-bottom: 1rem;
}}"""

    return ComponentDefinition(
        id="heading",
        name="Heading",
        type="atom",
        html='<h1 class="heading">{{text}}</h1>',
        css=css,
        variants=[
            ComponentVariant(name="h1", properties={"tag": "h1"}),
            ComponentVariant(name="h2", properties={"tag": "h2"}),
            ComponentVariant(name="h3", properties={"tag": "h3"}),
        ],
    )


def generate_atoms(tokens: DesignTokens) -> List[ComponentDefinition]:
    return [button(tokens), heading(tokens)]


# ── Organisms ──────────────────────────────────────────────────────────────────

def hero(requirements: ProjectRequirements, tokens: DesignTokens) -> ComponentDefinition:
    content = get_section_content(requirements.industry, "hero")
    cta = generate_cta_text(requirements)
    colors = tokens.colors
    typo = tokens.typography

    html = f"""\
<section class="hero">
  <div class="hero-container">
    <div class="hero-content">
      <h1 class="hero-title">{_copy(requirements, content['title'])}</h1>
      <p class="hero-subtitle">{_copy(requirements, content['subtitle'])}</p>
      <div class="hero-actions">
        <button class="btn btn-primary">{escape(cta.primary, quote=False)}</button>
        <button class="btn btn-secondary">{escape(cta.secondary, quote=False)}</button>
      </div>
    </div>
    <div class="hero-image" role="img" aria-label="{_attr(content['visual_placeholder'])}">
      <span class="hero-image-label">{escape(content['visual_placeholder'], quote=False)}</span>
    </div>
  </div>
</section>"""

    css = f"""\
.hero {{
  padding: {tokens.spacing['2xl']} {tokens.spacing['sm']};
  background: linear-gradient(135deg, {colors.primary}10, {colors.secondary}10);
}}

.hero-container {{
  max-width: 1200px;
  margin: 0 auto;
  display: grid;
  grid-template-columns: 1fr 1fr;
  gap: {tokens.spacing['xl']};
  align-items: center;
}}

.hero-title {{
  font-family: {font_stack(typo.font_pairings.heading)};
  font-size: {typo.scale['5xl']};
  font-weight: {typo.weights['bold']};
  line-height: 1.1;
  margin-bottom: {tokens.spacing['md']};
  color: {colors.primary};
}}

.hero-subtitle {{
  font-size: {typo.scale['xl']};
  line-height: 1.6;
  margin-bottom: {tokens.spacing['lg']};
  color: {MUTED_TEXT};
}}

.hero-actions {{
  display: flex;
  gap: {tokens.spacing['sm']};
  flex-wrap: wrap;
}}

.hero-image {{
  min-height: 320px;
  display: flex;
  align-items: center;
  justify-content: center;
  border-radius: {tokens.border_radius['xl']};
  background: {colors.neutral};
  box-shadow: {tokens.shadows['lg']};
}}

.hero-image-label {{
  color: {get_accessible_text_color(colors.neutral)};
  font-size: {typo.scale['sm']};
}}

@media (max-width: 768px) {{
  .hero-container {{
    grid-template-columns: 1fr;
    text-align: center;
  }}

  .hero-title {{
    font-size: {typo.scale['3xl']};
  }}
}}"""

    return ComponentDefinition(id="hero", name="Hero Section", type="organism", html=html, css=css)


def about(requirements: ProjectRequirements, tokens: DesignTokens) -> ComponentDefinition:
    content = get_section_content(requirements.industry, "about")
    typo = tokens.typography

    features: List[str] = []
    for n in (1, 2, 3):
        title = content.get(f"feature{n}_title")
        if not title:
            continue
        description = content.get(f"feature{n}_description", "")
        features.append(
            f'      <div class="about-feature">\n'
            f'        <h3 class="about-feature-title">{_copy(requirements, title)}</h3>\n'
            f'        <p class="about-feature-description">{_copy(requirements, description)}</p>\n'
            f"      </div>"
        )

    items_html = "\n".join(features)
    html = f"""\
<section class="about" id="about">
  <div class="about-container">
    <div class="about-header">
      <h2 class="about-title">{_copy(requirements, content['title'])}</h2>
      <p class="about-subtitle">{_copy(requirements, content['description'])}</p>
    </div>
    <div class="about-features">
{items_html}
    </div>
  </div>
</section>"""

    css = f"""\
{_section_shell_css("about", tokens)}

{_section_header_css("about", tokens)}

.about-features {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(240px, 1fr));
  gap: {tokens.spacing['lg']};
}}

.about-feature {{
  padding: {tokens.spacing['lg']};
  border-top: 4px solid {tokens.colors.accent};
  border-radius: {tokens.border_radius['lg']};
  background: {SURFACE};
}}

.about-feature-title {{
  font-family: {font_stack(typo.font_pairings.heading)};
  font-size: {typo.scale['xl']};
  font-weight: {typo.weights['semibold']};
  margin-bottom: {tokens.spacing['xs']};
}}"""

    return ComponentDefinition(id="about", name="About Section", type="organism", html=html, css=css)


def services(requirements: ProjectRequirements, tokens: DesignTokens) -> ComponentDefinition:
    content = get_section_content(requirements.industry, "services")
    typo = tokens.typography

    cards: List[str] = []
    for service in content["services"]:
        features = "\n".join(
            f'          <li>{_copy(requirements, item)}</li>' for item in service["features"]
        )
        cards.append(
            f'      <article class="service-card" data-icon="{_attr(service["icon"])}">\n'
            f'        <h3 class="service-title">{_copy(requirements, service["title"])}</h3>\n'
            f'        <p class="service-description">{_copy(requirements, service["description"])}</p>\n'
            f'        <ul class="service-features">\n{features}\n        </ul>\n'
            f"      </article>"
        )

    items_html = "\n".join(cards)
    html = f"""\
<section class="services" id="services">
  <div class="services-container">
{_section_header("services", _copy(requirements, content['title']), _copy(requirements, content['subtitle']))}
    <div class="services-grid">
{items_html}
    </div>
  </div>
</section>"""

    css = f"""\
{_section_shell_css("services", tokens, SURFACE)}

{_section_header_css("services", tokens)}

.services-grid {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(260px, 1fr));
  gap: {tokens.spacing['lg']};
}}

.service-card {{
  padding: {tokens.spacing['lg']};
  background: #ffffff;
  border-radius: {tokens.border_radius['lg']};
  box-shadow: {tokens.shadows['md']};
}}

.service-title {{
  font-family: {font_stack(typo.font_pairings.heading)};
  font-size: {typo.scale['xl']};
  color: {tokens.colors.primary};
  margin-bottom: {tokens.spacing['xs']};
}}

.service-features {{
  margin-top: {tokens.spacing['sm']};
  padding-left: {tokens.spacing['md']};
  color: {MUTED_TEXT};
}}"""

    return ComponentDefinition(id="services", name="Services Section", type="organism", html=html, css=css)


def portfolio(requirements: ProjectRequirements, tokens: DesignTokens) -> ComponentDefinition:
    content = get_section_content(requirements.industry, "portfolio")
    typo = tokens.typography

    cards: List[str] = []
    for project in content["projects"]:
        tags = "".join(
            f'<span class="portfolio-tag">{escape(tag, quote=False)}</span>' for tag in project["tags"]
        )
        metrics = (
            f'\n        <p class="portfolio-metrics">{escape(project["metrics"], quote=False)}</p>'
            if project.get("metrics") else ""
        )
        cards.append(
            f'      <article class="portfolio-card">\n'
            f'        <span class="portfolio-category">{escape(project["category"], quote=False)}</span>\n'
            f'        <h3 class="portfolio-project-title">{_copy(requirements, project["title"])}</h3>\n'
            f'        <p class="portfolio-description">{_copy(requirements, project["description"])}</p>'
            f"{metrics}\n"
            f'        <div class="portfolio-tags">{tags}</div>\n'
            f"      </article>"
        )

    items_html = "\n".join(cards)
    html = f"""\
<section class="portfolio" id="portfolio">
  <div class="portfolio-container">
{_section_header("portfolio", _copy(requirements, content['title']), _copy(requirements, content['subtitle']))}
    <div class="portfolio-grid">
{items_html}
    </div>
  </div>
</section>"""

    css = f"""\
{_section_shell_css("portfolio", tokens)}

{_section_header_css("portfolio", tokens)}

.portfolio-grid {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
  gap: {tokens.spacing['lg']};
}}

.portfolio-card {{
  padding: {tokens.spacing['lg']};
  border: 1px solid {tokens.colors.neutral};
  border-radius: {tokens.border_radius['lg']};
}}

.portfolio-category {{
  font-size: {typo.scale['sm']};
  font-weight: {typo.weights['semibold']};
  color: {tokens.colors.accent};
  text-transform: uppercase;
}}

.portfolio-project-title {{
  font-family: {font_stack(typo.font_pairings.heading)};
  font-size: {typo.scale['xl']};
  margin: {tokens.spacing['xs']} 0;
}}

.portfolio-metrics {{
  margin-top: {tokens.spacing['sm']};
  font-weight: {typo.weights['bold']};
  color: {tokens.colors.primary};
}}

.portfolio-tags {{
  display: flex;
  flex-wrap: wrap;
  gap: {tokens.spacing['xs']};
  margin-top: {tokens.spacing['sm']};
}}

.portfolio-tag {{
  padding: 0.25rem 0.75rem;
  font-size: {typo.scale['xs']};
  border-radius: {tokens.border_radius['sm']};
  background: {SURFACE};
}}"""

    return ComponentDefinition(id="portfolio", name="Portfolio Section", type="organism", html=html, css=css)


def testimonials(requirements: ProjectRequirements, tokens: DesignTokens) -> ComponentDefinition:
    content = get_section_content(requirements.industry, "testimonials")
    typo = tokens.typography

    cards: List[str] = []
    for item in content["testimonials"]:
        rating = int(item.get("rating", 5))
        cards.append(
            f'      <figure class="testimonial-card">\n'
            f'        <div class="testimonial-rating" aria-label="{rating} out of 5 stars">{"★" * rating}</div>\n'
            f'        <blockquote class="testimonial-content">{_copy(requirements, item["content"])}</blockquote>\n'
            f'        <figcaption class="testimonial-author">\n'
            f'          <strong>{escape(item["name"], quote=False)}</strong>\n'
            f'          <span>{escape(item["role"], quote=False)}, {escape(item["company"], quote=False)}</span>\n'
            f"        </figcaption>\n"
            f"      </figure>"
        )

    items_html = "\n".join(cards)
    html = f"""\
<section class="testimonials" id="testimonials">
  <div class="testimonials-container">
{_section_header("testimonials", _copy(requirements, content['title']), _copy(requirements, content['subtitle']))}
    <div class="testimonials-grid">
{items_html}
    </div>
  </div>
</section>"""

    css = f"""\
{_section_shell_css("testimonials", tokens, SURFACE)}

{_section_header_css("testimonials", tokens)}

.testimonials-grid {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(280px, 1fr));
  gap: {tokens.spacing['lg']};
}}

.testimonial-card {{
  padding: {tokens.spacing['lg']};
  background: #ffffff;
  border-radius: {tokens.border_radius['lg']};
  box-shadow: {tokens.shadows['sm']};
}}

.testimonial-rating {{
  color: {tokens.colors.semantic.warning};
  margin-bottom: {tokens.spacing['xs']};
}}

.testimonial-content {{
  font-style: italic;
  line-height: {calculate_line_height(typo.scale['base'])};
  margin-bottom: {tokens.spacing['sm']};
}}

.testimonial-author {{
  display: flex;
  flex-direction: column;
  font-size: {typo.scale['sm']};
  color: {MUTED_TEXT};
}}"""

    return ComponentDefinition(
        id="testimonials", name="Testimonials Section", type="organism", html=html, css=css,
    )


def _initials(name: str) -> str:
    parts = [p for p in name.replace(".", " ").split() if p[:1].isalpha()]
    return "".join(p[0] for p in parts[-2:]).upper()


def team(requirements: ProjectRequirements, tokens: DesignTokens) -> ComponentDefinition:
    content = get_section_content(requirements.industry, "team")
    colors = tokens.colors
    typo = tokens.typography

    cards: List[str] = []
    for member in content["members"]:
        expertise = "".join(
            f'<li>{escape(skill, quote=False)}</li>' for skill in member["expertise"]
        )
        cards.append(
            f'      <article class="team-member">\n'
            f'        <div class="team-avatar" aria-hidden="true">{escape(_initials(member["name"]), quote=False)}</div>\n'
            f'        <h3 class="team-name">{escape(member["name"], quote=False)}</h3>\n'
            f'        <p class="team-role">{escape(member["role"], quote=False)}</p>\n'
            f'        <p class="team-description">{_copy(requirements, member["description"])}</p>\n'
            f'        <ul class="team-expertise">{expertise}</ul>\n'
            f"      </article>"
        )

    items_html = "\n".join(cards)
    html = f"""\
<section class="team" id="team">
  <div class="team-container">
{_section_header("team", _copy(requirements, content['title']), _copy(requirements, content['subtitle']))}
    <div class="team-grid">
{items_html}
    </div>
  </div>
</section>"""

    css = f"""\
{_section_shell_css("team", tokens)}

{_section_header_css("team", tokens)}

.team-grid {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(260px, 1fr));
  gap: {tokens.spacing['lg']};
  text-align: center;
}}

.team-avatar {{
  width: 96px;
  height: 96px;
  margin: 0 auto {tokens.spacing['sm']};
  display: flex;
  align-items: center;
  justify-content: center;
  border-radius: 50%;
  background: {colors.primary};
  color: {get_accessible_text_color(colors.primary)};
  font-size: {typo.scale['2xl']};
  font-weight: {typo.weights['bold']};
}}

.team-name {{
  font-family: {font_stack(typo.font_pairings.heading)};
  font-size: {typo.scale['xl']};
}}

.team-role {{
  color: {colors.accent};
  font-weight: {typo.weights['medium']};
  margin-bottom: {tokens.spacing['xs']};
}}

.team-expertise {{
  list-style: none;
  display: flex;
  flex-wrap: wrap;
  justify-content: center;
  gap: {tokens.spacing['xs']};
  margin-top: {tokens.spacing['sm']};
  font-size: {typo.scale['xs']};
  color: {MUTED_TEXT};
}}"""

    return ComponentDefinition(id="team", name="Team Section", type="organism", html=html, css=css)


def pricing(requirements: ProjectRequirements, tokens: DesignTokens) -> ComponentDefinition:
    content = get_section_content(requirements.industry, "pricing")
    cta = generate_cta_text(requirements)
    colors = tokens.colors
    typo = tokens.typography

    cards: List[str] = []
    for plan in content["plans"]:
        highlighted = bool(plan.get("highlighted"))
        card_class = "pricing-card pricing-card-highlighted" if highlighted else "pricing-card"
        button_class = "btn btn-primary" if highlighted else "btn btn-outline"
        features = "\n".join(
            f'          <li>{_copy(requirements, item)}</li>' for item in plan["features"]
        )
        cards.append(
            f'      <article class="{card_class}">\n'
            f'        <h3 class="pricing-name">{escape(plan["name"], quote=False)}</h3>\n'
            f'        <p class="pricing-price">{escape(plan["price"], quote=False)}'
            f'<span class="pricing-period">/{escape(plan["period"], quote=False)}</span></p>\n'
            f'        <p class="pricing-description">{_copy(requirements, plan["description"])}</p>\n'
            f'        <ul class="pricing-features">\n{features}\n        </ul>\n'
            f'        <button class="{button_class}">{escape(cta.primary, quote=False)}</button>\n'
            f"      </article>"
        )

    items_html = "\n".join(cards)
    html = f"""\
<section class="pricing" id="pricing">
  <div class="pricing-container">
{_section_header("pricing", _copy(requirements, content['title']), _copy(requirements, content['subtitle']))}
    <div class="pricing-grid">
{items_html}
    </div>
  </div>
</section>"""

    css = f"""\
{_section_shell_css("pricing", tokens, SURFACE)}

{_section_header_css("pricing", tokens)}

.pricing-grid {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(280px, 1fr));
  gap: {tokens.spacing['lg']};
  align-items: stretch;
}}

.pricing-card {{
  display: flex;
  flex-direction: column;
  padding: {tokens.spacing['lg']};
  background: #ffffff;
  border: 1px solid {colors.neutral};
  border-radius: {tokens.border_radius['xl']};
}}

.pricing-card-highlighted {{
  border: 2px solid {colors.primary};
  box-shadow: {tokens.shadows['xl']};
}}

.pricing-price {{
  font-family: {font_stack(typo.font_pairings.heading)};
  font-size: {typo.scale['3xl']};
  font-weight: {typo.weights['bold']};
  color: {colors.primary};
}}

.pricing-period {{
  font-size: {typo.scale['sm']};
  color: {MUTED_TEXT};
}}

.pricing-features {{
  flex: 1;
  margin: {tokens.spacing['md']} 0;
  padding-left: {tokens.spacing['md']};
}}"""

    return ComponentDefinition(id="pricing", name="Pricing Section", type="organism", html=html, css=css)


def contact(requirements: ProjectRequirements, tokens: DesignTokens) -> ComponentDefinition:
    content = get_section_content(requirements.industry, "contact")
    typo = tokens.typography

    html = f"""\
<section class="contact" id="contact">
  <div class="contact-container">
    <div class="contact-header">
      <h2 class="contact-title">{_copy(requirements, content['title'])}</h2>
      <p class="contact-subtitle">{_copy(requirements, content['description'])}</p>
    </div>
    <ul class="contact-details">
      <li><span class="contact-label">Phone</span> {escape(content['phone'], quote=False)}</li>
      <li><span class="contact-label">Email</span> <a href="mailto:{_attr(content['email'])}">{escape(content['email'], quote=False)}</a></li>
      <li><span class="contact-label">Address</span> {escape(content['address'], quote=False)}</li>
    </ul>
  </div>
</section>"""

    css = f"""\
{_section_shell_css("contact", tokens)}

{_section_header_css("contact", tokens)}

.contact-details {{
  list-style: none;
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(220px, 1fr));
  gap: {tokens.spacing['md']};
  text-align: center;
}}

.contact-label {{
  display: block;
  font-size: {typo.scale['sm']};
  font-weight: {typo.weights['semibold']};
  color: {tokens.colors.accent};
  text-transform: uppercase;
}}

.contact-details a {{
  color: {tokens.colors.primary};
}}"""

    return ComponentDefinition(id="contact", name="Contact Section", type="organism", html=html, css=css)


# ── Interactive molecules ──────────────────────────────────────────────────────

def contact_form(requirements: ProjectRequirements, tokens: DesignTokens) -> ComponentDefinition:
    cta = generate_cta_text(requirements)
    colors = tokens.colors

    html = f"""\
<form class="contact-form" method="post">
  <label class="form-field">
    <span>Name</span>
    <input type="text" name="name" required />
  </label>
  <label class="form-field">
    <span>Email</span>
    <input type="email" name="email" required />
  </label>
  <label class="form-field">
    <span>Message</span>
    <textarea name="message" rows="5" required></textarea>
  </label>
  <button type="submit" class="btn btn-primary">{escape(cta.secondary, quote=False)}</button>
</form>"""

    css = f"""\
.contact-form {{
  display: flex;
  flex-direction: column;
  gap: {tokens.spacing['sm']};
  max-width: 560px;
  margin: {tokens.spacing['lg']} auto 0;
}}

.form-field {{
  display: flex;
  flex-direction: column;
  gap: 0.25rem;
  font-weight: {tokens.typography.weights['medium']};
}}

.form-field input,
.form-field textarea {{
  padding: 0.75rem;
  font: inherit;
  border: 1px solid {colors.neutral};
  border-radius: {tokens.border_radius['md']};
}}

.form-field input:focus,
.form-field textarea:focus {{
  outline: 2px solid {colors.primary};
  outline-offset: 1px;
}}"""

    return ComponentDefinition(id="contact_form", name="Contact Form", type="molecule", html=html, css=css)


# ── Dispatch ───────────────────────────────────────────────────────────────────

SECTION_RENDERERS: Dict[str, SectionRenderer] = {
    "hero": hero,
    "about": about,
    "services": services,
    "portfolio": portfolio,
    "testimonials": testimonials,
    "team": team,
    "pricing": pricing,
    "contact": contact,
}

# Other interactive element ids render nothing
INTERACTIVE_RENDERERS: Dict[str, SectionRenderer] = {
    "contact_form": contact_form,
}


def render_section(
    section_id: str,
    requirements: ProjectRequirements,
    tokens: DesignTokens,
) -> Optional[ComponentDefinition]:
    renderer = SECTION_RENDERERS.get(section_id)
    if renderer is None:
        logger.debug(f"Skipping unknown section {section_id!r}")
        return None
    return renderer(requirements, tokens)


def render_interactive(
    element_id: str,
    requirements: ProjectRequirements,
    tokens: DesignTokens,
) -> Optional[ComponentDefinition]:
    renderer = INTERACTIVE_RENDERERS.get(element_id)
    if renderer is None:
        logger.debug(f"No markup for interactive element {element_id!r}")
        return None
    return renderer(requirements, tokens)
