"""
content_strategy.py — Purpose- and audience-driven copy rules.

Maps the site's stated purpose to a content strategy (tone, urgency, CTA
style, messaging) and the target audience to modifiers (language
complexity, decision speed, trust factors, pain points), then rewrites
canned copy accordingly.

Every rule is a plain regex rewrite with no grammatical awareness; the
rewrites run in a fixed order and later rules see earlier output.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from pydantic.alias_generators import to_camel

DEFAULT_PURPOSE = "Generate leads and conversions"
DEFAULT_AUDIENCE = "General consumers (B2C)"
CONSUMER_AUDIENCE = "General consumers (B2C)"


@dataclass(frozen=True)
class Messaging:
    primary_value: str
    secondary_values: Tuple[str, ...] = ()
    risk_mitigators: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ContentStrategy:
    tone: str        # professional / friendly / authoritative / approachable / technical
    urgency: str     # low / medium / high
    focus_area: str  # credibility / innovation / results / personal / expertise
    cta_style: str   # soft / direct / urgent / consultative
    messaging: Messaging


@dataclass(frozen=True)
class AudienceModifier:
    language_complexity: str  # simple / moderate / advanced
    decision_speed: str       # fast / moderate / slow
    trust_factors: Tuple[str, ...] = ()
    pain_points: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CTAText:
    primary: str
    secondary: str


PURPOSE_STRATEGIES: Mapping[str, ContentStrategy] = MappingProxyType({
    "Generate leads and conversions": ContentStrategy(
        "professional", "high", "results", "direct",
        Messaging("proven results that drive growth",
                  ("measurable outcomes", "quick implementation", "ROI focus"),
                  ("free consultation", "case studies", "money-back guarantee")),
    ),
    "Build brand awareness": ContentStrategy(
        "approachable", "low", "innovation", "soft",
        Messaging("innovative solutions that set you apart",
                  ("thought leadership", "industry expertise", "creative approach"),
                  ("awards and recognition", "media features", "industry partnerships")),
    ),
    "Sell products or services": ContentStrategy(
        "friendly", "medium", "results", "direct",
        Messaging("quality solutions at competitive prices",
                  ("customer satisfaction", "value for money", "fast delivery"),
                  ("customer reviews", "satisfaction guarantee", "secure payment")),
    ),
    "Share information and content": ContentStrategy(
        "authoritative", "low", "expertise", "consultative",
        Messaging("trusted expertise and insights",
                  ("comprehensive resources", "regular updates", "expert analysis"),
                  ("credentials and certifications", "published research", "industry recognition")),
    ),
    "Collect user data": ContentStrategy(
        "approachable", "medium", "personal", "soft",
        Messaging("personalized experiences tailored to you",
                  ("privacy protection", "valuable insights", "exclusive content"),
                  ("privacy policy", "data security", "opt-out options")),
    ),
    "Provide customer support": ContentStrategy(
        "friendly", "low", "credibility", "consultative",
        Messaging("reliable support when you need it most",
                  ("24/7 availability", "expert assistance", "quick resolution"),
                  ("response time guarantees", "satisfaction ratings", "multiple contact options")),
    ),
    "Showcase portfolio/work": ContentStrategy(
        "professional", "low", "expertise", "consultative",
        Messaging("exceptional work that speaks for itself",
                  ("creative excellence", "attention to detail", "client satisfaction"),
                  ("client testimonials", "award recognition", "portfolio diversity")),
    ),
    "Build community": ContentStrategy(
        "friendly", "low", "personal", "soft",
        Messaging("a welcoming community where you belong",
                  ("shared interests", "supportive environment", "valuable connections"),
                  ("member testimonials", "community guidelines", "free to join")),
    ),
    "Educate and inform": ContentStrategy(
        "authoritative", "low", "expertise", "consultative",
        Messaging("comprehensive education from trusted experts",
                  ("practical knowledge", "step-by-step guidance", "real-world application"),
                  ("instructor credentials", "student success stories", "curriculum transparency")),
    ),
    "Drive event attendance": ContentStrategy(
        "approachable", "high", "innovation", "urgent",
        Messaging("exclusive insights you can't get anywhere else",
                  ("networking opportunities", "industry leaders", "limited availability"),
                  ("speaker lineup", "past attendee feedback", "agenda preview")),
    ),
})

AUDIENCE_MODIFIERS: Mapping[str, AudienceModifier] = MappingProxyType({
    "General consumers (B2C)": AudienceModifier(
        "simple", "fast",
        ("customer reviews", "money-back guarantee", "easy returns"),
        ("saving money", "convenience", "quality concerns"),
    ),
    "Business professionals (B2B)": AudienceModifier(
        "advanced", "slow",
        ("case studies", "ROI data", "industry certifications"),
        ("efficiency", "scalability", "compliance"),
    ),
    "Young adults (18-30)": AudienceModifier(
        "moderate", "fast",
        ("social proof", "innovation", "sustainability"),
        ("affordability", "convenience", "social impact"),
    ),
    "Middle-aged professionals (30-50)": AudienceModifier(
        "advanced", "moderate",
        ("expertise", "track record", "comprehensive solutions"),
        ("time constraints", "family considerations", "career advancement"),
    ),
    "Seniors (50+)": AudienceModifier(
        "simple", "slow",
        ("personal service", "established reputation", "clear communication"),
        ("simplicity", "reliability", "personal attention"),
    ),
    "Students and educators": AudienceModifier(
        "moderate", "moderate",
        ("educational value", "peer recommendations", "institutional partnerships"),
        ("budget constraints", "learning outcomes", "practical application"),
    ),
    "Entrepreneurs and startups": AudienceModifier(
        "advanced", "fast",
        ("scalability", "innovation", "growth potential"),
        ("resource constraints", "speed to market", "competitive advantage"),
    ),
    "Enterprise decision makers": AudienceModifier(
        "advanced", "slow",
        ("security", "compliance", "enterprise support"),
        ("integration complexity", "risk management", "stakeholder buy-in"),
    ),
    "Creative professionals": AudienceModifier(
        "moderate", "moderate",
        ("portfolio quality", "creative freedom", "industry recognition"),
        ("creative constraints", "client management", "pricing pressures"),
    ),
    "Technical/Developer audience": AudienceModifier(
        "advanced", "moderate",
        ("technical specifications", "documentation quality", "open source"),
        ("technical debt", "scalability", "maintenance overhead"),
    ),
})

CTA_OPTIONS: Mapping[str, Mapping[str, Tuple[str, ...]]] = MappingProxyType({
    "soft": MappingProxyType({
        "primary": ("Learn More", "Explore Options", "See How It Works", "Get Information"),
        "secondary": ("Contact Us", "Schedule Call", "Request Info", "Ask Questions"),
    }),
    "direct": MappingProxyType({
        "primary": ("Get Started", "Start Now", "Try It Free", "Get Quote"),
        "secondary": ("See Pricing", "View Plans", "Contact Sales", "Learn More"),
    }),
    "urgent": MappingProxyType({
        "primary": ("Register Now", "Claim Your Spot", "Don't Miss Out", "Act Now"),
        "secondary": ("Limited Time", "Reserve Seat", "Join Waitlist", "Get Notified"),
    }),
    "consultative": MappingProxyType({
        "primary": ("Schedule Consultation", "Get Expert Advice", "Discuss Your Needs", "Free Assessment"),
        "secondary": ("Learn More", "View Portfolio", "Read Case Studies", "Contact Expert"),
    }),
})

# (pattern, replacement) pairs, applied in order
SIMPLIFY_REWRITES = (
    (r"utilize", "use"),
    (r"implement", "put in place"),
    (r"comprehensive", "complete"),
    (r"optimize", "improve"),
    (r"facilitate", "help with"),
)

CONSUMER_REWRITES = (
    (r"solutions", "services"),
    (r"leverage", "use"),
    (r"scalable", "flexible"),
)

URGENCY_REWRITES = (
    (r"contact us", "get started today"),
    (r"learn more", "see results now"),
)

_PRONOUN_RE = re.compile(r"\b(we|our|us)\b", re.IGNORECASE)
_ENTITY_RE = re.compile(r"\bthe (company|business|organization)\b", re.IGNORECASE)
_OWNED_RE = re.compile(r"\bour (team|services|solutions)\b", re.IGNORECASE)


def _field(requirements, name: str) -> Optional[str]:
    if isinstance(requirements, dict):
        value = requirements.get(name)
        if value is None:
            value = requirements.get(to_camel(name))
        return value
    return getattr(requirements, name, None)


def get_content_strategy(purpose: Optional[str]) -> ContentStrategy:
    return PURPOSE_STRATEGIES.get(purpose or "", PURPOSE_STRATEGIES[DEFAULT_PURPOSE])


def get_audience_modifiers(audience: Optional[str]) -> AudienceModifier:
    return AUDIENCE_MODIFIERS.get(audience or "", AUDIENCE_MODIFIERS[DEFAULT_AUDIENCE])


def _rewrite(content: str, rules) -> str:
    for pattern, replacement in rules:
        content = re.sub(pattern, replacement, content, flags=re.IGNORECASE)
    return content


def generate_personalized_content(
    text: str,
    requirements,
    business_name: Optional[str] = None,
) -> str:
    """
    Rewrite canned copy for one project.

    Args:
        text:          Source copy
        requirements:  ProjectRequirements, or any object / dict exposing
                       purpose, target_audience and business_name
        business_name: Overrides requirements.business_name

    Returns:
        The rewritten copy. Rules, in order: business-name substitution,
        technical-term simplification, consumer wording, urgency phrasing.
    """
    content = text
    name = business_name or _field(requirements, "business_name")
    audience_key = _field(requirements, "target_audience")

    if name:
        def _pronoun(match: re.Match) -> str:
            return f"{name}'s" if match.group(1).lower() == "our" else name

        content = _PRONOUN_RE.sub(_pronoun, content)
        content = _ENTITY_RE.sub(lambda _m: name, content)
        content = _OWNED_RE.sub(lambda m: f"{name}'s {m.group(1)}", content)

    strategy = get_content_strategy(_field(requirements, "purpose"))
    audience = get_audience_modifiers(audience_key)

    if strategy.tone == "technical" and audience.language_complexity == "simple":
        content = _rewrite(content, SIMPLIFY_REWRITES)

    if audience_key == CONSUMER_AUDIENCE:
        content = _rewrite(content, CONSUMER_REWRITES)

    if audience.decision_speed == "fast" and strategy.urgency == "high":
        content = _rewrite(content, URGENCY_REWRITES)

    return content


def generate_cta_text(requirements) -> CTAText:
    strategy = get_content_strategy(_field(requirements, "purpose"))
    audience = get_audience_modifiers(_field(requirements, "target_audience"))
    options = CTA_OPTIONS.get(strategy.cta_style, CTA_OPTIONS["direct"])

    primary_index = {"fast": 0, "moderate": 1}.get(audience.decision_speed, 2)
    secondary_index = 0 if audience.decision_speed == "fast" else 1

    primary = options["primary"]
    secondary = options["secondary"]
    return CTAText(
        primary=primary[primary_index] if primary_index < len(primary) else primary[0],
        secondary=secondary[secondary_index] if secondary_index < len(secondary) else secondary[0],
    )


def generate_value_propositions(requirements) -> List[str]:
    strategy = get_content_strategy(_field(requirements, "purpose"))
    audience = get_audience_modifiers(_field(requirements, "target_audience"))

    combined = [
        *strategy.messaging.secondary_values,
        *(f"addressing {pain}" for pain in audience.pain_points),
        *audience.trust_factors[:2],
    ]
    return combined[:4]
