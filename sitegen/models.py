"""
models.py — Pydantic records shared by the generation pipeline.

Python attributes are snake_case; every model also accepts and emits the
camelCase names used by the wire format (projectType, designTokens, ...),
so a template dumped with ``model_dump(by_alias=True)`` can be handed
straight to a downstream exporter.
"""

from __future__ import annotations

import re
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_HEX_RE = re.compile(r"^#?(?:[0-9a-fA-F]{3}){1,2}$")


class _Record(BaseModel):
    """Base for every public record: camelCase aliases, immutable after creation."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ── Input ─────────────────────────────────────────────────────────────────────

class ColorPreferences(_Record):
    type: Literal["ai-suggested", "brand", "mood"] = "ai-suggested"
    values: Tuple[str, ...] = ()   # hex seeds; the first one overrides the industry base color
    mood: Optional[str] = None

    @field_validator("values")
    @classmethod
    def _hex_values(cls, values: Tuple[str, ...]) -> Tuple[str, ...]:
        normalized = []
        for value in values:
            if not _HEX_RE.match(value.strip()):
                raise ValueError(f"not a hex color: {value!r}")
            normalized.append("#" + value.strip().lstrip("#").lower())
        return tuple(normalized)

    @property
    def base_color(self) -> Optional[str]:
        return self.values[0] if self.values else None


class ProjectRequirements(_Record):
    """
    Validated project brief. ``project_type`` and ``industry`` are required;
    every other field has a default. Categorical values are kept as plain
    strings so unknown values survive to the engines, which fall back to
    their documented defaults instead of failing.
    """
    project_type: str
    industry: str
    purpose: str = "Build brand awareness"
    target_audience: str = "General consumers (B2C)"
    style_direction: str = "modern"
    color_preferences: ColorPreferences = Field(default_factory=ColorPreferences)
    typography_style: str = "professional"
    required_sections: Tuple[str, ...] = ()
    interactive_elements: Tuple[str, ...] = ()
    special_features: Tuple[str, ...] = ()
    device_priority: str = "mobile-first"
    accessibility_level: str = "enhanced"
    business_name: Optional[str] = None

    @field_validator("project_type", "industry")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


# ── Design tokens ─────────────────────────────────────────────────────────────

class SemanticColors(_Record):
    success: str
    warning: str
    error: str
    info: str


class ColorPalette(_Record):
    primary: str
    secondary: str
    accent: str
    neutral: str
    semantic: SemanticColors

    def roles(self) -> Dict[str, str]:
        """Flat role → hex map, base roles first, then semantic."""
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "accent": self.accent,
            "neutral": self.neutral,
            "success": self.semantic.success,
            "warning": self.semantic.warning,
            "error": self.semantic.error,
            "info": self.semantic.info,
        }


class FontPairingNames(_Record):
    heading: str
    body: str


class TypographySystem(_Record):
    font_pairings: FontPairingNames
    scale: Dict[str, str]     # xs … 6xl → "1.000rem"
    weights: Dict[str, int]   # light … bold → numeric weight


class DesignTokens(_Record):
    colors: ColorPalette
    typography: TypographySystem
    spacing: Dict[str, str]
    border_radius: Dict[str, str]
    shadows: Dict[str, str]


# ── Components & output ───────────────────────────────────────────────────────

ComponentType = Literal["atom", "molecule", "organism", "template"]


class ComponentVariant(_Record):
    name: str
    properties: Dict[str, str] = Field(default_factory=dict)


class ComponentDefinition(_Record):
    id: str
    name: str
    type: ComponentType
    html: str
    css: str
    variants: Optional[List[ComponentVariant]] = None


class GeneratedTemplate(_Record):
    """Terminal artifact of one generation run. Owned by the caller."""
    id: str
    name: str
    description: str
    html: str
    css: str
    design_tokens: DesignTokens
    components: List[ComponentDefinition]

    def component(self, component_id: str) -> Optional[ComponentDefinition]:
        return next((c for c in self.components if c.id == component_id), None)
