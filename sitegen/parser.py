"""
Brief parser — reads a project brief into validated ProjectRequirements.

Accepted inputs:
    briefs/my_site/            ← folder containing brief.md
    briefs/my_site/brief.md    ← markdown brief
    briefs/my_site.json        ← JSON brief (camelCase or snake_case keys)

SUPPORTED SECTIONS IN brief.md:
  ## Project Type          → project_type          (required)
  ## Industry              → industry              (required)
  ## Purpose               → purpose
  ## Target Audience       → target_audience
  ## Style                 → style_direction
  ## Typography            → typography_style
  ## Business Name         → business_name
  ## Colors                → color_preferences (type "brand", hex list)
  ## Color Mood            → color_preferences (type "mood")
  ## Sections              → required_sections     (list)
  ## Interactive Elements  → interactive_elements  (list)
  ## Features              → special_features      (list)
  ## Device Priority       → device_priority
  ## Accessibility         → accessibility_level

List sections take one "- item" per line or a comma-separated line.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Union

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from .models import ProjectRequirements

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("project_type", "industry")

DEFAULTS: Dict[str, object] = {
    "purpose": "Build brand awareness",
    "target_audience": "General consumers (B2C)",
    "style_direction": "modern",
    "color_preferences": {"type": "ai-suggested"},
    "typography_style": "professional",
    "device_priority": "mobile-first",
    "accessibility_level": "enhanced",
}

# Section heading → field; values are kept verbatim
TEXT_SECTIONS = {
    "Purpose": "purpose",
    "Target Audience": "target_audience",
    "Business Name": "business_name",
}

# Section heading → field; values are lower-cased ids
ID_SECTIONS = {
    "Project Type": "project_type",
    "Industry": "industry",
    "Style": "style_direction",
    "Typography": "typography_style",
    "Device Priority": "device_priority",
    "Accessibility": "accessibility_level",
}

LIST_SECTIONS = {
    "Sections": "required_sections",
    "Interactive Elements": "interactive_elements",
    "Features": "special_features",
}


class RequirementsError(ValueError):
    """Brief is missing required fields or cannot be read as requirements."""


# ── Markdown helpers ───────────────────────────────────────────────────────────

def _extract_section(text: str, *section_names: str) -> str:
    """Extract first non-empty line from any matching ## Section heading."""
    pattern = "|".join(re.escape(n) for n in section_names)
    in_section = False
    for line in text.splitlines():
        if re.match(rf"##\s*({pattern})\s*$", line.strip(), re.IGNORECASE):
            in_section = True
            continue
        if in_section:
            if re.match(r"^#{1,3}\s", line):
                break
            stripped = line.strip()
            if stripped:
                return stripped
    return ""


def _extract_multiline_section(text: str, *section_names: str) -> str:
    """Extract all lines from any matching ## Section until the next ## heading."""
    pattern = "|".join(re.escape(n) for n in section_names)
    in_section = False
    collected: List[str] = []
    for line in text.splitlines():
        if re.match(rf"##\s*({pattern})\s*$", line.strip(), re.IGNORECASE):
            in_section = True
            continue
        if in_section:
            if re.match(r"^#{1,3}\s", line):
                break
            collected.append(line)
    return "\n".join(collected).strip()


def _split_items(block: str) -> List[str]:
    items: List[str] = []
    for line in block.splitlines():
        stripped = line.strip().lstrip("-*").strip()
        if not stripped:
            continue
        items.extend(part.strip() for part in stripped.split(",") if part.strip())
    return items


def _to_id(value: str) -> str:
    return re.sub(r"\s+", "_", value.strip().lower())


def parse_markdown_brief(text: str) -> dict:
    """Raw requirement fields (snake_case) found in a markdown brief."""
    data: dict = {}

    for heading, name in TEXT_SECTIONS.items():
        value = _extract_section(text, heading)
        if value:
            data[name] = value

    for heading, name in ID_SECTIONS.items():
        value = _extract_section(text, heading)
        if value:
            data[name] = _to_id(value) if name in REQUIRED_FIELDS else value.strip().lower()

    for heading, name in LIST_SECTIONS.items():
        items = _split_items(_extract_multiline_section(text, heading))
        if items:
            data[name] = [_to_id(item) for item in items] if name != "special_features" else items

    # ── Color preferences ─────────────────────────────────────────────────────
    colors = _split_items(_extract_multiline_section(text, "Colors", "Brand Colors"))
    mood = _extract_section(text, "Color Mood")
    if colors:
        data["color_preferences"] = {"type": "brand", "values": colors, "mood": mood or None}
    elif mood:
        data["color_preferences"] = {"type": "mood", "mood": mood}

    return data


# ── Validation ─────────────────────────────────────────────────────────────────

def _get(data: dict, name: str):
    value = data.get(name)
    if value is None:
        value = data.get(to_camel(name))
    return value


def complete_requirements(data: dict) -> ProjectRequirements:
    """
    Apply boundary defaults and validate a raw brief.

    Blank strings count as missing. Raises RequirementsError naming the
    missing fields when project type or industry is absent.
    """
    missing = [
        to_camel(name) for name in REQUIRED_FIELDS
        if not str(_get(data, name) or "").strip()
    ]
    if missing:
        raise RequirementsError(
            f"Project type and industry are required (missing: {', '.join(missing)})"
        )

    fields: dict = {}
    for name in ProjectRequirements.model_fields:
        value = _get(data, name)
        if isinstance(value, str) and not value.strip():
            value = None
        if value is None:
            value = DEFAULTS.get(name)
        if value is not None:
            fields[name] = value

    try:
        return ProjectRequirements.model_validate(fields)
    except ValidationError as exc:
        raise RequirementsError(f"Invalid project brief: {exc}") from exc


# ── Entry point ────────────────────────────────────────────────────────────────

def _resolve_brief_file(path: Path) -> Path:
    if path.is_dir():
        brief_file = path / "brief.md"
        if not brief_file.exists():
            json_file = path / "brief.json"
            if json_file.exists():
                return json_file
            raise FileNotFoundError(f"brief.md not found in {path}")
        return brief_file
    if not path.exists():
        raise FileNotFoundError(f"Brief not found: {path}")
    return path


def read_brief(brief_path: Union[str, Path]) -> dict:
    """Raw requirement fields from a brief folder, markdown file or JSON file."""
    brief_file = _resolve_brief_file(Path(brief_path))
    text = brief_file.read_text(encoding="utf-8")

    if brief_file.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise RequirementsError(f"Malformed JSON brief {brief_file.name}: {exc}") from exc
        if not isinstance(data, dict):
            raise RequirementsError(f"JSON brief {brief_file.name} must contain an object")
        return data

    return parse_markdown_brief(text)


def parse_brief(brief_path: Union[str, Path]) -> ProjectRequirements:
    """
    Parse and validate a brief.

    Args:
        brief_path: Folder containing brief.md (or brief.json), a .md file
                    or a .json file

    Returns:
        ProjectRequirements with boundary defaults applied
    """
    data = read_brief(brief_path)
    requirements = complete_requirements(data)
    logger.info(
        f"Parsed brief {brief_path}: {requirements.project_type} / {requirements.industry}"
    )
    return requirements
