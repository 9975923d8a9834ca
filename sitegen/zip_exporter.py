"""
zip_exporter.py — Write a generated template to disk and bundle it as a ZIP.

Output folder:
  index.html          — full document with inline stylesheet
  styles.css          — the same stylesheet, standalone
  design-tokens.json  — DesignTokens, camelCase keys
  template.json       — the complete GeneratedTemplate, camelCase keys
  palette.png         — palette strip preview (optional)

ZIP layout:
  <slug>.zip
    site/      — index.html, styles.css
    tokens/    — design-tokens.json, template.json
    preview/   — palette.png
"""

from __future__ import annotations

import logging
import re
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from .models import GeneratedTemplate
from .palette_renderer import render_palette

logger = logging.getLogger(__name__)


@dataclass
class ExportedFiles:
    html: Path
    css: Path
    tokens: Path
    template: Path
    palette_png: Optional[Path] = None

    def archive_names(self) -> Dict[Path, str]:
        """File on disk → path inside the ZIP."""
        names = {
            self.html: f"site/{self.html.name}",
            self.css: f"site/{self.css.name}",
            self.tokens: f"tokens/{self.tokens.name}",
            self.template: f"tokens/{self.template.name}",
        }
        if self.palette_png:
            names[self.palette_png] = f"preview/{self.palette_png.name}"
        return names


def slugify(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")[:40].strip("-")
    return slug or "template"


def write_template_files(
    template: GeneratedTemplate,
    output_dir: Path,
    with_preview: bool = True,
) -> ExportedFiles:
    """
    Write every template artifact into output_dir (created if missing).

    Args:
        template:     GeneratedTemplate to export
        output_dir:   Target folder
        with_preview: Also render palette.png

    Returns:
        ExportedFiles with the written paths
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    html_path = output_dir / "index.html"
    html_path.write_text(template.html, encoding="utf-8")

    css_path = output_dir / "styles.css"
    css_path.write_text(template.css, encoding="utf-8")

    tokens_path = output_dir / "design-tokens.json"
    tokens_path.write_text(
        template.design_tokens.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
    )

    template_path = output_dir / "template.json"
    template_path.write_text(template.model_dump_json(by_alias=True, indent=2), encoding="utf-8")

    palette_png = None
    if with_preview:
        palette_png = render_palette(template.design_tokens.colors, output_dir / "palette.png")

    logger.info(f"Exported {template.id} → {output_dir}")
    return ExportedFiles(
        html=html_path,
        css=css_path,
        tokens=tokens_path,
        template=template_path,
        palette_png=palette_png,
    )


def create_template_zip(
    template: GeneratedTemplate,
    output_dir: Path,
    files: ExportedFiles,
) -> Optional[Path]:
    """
    Bundle exported files into <slug>.zip inside output_dir.

    Returns:
        Path to created ZIP file, or None on failure.
    """
    try:
        zip_path = Path(output_dir) / f"{slugify(template.name)}.zip"

        with zipfile.ZipFile(zip_path, "w", zipfile.ZIP_DEFLATED) as zf:
            for path, arcname in files.archive_names().items():
                if path.exists():
                    zf.write(path, arcname)

        logger.info(f"ZIP created: {zip_path.name} ({zip_path.stat().st_size // 1024} KB)")
        return zip_path

    except (OSError, zipfile.BadZipFile) as e:
        logger.warning(f"ZIP creation failed: {e}")

    return None
