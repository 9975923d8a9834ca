"""
Site Template Generator — CLI

Usage:
  python -m sitegen.main --brief briefs/example
  python -m sitegen.main --brief briefs/example/brief.md --output outputs/acme --no-zip
  python -m sitegen.main --brief brief.json --ratio 1.333 --json
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from . import config
from .design_system import ROLE_USAGE
from .generator import generate_template
from .models import GeneratedTemplate
from .palette_renderer import contrast_label
from .parser import RequirementsError, parse_brief
from .typography import TYPE_SCALES, validate_accessibility
from .zip_exporter import create_template_zip, slugify, write_template_files

console = Console()


# ── CLI ───────────────────────────────────────────────────────────────────────

def scale_ratio(value: str) -> float:
    """argparse type for --ratio: a finite number greater than 1."""
    try:
        ratio = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ratio {value!r}") from None
    if not (math.isfinite(ratio) and ratio > 1):
        raise argparse.ArgumentTypeError(f"ratio must be greater than 1, got {value}")
    return ratio


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Site Template Generator — rule-based website templates from a project brief"
    )
    parser.add_argument(
        "--brief",
        required=True,
        help="Path to a brief folder (containing brief.md), a .md file or a .json file",
    )
    parser.add_argument(
        "--output",
        default=None,
        help=f"Output directory (default: {config.OUTPUT_DIR}/<slug>_<timestamp>)",
    )
    parser.add_argument(
        "--ratio",
        type=scale_ratio,
        default=config.SCALE_RATIO,
        help=(
            f"Modular type-scale ratio, greater than 1 (default: {config.SCALE_RATIO}; common: "
            + ", ".join(f"{s.ratio} {s.name}" for s in TYPE_SCALES)
            + ")"
        ),
    )
    parser.add_argument(
        "--no-preview",
        action="store_true",
        help="Skip the palette.png preview",
    )
    parser.add_argument(
        "--no-zip",
        action="store_true",
        help="Skip the ZIP bundle",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the template JSON instead of the summary",
    )
    return parser.parse_args(argv)


# ── Output helpers ────────────────────────────────────────────────────────────

def display_template(template: GeneratedTemplate) -> None:
    """Print palette, fonts, components and typography advisories."""
    tokens = template.design_tokens

    table = Table(title="Color Palette", show_lines=False)
    table.add_column("Role", style="bold")
    table.add_column("Hex")
    table.add_column("Contrast")
    table.add_column("Usage", style="dim")
    for role, hex_val in tokens.colors.roles().items():
        table.add_row(role, f"[{hex_val}]■[/] {hex_val}", contrast_label(hex_val), ROLE_USAGE.get(role, ""))
    console.print(table)

    fonts = tokens.typography.font_pairings
    console.print(f"  Fonts: [bold]{fonts.heading}[/bold] / [bold]{fonts.body}[/bold]")
    console.print(
        "  Components: " + ", ".join(f"{c.id} [dim]({c.type})[/dim]" for c in template.components)
    )

    report = validate_accessibility(tokens.typography)
    for issue, suggestion in zip(report.issues, report.suggestions):
        console.print(f"  [yellow]⚠ {issue}[/yellow]\n    [dim]{suggestion}[/dim]")


def _error(message: str) -> None:
    console.print(Panel(message, title="[bold red]Error[/bold red]", border_style="red"))
    sys.exit(2)


# ── Main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        format="%(asctime)s — %(levelname)s — %(name)s — %(message)s",
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    )
    pipeline_start = time.time()

    problems = config.settings_problems()
    if problems:
        _error("\n".join(problems))

    if not args.json:
        console.print(Rule("[bold magenta]Site Template Generator[/bold magenta]"))

    # ── Step 1: Parse brief ──────────────────────────────────────────────────
    try:
        requirements = parse_brief(args.brief)
    except (RequirementsError, FileNotFoundError) as exc:
        _error(str(exc))

    # ── Step 2: Generate template ────────────────────────────────────────────
    template = generate_template(
        requirements,
        scale_ratio=args.ratio,
        min_contrast=config.MIN_CONTRAST,
        base_font_size=config.BASE_FONT_SIZE,
    )

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    slug = slugify(requirements.business_name or template.name)
    output_dir = Path(args.output) if args.output else config.OUTPUT_DIR / f"{slug}_{timestamp}"

    if args.json:
        files = write_template_files(template, output_dir, with_preview=not args.no_preview)
        if not args.no_zip:
            create_template_zip(template, output_dir, files)
        console.print_json(template.model_dump_json(by_alias=True))
        return

    console.print(
        f"  Brief: [bold]{args.brief}[/bold]  |  "
        f"Type: [bold]{requirements.project_type}[/bold]  |  "
        f"Industry: [bold]{requirements.industry}[/bold]"
    )
    console.print(f"  [green]✓[/green] Generated [bold]{template.name}[/bold] ({template.id})\n")
    display_template(template)

    # ── Step 3: Export ───────────────────────────────────────────────────────
    console.print("\n[bold]Exporting[/bold]")
    files = write_template_files(template, output_dir, with_preview=not args.no_preview)
    console.print("  [green]✓ index.html, styles.css, design-tokens.json, template.json[/green]")
    if files.palette_png:
        console.print(f"  [green]✓ Palette preview[/green] → {files.palette_png.name}")

    if not args.no_zip:
        zip_path = create_template_zip(template, output_dir, files)
        if zip_path:
            console.print(f"  [green]✓ ZIP bundle[/green] → {zip_path.name}")
        else:
            console.print("  [yellow]⚠ ZIP bundle failed, files were still written[/yellow]")

    total_elapsed = time.time() - pipeline_start
    console.print(
        Panel(
            f"{len(template.components)} component(s) generated in [bold]{total_elapsed:.1f}s[/bold]\n"
            f"Outputs saved to: [bold]{output_dir}[/bold]",
            title="[bold green]Template Complete[/bold green]",
            border_style="green",
        )
    )


if __name__ == "__main__":
    main()
