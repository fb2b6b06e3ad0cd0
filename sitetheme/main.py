"""
Site Theme Engine — command line

Usage:
  python -m sitetheme.main --vector 0.6,0.9,0.3,0.8,0.3,0.5 --goal luxury
  python -m sitetheme.main --site-type restaurant --anti-ref corporate --css
  python -m sitetheme.main --preset modern-clean --primary "#e11d48" --json
  python -m sitetheme.main --vector 0.2,0.6,0.6,0.5,0.9,0.4 --preview outputs/theme.png
  python -m sitetheme.main --list-presets
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .brand_character import MAX_EMOTIONAL_GOALS
from .composition import ComposedTheme, ThemeRequest, compose_theme
from .config import Settings
from .personality import AXES, describe_vector
from .presets import THEME_PRESETS
from .preview import render_theme_preview
from .tokens import is_color_token, tokens_to_css_string

console = Console()
logger = logging.getLogger(__name__)


# ── CLI ───────────────────────────────────────────────────────────────────────

def parse_vector(text: str) -> List[float]:
    try:
        values = [float(part) for part in text.replace(" ", "").split(",") if part]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated numbers, got {text!r}")
    if len(values) != len(AXES):
        raise argparse.ArgumentTypeError(
            f"expected {len(AXES)} values ({', '.join(AXES)}), got {len(values)}"
        )
    return values


def parse_json_object(text: str) -> dict:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid JSON: {exc.msg}")
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError("expected a JSON object")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitetheme",
        description="Site Theme Engine: personality vector → design tokens + visual vocabulary",
    )
    parser.add_argument(
        "--vector",
        type=parse_vector,
        default=[0.5] * len(AXES),
        help="6 comma-separated values in [0,1]: " + ", ".join(AXES),
    )
    parser.add_argument("--goal", action="append", default=[],
                        help=f"Emotional goal (repeatable, at most {MAX_EMOTIONAL_GOALS})")
    parser.add_argument("--anti-ref", action="append", default=[], dest="anti_refs",
                        help="Anti-reference (repeatable)")
    parser.add_argument("--primary", help="Primary colour override, e.g. '#2563eb'")
    parser.add_argument("--preset", help="Start from a curated preset id")
    parser.add_argument("--font-pairing", help="Font pairing id override")
    parser.add_argument("--site-type", help="Business / site type, e.g. restaurant")
    parser.add_argument("--sub-type", help="Business sub-type, e.g. japanese")
    parser.add_argument("--archetype", help="Brand archetype, e.g. artisan")
    parser.add_argument("--ai-patch", type=parse_json_object, default={},
                        help="JSON object of suggested token values (sanitised before merge)")

    out = parser.add_mutually_exclusive_group()
    out.add_argument("--css", action="store_true", help="Print CSS custom properties")
    out.add_argument("--json", action="store_true", help="Print tokens + vocabulary as JSON")
    out.add_argument("--list-presets", action="store_true", help="List curated presets and exit")

    parser.add_argument(
        "--preview",
        nargs="?",
        const="",
        metavar="PATH",
        help="Also write a PNG swatch sheet (default: <output dir>/theme-<fingerprint>.png)",
    )
    return parser


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


# ── Output ────────────────────────────────────────────────────────────────────

def _print_presets() -> None:
    table = Table(title="Theme presets", show_lines=False)
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("primary")
    table.add_column("vector", style="dim")
    for preset in THEME_PRESETS:
        primary = preset.tokens.color_primary
        table.add_row(
            preset.id,
            preset.name,
            f"[{primary}]■[/] {primary}",
            ", ".join(f"{v:g}" for v in preset.personality_vector),
        )
    console.print(table)


def _print_theme(request: ThemeRequest, result: ComposedTheme) -> None:
    console.print(
        Panel(
            f"[bold]{describe_vector(request.vector)}[/bold]\n"
            f"[dim]fingerprint {result.fingerprint[:16]}[/dim]",
            title="Personality",
            expand=False,
        )
    )

    tokens = Table(title="Theme tokens")
    tokens.add_column("token", style="cyan")
    tokens.add_column("value")
    for key, value in result.tokens.to_dict().items():
        shown = f"[{value}]■[/] {value}" if is_color_token(key) else value
        tokens.add_row(key, shown)
    console.print(tokens)

    vocab = Table(title="Visual vocabulary")
    vocab.add_column("field", style="magenta")
    vocab.add_column("value")
    for key, value in result.vocabulary.to_dict().items():
        vocab.add_row(key, str(value))
    for key, value in result.pattern.to_dict().items():
        vocab.add_row(key, str(value))
    console.print(vocab)


# ── Main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.goal) > MAX_EMOTIONAL_GOALS:
        parser.error(f"at most {MAX_EMOTIONAL_GOALS} --goal values are allowed")

    if args.list_presets:
        _print_presets()
        return 0

    request = ThemeRequest(
        vector=args.vector,
        goals=args.goal,
        anti_references=args.anti_refs,
        primary_color=args.primary,
        preset_id=args.preset,
        font_pairing_id=args.font_pairing,
        site_type=args.site_type,
        sub_type=args.sub_type,
        archetype=args.archetype,
        ai_patch=args.ai_patch,
    )
    result = compose_theme(request)

    if args.css:
        print(tokens_to_css_string(result.tokens, selector=settings.css_selector))
    elif args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _print_theme(request, result)

    if args.preview is not None:
        target = Path(args.preview) if args.preview else (
            Path(settings.output_dir) / f"theme-{result.fingerprint[:8]}.png"
        )
        path = render_theme_preview(result.tokens, target, width=settings.preview_width)
        logger.info("Preview saved → %s", path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
