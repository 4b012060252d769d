"""Command-line interface for pagegen."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from .errors import HtmlElementError
from .io_utils import write_text
from .models import load_page_config
from .page import homepage_html
from .tags import TAG_VARIANTS

DEFAULT_CONFIG = "config/homepage.yaml"


def _handle_build(args: argparse.Namespace) -> None:
    config = load_page_config(Path(args.config))
    try:
        output = homepage_html(config, continue_on_error=not args.strict)
    except HtmlElementError as exc:
        print(f"[build] rendering failed: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.out == "-":
        sys.stdout.write(output)
        return

    written = write_text(Path(args.out), output)
    card_count = sum(len(stack.cards) for stack in config.stacks)
    print(
        f"Built {written} with {len(config.stacks)} link stack(s) "
        f"and {card_count} link card(s)."
    )


def _handle_validate(args: argparse.Namespace) -> None:
    config_path = Path(args.config)
    config = load_page_config(config_path)

    errors: list[str] = []
    for stack in config.stacks:
        if not stack.cards:
            errors.append(f"{config_path}: link stack '{stack.text}' has no cards.")
        seen: set[str] = set()
        for card in stack.cards:
            if card.url in seen:
                errors.append(
                    f"{config_path}: link stack '{stack.text}' lists {card.url} more than once."
                )
            seen.add(card.url)

    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        raise SystemExit(1)

    print(f"Validated {len(config.stacks)} link stack(s) in {config_path}.")


def _handle_tags(args: argparse.Namespace) -> None:
    for name, variant in TAG_VARIANTS.items():
        suffix = "" if variant.augment is None else " (augmented)"
        print(f"{name}: <{variant.tag}>{suffix}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagegen",
        description="Link-directory homepage generator",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="pagegen 0.1.0",
        help="Show the pagegen version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    build_parser = subparsers.add_parser(
        "build",
        help="Render the homepage.",
        description="Validate the page config and write the rendered homepage.",
    )
    build_parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help="Path to the page config YAML.",
    )
    build_parser.add_argument(
        "--out",
        default="generated/index.html",
        help="File to write the rendered HTML to, or '-' for stdout.",
    )
    build_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on the first element that cannot be rendered instead of skipping it.",
    )
    build_parser.set_defaults(func=_handle_build)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate the page config.",
        description="Validate the page config and check link stacks for empty or duplicate entries.",
    )
    validate_parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help="Path to the page config YAML.",
    )
    validate_parser.set_defaults(func=_handle_validate)

    tags_parser = subparsers.add_parser(
        "tags",
        help="List the available tag helpers.",
        description="List registered tag variants and the HTML tag each produces.",
    )
    tags_parser.set_defaults(func=_handle_tags)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
