"""Command-line entry point for lexicolor.

Tokenizes a file (or stdin, or the bundled demo program) and prints the
token stream in color, with a legend explaining the colors.

Usage:
    lexicolor [FILE] [--format ansi|listing|json] [--no-color] [--no-legend]
              [--lossless] [-v]

Options:
    FILE         Source file to tokenize; "-" reads stdin, omitted uses the demo
    --format     Output format (default: ansi)
    --no-color   Never emit escape sequences
    --no-legend  Skip the color legend in ansi output
    --lossless   Emit characters the function/import forms normally drop
    -v           Debug logging on stderr
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from lexicolor.demo import DEMO_SOURCE
from lexicolor.lexer import Lexer
from lexicolor.renderers import AnsiRenderer, ListingRenderer
from lexicolor.serialization import to_json
from lexicolor.utils.logger import get_logger

logger = get_logger(__name__)


def _read_source(path: str | None) -> str:
    if path is None:
        return DEMO_SOURCE
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _use_color(force_off: bool) -> bool:
    if force_off or "NO_COLOR" in os.environ:
        return False
    return sys.stdout.isatty()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexicolor",
        description="Tokenize Rust-like source and print it colored by token category",
    )
    parser.add_argument("file", nargs="?", help='Source file ("-" for stdin; default: demo program)')
    parser.add_argument(
        "--format",
        choices=("ansi", "listing", "json"),
        default="ansi",
        help="Output format (default: ansi)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--no-legend", action="store_true", help="Do not print the color legend")
    parser.add_argument(
        "--lossless", action="store_true", help="Keep whitespace and ';' swallowed by calls/imports"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = _read_source(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Failed to read %r", args.file, exc_info=True)
        print(f"lexicolor: cannot read {args.file}: {exc}", file=sys.stderr)
        return 2

    tokens = Lexer(source, lossless=args.lossless).tokenize()

    if args.format == "json":
        sys.stdout.write(to_json(tokens, indent=2) + "\n")
    elif args.format == "listing":
        sys.stdout.write(ListingRenderer().render(tokens))
    else:
        renderer = AnsiRenderer(color=_use_color(args.no_color))
        if not args.no_legend:
            sys.stdout.write(renderer.legend())
        sys.stdout.write(renderer.render(tokens))
    return 0


if __name__ == "__main__":
    sys.exit(main())
