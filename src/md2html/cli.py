#!/usr/bin/env python3
"""md2html CLI - Markdown to a single self-contained HTML file.

Usage:
    md2html [--font <name>] [--title <title>] <input.md>

The output is written next to the input with ``.md`` replaced by
``.html``.  Local ``.md`` links are pointed at ``.html`` and local
images are embedded as base64 data URIs.
"""

from __future__ import annotations

import argparse
import sys

from md2html.constants import MARKDOWN_SUFFIX, USAGE_TEXT
from md2html.runner import run_convert
from md2html.utils import VERSION, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2html",
        description="Convert a Markdown file to a self-contained HTML file.",
    )
    parser.add_argument(
        "--font", default=None,
        help="Google Font family to use (default: Open Sans)",
    )
    parser.add_argument(
        "--title", default=None,
        help="HTML document title (empty by default)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version", action="version", version=f"md2html {VERSION}",
    )
    parser.add_argument("input", nargs="?", default=None, help="Markdown file (*.md)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    if not args.input:
        print(USAGE_TEXT)
        sys.exit(1)

    if not args.input.endswith(MARKDOWN_SUFFIX):
        print("Error: Input file must have .md extension")
        sys.exit(1)

    success = run_convert(args.input, font=args.font, title=args.title)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
