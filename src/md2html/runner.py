"""md2html runner - read, rewrite, embed, render, assemble, write.

The pipeline is strictly linear and runs once per invocation:

    markdown text -> links rewritten -> images embedded
                  -> HTML fragment -> full document -> <input>.html

Fatal failures raise ``ConversionError``; ``run_convert`` turns them
into a single ``Error:`` line and a False return for the CLI.
"""

from __future__ import annotations

import logging
from pathlib import Path

from md2html.config_loader import load_config
from md2html.constants import HTML_SUFFIX, MARKDOWN_SUFFIX
from md2html.converter import convert_md_to_html
from md2html.document import create_html_document
from md2html.images import embed_images
from md2html.links import rewrite_markdown_links

logger = logging.getLogger("md2html")


class ConversionError(Exception):
    """A failure that aborts the whole conversion."""


class InputExtensionError(ConversionError):
    """The input path does not end in ``.md``."""

    def __init__(self, input_path: str | Path):
        super().__init__("Input file must have .md extension")
        self.input_path = str(input_path)


def output_path_for(input_path: str | Path) -> Path:
    """``notes/guide.md`` -> ``notes/guide.html``."""
    name = str(input_path)
    if not name.endswith(MARKDOWN_SUFFIX):
        raise InputExtensionError(input_path)
    return Path(name[: -len(MARKDOWN_SUFFIX)] + HTML_SUFFIX)


def render_document(md_text: str, base_dir: str | Path, font_family: str, title: str) -> str:
    """Run the text passes and return the finished HTML page."""
    processed = rewrite_markdown_links(md_text)
    processed = embed_images(processed, base_dir)
    body = convert_md_to_html(processed)
    return create_html_document(body, font_family, title)


def convert_file(input_path: str | Path, font_family: str, title: str) -> Path:
    """Convert one Markdown file to a self-contained HTML file beside it.

    Returns the output path.  The output is written in a single call
    after everything else has succeeded.

    Raises:
        InputExtensionError: *input_path* does not end in ``.md``.
        ConversionError: the input cannot be read or the output cannot
            be written.
    """
    output_path = output_path_for(input_path)
    source = Path(input_path)

    try:
        md_text = source.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ConversionError(f"failed to read input file: {exc}") from exc

    logger.debug("Read %s (%d chars)", source, len(md_text))
    html = render_document(md_text, source.parent, font_family, title)

    try:
        output_path.write_bytes(html.encode("utf-8"))
    except OSError as exc:
        raise ConversionError(f"failed to write output file: {exc}") from exc

    logger.debug("Wrote %s (%d chars)", output_path, len(html))
    return output_path


def _document_settings(font: str | None, title: str | None) -> tuple[str, str]:
    """Fill unset *font* / *title* from md2html.toml, env, then defaults."""
    try:
        config = load_config()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConversionError(f"failed to read config file: {exc}") from exc
    font_family = font if font is not None else config.document.font
    doc_title = title if title is not None else config.document.title
    return font_family, doc_title


def run_convert(input_path: str, font: str | None = None, title: str | None = None) -> bool:
    """CLI entry for a single conversion.

    *font* and *title* left as None fall back to md2html.toml,
    MD2HTML_DOCUMENT_* environment variables, then built-in defaults.
    Prints the outcome and returns True on success.
    """
    try:
        font_family, doc_title = _document_settings(font, title)
        output_path = convert_file(input_path, font_family, doc_title)
    except ConversionError as exc:
        print(f"Error: {exc}")
        return False

    print(f"Successfully converted {input_path} to {output_path}")
    return True
