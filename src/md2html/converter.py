from __future__ import annotations

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

RELATIVE_LINK_PREFIXES = ("#", "./", "../")


def is_relative_link(href: str) -> bool:
    """Anchors, root-relative and dot-relative paths stay in the same tab."""
    if href.startswith(RELATIVE_LINK_PREFIXES):
        return True
    return href.startswith("/") and not href.startswith("//")


class TargetBlankProcessor(Treeprocessor):
    """Open every non-relative link in a new browsing context."""

    def run(self, root):
        for anchor in root.iter("a"):
            href = anchor.get("href")
            if href is None or is_relative_link(href):
                continue
            anchor.set("target", "_blank")


class TargetBlankExtension(Extension):
    def extendMarkdown(self, md):
        # After the inline processor (20) has turned link syntax into <a> elements
        md.treeprocessors.register(TargetBlankProcessor(md), "target_blank", 1)


def build_extensions() -> list:
    return [
        "extra",
        "toc",
        "sane_lists",
        "smarty",
        TargetBlankExtension(),
    ]


def convert_md_to_html(md_text: str) -> str:
    """Convert Markdown text to an HTML fragment.

    Supports: headers with stable ids, emphasis, lists, fenced code,
    block quotes, tables, footnotes, definition lists, horizontal rules,
    smart punctuation, and links that open in a new tab.
    """
    md = markdown.Markdown(extensions=build_extensions(), output_format="html")
    return md.convert(md_text)
