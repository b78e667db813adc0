"""Rewrite relative ``.md`` link targets in Markdown source to ``.html``.

Only inline links of the form ``[text](target)`` are considered.  A
``[`` directly preceded by ``!`` opens an image and is skipped; the
look-behind makes links at the start of the text, at the start of a
line, and right after another link behave identically.

Markdown context is not inspected: links inside code spans and fenced
code blocks are rewritten like any other text.
"""

from __future__ import annotations

import re

from md2html.constants import EXTERNAL_LINK_PREFIXES, HTML_SUFFIX, MARKDOWN_SUFFIX

LINK_PATTERN = re.compile(r"(?<!!)\[([^\]]*)\]\(([^)]+)\)")


def is_external_link(target: str) -> bool:
    """True for http(s) URLs and in-document ``#`` anchors."""
    return target.startswith(EXTERNAL_LINK_PREFIXES)


def rewrite_link_target(target: str) -> str:
    """Swap a trailing ``.md`` for ``.html``; anything else is returned as-is."""
    if is_external_link(target):
        return target
    if target.endswith(MARKDOWN_SUFFIX):
        return target[: -len(MARKDOWN_SUFFIX)] + HTML_SUFFIX
    return target


def _replace_link(match: re.Match) -> str:
    text, target = match.group(1), match.group(2)
    new_target = rewrite_link_target(target)
    if new_target == target:
        return match.group(0)
    return f"[{text}]({new_target})"


def rewrite_markdown_links(md_text: str) -> str:
    """Return *md_text* with every local ``.md`` link target pointing at ``.html``."""
    return LINK_PATTERN.sub(_replace_link, md_text)
