"""Inline local Markdown images as base64 ``data:`` URIs.

Each ``![alt](target)`` whose target is a local path is resolved against
the Markdown file's directory, read in full, and replaced by
``![alt](data:<mime>;base64,<payload>)``.  An image that cannot be read
is logged and left exactly as written; it never aborts the conversion.
"""

from __future__ import annotations

import base64
import logging
import os
import re
from pathlib import Path

from md2html.constants import EXTERNAL_IMAGE_PREFIXES
from md2html.mime import get_mime_type

logger = logging.getLogger("md2html")

IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")


def is_external_image(target: str) -> bool:
    """True for http(s) URLs and targets that are already data URIs."""
    return target.startswith(EXTERNAL_IMAGE_PREFIXES)


def resolve_image_path(target: str, base_dir: str | Path) -> str:
    """Join *target* onto *base_dir* and normalize; ``..`` is allowed.

    A leading ``/`` does not escape *base_dir*: ``/img/a.png`` resolves
    to ``<base_dir>/img/a.png``.
    """
    return os.path.normpath(os.path.join(str(base_dir), target.lstrip("/")))


def to_data_uri(data: bytes, filename: str) -> str:
    """Build ``data:<mime>;base64,<payload>`` for *data*, typed by *filename*."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{get_mime_type(filename)};base64,{encoded}"


def embed_images(md_text: str, base_dir: str | Path) -> str:
    """Return *md_text* with readable local images replaced by data URIs."""

    def _replace(match: re.Match) -> str:
        alt_text, target = match.group(1), match.group(2)
        if is_external_image(target):
            return match.group(0)

        full_path = resolve_image_path(target, base_dir)
        try:
            with open(full_path, "rb") as fh:
                data = fh.read()
        except OSError as exc:
            logger.warning("Could not read image %s: %s", target, exc)
            return match.group(0)

        logger.debug("Embedded %s (%d bytes)", full_path, len(data))
        return f"![{alt_text}]({to_data_uri(data, target)})"

    return IMAGE_PATTERN.sub(_replace, md_text)
