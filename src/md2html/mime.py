"""Image MIME type lookup by file extension."""

from __future__ import annotations

import os

from md2html.constants import DEFAULT_MIME_TYPE, MIME_TYPES


def _extension(filename: str) -> str:
    """Return the lowercased extension (with dot) of the last path component.

    Unlike ``os.path.splitext`` a bare dotfile such as ``.png`` counts as
    having the extension ``.png``.
    """
    name = os.path.basename(filename)
    _, dot, ext = name.rpartition(".")
    if not dot:
        return ""
    return f".{ext}".lower()


def get_mime_type(filename: str) -> str:
    """Map *filename*'s extension to an image MIME type, defaulting to PNG."""
    return MIME_TYPES.get(_extension(filename), DEFAULT_MIME_TYPE)
