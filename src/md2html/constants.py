"""md2html project-wide constants: defaults, suffixes, MIME table, usage text."""

from __future__ import annotations

# ── Document defaults ────────────────────────────────────────────
DEFAULT_FONT = "Open Sans"
DEFAULT_TITLE = ""

# ── File naming ──────────────────────────────────────────────────
MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"
CONFIG_FILENAME = "md2html.toml"

# ── Target classification ────────────────────────────────────────
# Links with these prefixes are never rewritten.
EXTERNAL_LINK_PREFIXES = ("http://", "https://", "#")
# Images with these prefixes are never embedded.
EXTERNAL_IMAGE_PREFIXES = ("http://", "https://", "data:")

# ── Image MIME types (keys are lowercase) ────────────────────────
MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
}
DEFAULT_MIME_TYPE = "image/png"

# ── CLI usage ────────────────────────────────────────────────────
USAGE_TEXT = """\
Usage: md2html [--font <font-name>] [--title <title>] <input.md>
Example: md2html file.md
Example: md2html --font 'Roboto' file.md
Example: md2html --title 'My Document' file.md"""
