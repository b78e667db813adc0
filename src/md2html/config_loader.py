"""md2html configuration loader.

Supplies the defaults for ``--font`` and ``--title``.  Values come from
the ``[document]`` section of md2html.toml in the working directory,
then MD2HTML_DOCUMENT_FONT / MD2HTML_DOCUMENT_TITLE, which win over the
file.  Command-line flags sit above both (see ``runner.run_convert``).

Only string values are understood; everything else in the file is
ignored.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from md2html.constants import CONFIG_FILENAME, DEFAULT_FONT, DEFAULT_TITLE

logger = logging.getLogger("md2html")

DOCUMENT_SECTION = "document"
DOCUMENT_KEYS = ("font", "title")
ENV_PREFIX = "MD2HTML_DOCUMENT_"


@dataclass(frozen=True)
class DocumentConfig:
    font: str = DEFAULT_FONT
    title: str = DEFAULT_TITLE


@dataclass(frozen=True)
class Md2HtmlConfig:
    document: DocumentConfig


# ── md2html.toml ─────────────────────────────────────────────────────

def _unquote(raw: str) -> str | None:
    """Return the contents of a quoted TOML string, or None if *raw* is not one.

    A ``#`` after the closing quote starts a comment.
    """
    stripped = raw.strip()
    if not stripped or stripped[0] not in "\"'":
        return None
    quote = stripped[0]
    end = stripped.find(quote, 1)
    if end == -1:
        return None
    rest = stripped[end + 1:].strip()
    if rest and not rest.startswith("#"):
        return None
    return stripped[1:end]


def _read_document_section(path: Path) -> dict[str, str]:
    """Pull the string ``font`` / ``title`` keys out of ``[document]``.

    Raises OSError or UnicodeDecodeError when the file cannot be read.
    """
    values: dict[str, str] = {}
    section = None

    for lineno, raw_line in enumerate(path.read_text(encoding="utf-8").splitlines(), 1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if line.startswith("[") and line.endswith("]"):
            section = line[1:-1].strip()
            continue

        if section != DOCUMENT_SECTION or "=" not in line:
            continue

        key, _, raw_value = line.partition("=")
        key = key.strip()
        if key not in DOCUMENT_KEYS:
            logger.debug("%s:%d: ignoring unknown key %r", path, lineno, key)
            continue

        value = _unquote(raw_value)
        if value is None:
            logger.warning("%s:%d: %s must be a quoted string, ignoring", path, lineno, key)
            continue
        values[key] = value

    return values


# ── Public API ────────────────────────────────────────────────────────

_cached_config: Md2HtmlConfig | None = None


def load_config(project_root: Path | None = None) -> Md2HtmlConfig:
    """Load md2html configuration.

    Priority (highest wins):
    1. MD2HTML_DOCUMENT_FONT / MD2HTML_DOCUMENT_TITLE
    2. md2html.toml in *project_root* (default: CWD)
    3. Built-in defaults

    Raises OSError or UnicodeDecodeError for an unreadable md2html.toml.
    """
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    settings: dict[str, str] = {}

    toml_path = (project_root or Path.cwd()) / CONFIG_FILENAME
    if toml_path.is_file():
        settings.update(_read_document_section(toml_path))

    for key in DOCUMENT_KEYS:
        env_val = os.environ.get(f"{ENV_PREFIX}{key.upper()}")
        if env_val is not None:
            settings[key] = env_val

    _cached_config = Md2HtmlConfig(document=DocumentConfig(**settings))
    return _cached_config


def reset_config() -> None:
    """Clear cached config (useful for testing)."""
    global _cached_config
    _cached_config = None
