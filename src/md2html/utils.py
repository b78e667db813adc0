"""md2html shared utilities - logging and version."""

from __future__ import annotations

import logging
import sys

# ── Structured logging ───────────────────────────────────────────────

logger = logging.getLogger("md2html")


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``md2html`` logger with a stderr handler.

    In interactive terminals the format is compact; in pipes / CI it
    includes severity and logger name for machine parsing.
    """
    level = logging.DEBUG if verbose else logging.INFO
    handler = logging.StreamHandler(sys.stderr)
    if sys.stderr.isatty():
        fmt = "%(asctime)s %(message)s"
    else:
        fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))
    logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(handler)

# ── Version ─────────────────────────────────────────────────────────

try:
    from importlib.metadata import version as _get_version
    VERSION = _get_version("md2html")
except Exception:
    VERSION = "0.1.0"
