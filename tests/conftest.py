"""Shared fixtures for md2html tests."""

import logging
import sys
from pathlib import Path

# Ensure src/ is at the FRONT of sys.path so the md2html package is found
# without an editable install.
_src_dir = str(Path(__file__).resolve().parent.parent / "src")
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

import pytest

# PNG signature followed by arbitrary bytes; images are never decoded
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256))


@pytest.fixture(autouse=True)
def _reset_config_cache(monkeypatch):
    """Clear config cache and MD2HTML_* env vars around each test."""
    from md2html.config_loader import reset_config
    monkeypatch.delenv("MD2HTML_DOCUMENT_FONT", raising=False)
    monkeypatch.delenv("MD2HTML_DOCUMENT_TITLE", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop handlers added by setup_logging so they don't outlive capsys."""
    logger = logging.getLogger("md2html")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def tmp_env(tmp_path, monkeypatch):
    """Run the test with CWD set to an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def md_file(tmp_path):
    """Write a Markdown file under tmp_path and return its path."""

    def _write(content: str, name: str = "doc.md") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
