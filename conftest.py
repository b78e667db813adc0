"""Root conftest - make src/ importable without an editable install."""

import sys
from pathlib import Path

_src_dir = str(Path(__file__).resolve().parent / "src")

if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)
