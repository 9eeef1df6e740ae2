import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Headless runs: QPainter and QImage only need the offscreen platform plugin.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance() or QGuiApplication([])
    yield app


@pytest.fixture
def write_png(tmp_path):
    """Return a helper writing an RGBA array to a PNG file under ``tmp_path``."""

    from PIL import Image

    def _write(array, name="input.png"):
        path = tmp_path / name
        Image.fromarray(array, "RGBA").save(path)
        return path

    return _write
