"""Shared fixtures.

Exports default to ``settings.OUTPUT_DIR``; every test gets its own temporary
output directory so nothing is written into the working tree.
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

import settings
from models import Entry


@pytest.fixture(autouse=True)
def _isolate_output_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    out = tmp_path / "reports"
    monkeypatch.setattr(settings, "OUTPUT_DIR", out)
    return out


@pytest.fixture
def sample_entries() -> list[Entry]:
    return [
        Entry(supplier="A → B", quoted_value=1000.0, final_value=800.0, account_category="X"),
        Entry(supplier="C → D", quoted_value=500.0, final_value=500.0, account_category="X"),
    ]


def make_png(width: int, height: int) -> bytes:
    buf = BytesIO()
    Image.new("RGB", (width, height), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def png_factory():
    return make_png
