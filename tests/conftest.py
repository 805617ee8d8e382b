"""Test configuration helpers."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR
