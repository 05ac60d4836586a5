"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`dreadball` package without requiring an editable install in CI.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

FIXTURES_PATH = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def catalog_path() -> Path:
    return FIXTURES_PATH / "catalog.json"
