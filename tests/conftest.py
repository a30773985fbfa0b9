"""
Shared test configuration for the house price predictor.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Point the model at an empty location so no test reads a real artifact."""
    monkeypatch.setenv("HOUSE_PRICE_MODEL_PATH", str(tmp_path / "missing.cbm"))
    monkeypatch.setenv("HOUSE_PRICE_LOG_LEVEL", "DEBUG")
