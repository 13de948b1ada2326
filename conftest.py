"""Pytest configuration: ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_amount_env(monkeypatch):
    """Keep a developer's .env / shell defaults out of the suite."""
    for name in ("ARABIC_AMOUNT_THREE_DECIMALS", "ARABIC_AMOUNT_FORMAL", "ARABIC_AMOUNT_LIMITER"):
        monkeypatch.delenv(name, raising=False)
    yield
