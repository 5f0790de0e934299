"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _fake_registry_credentials(monkeypatch):
    """Never pick up a real API key or registry URL from the developer's environment."""
    monkeypatch.setenv("COMPANIES_HOUSE_API_KEY", "test-key")
    monkeypatch.delenv("COMPANIES_HOUSE_BASE_URL", raising=False)
    monkeypatch.delenv("COMPANIES_HOUSE_TIMEOUT", raising=False)
