"""Pytest configuration for globalkit tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from globalkit.config import get_settings  # noqa: E402


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Clear the cached settings before and after a test that changes the environment."""

    for name in ("GLOBALKIT_CONFIG", "GLOBALKIT_WORD_BITS", "GLOBALKIT_ECHO_MODE", "GLOBALKIT_BASE64_UIDS", "GLOBALKIT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
