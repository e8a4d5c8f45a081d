"""
Shared test fixtures for the twotrack test suite.

Keeps structlog and TWOTRACK_* environment variables from leaking between tests.
"""

from __future__ import annotations

import os

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Restore structlog's default configuration after every test."""
    yield
    structlog.reset_defaults()


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:
    """Remove TWOTRACK_* variables and run from an empty directory (no .env)."""
    for name in list(os.environ):
        if name.startswith("TWOTRACK_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
