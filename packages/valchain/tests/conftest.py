"""Pytest configuration and fixtures for valchain tests."""

import pytest

from valchain.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test with default settings and no VALCHAIN_* variables."""
    monkeypatch.delenv("VALCHAIN_REPR_LIMIT", raising=False)
    monkeypatch.delenv("VALCHAIN_LOG_FAILURES", raising=False)
    reset_settings()
    yield
    reset_settings()
