"""Shared fixtures for tsconfig-init tests."""

import pytest

from tsinit.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from TSINIT_* variables and cached settings."""
    for name in ("TSINIT_ENV", "TSINIT_LOG_LEVEL", "TSINIT_ASSUME_YES"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def project_root(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
