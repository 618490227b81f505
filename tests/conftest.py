"""Shared fixtures for physcalc tests."""

import pytest

from physcalc.config import reset_settings

_ENV_VARS = (
    "PHYSCALC_LOG_LEVEL",
    "PHYSCALC_STRICT_UNITS",
    "PHYSCALC_MAX_DEPTH",
    "PHYSCALC_OUTPUT",
)


@pytest.fixture
def clean_settings(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
