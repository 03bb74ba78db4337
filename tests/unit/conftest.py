"""Shared fixtures for unit tests."""

import pytest

from atf_core import config


@pytest.fixture
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every configuration override from the environment."""
    for key in config.KEYS:
        monkeypatch.delenv(config.env_var_name(key), raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_process_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without a cached process-wide configuration."""
    monkeypatch.setattr(config, "_config", None)
