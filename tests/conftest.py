"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import pytest

from tests.helpers.stub_feed import StubFeed

_ENV_VARS = (
    "GHACTIVITY_API_URL",
    "GHACTIVITY_TIMEOUT_S",
    "GHACTIVITY_USER_AGENT",
    "GHACTIVITY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear configuration variables and keep global log handlers untouched."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(
        "ghactivity.cli.configure_logging", lambda level: ("ERROR", False)
    )


@pytest.fixture
def stub_feed() -> StubFeed:
    """Return a stub feed answering with an empty array."""
    return StubFeed()
