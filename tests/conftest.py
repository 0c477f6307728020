"""Shared fixtures and the integration-test opt-in."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

TOOL_MODULES = ("issues", "comments", "search", "worklogs")


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: spawns the server process; run with -m integration")


def pytest_collection_modifyitems(config, items):
    """Integration tests only run when selected with ``-m integration``."""
    if "integration" in (config.option.markexpr or ""):
        return
    skip = pytest.mark.skip(reason="use -m integration to run")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture
def jira_env(monkeypatch):
    """Minimal JIRA_* environment for settings and lifespan tests."""
    monkeypatch.setenv("JIRA_URL", "https://test.atlassian.net/")
    monkeypatch.setenv("JIRA_EMAIL", "test@example.com")
    monkeypatch.setenv("JIRA_API_TOKEN", "tok")


@pytest.fixture
def mock_client():
    client = AsyncMock()
    client.max_results = 50
    client.max_comments = 10
    return client


@pytest.fixture
def patch_client(mock_client):
    """Make every tool module's get_jira_client() return ``mock_client``."""
    patches = [
        patch(f"jira_adf_mcp.tools.{name}.get_jira_client", return_value=mock_client)
        for name in TOOL_MODULES
    ]
    for p in patches:
        p.start()
    yield mock_client
    for p in patches:
        p.stop()
