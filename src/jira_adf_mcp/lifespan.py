"""Server lifespan: owns the single JiraClient the tools share."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from jira_adf_mcp.jira.client import JiraClient
from jira_adf_mcp.logging.logger import setup_logger
from jira_adf_mcp.settings import JiraSettings

logger = logging.getLogger("jira_adf_mcp")

_client: JiraClient | None = None


def get_jira_client() -> JiraClient:
    """Return the client opened by :func:`lifespan`; raises RuntimeError outside it."""
    if _client is None:
        raise RuntimeError("JiraClient not initialized. Is the server running?")
    return _client


@asynccontextmanager
async def lifespan(server) -> AsyncIterator[None]:  # noqa: ARG001
    """Load settings, open the client for the server's lifetime, close it on exit."""
    global _client

    settings = JiraSettings()
    setup_logger(level=settings.log_level)
    logger.info(
        "Connecting to %s as %s (max_results=%d, max_comments=%d)",
        settings.url,
        settings.email,
        settings.max_results,
        settings.max_comments,
    )

    async with JiraClient.from_settings(settings) as client:
        _client = client
        try:
            yield
        finally:
            _client = None
            logger.info("Jira client closed")
