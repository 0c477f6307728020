"""Configuration settings loaded from JIRA_* environment variables."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class JiraSettings(BaseSettings):
    """Connection details and display defaults for the Jira site.

    ``url``, ``email`` and ``api_token`` are required; the page sizes bound
    how many search results and comments a tool renders when the caller
    does not ask for a specific number.
    """

    model_config = {"env_prefix": "JIRA_"}

    url: str
    email: str
    api_token: str

    timeout: int = Field(default=30, gt=0)
    ssl_verify: bool | str = True
    log_level: str = "INFO"
    max_results: int = Field(default=50, ge=1, le=100)
    max_comments: int = Field(default=10, ge=1, le=100)

    @field_validator("url")
    @classmethod
    def _site_url(cls, value: str) -> str:
        if not value.startswith(("https://", "http://")):
            raise ValueError("JIRA_URL must be an http(s) URL, e.g. https://your-site.atlassian.net")
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown JIRA_LOG_LEVEL {value!r}")
        return level
