"""Jira MCP server rendering Atlassian Document Format as markdown."""

from jira_adf_mcp.jira.adf import (
    ensure_adf_format,
    extract_text_from_adf,
    parse_adf,
    text_to_adf,
)
from jira_adf_mcp.jira.client import JiraClient
from jira_adf_mcp.server import mcp
from jira_adf_mcp.settings import JiraSettings

__all__ = [
    "mcp",
    "JiraSettings",
    "JiraClient",
    "ensure_adf_format",
    "extract_text_from_adf",
    "parse_adf",
    "text_to_adf",
]
