"""MCP tools. Importing this package registers every tool with the server."""

from jira_adf_mcp.tools import comments, issues, search, worklogs

__all__ = ["comments", "issues", "search", "worklogs"]
