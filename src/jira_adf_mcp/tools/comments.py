"""Comment tools: add and retrieve comments on issues."""

from __future__ import annotations

from typing import Any

from jira_adf_mcp.formatters.comments import format_comments
from jira_adf_mcp.jira.adf import text_to_adf
from jira_adf_mcp.jira.errors import JiraValidationError
from jira_adf_mcp.jira.validators import AddCommentParams, GetCommentsParams, validate_params
from jira_adf_mcp.lifespan import get_jira_client
from jira_adf_mcp.server import mcp


@mcp.tool()
async def add_comment(issue_key: str, body: str) -> dict[str, Any]:
    """Add a comment to a Jira issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        body: Plain text comment body. Blank lines separate paragraphs.

    Returns:
        The created comment data.
    """
    params = validate_params(AddCommentParams, issue_key=issue_key, body=body)
    adf_body = text_to_adf(params.body)
    if adf_body is None:
        raise JiraValidationError("Comment body must not be blank.")
    client = get_jira_client()
    return await client.add_comment(params.issue_key, adf_body)


@mcp.tool()
async def get_comments(issue_key: str, max_comments: int | None = None) -> str:
    """Get comments on a Jira issue, rendered as markdown.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        max_comments: Maximum number of comments to show. Defaults to server config (10).

    Returns:
        Markdown listing each comment with author, timestamps and body.
    """
    params = validate_params(GetCommentsParams, issue_key=issue_key, max_comments=max_comments)
    client = get_jira_client()
    limit = params.max_comments if params.max_comments is not None else client.max_comments
    result = await client.get_comments(params.issue_key, max_results=limit, order_by="created")
    comments = result.get("comments", [])
    total = result.get("total", len(comments))
    return format_comments(params.issue_key, comments, total=total, max_displayed=limit)
