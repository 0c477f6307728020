"""Worklog tools: log, list, update and delete time spent on issues."""

from __future__ import annotations

import logging
from typing import Any

from jira_adf_mcp.formatters.worklogs import format_worklog, format_worklogs
from jira_adf_mcp.jira.adf import text_to_adf
from jira_adf_mcp.jira.validators import (
    AddWorklogParams,
    IssueKeyParams,
    UpdateWorklogParams,
    WorklogRefParams,
    to_jira_datetime,
    validate_params,
)
from jira_adf_mcp.lifespan import get_jira_client
from jira_adf_mcp.server import mcp

logger = logging.getLogger("jira_adf_mcp")


@mcp.tool()
async def add_worklog(
    issue_key: str,
    time_spent: str,
    comment: str | None = None,
    started: str | None = None,
) -> str:
    """Log time spent on a Jira issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        time_spent: Duration in Jira notation (e.g. "30m", "4h", "3h 30m").
        comment: Plain text description of the work done. Optional.
        started: ISO datetime the work started at. Defaults to now on the Jira side.

    Returns:
        Markdown describing the created worklog.
    """
    params = validate_params(
        AddWorklogParams,
        issue_key=issue_key,
        time_spent=time_spent,
        comment=comment,
        started=started,
    )
    payload: dict[str, Any] = {"timeSpent": params.time_spent}
    adf_comment = text_to_adf(params.comment)
    if adf_comment is not None:
        payload["comment"] = adf_comment
    if params.started is not None:
        payload["started"] = to_jira_datetime(params.started)

    client = get_jira_client()
    worklog = await client.add_worklog(params.issue_key, payload)
    logger.info("Logged %s on %s", params.time_spent, params.issue_key)
    return format_worklog(worklog)


@mcp.tool()
async def get_worklogs(issue_key: str) -> str:
    """Get all worklog entries on a Jira issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").

    Returns:
        Markdown with totals and each entry's time, author and comment.
    """
    params = validate_params(IssueKeyParams, issue_key=issue_key)
    client = get_jira_client()
    result = await client.get_worklogs(params.issue_key)
    return format_worklogs(result.get("worklogs", []))


@mcp.tool()
async def update_worklog(
    issue_key: str,
    worklog_id: str,
    time_spent: str | None = None,
    comment: str | None = None,
) -> str:
    """Update the time spent or comment of an existing worklog.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        worklog_id: The worklog ID (from get_worklogs).
        time_spent: New duration in Jira notation. Optional.
        comment: New plain text comment. Optional; a blank value is ignored.

    Returns:
        Markdown describing the updated worklog, or a message when nothing changed.
    """
    params = validate_params(
        UpdateWorklogParams,
        issue_key=issue_key,
        worklog_id=worklog_id,
        time_spent=time_spent,
        comment=comment,
    )
    payload: dict[str, Any] = {}
    if params.time_spent is not None:
        payload["timeSpent"] = params.time_spent
    adf_comment = text_to_adf(params.comment)
    if adf_comment is not None:
        payload["comment"] = adf_comment

    if not payload:
        return "No worklog fields to update."

    client = get_jira_client()
    worklog = await client.update_worklog(params.issue_key, params.worklog_id, payload)
    return format_worklog(worklog)


@mcp.tool()
async def delete_worklog(issue_key: str, worklog_id: str) -> str:
    """Delete a worklog entry from a Jira issue. This action is irreversible.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        worklog_id: The worklog ID (from get_worklogs).

    Returns:
        Confirmation message.
    """
    params = validate_params(WorklogRefParams, issue_key=issue_key, worklog_id=worklog_id)
    client = get_jira_client()
    await client.delete_worklog(params.issue_key, params.worklog_id)
    return f"Worklog {params.worklog_id} deleted from {params.issue_key}."
