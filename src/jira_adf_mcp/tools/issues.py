"""Issue tools: get, create and update issues."""

from __future__ import annotations

import logging
from typing import Any

from jira_adf_mcp.formatters.issue import format_issue
from jira_adf_mcp.jira.adf import ADFDocument, ensure_adf_format
from jira_adf_mcp.jira.errors import JiraValidationError
from jira_adf_mcp.jira.validators import (
    CreateIssueParams,
    IssueKeyParams,
    UpdateIssueParams,
    validate_params,
)
from jira_adf_mcp.lifespan import get_jira_client
from jira_adf_mcp.server import mcp

logger = logging.getLogger("jira_adf_mcp")


def _description_adf(description: str | dict[str, Any] | None) -> ADFDocument | None:
    """Convert a description argument to ADF; ``None`` means leave the field out."""
    adf = ensure_adf_format(description)
    if adf is None and isinstance(description, dict):
        raise JiraValidationError(
            "Invalid parameters: description must be plain text or an ADF node with a \"type\"."
        )
    return adf


@mcp.tool()
async def get_issue(issue_key: str) -> str:
    """Get a Jira issue by its key (e.g. "PROJ-123").

    Args:
        issue_key: The issue key.

    Returns:
        Markdown with the issue's key fields and its description rendered from ADF.
    """
    params = validate_params(IssueKeyParams, issue_key=issue_key)
    client = get_jira_client()
    issue = await client.get_issue(params.issue_key)
    return format_issue(issue)


@mcp.tool()
async def create_issue(
    project_key: str,
    summary: str,
    issue_type: str = "Task",
    description: str | dict[str, Any] | None = None,
    priority: str | None = None,
    labels: list[str] | None = None,
) -> dict[str, Any]:
    """Create a new Jira issue.

    Args:
        project_key: The project key (e.g. "PROJ").
        summary: Issue title/summary.
        issue_type: Issue type name (e.g. "Task", "Bug", "Story"). Defaults to "Task".
        description: Plain text (blank lines separate paragraphs) or a pre-built
            ADF document or node. Optional.
        priority: Priority name (e.g. "High", "Medium", "Low"). Optional.
        labels: List of labels to attach. Optional.

    Returns:
        Created issue data with id, key, and self URL.
    """
    params = validate_params(
        CreateIssueParams,
        project_key=project_key,
        summary=summary,
        issue_type=issue_type,
        description=description,
        priority=priority,
        labels=labels,
    )
    client = get_jira_client()

    fields: dict[str, Any] = {
        "project": {"key": params.project_key},
        "summary": params.summary,
        "issuetype": {"name": params.issue_type},
    }
    adf_description = _description_adf(params.description)
    if adf_description is not None:
        fields["description"] = adf_description
    if params.priority:
        fields["priority"] = {"name": params.priority}
    if params.labels:
        fields["labels"] = params.labels

    result = await client.create_issue(fields)
    logger.info("Created issue %s in project %s", result.get("key"), params.project_key)
    return result


@mcp.tool()
async def update_issue(
    issue_key: str,
    summary: str | None = None,
    description: str | dict[str, Any] | None = None,
    priority: str | None = None,
    labels: list[str] | None = None,
) -> str:
    """Update fields on an existing Jira issue.

    Args:
        issue_key: The issue key (e.g. "PROJ-123").
        summary: New summary. Optional.
        description: New description as plain text or ADF. Optional; blank text is ignored.
        priority: New priority name. Optional.
        labels: New labels list (replaces existing). Optional.

    Returns:
        Confirmation message.
    """
    params = validate_params(
        UpdateIssueParams,
        issue_key=issue_key,
        summary=summary,
        description=description,
        priority=priority,
        labels=labels,
    )
    client = get_jira_client()

    fields: dict[str, Any] = {}
    if params.summary is not None:
        fields["summary"] = params.summary
    adf_description = _description_adf(params.description)
    if adf_description is not None:
        fields["description"] = adf_description
    if params.priority is not None:
        fields["priority"] = {"name": params.priority}
    if params.labels is not None:
        fields["labels"] = params.labels

    if not fields:
        return "No fields to update."

    await client.update_issue(params.issue_key, fields)
    return f"Issue {params.issue_key} updated successfully ({', '.join(sorted(fields))})."
