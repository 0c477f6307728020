"""Issue formatter: header, key fields and the rendered description."""

from __future__ import annotations

from typing import Any

from jira_adf_mcp.formatters.dates import format_date
from jira_adf_mcp.jira.adf import parse_adf
from jira_adf_mcp.jira.models import JiraIssue


def _is_empty_description(description: Any) -> bool:
    if not description:
        return True
    if isinstance(description, dict):
        return not description.get("content")
    if isinstance(description, str):
        return not description.strip()
    return True


def format_description(description: Any) -> str:
    """Return the "## Description" section, or "" when there is nothing to show."""
    if _is_empty_description(description):
        return ""
    return f"## Description\n{parse_adf(description)}\n\n"


def format_issue(issue: dict[str, Any]) -> str:
    """Format a raw issue payload as markdown."""
    model = JiraIssue.model_validate(issue)
    fields = model.fields

    lines = [f"# {model.key}: {fields.summary}", ""]
    if fields.status:
        lines.append(f"**Status:** {fields.status.get('name', 'Unknown')}")
    if fields.issue_type:
        lines.append(f"**Type:** {fields.issue_type.get('name', 'Unknown')}")
    if fields.priority:
        lines.append(f"**Priority:** {fields.priority.get('name', 'None')}")
    assignee = fields.assignee.display_name if fields.assignee else "Unassigned"
    lines.append(f"**Assignee:** {assignee}")
    if fields.reporter:
        lines.append(f"**Reporter:** {fields.reporter.display_name}")
    if fields.labels:
        lines.append(f"**Labels:** {', '.join(fields.labels)}")
    if fields.created:
        lines.append(f"**Created:** {format_date(fields.created)}")
    if fields.updated:
        lines.append(f"**Updated:** {format_date(fields.updated)}")

    markdown = "\n".join(lines) + "\n\n"
    return markdown + format_description(fields.description)
