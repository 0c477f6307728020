"""Search results formatter: one markdown card per issue."""

from __future__ import annotations

import re
from typing import Any

from jira_adf_mcp.formatters.dates import format_date
from jira_adf_mcp.jira.adf import parse_adf
from jira_adf_mcp.jira.models import JiraIssue

PREVIEW_LENGTH = 100

_WHITESPACE = re.compile(r"\s+")

# Checked in order; first keyword group found in the status name wins.
_STATUS_ICONS = (
    (("done", "resolved", "closed"), "✅"),
    (("progress", "review", "testing"), "🔄"),
    (("blocked", "impediment"), "🚫"),
    (("todo", "to do", "open", "new"), "📋"),
)


def status_icon(status: str) -> str:
    lowered = status.lower()
    for keywords, icon in _STATUS_ICONS:
        if any(keyword in lowered for keyword in keywords):
            return icon
    return "🔵"


def description_preview(description: Any, limit: int = PREVIEW_LENGTH) -> str:
    """Render ``description`` as markdown collapsed onto one line, cut at ``limit``."""
    text = _WHITESPACE.sub(" ", parse_adf(description)).strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."


def _format_card(issue: JiraIssue) -> str:
    fields = issue.fields
    status = (fields.status or {}).get("name") or "Unknown"
    priority = (fields.priority or {}).get("name") or "None"
    assignee = fields.assignee.display_name if fields.assignee and fields.assignee.display_name else "Unassigned"

    card = f"## 🎫 {issue.key}: {fields.summary or 'No Summary'}\n\n"
    card += (
        f"**Status**: {status_icon(status)} {status} | **Priority**: {priority}"
        f" | **Assignee**: {assignee}\n\n"
    )

    preview = description_preview(fields.description) if fields.description else ""
    if preview:
        card += f"**Description**: {preview}\n\n"

    dates = []
    if fields.created:
        dates.append(f"Created: {format_date(fields.created)}")
    if fields.updated:
        dates.append(f"Updated: {format_date(fields.updated)}")
    if dates:
        card += f"*{' | '.join(dates)}*\n"

    card += f"**[View Details →](get_issue {issue.key})**\n\n---\n\n"
    return card


def format_issues_list(
    issues: list[dict[str, Any]],
    jql: str | None = None,
    total: int | None = None,
    max_results: int | None = None,
) -> str:
    """Format search results as markdown cards with description previews.

    Args:
        issues: Raw issue payloads from the search endpoint.
        jql: The query that produced them, echoed in the header.
        total: Total matches reported by Jira.
        max_results: Page size used for the search.
    """
    markdown = "# Jira Search Results\n\n"
    if jql:
        markdown += f"**JQL Query**: `{jql}`\n"

    if not issues:
        markdown += "\n**Found**: 0 issues\n\n---\n\n"
        markdown += "📭 **No issues found matching your search criteria.**\n\n"
        return markdown + "Try adjusting your JQL query.\n"

    total = total if total is not None else len(issues)
    truncated = max_results is not None and total > len(issues)
    markdown += f"**Results**: {len(issues)} of {total}\n\n---\n\n"

    markdown += "".join(_format_card(JiraIssue.model_validate(issue)) for issue in issues)

    if truncated:
        markdown += (
            f"*Showing first {len(issues)} results. Use `max_results` to see more.*\n\n"
        )
    return markdown + "💡 **Tip**: Use `get_issue <ISSUE-KEY>` for detailed information about any issue.\n"
