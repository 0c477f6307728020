"""Worklog formatters."""

from __future__ import annotations

from typing import Any

from jira_adf_mcp.formatters.dates import format_date
from jira_adf_mcp.jira.adf import extract_text_from_adf
from jira_adf_mcp.jira.models import JiraWorklog


def _comment_text(comment: Any) -> str:
    # One line per top-level block so paragraphs do not run together.
    if isinstance(comment, dict) and isinstance(comment.get("content"), list):
        blocks = (extract_text_from_adf(block).strip() for block in comment["content"])
        return "\n".join(block for block in blocks if block)
    return extract_text_from_adf(comment).strip()


def format_worklog(worklog: dict[str, Any] | JiraWorklog) -> str:
    """Format a single worklog entry. The comment is shown as plain text."""
    entry = worklog if isinstance(worklog, JiraWorklog) else JiraWorklog.model_validate(worklog)

    sections = [f"## ⏱️ Worklog {entry.id}" if entry.id else "## ⏱️ Worklog Entry"]
    sections.append(f"**Time Spent:** {entry.time_spent} ({entry.time_spent_seconds}s)")
    if entry.started:
        sections.append(f"**Started:** {format_date(entry.started)}")
    if entry.author:
        sections.append(f"**Author:** {entry.author.display_name or 'Unknown'}")
    if entry.created:
        sections.append(f"**Created:** {format_date(entry.created)}")
    if entry.updated and entry.updated != entry.created:
        sections.append(f"**Updated:** {format_date(entry.updated)}")
        if entry.update_author and entry.update_author != entry.author:
            sections.append(f"**Updated By:** {entry.update_author.display_name or 'Unknown'}")

    comment = _comment_text(entry.comment)
    if comment:
        sections.append("**Comment:**")
        sections.append(comment)

    if entry.visibility:
        sections.append(
            f"**Visibility:** {entry.visibility.get('type')} - {entry.visibility.get('value')}"
        )
    return "\n\n".join(sections)


def format_worklogs(worklogs: list[dict[str, Any]]) -> str:
    """Format a list of worklog entries with totals."""
    if not worklogs:
        return "# ⏱️ Worklogs\n\nNo worklog entries found."

    entries = [JiraWorklog.model_validate(w) for w in worklogs]
    total_seconds = sum(e.time_spent_seconds for e in entries)
    total_hours = round(total_seconds / 3600, 2)

    sections = [
        "# ⏱️ Worklogs",
        f"**Total Entries:** {len(entries)}",
        f"**Total Time:** {total_hours:g} hours ({total_seconds} seconds)",
    ]
    for entry in entries:
        sections.append("---")
        sections.append(format_worklog(entry))
    return "\n\n".join(sections)
