"""Comments formatter."""

from __future__ import annotations

from typing import Any

from jira_adf_mcp.formatters.dates import format_date
from jira_adf_mcp.jira.adf import parse_adf
from jira_adf_mcp.jira.models import JiraComment


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def format_comments(
    issue_key: str,
    comments: list[dict[str, Any]],
    total: int | None = None,
    max_displayed: int | None = None,
) -> str:
    """Format an issue's comments as markdown, oldest first.

    Args:
        issue_key: The issue the comments belong to.
        comments: Raw comment payloads as returned by Jira.
        total: Total comments on the issue, when more exist than were fetched.
        max_displayed: The page size used to fetch ``comments``.
    """
    header = f"# 💬 Comments for {issue_key}\n\n"
    if not comments:
        return header + "**No comments found**\n\nThis issue doesn't have any comments yet."

    parsed = [JiraComment.model_validate(c) for c in comments]
    total = total if total is not None else len(parsed)
    truncated = max_displayed is not None and max_displayed < total

    summary = f"**Total:** {_plural(total, 'comment')}"
    if truncated:
        summary += f" | **Showing:** {max_displayed}"
    latest = format_date(parsed[-1].created)
    if latest:
        summary += f" | **Latest:** {latest}"

    body = "\n---\n\n".join(
        _format_single_comment(comment, number) for number, comment in enumerate(parsed, start=1)
    )
    markdown = f"{header}{summary}\n\n---\n\n{body}"

    if truncated:
        remaining = total - max_displayed
        markdown += (
            f"\n\n**Navigation:** Use `get_comments {issue_key} max_comments:{max_displayed + 10}`"
            f" to see {_plural(remaining, 'more comment')}."
        )
    return markdown


def _format_single_comment(comment: JiraComment, number: int) -> str:
    author = comment.author.display_name if comment.author and comment.author.display_name else "Unknown User"
    lock = "🔒 " if comment.is_internal else ""
    markdown = f"## {lock}Comment #{number} • {author} • {format_date(comment.created)}\n\n"

    if comment.updated and comment.updated != comment.created:
        editor = comment.update_author.display_name if comment.update_author else author
        markdown += f"_Last edited: {format_date(comment.updated)}"
        if editor and editor != author:
            markdown += f" by {editor}"
        markdown += "_\n\n"

    if comment.is_internal:
        markdown += "_Internal comment - restricted visibility_\n\n"

    body = parse_adf(comment.body).strip() if comment.body else ""
    return markdown + (body or "_No content_")
