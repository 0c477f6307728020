"""Search tool: JQL search rendered as issue cards."""

from __future__ import annotations

from jira_adf_mcp.formatters.issues_list import format_issues_list
from jira_adf_mcp.jira.validators import SearchParams, validate_params
from jira_adf_mcp.lifespan import get_jira_client
from jira_adf_mcp.server import mcp


@mcp.tool()
async def search_issues(
    jql: str,
    max_results: int | None = None,
    start_at: int = 0,
) -> str:
    """Search for Jira issues using JQL (Jira Query Language).

    Args:
        jql: JQL query string (e.g. 'project = PROJ AND status = "To Do"').
        max_results: Maximum number of results. Defaults to server config (50).
        start_at: Pagination offset. Defaults to 0.

    Returns:
        Markdown cards with status, priority, assignee and a short
        description preview for each matching issue.
    """
    params = validate_params(SearchParams, jql=jql, max_results=max_results, start_at=start_at)
    client = get_jira_client()
    limit = params.max_results if params.max_results is not None else client.max_results

    result = await client.search_issues(params.jql, max_results=limit, start_at=params.start_at)
    issues = result.get("issues", [])
    return format_issues_list(
        issues, jql=params.jql, total=result.get("total"), max_results=limit
    )
