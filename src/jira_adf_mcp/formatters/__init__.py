from jira_adf_mcp.formatters.comments import format_comments
from jira_adf_mcp.formatters.issue import format_description, format_issue
from jira_adf_mcp.formatters.issues_list import format_issues_list
from jira_adf_mcp.formatters.worklogs import format_worklog, format_worklogs

__all__ = [
    "format_comments",
    "format_description",
    "format_issue",
    "format_issues_list",
    "format_worklog",
    "format_worklogs",
]
