from jira_adf_mcp.jira.adf import (
    ADFDocument,
    ADFMark,
    ADFNode,
    ADFToMarkdownParser,
    adf_parser,
    ensure_adf_format,
    extract_text_from_adf,
    parse_adf,
    text_to_adf,
)
from jira_adf_mcp.jira.client import JiraClient
from jira_adf_mcp.jira.errors import (
    JiraAPIError,
    JiraAuthenticationError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraValidationError,
)

__all__ = [
    "ADFDocument",
    "ADFMark",
    "ADFNode",
    "ADFToMarkdownParser",
    "JiraClient",
    "JiraAPIError",
    "JiraAuthenticationError",
    "JiraNotFoundError",
    "JiraPermissionError",
    "JiraValidationError",
    "adf_parser",
    "ensure_adf_format",
    "extract_text_from_adf",
    "parse_adf",
    "text_to_adf",
]
