"""Jira API exception hierarchy."""


class JiraAPIError(Exception):
    """Base exception for Jira API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class JiraValidationError(JiraAPIError):
    """Raised when tool parameters or the request payload are invalid (400)."""

    def __init__(self, message: str = "Validation error."):
        super().__init__(message, status_code=400)


class JiraAuthenticationError(JiraAPIError):
    """Raised when authentication fails (401)."""

    def __init__(self, message: str = "Authentication failed. Check JIRA_EMAIL and JIRA_API_TOKEN."):
        super().__init__(message, status_code=401)


class JiraPermissionError(JiraAPIError):
    """Raised when the user lacks permissions on the issue or project (403)."""

    def __init__(self, message: str = "Permission denied."):
        super().__init__(message, status_code=403)


class JiraNotFoundError(JiraAPIError):
    """Raised when an issue, comment or worklog does not exist (404)."""

    def __init__(self, message: str = "Resource not found."):
        super().__init__(message, status_code=404)
