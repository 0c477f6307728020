"""Parameter models validating raw tool input before it reaches Jira."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError

from jira_adf_mcp.jira.errors import JiraValidationError

ISSUE_KEY_PATTERN = r"^[A-Z][A-Z0-9_]*-\d+$"
PROJECT_KEY_PATTERN = r"^[A-Z][A-Z0-9_]*$"
# Jira duration notation, e.g. "2w", "3d", "4h", "3h 30m".
TIME_SPENT_PATTERN = r"^\d+[wdhm]( \d+[wdhm])*$"
MAX_TEXT_LENGTH = 32767

ParamsT = TypeVar("ParamsT", bound=BaseModel)

# Plain text (length-checked) or a pre-built ADF document/node.
Description = Union[Annotated[str, Field(max_length=MAX_TEXT_LENGTH)], dict[str, Any], None]


class CreateIssueParams(BaseModel):
    project_key: str = Field(pattern=PROJECT_KEY_PATTERN)
    summary: str = Field(min_length=1, max_length=255)
    issue_type: str = Field(default="Task", min_length=1)
    description: Description = None
    priority: str | None = None
    labels: list[str] | None = None


class UpdateIssueParams(BaseModel):
    issue_key: str = Field(pattern=ISSUE_KEY_PATTERN)
    summary: str | None = Field(default=None, min_length=1, max_length=255)
    description: Description = None
    priority: str | None = None
    labels: list[str] | None = None


class GetCommentsParams(BaseModel):
    issue_key: str = Field(pattern=ISSUE_KEY_PATTERN)
    max_comments: int | None = Field(default=None, ge=1, le=100)


class AddCommentParams(BaseModel):
    issue_key: str = Field(pattern=ISSUE_KEY_PATTERN)
    body: str = Field(min_length=1, max_length=MAX_TEXT_LENGTH)


class AddWorklogParams(BaseModel):
    issue_key: str = Field(pattern=ISSUE_KEY_PATTERN)
    time_spent: str = Field(pattern=TIME_SPENT_PATTERN)
    comment: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH)
    started: datetime | None = None


class UpdateWorklogParams(BaseModel):
    issue_key: str = Field(pattern=ISSUE_KEY_PATTERN)
    worklog_id: str = Field(min_length=1)
    time_spent: str | None = Field(default=None, pattern=TIME_SPENT_PATTERN)
    comment: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH)


class WorklogRefParams(BaseModel):
    issue_key: str = Field(pattern=ISSUE_KEY_PATTERN)
    worklog_id: str = Field(min_length=1)


class IssueKeyParams(BaseModel):
    issue_key: str = Field(pattern=ISSUE_KEY_PATTERN)


def validate_params(model: type[ParamsT], **raw: Any) -> ParamsT:
    """Validate ``raw`` against ``model``, raising JiraValidationError on failure."""
    try:
        return model(**raw)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise JiraValidationError(f"Invalid parameters: {problems}") from e


def to_jira_datetime(value: datetime) -> str:
    """Format a datetime the way Jira expects it, e.g. 2024-01-31T09:00:00.000+0000.

    Naive datetimes are taken as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}" + value.strftime("%z")


class SearchParams(BaseModel):
    jql: str = Field(min_length=1)
    max_results: int | None = Field(default=None, ge=1, le=100)
    start_at: int = Field(default=0, ge=0)
