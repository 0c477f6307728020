"""Pydantic models for Jira API responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class JiraUser(BaseModel):
    account_id: str = Field(alias="accountId", default="")
    display_name: str = Field(alias="displayName", default="")
    email_address: str | None = Field(alias="emailAddress", default=None)

    model_config = {"populate_by_name": True}


class JiraIssueFields(BaseModel):
    summary: str = ""
    # ADF document on API v3, plain string on older instances.
    description: Any | None = None
    status: dict[str, Any] | None = None
    issue_type: dict[str, Any] | None = Field(alias="issuetype", default=None)
    priority: dict[str, Any] | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    labels: list[str] = Field(default_factory=list)
    project: dict[str, Any] | None = None
    created: str | None = None
    updated: str | None = None

    model_config = {"populate_by_name": True}


class JiraIssue(BaseModel):
    id: str = ""
    key: str = ""
    self_url: str = Field(alias="self", default="")
    fields: JiraIssueFields = Field(default_factory=JiraIssueFields)

    model_config = {"populate_by_name": True}


class JiraComment(BaseModel):
    id: str = ""
    author: JiraUser | None = None
    update_author: JiraUser | None = Field(alias="updateAuthor", default=None)
    body: Any | None = None
    created: str | None = None
    updated: str | None = None
    visibility: dict[str, Any] | None = None
    jsd_public: bool | None = Field(alias="jsdPublic", default=None)

    model_config = {"populate_by_name": True}

    @property
    def is_internal(self) -> bool:
        return self.visibility is not None or self.jsd_public is False


class JiraWorklog(BaseModel):
    id: str = ""
    author: JiraUser | None = None
    update_author: JiraUser | None = Field(alias="updateAuthor", default=None)
    comment: Any | None = None
    time_spent: str = Field(alias="timeSpent", default="")
    time_spent_seconds: int = Field(alias="timeSpentSeconds", default=0)
    started: str | None = None
    created: str | None = None
    updated: str | None = None
    visibility: dict[str, Any] | None = None

    model_config = {"populate_by_name": True}
