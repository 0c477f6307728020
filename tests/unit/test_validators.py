"""Tests for tool parameter validation."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from jira_adf_mcp.jira.errors import JiraValidationError
from jira_adf_mcp.jira.validators import (
    AddCommentParams,
    AddWorklogParams,
    CreateIssueParams,
    IssueKeyParams,
    SearchParams,
    UpdateIssueParams,
    UpdateWorklogParams,
    to_jira_datetime,
    validate_params,
)


class TestIssueKey:
    @pytest.mark.parametrize("key", ["PROJ-1", "AB2-1234", "A_B-9"])
    def test_valid(self, key):
        assert validate_params(IssueKeyParams, issue_key=key).issue_key == key

    @pytest.mark.parametrize("key", ["proj-1", "PROJ", "PROJ-", "-1", "PROJ-1a"])
    def test_invalid(self, key):
        with pytest.raises(JiraValidationError, match="issue_key"):
            validate_params(IssueKeyParams, issue_key=key)


class TestWorklogParams:
    @pytest.mark.parametrize("value", ["30m", "4h", "2d", "1w", "3h 30m"])
    def test_time_spent_valid(self, value):
        params = validate_params(AddWorklogParams, issue_key="PROJ-1", time_spent=value)
        assert params.time_spent == value

    @pytest.mark.parametrize("value", ["", "4", "4x", "h4", "3h  30m"])
    def test_time_spent_invalid(self, value):
        with pytest.raises(JiraValidationError, match="time_spent"):
            validate_params(AddWorklogParams, issue_key="PROJ-1", time_spent=value)

    def test_started_parsed(self):
        params = validate_params(
            AddWorklogParams, issue_key="PROJ-1", time_spent="1h", started="2024-01-31T09:00:00Z"
        )
        assert params.started == datetime(2024, 1, 31, 9, 0, tzinfo=timezone.utc)

    def test_started_invalid(self):
        with pytest.raises(JiraValidationError, match="started"):
            validate_params(AddWorklogParams, issue_key="PROJ-1", time_spent="1h", started="yesterday")

    def test_update_allows_missing_fields(self):
        params = validate_params(UpdateWorklogParams, issue_key="PROJ-1", worklog_id="10")
        assert params.time_spent is None
        assert params.comment is None

    def test_update_requires_worklog_id(self):
        with pytest.raises(JiraValidationError, match="worklog_id"):
            validate_params(UpdateWorklogParams, issue_key="PROJ-1", worklog_id="")


class TestOtherParams:
    def test_comment_body_required(self):
        with pytest.raises(JiraValidationError, match="body"):
            validate_params(AddCommentParams, issue_key="PROJ-1", body="")

    def test_comment_too_long(self):
        with pytest.raises(JiraValidationError, match="body"):
            validate_params(AddCommentParams, issue_key="PROJ-1", body="x" * 32768)

    def test_create_issue_defaults(self):
        params = validate_params(CreateIssueParams, project_key="PROJ", summary="Title")
        assert params.issue_type == "Task"
        assert params.description is None

    def test_description_accepts_adf(self):
        doc = {"type": "doc", "version": 1, "content": []}
        params = validate_params(CreateIssueParams, project_key="PROJ", summary="T", description=doc)
        assert params.description == doc

    def test_description_text_too_long(self):
        with pytest.raises(JiraValidationError, match="description"):
            validate_params(UpdateIssueParams, issue_key="PROJ-1", description="x" * 32768)

    def test_description_rejects_other_types(self):
        with pytest.raises(JiraValidationError, match="description"):
            validate_params(UpdateIssueParams, issue_key="PROJ-1", description=["a"])

    def test_search_page_size_bounds(self):
        assert validate_params(SearchParams, jql="project = PROJ").max_results is None
        with pytest.raises(JiraValidationError, match="max_results"):
            validate_params(SearchParams, jql="project = PROJ", max_results=101)

    def test_create_issue_bad_project_key(self):
        with pytest.raises(JiraValidationError, match="project_key"):
            validate_params(CreateIssueParams, project_key="proj", summary="Title")


class TestJiraDatetime:
    def test_utc(self):
        value = datetime(2024, 1, 31, 9, 5, 7, 123456, tzinfo=timezone.utc)
        assert to_jira_datetime(value) == "2024-01-31T09:05:07.123+0000"

    def test_naive_is_utc(self):
        assert to_jira_datetime(datetime(2024, 1, 31, 9, 0)) == "2024-01-31T09:00:00.000+0000"

    def test_offset(self):
        value = datetime(2024, 1, 31, 9, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_jira_datetime(value) == "2024-01-31T09:00:00.000+0200"
