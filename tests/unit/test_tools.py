"""Tests for the MCP tools using a mocked JiraClient."""

from __future__ import annotations

import pytest

from jira_adf_mcp.jira.adf import text_to_adf
from jira_adf_mcp.jira.errors import JiraValidationError
from jira_adf_mcp.tools import comments, issues, search, worklogs


def _fn(tool):
    """Return the plain coroutine function behind an @mcp.tool() registration."""
    return getattr(tool, "fn", tool)


class TestIssueTools:
    async def test_get_issue_renders_description(self, patch_client):
        patch_client.get_issue.return_value = {
            "key": "PROJ-1",
            "fields": {"summary": "Test", "description": text_to_adf("Bug details here")},
        }
        markdown = await _fn(issues.get_issue)("PROJ-1")
        assert "# PROJ-1: Test" in markdown
        assert "## Description\nBug details here\n\n" in markdown
        patch_client.get_issue.assert_awaited_once_with("PROJ-1")

    async def test_create_issue_converts_description(self, patch_client):
        patch_client.create_issue.return_value = {"key": "PROJ-2"}
        await _fn(issues.create_issue)(
            project_key="PROJ", summary="New", description="First\n\nSecond", labels=["x"]
        )
        fields = patch_client.create_issue.call_args.args[0]
        assert fields["description"] == text_to_adf("First\n\nSecond")
        assert fields["issuetype"] == {"name": "Task"}
        assert fields["labels"] == ["x"]

    async def test_create_issue_omits_blank_description(self, patch_client):
        patch_client.create_issue.return_value = {"key": "PROJ-3"}
        await _fn(issues.create_issue)(project_key="PROJ", summary="New", description="  \n\n ")
        fields = patch_client.create_issue.call_args.args[0]
        assert "description" not in fields

    async def test_update_issue_nothing_to_do(self, patch_client):
        result = await _fn(issues.update_issue)("PROJ-1", description="   ")
        assert result == "No fields to update."
        patch_client.update_issue.assert_not_awaited()

    async def test_update_issue_sends_fields(self, patch_client):
        result = await _fn(issues.update_issue)("PROJ-1", summary="S", description="D")
        patch_client.update_issue.assert_awaited_once_with(
            "PROJ-1", {"summary": "S", "description": text_to_adf("D")}
        )
        assert "PROJ-1 updated" in result

    async def test_create_issue_accepts_prebuilt_document(self, patch_client):
        patch_client.create_issue.return_value = {"key": "PROJ-4"}
        doc = text_to_adf("Rich body")
        await _fn(issues.create_issue)(project_key="PROJ", summary="New", description=doc)
        fields = patch_client.create_issue.call_args.args[0]
        assert fields["description"] == doc

    async def test_update_issue_wraps_bare_node(self, patch_client):
        node = {
            "type": "paragraph",
            "content": [{"type": "text", "text": "Bold", "marks": [{"type": "strong"}]}],
        }
        await _fn(issues.update_issue)("PROJ-1", description=node)
        patch_client.update_issue.assert_awaited_once_with(
            "PROJ-1", {"description": {"type": "doc", "version": 1, "content": [node]}}
        )

    async def test_description_dict_without_type_rejected(self, patch_client):
        with pytest.raises(JiraValidationError, match="description"):
            await _fn(issues.create_issue)(
                project_key="PROJ", summary="New", description={"content": []}
            )
        patch_client.create_issue.assert_not_awaited()

    async def test_invalid_key_rejected_before_request(self, patch_client):
        with pytest.raises(JiraValidationError):
            await _fn(issues.get_issue)("not a key")
        patch_client.get_issue.assert_not_awaited()


class TestCommentTools:
    async def test_add_comment_builds_adf(self, patch_client):
        patch_client.add_comment.return_value = {"id": "10"}
        result = await _fn(comments.add_comment)("PROJ-1", "Line one\n\nLine two")
        assert result == {"id": "10"}
        patch_client.add_comment.assert_awaited_once_with(
            "PROJ-1", text_to_adf("Line one\n\nLine two")
        )

    async def test_add_blank_comment_rejected(self, patch_client):
        with pytest.raises(JiraValidationError, match="blank"):
            await _fn(comments.add_comment)("PROJ-1", "\n\n\n")
        patch_client.add_comment.assert_not_awaited()

    async def test_get_comments_uses_default_limit(self, patch_client):
        patch_client.get_comments.return_value = {
            "total": 1,
            "comments": [{"id": "1", "author": {"displayName": "Ana"}, "body": text_to_adf("Hi")}],
        }
        markdown = await _fn(comments.get_comments)("PROJ-1")
        patch_client.get_comments.assert_awaited_once_with(
            "PROJ-1", max_results=10, order_by="created"
        )
        assert "Comment #1 • Ana" in markdown
        assert markdown.endswith("Hi")


class TestWorklogTools:
    async def test_add_worklog_payload(self, patch_client):
        patch_client.add_worklog.return_value = {"id": "5", "timeSpent": "2h", "timeSpentSeconds": 7200}
        markdown = await _fn(worklogs.add_worklog)(
            "PROJ-1", "2h", comment="Fixed bug\n\nAlso updated docs", started="2024-01-31T09:00:00Z"
        )
        patch_client.add_worklog.assert_awaited_once_with(
            "PROJ-1",
            {
                "timeSpent": "2h",
                "comment": {
                    "type": "doc",
                    "version": 1,
                    "content": [
                        {"type": "paragraph", "content": [{"type": "text", "text": "Fixed bug"}]},
                        {"type": "paragraph", "content": [{"type": "text", "text": "Also updated docs"}]},
                    ],
                },
                "started": "2024-01-31T09:00:00.000+0000",
            },
        )
        assert "## ⏱️ Worklog 5" in markdown

    async def test_add_worklog_without_comment(self, patch_client):
        patch_client.add_worklog.return_value = {"id": "6"}
        await _fn(worklogs.add_worklog)("PROJ-1", "15m", comment="   ")
        assert patch_client.add_worklog.call_args.args[1] == {"timeSpent": "15m"}

    async def test_add_worklog_invalid_duration(self, patch_client):
        with pytest.raises(JiraValidationError, match="time_spent"):
            await _fn(worklogs.add_worklog)("PROJ-1", "two hours")
        patch_client.add_worklog.assert_not_awaited()

    async def test_get_worklogs(self, patch_client):
        patch_client.get_worklogs.return_value = {
            "worklogs": [{"id": "1", "timeSpent": "1h", "timeSpentSeconds": 3600, "comment": text_to_adf("Done")}]
        }
        markdown = await _fn(worklogs.get_worklogs)("PROJ-1")
        assert "**Total Entries:** 1" in markdown
        assert "Done" in markdown

    async def test_update_worklog_nothing_to_do(self, patch_client):
        result = await _fn(worklogs.update_worklog)("PROJ-1", "1")
        assert result == "No worklog fields to update."
        patch_client.update_worklog.assert_not_awaited()

    async def test_update_worklog_comment(self, patch_client):
        patch_client.update_worklog.return_value = {"id": "1", "timeSpent": "1h"}
        await _fn(worklogs.update_worklog)("PROJ-1", "1", comment="New note")
        patch_client.update_worklog.assert_awaited_once_with(
            "PROJ-1", "1", {"comment": text_to_adf("New note")}
        )

    async def test_delete_worklog(self, patch_client):
        result = await _fn(worklogs.delete_worklog)("PROJ-1", "1")
        patch_client.delete_worklog.assert_awaited_once_with("PROJ-1", "1")
        assert result == "Worklog 1 deleted from PROJ-1."


class TestSearchTools:
    async def test_search_uses_client_default_limit(self, patch_client):
        patch_client.search_issues.return_value = {
            "total": 1,
            "issues": [
                {
                    "key": "PROJ-7",
                    "fields": {
                        "summary": "Login fails",
                        "status": {"name": "In Progress"},
                        "description": text_to_adf("Steps:\n\nOpen the *login* page"),
                    },
                }
            ],
        }
        markdown = await _fn(search.search_issues)("project = PROJ")
        patch_client.search_issues.assert_awaited_once_with(
            "project = PROJ", max_results=50, start_at=0
        )
        assert "**JQL Query**: `project = PROJ`" in markdown
        assert "## 🎫 PROJ-7: Login fails" in markdown
        assert "**Status**: 🔄 In Progress" in markdown
        assert "**Description**: Steps: Open the *login* page\n" in markdown

    async def test_search_explicit_limit(self, patch_client):
        patch_client.search_issues.return_value = {"total": 0, "issues": []}
        markdown = await _fn(search.search_issues)("assignee = currentUser()", max_results=5, start_at=10)
        patch_client.search_issues.assert_awaited_once_with(
            "assignee = currentUser()", max_results=5, start_at=10
        )
        assert "**Found**: 0 issues" in markdown

    async def test_search_rejects_empty_jql(self, patch_client):
        with pytest.raises(JiraValidationError, match="jql"):
            await _fn(search.search_issues)("")
        patch_client.search_issues.assert_not_awaited()
