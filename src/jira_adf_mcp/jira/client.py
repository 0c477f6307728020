"""Async Jira REST API v3 client using httpx."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from jira_adf_mcp.jira.errors import (
    JiraAPIError,
    JiraAuthenticationError,
    JiraNotFoundError,
    JiraPermissionError,
    JiraValidationError,
)

if TYPE_CHECKING:
    from jira_adf_mcp.settings import JiraSettings

logger = logging.getLogger("jira_adf_mcp")

# Fields requested for search results; enough for the list formatter.
SEARCH_FIELDS = [
    "summary",
    "status",
    "priority",
    "assignee",
    "description",
    "created",
    "updated",
]

_ERROR_MAP: dict[int, type[JiraAPIError]] = {
    400: JiraValidationError,
    401: JiraAuthenticationError,
    403: JiraPermissionError,
    404: JiraNotFoundError,
}


class JiraClient:
    """Async wrapper around the Jira REST API v3 issue, comment and worklog endpoints."""

    def __init__(
        self,
        base_url: str,
        email: str,
        api_token: str,
        timeout: int = 30,
        ssl_verify: bool | str = True,
        max_results: int = 50,
        max_comments: int = 10,
    ):
        self._base_url = base_url.rstrip("/")
        self.max_results = max_results
        self.max_comments = max_comments
        self._client = httpx.AsyncClient(
            base_url=f"{self._base_url}/rest/api/3",
            auth=(email, api_token),
            headers={"Accept": "application/json", "Content-Type": "application/json"},
            timeout=timeout,
            verify=ssl_verify,
        )

    @classmethod
    def from_settings(cls, settings: JiraSettings) -> JiraClient:
        """Build a client from loaded JIRA_* settings, page-size defaults included."""
        return cls(
            base_url=settings.url,
            email=settings.email,
            api_token=settings.api_token,
            timeout=settings.timeout,
            ssl_verify=settings.ssl_verify,
            max_results=settings.max_results,
            max_comments=settings.max_comments,
        )

    async def __aenter__(self) -> JiraClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Request helpers
    # ------------------------------------------------------------------

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        logger.debug("Jira API %s %s", method, path)
        response = await self._client.request(method, path, **kwargs)
        if response.status_code >= 400:
            body = response.text
            error_cls = _ERROR_MAP.get(response.status_code, JiraAPIError)
            message = f"Jira API {method} {path} failed ({response.status_code}): {body}"
            if error_cls is JiraAPIError:
                raise JiraAPIError(message, status_code=response.status_code)
            raise error_cls(message)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def _get(self, path: str, **params: Any) -> Any:
        params = {k: v for k, v in params.items() if v is not None}
        return await self._request("GET", path, params=params)

    async def _post(self, path: str, json: Any) -> Any:
        return await self._request("POST", path, json=json)

    async def _put(self, path: str, json: Any) -> Any:
        return await self._request("PUT", path, json=json)

    async def _delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    async def get_myself(self) -> dict[str, Any]:
        return await self._get("/myself")

    async def get_issue(self, issue_key: str) -> dict[str, Any]:
        return await self._get(f"/issue/{issue_key}")

    async def create_issue(self, fields: dict[str, Any]) -> dict[str, Any]:
        return await self._post("/issue", json={"fields": fields})

    async def update_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        await self._put(f"/issue/{issue_key}", json={"fields": fields})

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search_issues(
        self, jql: str, max_results: int | None = None, start_at: int = 0
    ) -> dict[str, Any]:
        return await self._post(
            "/search",
            json={
                "jql": jql,
                "maxResults": max_results if max_results is not None else self.max_results,
                "startAt": start_at,
                "fields": SEARCH_FIELDS,
            },
        )

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    async def get_comments(
        self, issue_key: str, max_results: int | None = None, order_by: str | None = None
    ) -> dict[str, Any]:
        return await self._get(
            f"/issue/{issue_key}/comment", maxResults=max_results, orderBy=order_by
        )

    async def add_comment(self, issue_key: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"/issue/{issue_key}/comment", json={"body": body})

    # ------------------------------------------------------------------
    # Worklogs
    # ------------------------------------------------------------------

    async def get_worklogs(self, issue_key: str) -> dict[str, Any]:
        return await self._get(f"/issue/{issue_key}/worklog")

    async def add_worklog(self, issue_key: str, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._post(f"/issue/{issue_key}/worklog", json=payload)

    async def update_worklog(
        self, issue_key: str, worklog_id: str, payload: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._put(f"/issue/{issue_key}/worklog/{worklog_id}", json=payload)

    async def delete_worklog(self, issue_key: str, worklog_id: str) -> None:
        await self._delete(f"/issue/{issue_key}/worklog/{worklog_id}")
