#!/usr/bin/env python3
"""Check JIRA_* configuration, credentials and ADF rendering against a live site.

Usage: python scripts/health_check.py [ISSUE-KEY]

With an issue key, the issue's description is fetched and rendered the way
the get_issue tool shows it.
"""

import asyncio
import sys

from pydantic import ValidationError

from jira_adf_mcp.formatters.issue import format_description
from jira_adf_mcp.jira.client import JiraClient
from jira_adf_mcp.jira.errors import JiraAPIError
from jira_adf_mcp.settings import JiraSettings


async def main(issue_key: str | None = None) -> int:
    try:
        settings = JiraSettings()
    except ValidationError as e:
        print(f"FAIL: invalid JIRA_* settings:\n{e}")
        return 1

    print(f"Site:  {settings.url}")
    print(f"User:  {settings.email} (token ...{settings.api_token[-4:]})")

    async with JiraClient.from_settings(settings) as client:
        try:
            me = await client.get_myself()
            print(f"OK: authenticated as {me.get('displayName')} ({me.get('accountId')})")
            if issue_key:
                issue = await client.get_issue(issue_key)
                description = issue.get("fields", {}).get("description")
                print(f"\n{issue_key}:\n{format_description(description) or '(no description)'}")
        except JiraAPIError as e:
            print(f"FAIL ({e.status_code}): {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None)))
