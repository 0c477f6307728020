"""Human-readable rendering of Jira timestamps."""

from __future__ import annotations

from datetime import datetime

_JIRA_FORMATS = ("%Y-%m-%dT%H:%M:%S.%f%z", "%Y-%m-%dT%H:%M:%S%z")


def format_date(value: str | None) -> str:
    """Render e.g. 2024-01-15T10:30:00.000+0000 as "Jan 15, 2024 10:30 AM".

    Unparseable values are returned unchanged.
    """
    if not value:
        return ""
    for fmt in _JIRA_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
            break
        except ValueError:
            continue
    else:
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return value
    return parsed.strftime("%b %d, %Y %I:%M %p")
