"""Entry point for running the server: python -m jira_adf_mcp"""

import jira_adf_mcp.tools  # noqa: F401 (registers all tools with the server)
from jira_adf_mcp.server import mcp


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
