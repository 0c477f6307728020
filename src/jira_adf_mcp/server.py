"""FastMCP server instance."""

from fastmcp import FastMCP

from jira_adf_mcp.lifespan import lifespan

mcp = FastMCP("jira-adf-mcp", lifespan=lifespan)
