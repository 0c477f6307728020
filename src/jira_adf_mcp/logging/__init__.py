from jira_adf_mcp.logging.logger import LOGGER_NAME, setup_logger

__all__ = ["LOGGER_NAME", "setup_logger"]
