"""Logging for the server process.

stdout carries the MCP stdio transport, so every record goes to stderr.
"""

import logging
import sys

LOGGER_NAME = "jira_adf_mcp"

# httpx logs each request line at INFO; keep it out unless debugging.
_NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logger(name: str = LOGGER_NAME, level: str = "INFO") -> logging.Logger:
    """Attach a stderr handler to ``name`` once and set its level.

    Calling it again only adjusts the level, so tests and the lifespan can
    both call it safely.
    """
    logger = logging.getLogger(name)
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s")
        )
        logger.addHandler(handler)
        logger.propagate = False

    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(
            logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
        )
    return logger
