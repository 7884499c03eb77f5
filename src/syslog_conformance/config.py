"""Environment-driven settings shared by the CLI and the MCP server."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "SYSLOG_CONFORMANCE_LOG_LEVEL"
MAX_WORKERS_ENV = "SYSLOG_CONFORMANCE_MAX_WORKERS"
BASE_DIR_ENV = "SYSLOG_CONFORMANCE_BASE_DIR"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_level() -> int:
    """Numeric level named by SYSLOG_CONFORMANCE_LOG_LEVEL; unknown names mean INFO."""
    name = os.getenv(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Send log records to stderr; stdout carries reports (CLI) or the MCP stream (server)."""
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
