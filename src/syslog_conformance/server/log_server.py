"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: validate a single message or a whole file of messages
- Resources: grammar, verdict schemas and sample messages

Run locally (stdio):
    python -m syslog_conformance.server.log_server
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from syslog_conformance.config import configure_logging
from syslog_conformance.resources.registry import register_resources
from syslog_conformance.tools.conformance import validate_file_impl, validate_message_impl

LOGGER = logging.getLogger(__name__)

mcp = FastMCP("syslog-conformance", json_response=True)

register_resources(mcp)


@mcp.tool()
def validate_message(message: str) -> dict[str, Any]:
    """Check one syslog message against RFC 5424.

    Parameters
    ----------
    message:
        A single message line (no embedded newline).

    Returns
    -------
    dict:
        {"message": str, "passed": bool, "failures": list[dict]}
    """
    return validate_message_impl(message=message)


@mcp.tool()
async def validate_file(
    log_path: str,
    expected_count: int,
    max_workers: int | None = None,
    include_passing: bool = False,
) -> dict[str, Any]:
    """Check every line of a file against RFC 5424 and verify the line count.

    Parameters
    ----------
    log_path:
        Path to a newline-delimited message file (plain or .gz), relative to
        SYSLOG_CONFORMANCE_BASE_DIR.
    expected_count:
        Number of lines the file is expected to hold.
    max_workers:
        Validate lines on a thread pool of this size (default: sequential).
    include_passing:
        Also list lines that passed.

    Returns
    -------
    dict:
        {"line_count": int, "count_matches": bool, "failed_count": int, "passed": bool, "lines": list[dict], ...}
    """
    return await validate_file_impl(
        log_path=log_path,
        expected_count=expected_count,
        max_workers=max_workers,
        include_passing=include_passing,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
