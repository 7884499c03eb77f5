"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from syslog_conformance.config import BASE_DIR_ENV
from syslog_conformance.core.grammar import (
    MESSAGE_PATTERN,
    PRIVAL_MAX,
    PRIVAL_MIN,
    STRUCTURED_DATA_PATTERN,
    TIMESTAMP_PATTERN,
    VERSION,
)
from syslog_conformance.core.verdict import FileVerdict, MessageVerdict
from syslog_conformance.tools.conformance import base_dir

SAMPLE_LOG = (
    "<34>1 2003-10-11T22:14:15.003Z mymachine.example.com su - ID47 - "
    "'su root' failed for lonvick on /dev/pts/8\n"
    "<165>1 2003-08-24T05:14:15.000003-07:00 192.0.2.1 myproc 8710 - - "
    "%% It's time to make the do-nuts.\n"
    '<165>1 2003-10-11T22:14:15.003Z mymachine.example.com evntslog - ID47 '
    '[exampleSDID@32473 iut="3" eventSource="Application" eventID="1011"] '
    "An application event log entry...\n"
    '<165>1 2003-10-11T22:14:15.003Z mymachine.example.com evntslog - ID47 '
    '[exampleSDID@32473 iut="3" eventSource="Application" eventID="1011"]'
    '[examplePriority@32473 class="high"]\n'
)


def grammar() -> dict[str, Any]:
    """Return the structural grammar and field constants."""
    return {
        "message": MESSAGE_PATTERN,
        "timestamp": TIMESTAMP_PATTERN,
        "structured_data": STRUCTURED_DATA_PATTERN,
        "prival_min": PRIVAL_MIN,
        "prival_max": PRIVAL_MAX,
        "version": VERSION,
    }


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://syslog-conformance/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        return (
            "Resources:\n"
            "- app://syslog-conformance/help\n"
            "- app://syslog-conformance/grammar\n"
            "- app://syslog-conformance/schemas/message-verdict\n"
            "- app://syslog-conformance/schemas/file-verdict\n"
            "- app://syslog-conformance/examples/sample-log\n"
            f"\nFile tools are restricted to {BASE_DIR_ENV}: {base_dir()}\n"
        )

    @mcp.resource("app://syslog-conformance/grammar")
    def grammar_resource() -> dict[str, Any]:
        """Return the RFC 5424 regular grammar used for structural checks."""
        return grammar()

    @mcp.resource("app://syslog-conformance/schemas/message-verdict")
    def message_verdict_schema() -> dict[str, Any]:
        """Return the JSON schema for validate_message results."""
        return MessageVerdict.model_json_schema()

    @mcp.resource("app://syslog-conformance/schemas/file-verdict")
    def file_verdict_schema() -> dict[str, Any]:
        """Return the JSON schema for validate_file results."""
        return FileVerdict.model_json_schema()

    @mcp.resource("app://syslog-conformance/examples/sample-log")
    def sample_log() -> str:
        """Return the RFC 5424 example messages, one per line."""
        return SAMPLE_LOG
