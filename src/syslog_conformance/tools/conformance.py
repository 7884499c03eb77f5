"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from syslog_conformance.config import BASE_DIR_ENV
from syslog_conformance.core.file_harness import validate_file
from syslog_conformance.core.message import validate_message
from syslog_conformance.core.verdict import file_verdict, message_verdict

HARD_MAX_WORKERS = 32


def base_dir() -> Path:
    """Directory that file tools may read from (default: the working directory)."""
    return Path(os.getenv(BASE_DIR_ENV) or Path.cwd()).resolve()


def safe_resolve(path: str) -> Path:
    """Map a tool-supplied path to a file inside the base directory.

    Relative paths are taken from the base directory; anything that resolves
    outside it is refused.
    """
    root = base_dir()
    target = (root / Path(path).expanduser()).resolve()
    if not target.is_relative_to(root):
        raise ValueError(f"{path} is outside {BASE_DIR_ENV} ({root})")
    return target


def validate_message_impl(*, message: str) -> dict[str, Any]:
    """Implementation for the `validate_message` MCP tool."""
    if "\n" in message:
        raise ValueError("message must be a single line; use validate_file for multi-line input")
    return message_verdict(validate_message(message)).model_dump()


async def validate_file_impl(
    *,
    log_path: str,
    expected_count: int,
    max_workers: int | None = None,
    include_passing: bool = False,
) -> dict[str, Any]:
    """Implementation for the `validate_file` MCP tool.

    Notes
    -----
    - log_path is resolved under SYSLOG_CONFORMANCE_BASE_DIR
    - max_workers is capped at HARD_MAX_WORKERS
    - only failing lines are listed unless include_passing is set
    """
    if max_workers is not None:
        if max_workers <= 0:
            raise ValueError("max_workers must be > 0")
        max_workers = min(max_workers, HARD_MAX_WORKERS)

    path = safe_resolve(log_path)
    report = await validate_file(path, expected_count, max_workers=max_workers)
    return file_verdict(report, include_passing=include_passing).model_dump()
