"""Line-oriented file validation.

Reads newline-delimited messages, validates each line independently and checks
the total line count against the expected value.
"""

from __future__ import annotations

import asyncio
import gzip
import logging
import os
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from ..config import MAX_WORKERS_ENV
from .message import validate_message
from .models import FileReport, LineResult

LOGGER = logging.getLogger(__name__)

CHUNK_LINES = 256


@asynccontextmanager
async def _open_bytes(path: Path):
    """Open a message file for async binary reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rb")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, mode="rb") as f:
            yield f


def resolve_max_workers(max_workers: int | None) -> int:
    """Explicit value first, then the environment, else sequential."""
    if max_workers is not None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        return max_workers

    env = os.getenv(MAX_WORKERS_ENV)
    if env:
        try:
            value = int(env)
        except ValueError as exc:
            raise ValueError(f"{MAX_WORKERS_ENV} must be an integer") from exc
        if value < 1:
            raise ValueError(f"{MAX_WORKERS_ENV} must be >= 1")
        return value

    return 1


def strip_terminator(raw: bytes) -> bytes:
    """Drop one line terminator (LF or CRLF); any other trailing bytes are message content."""
    return raw.removesuffix(b"\n").removesuffix(b"\r")


def _validate_line(line_no: int, raw: bytes) -> LineResult:
    return LineResult(line_no=line_no, report=validate_message(strip_terminator(raw)))


async def _iter_chunks(path: Path, size: int) -> AsyncIterator[list[tuple[int, bytes]]]:
    """Yield numbered lines in lists of at most size entries."""
    chunk: list[tuple[int, bytes]] = []
    line_no = 0
    async with _open_bytes(path) as f:
        async for raw in f:
            line_no += 1
            chunk.append((line_no, raw))
            if len(chunk) >= size:
                yield chunk
                chunk = []
    if chunk:
        yield chunk


async def iter_line_results(
    log_path: str | Path,
    *,
    max_workers: int | None = None,
) -> AsyncIterator[LineResult]:
    """Yield one LineResult per line, in file order.

    With more than one worker each chunk of lines is validated on a thread
    pool; gather returns the chunk in submission order.
    """
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    workers = resolve_max_workers(max_workers)
    if workers == 1:
        async for chunk in _iter_chunks(path, CHUNK_LINES):
            for line_no, raw in chunk:
                yield _validate_line(line_no, raw)
        return

    loop = asyncio.get_running_loop()
    with ThreadPoolExecutor(max_workers=workers) as executor:
        async for chunk in _iter_chunks(path, CHUNK_LINES):
            results = await asyncio.gather(
                *(loop.run_in_executor(executor, _validate_line, n, raw) for n, raw in chunk)
            )
            for result in results:
                yield result


async def validate_file(
    log_path: str | Path,
    expected_count: int,
    *,
    max_workers: int | None = None,
) -> FileReport:
    """Validate every line of a file and compare the line count to expected_count."""
    if expected_count < 0:
        raise ValueError("expected_count must be >= 0")

    results = [r async for r in iter_line_results(log_path, max_workers=max_workers)]
    report = FileReport(path=str(log_path), expected_count=expected_count, results=results)
    LOGGER.debug(
        "validated %s: %d line(s), %d failed, expected %d",
        log_path,
        report.line_count,
        len(report.failed_lines),
        expected_count,
    )
    return report


def validate_file_sync(
    log_path: str | Path,
    expected_count: int,
    *,
    max_workers: int | None = None,
) -> FileReport:
    """Blocking wrapper around validate_file for callers without an event loop."""
    return asyncio.run(validate_file(log_path, expected_count, max_workers=max_workers))
