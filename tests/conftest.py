from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

VALID_MESSAGES = [
    "<34>1 2003-10-11T22:14:15.003Z mymachine.example.com su - ID47 - 'su root' failed for lonvick on /dev/pts/8",
    "<165>1 2003-08-24T05:14:15.000003-07:00 192.0.2.1 myproc 8710 - - %% It's time to make the do-nuts.",
    '<165>1 2003-10-11T22:14:15.003Z mymachine.example.com evntslog - ID47 '
    '[exampleSDID@32473 iut="3" eventSource="Application" eventID="1011"] An application event log entry...',
    '<165>1 2003-10-11T22:14:15.003Z mymachine.example.com evntslog - ID47 '
    '[exampleSDID@32473 iut="3" eventSource="Application" eventID="1011"][examplePriority@32473 class="high"]',
]


@pytest.fixture
def valid_messages() -> list[str]:
    return list(VALID_MESSAGES)


@pytest.fixture
def write_bytes() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\n" for line in lines))

    return _write


@pytest.fixture
def write_messages(write_bytes) -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        write_bytes(path, [line.encode("utf-8") for line in lines])

    return _write
