"""Core data models for conformance reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FailureKind(str, Enum):
    """Category of a reported conformance failure."""

    STRUCTURE = "structure"
    FIELD_RANGE = "field_range"
    STRUCTURED_DATA = "structured_data"
    UTF8 = "utf8"
    INVALID_STATE = "invalid_state"


@dataclass(frozen=True, slots=True)
class Failure:
    """A single descriptive failure (message + offending substring)."""

    kind: FailureKind
    message: str
    location: str | None = None  # offending substring, when one can be named
    fatal: bool = False


@dataclass(slots=True)
class ConformanceReport:
    """Accumulates failures for one validated message.

    Non-fatal failures keep sibling checks running; a fatal failure marks the
    report aborted and later checks of the same message are skipped.
    """

    subject: str
    failures: list[Failure] = field(default_factory=list)
    aborted: bool = False

    @property
    def passed(self) -> bool:
        return not self.failures

    def fail(self, kind: FailureKind, message: str, location: str | None = None) -> None:
        """Record a non-fatal failure."""
        self.failures.append(Failure(kind=kind, message=message, location=location))

    def abort(self, kind: FailureKind, message: str, location: str | None = None) -> None:
        """Record a fatal failure and stop validating this message."""
        self.failures.append(Failure(kind=kind, message=message, location=location, fatal=True))
        self.aborted = True

    def expect(
        self,
        condition: bool,
        kind: FailureKind,
        message: str,
        location: str | None = None,
    ) -> bool:
        """Record a non-fatal failure unless condition holds."""
        if not condition:
            self.fail(kind, message, location)
        return condition


@dataclass(frozen=True, slots=True)
class SyslogHeader:
    """Fields extracted from a message that matched the RFC 5424 grammar."""

    prival: int
    version: str
    timestamp: str
    hostname: str
    app_name: str
    procid: str
    msgid: str
    structured_data: str
    msg: str | None = None  # None when the optional SP MSG part is absent

    @property
    def facility(self) -> int:
        return self.prival // 8

    @property
    def severity(self) -> int:
        return self.prival % 8


@dataclass(frozen=True, slots=True)
class LineResult:
    """Outcome for one line of a validated file."""

    line_no: int
    report: ConformanceReport


@dataclass(frozen=True, slots=True)
class FileReport:
    """Aggregate outcome of validating a newline-delimited file."""

    path: str
    expected_count: int
    results: list[LineResult]

    @property
    def line_count(self) -> int:
        return len(self.results)

    @property
    def count_matches(self) -> bool:
        return self.line_count == self.expected_count

    @property
    def failed_lines(self) -> list[LineResult]:
        return [r for r in self.results if not r.report.passed]

    @property
    def passed(self) -> bool:
        return self.count_matches and not self.failed_lines
