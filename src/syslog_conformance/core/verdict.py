"""Serializable verdicts for tool and resource consumers."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .models import ConformanceReport, FileReport, LineResult


class FailureOut(BaseModel):
    kind: str = Field(description="Failure category (structure, field_range, structured_data, utf8, invalid_state).")
    message: str = Field(description="Human readable description of the violation.")
    location: str | None = Field(default=None, description="Offending substring, if known.")
    fatal: bool = Field(default=False, description="True if validation of the message was aborted.")


class MessageVerdict(BaseModel):
    message: str = Field(description="The validated message (invalid bytes shown escaped).")
    passed: bool
    failures: list[FailureOut] = Field(default_factory=list)


class LineVerdict(MessageVerdict):
    line_no: int = Field(ge=1, description="1-based line number in the file.")


class FileVerdict(BaseModel):
    path: str
    expected_count: int = Field(ge=0)
    line_count: int = Field(ge=0)
    count_matches: bool
    failed_count: int = Field(ge=0, description="Number of lines with at least one failure.")
    passed: bool
    lines: list[LineVerdict] = Field(default_factory=list)


def _printable(text: str) -> str:
    """Render lone surrogates from surrogateescape as backslash escapes."""
    return text.encode("utf-8", errors="backslashreplace").decode("utf-8")


def _failures(report: ConformanceReport) -> list[FailureOut]:
    return [
        FailureOut(
            kind=f.kind.value,
            message=_printable(f.message),
            location=_printable(f.location) if f.location is not None else None,
            fatal=f.fatal,
        )
        for f in report.failures
    ]


def message_verdict(report: ConformanceReport) -> MessageVerdict:
    return MessageVerdict(
        message=_printable(report.subject),
        passed=report.passed,
        failures=_failures(report),
    )


def _line_verdict(result: LineResult) -> LineVerdict:
    return LineVerdict(
        line_no=result.line_no,
        message=_printable(result.report.subject),
        passed=result.report.passed,
        failures=_failures(result.report),
    )


def file_verdict(report: FileReport, *, include_passing: bool = False) -> FileVerdict:
    """Summarize a FileReport; passing lines are omitted unless requested."""
    selected = report.results if include_passing else report.failed_lines
    return FileVerdict(
        path=report.path,
        expected_count=report.expected_count,
        line_count=report.line_count,
        count_matches=report.count_matches,
        failed_count=len(report.failed_lines),
        passed=report.passed,
        lines=[_line_verdict(r) for r in selected],
    )
