"""RFC 5424 conformance core.

Message, timestamp, calendar and STRUCTURED-DATA validators plus the
line-oriented file harness.
"""

from __future__ import annotations

from .dates import check_calendar_date, days_in_month, is_leap_year
from .file_harness import iter_line_results, validate_file, validate_file_sync
from .message import parse_header, validate_message
from .models import (
    ConformanceReport,
    Failure,
    FailureKind,
    FileReport,
    LineResult,
    SyslogHeader,
)
from .structured_data import SDState, validate_structured_data
from .timestamp import validate_timestamp
from .utf8 import UTF8_BOM, validate_utf8

__all__ = [
    "UTF8_BOM",
    "ConformanceReport",
    "Failure",
    "FailureKind",
    "FileReport",
    "LineResult",
    "SDState",
    "SyslogHeader",
    "check_calendar_date",
    "days_in_month",
    "is_leap_year",
    "iter_line_results",
    "parse_header",
    "validate_file",
    "validate_file_sync",
    "validate_message",
    "validate_structured_data",
    "validate_timestamp",
    "validate_utf8",
]
