"""TIMESTAMP field validation (RFC 3339 profile used by RFC 5424).

Beyond the calendar check, TIME-HOUR, TIME-MINUTE, TIME-SECOND and the
numeric offset are range checked against the RFC 3339 limits (a leap second
of 60 is rejected, as RFC 5424 requires). This is stricter than a
calendar-only check: a structurally valid "24:00:00" is a reported failure.
"""

from __future__ import annotations

from .dates import check_calendar_date
from .grammar import TIMESTAMP_RE
from .models import ConformanceReport, FailureKind

# field -> inclusive upper bound (all lower bounds are 0)
_TIME_LIMITS: tuple[tuple[str, str, int], ...] = (
    ("hour", "TIME-HOUR", 23),
    ("minute", "TIME-MINUTE", 59),
    ("second", "TIME-SECOND", 59),
    ("offset_hour", "TIME-NUMOFFSET hour", 23),
    ("offset_minute", "TIME-NUMOFFSET minute", 59),
)


def validate_timestamp(timestamp: str, report: ConformanceReport) -> None:
    """Check TIMESTAMP structure, then calendar and time-of-day ranges."""
    m = TIMESTAMP_RE.fullmatch(timestamp)
    if not m:
        report.fail(
            FailureKind.STRUCTURE,
            f"{timestamp} does not match RFC 5424 timestamp regex",
            timestamp,
        )
        return

    year = int(m.group("year"))
    month = int(m.group("month"))
    day = int(m.group("mday"))
    check_calendar_date(year, month, day, report, location=timestamp)

    for group, label, limit in _TIME_LIMITS:
        raw = m.group(group)
        if raw is None:  # offset was "Z"
            continue
        value = int(raw)
        report.expect(
            value <= limit,
            FailureKind.FIELD_RANGE,
            f"{label} {value} is not a value between 0 and {limit}",
            timestamp,
        )
