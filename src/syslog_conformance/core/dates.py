"""Calendar validity rules for RFC 5424 dates."""

from __future__ import annotations

from .models import ConformanceReport, FailureKind

_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_SHORT_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int | None:
    """Return the number of days in month, or None if month is not 1..12."""
    if month in _LONG_MONTHS:
        return 31
    if month in _SHORT_MONTHS:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return None


def check_calendar_date(
    year: int,
    month: int,
    day: int,
    report: ConformanceReport,
    location: str | None = None,
) -> None:
    """Report DATE-FULLYEAR / DATE-MONTH / DATE-MDAY violations.

    Every check runs even if an earlier one failed.
    """
    report.expect(year >= 0, FailureKind.FIELD_RANGE, f"DATE-FULLYEAR {year} is negative", location)
    report.expect(day >= 1, FailureKind.FIELD_RANGE, f"DATE-MDAY {day} is less than 1", location)

    max_day = days_in_month(year, month)
    if max_day is None:
        report.fail(FailureKind.FIELD_RANGE, "DATE-MONTH was not a value between 1 and 12", location)
        return

    report.expect(
        day <= max_day,
        FailureKind.FIELD_RANGE,
        f"DATE-MDAY {day} exceeds {max_day} days in month {month} of {year}",
        location,
    )
