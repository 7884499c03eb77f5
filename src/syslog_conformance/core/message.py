"""Whole-message RFC 5424 validation."""

from __future__ import annotations

import logging

from .grammar import MESSAGE_RE, NILVALUE, PRIVAL_MAX, PRIVAL_MIN, VERSION
from .models import ConformanceReport, FailureKind, SyslogHeader
from .structured_data import validate_structured_data
from .timestamp import validate_timestamp
from .utf8 import UTF8_BOM, to_wire_bytes, validate_utf8

LOGGER = logging.getLogger(__name__)


def _as_text(message: str | bytes) -> str:
    """Decode wire bytes so that invalid sequences survive for the UTF-8 checks."""
    if isinstance(message, bytes):
        return message.decode("utf-8", errors="surrogateescape")
    return message


def parse_header(message: str | bytes) -> SyslogHeader | None:
    """Extract RFC 5424 fields, or None if the message does not match the grammar."""
    m = MESSAGE_RE.fullmatch(_as_text(message))
    if not m:
        return None
    return SyslogHeader(
        prival=int(m.group("prival")),
        version=m.group("version"),
        timestamp=m.group("timestamp"),
        hostname=m.group("hostname"),
        app_name=m.group("app_name"),
        procid=m.group("procid"),
        msgid=m.group("msgid"),
        structured_data=m.group("structured_data"),
        msg=m.group("msg"),
    )


def validate_message(
    message: str | bytes,
    report: ConformanceReport | None = None,
) -> ConformanceReport:
    """Validate one syslog message and return the report of its failures.

    Malformed input never raises: structural mismatches are reported and stop
    further checks, field range violations are reported independently.
    """
    text = _as_text(message)
    if report is None:
        report = ConformanceReport(subject=text)

    header = parse_header(text)
    if header is None:
        report.abort(
            FailureKind.STRUCTURE,
            f"message does not match RFC 5424 regex: {text}",
            text,
        )
        return report

    report.expect(
        PRIVAL_MIN <= header.prival <= PRIVAL_MAX,
        FailureKind.FIELD_RANGE,
        f"PRIVAL {header.prival} is not a value between {PRIVAL_MIN} and {PRIVAL_MAX}",
        str(header.prival),
    )
    report.expect(
        header.version == VERSION,
        FailureKind.FIELD_RANGE,
        f"VERSION was {header.version!r}, expected {VERSION!r}",
        header.version,
    )

    if header.timestamp != NILVALUE:
        validate_timestamp(header.timestamp, report)

    validate_structured_data(header.structured_data, report)
    if report.aborted:
        return report

    if header.msg is not None:
        msg_bytes = to_wire_bytes(header.msg)
        if msg_bytes.startswith(UTF8_BOM):
            validate_utf8(msg_bytes[len(UTF8_BOM):], report, location=header.msg)

    if not report.passed:
        LOGGER.debug("message failed with %d failure(s): %s", len(report.failures), text)
    return report
