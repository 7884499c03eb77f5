from __future__ import annotations

import pytest

from syslog_conformance.core.message import parse_header, validate_message
from syslog_conformance.core.models import FailureKind

_TEMPLATE = "<{pri}>{ver} 2003-10-11T22:14:15.003Z mymachine.example.com evntslog - ID47 {sd}{msg}"


def _msg(pri: str = "165", ver: str = "1", sd: str = "-", msg: str = " hello") -> str:
    return _TEMPLATE.format(pri=pri, ver=ver, sd=sd, msg=msg)


def test_rfc_examples_pass(valid_messages: list[str]) -> None:
    for message in valid_messages:
        report = validate_message(message)
        assert report.passed, report.failures


@pytest.mark.parametrize("prival", range(0, 192))
def test_prival_in_range_passes(prival: int) -> None:
    assert validate_message(_msg(pri=str(prival))).passed


def test_prival_192_fails() -> None:
    report = validate_message(_msg(pri="192"))
    assert [f.kind for f in report.failures] == [FailureKind.FIELD_RANGE]
    assert "PRIVAL 192" in report.failures[0].message


def test_prival_negative_is_structural_mismatch() -> None:
    report = validate_message(_msg(pri="-1"))
    assert report.aborted
    assert report.failures[0].kind == FailureKind.STRUCTURE
    assert report.failures[0].message.startswith("message does not match RFC 5424 regex")


def test_version_2_fails() -> None:
    report = validate_message(_msg(ver="2"))
    assert len(report.failures) == 1
    assert "VERSION" in report.failures[0].message


def test_prival_and_version_checked_independently() -> None:
    report = validate_message(_msg(pri="999", ver="2"))
    assert len(report.failures) == 2
    assert not report.aborted


@pytest.mark.parametrize(
    "message",
    [
        "",
        "not syslog at all",
        "<34>1 2003-10-11T22:14:15.003Z host app - ID47",  # STRUCTURED-DATA missing
        "<34>1  2003-10-11T22:14:15.003Z host app - ID47 - msg",
        "<34>1 2003-10-11T22:14:15.003Z host app - ID47 [bad element msg",
        "34>1 2003-10-11T22:14:15.003Z host app - ID47 - msg",
        "<34>1 2003-10-11T22:14:15.003Z host app - ID47 [id p=\"va]ue\"]",
    ],
)
def test_structural_mismatch_stops_processing(message: str) -> None:
    report = validate_message(message)
    assert len(report.failures) == 1
    assert report.failures[0].kind == FailureKind.STRUCTURE
    assert report.failures[0].fatal


def test_nil_timestamp_is_accepted() -> None:
    message = "<14>1 - - - - - - Just a message"
    assert validate_message(message).passed


def test_bad_calendar_date_reported() -> None:
    message = "<14>1 2023-02-29T00:00:00Z host app - - - msg"
    report = validate_message(message)
    assert len(report.failures) == 1
    assert report.failures[0].kind == FailureKind.FIELD_RANGE


def test_structured_data_violation_reported() -> None:
    report = validate_message(_msg(sd="[id p=\"a=b\"]"))
    assert [f.kind for f in report.failures] == [FailureKind.STRUCTURED_DATA]


def test_message_without_msg_part() -> None:
    assert validate_message(_msg(msg="")).passed


def test_bom_followed_by_valid_utf8_passes() -> None:
    raw = _msg(msg=" ").encode("utf-8") + b"\xef\xbb\xbf" + "café ✓".encode("utf-8")
    assert validate_message(raw).passed


def test_bom_followed_by_invalid_utf8_fails() -> None:
    raw = _msg(msg=" ").encode("utf-8") + b"\xef\xbb\xbf" + b"bad \xc0\xaf bytes"
    report = validate_message(raw)
    assert [f.kind for f in report.failures] == [FailureKind.UTF8]


def test_invalid_utf8_without_bom_is_not_checked() -> None:
    raw = _msg(msg=" ").encode("utf-8") + b"bad \xff bytes"
    assert validate_message(raw).passed


def test_str_input_with_bom() -> None:
    assert validate_message(_msg(msg=" \ufeffhello")).passed


def test_validation_is_idempotent() -> None:
    message = _msg(pri="200", sd="-x")
    first = validate_message(message)
    second = validate_message(message)
    assert first.failures == second.failures
    assert first.passed == second.passed


def test_parse_header() -> None:
    header = parse_header(_msg(sd="[id@1 a=\"b\"]"))
    assert header is not None
    assert header.prival == 165
    assert header.facility == 20
    assert header.severity == 5
    assert header.version == "1"
    assert header.timestamp == "2003-10-11T22:14:15.003Z"
    assert header.hostname == "mymachine.example.com"
    assert header.app_name == "evntslog"
    assert header.procid == "-"
    assert header.msgid == "ID47"
    assert header.structured_data == "[id@1 a=\"b\"]"
    assert header.msg == "hello"


def test_parse_header_no_match() -> None:
    assert parse_header("garbage") is None


def test_hour_24_reported_as_time_range_failure() -> None:
    report = validate_message("<14>1 2023-01-01T24:00:00Z host app - - - msg")
    assert [f.message for f in report.failures] == ["TIME-HOUR 24 is not a value between 0 and 23"]
    assert not report.aborted
