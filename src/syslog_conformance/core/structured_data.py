"""STRUCTURED-DATA validation.

A character-level automaton over the field. The regular grammar has already
fixed the field boundaries; this scan enforces what the regex cannot express
positionally: SD-ID / PARAM-NAME charsets, the enterprise number suffix and
backslash escaping inside PARAM-VALUE.

SD-ID names are not checked against the IANA registry and the enterprise
number is only checked to be digits.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .models import ConformanceReport, FailureKind
from .utf8 import to_wire_bytes, validate_utf8

LOGGER = logging.getLogger(__name__)


class SDState(Enum):
    INIT = "init"
    ELEMENT_EMPTY = "element_empty"
    ELEMENT_BEGIN = "element_begin"
    ID_NAME = "id_name"
    ID_ENTERPRISE_NUMBER = "id_enterprise_number"
    PARAM_NAME = "param_name"
    PARAM_VALUE_BEGIN = "param_value_begin"
    PARAM_VALUE = "param_value"
    PARAM_VALUE_END = "param_value_end"


@dataclass(slots=True)
class _Scan:
    """Automaton state record for one STRUCTURED-DATA field."""

    field: str
    report: ConformanceReport
    state: SDState = SDState.INIT
    escaped: bool = False  # previous char was an unescaped backslash
    value: str = ""

    def reject(self, message: str) -> None:
        self.report.fail(FailureKind.STRUCTURED_DATA, message, self.field)


def _is_printusascii(c: str) -> bool:
    return 32 < ord(c) < 127


def _on_init(scan: _Scan, c: str) -> SDState | None:
    if c == "-":
        return SDState.ELEMENT_EMPTY
    if c == "[":
        return SDState.ID_NAME
    scan.reject(f"STRUCTURED-DATA must begin with '-' or '[', found {c!r}")
    return None


def _on_element_empty(scan: _Scan, c: str) -> SDState | None:
    scan.reject("empty element had trailing character")
    return None


def _on_element_begin(scan: _Scan, c: str) -> SDState | None:
    if c == "[":
        return SDState.ID_NAME
    scan.reject(f"SD-ELEMENT must begin with '[', found {c!r}")
    return None


def _on_id_name(scan: _Scan, c: str) -> SDState | None:
    if c == "@":
        return SDState.ID_ENTERPRISE_NUMBER
    if c == "]":
        return SDState.ELEMENT_BEGIN
    if c == " ":
        return SDState.PARAM_NAME
    if _is_printusascii(c) and c not in '="':
        return SDState.ID_NAME
    scan.reject(f"invalid character {c!r} in SD-ID")
    return None


def _on_id_enterprise_number(scan: _Scan, c: str) -> SDState | None:
    if c == "]":
        return SDState.ELEMENT_BEGIN
    if c == " ":
        return SDState.PARAM_NAME
    if "0" <= c <= "9":
        return SDState.ID_ENTERPRISE_NUMBER
    scan.reject(f"invalid character {c!r} in SD-ID enterprise number")
    return None


def _on_param_name(scan: _Scan, c: str) -> SDState | None:
    if c == "=":
        return SDState.PARAM_VALUE_BEGIN
    if _is_printusascii(c) and c not in ' ]"':
        return SDState.PARAM_NAME
    scan.reject(f"invalid character {c!r} in PARAM-NAME")
    return None


def _on_param_value_begin(scan: _Scan, c: str) -> SDState | None:
    if c == '"':
        scan.value = ""
        return SDState.PARAM_VALUE
    scan.reject(f"PARAM-VALUE must begin with '\"', found {c!r}")
    return None


def _on_param_value(scan: _Scan, c: str) -> SDState | None:
    scan.value += c
    if scan.escaped:
        scan.escaped = False
        return SDState.PARAM_VALUE
    if c == '"':
        # value is complete, including the closing quote
        validate_utf8(to_wire_bytes(scan.value), scan.report, location=scan.value)
        return SDState.PARAM_VALUE_END
    if c in "=]":
        scan.reject(f"unescaped {c!r} in PARAM-VALUE")
        return None
    if c == "\\":
        scan.escaped = True
    return SDState.PARAM_VALUE


def _on_param_value_end(scan: _Scan, c: str) -> SDState | None:
    if c == " ":
        return SDState.PARAM_NAME
    if c == "]":
        return SDState.ELEMENT_BEGIN
    scan.reject("invalid ending of PARAM-VALUE")
    return None


_TRANSITIONS: dict[SDState, Callable[[_Scan, str], SDState | None]] = {
    SDState.INIT: _on_init,
    SDState.ELEMENT_EMPTY: _on_element_empty,
    SDState.ELEMENT_BEGIN: _on_element_begin,
    SDState.ID_NAME: _on_id_name,
    SDState.ID_ENTERPRISE_NUMBER: _on_id_enterprise_number,
    SDState.PARAM_NAME: _on_param_name,
    SDState.PARAM_VALUE_BEGIN: _on_param_value_begin,
    SDState.PARAM_VALUE: _on_param_value,
    SDState.PARAM_VALUE_END: _on_param_value_end,
}


def validate_structured_data(structured_data: str, report: ConformanceReport) -> bool:
    """Scan a STRUCTURED-DATA field, stopping at the first violation.

    Returns True if the whole field was scanned.
    """
    scan = _Scan(field=structured_data, report=report)
    for c in structured_data:
        handler = _TRANSITIONS.get(scan.state)
        if handler is None:
            report.abort(
                FailureKind.INVALID_STATE,
                "invalid state reached during SD-ELEMENT parsing",
                structured_data,
            )
            return False

        next_state = handler(scan, c)
        if next_state is None:
            LOGGER.debug("STRUCTURED-DATA rejected in state %s: %s", scan.state.name, structured_data)
            return False
        scan.state = next_state
    return True
