"""RFC 5424 structural grammar.

The expressions enforce field boundaries and repetition counts only.
Escaping inside PARAM-VALUE, PRIVAL range and calendar validity are checked
by the field validators after a match.
"""

from __future__ import annotations

import re

PRIVAL_MIN = 0
PRIVAL_MAX = 191
VERSION = "1"
NILVALUE = "-"

# PRINTUSASCII (%d33-126)
_PRINTUSASCII = r"[!-~]"

# SD-NAME: PRINTUSASCII except '=', SP, ']', '"'
_SD_NAME = r'[!#-<>-\\^-~]{1,32}'

# PARAM-VALUE: '"', '\' and ']' only appear escaped
_PARAM_VALUE = r'(?:[^"\\\]]|\\.)*'

_SD_ELEMENT = r"\[" + _SD_NAME + r"(?: " + _SD_NAME + r'="' + _PARAM_VALUE + r'")*\]'

_TIMESTAMP_SHAPE = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,6})?(?:Z|[+-]\d{2}:\d{2})"

TIMESTAMP_PATTERN = (
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<mday>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<secfrac>\d{1,6}))?"
    r"(?P<offset>Z|[+-](?P<offset_hour>\d{2}):(?P<offset_minute>\d{2}))"
)

STRUCTURED_DATA_PATTERN = r"-|(?:" + _SD_ELEMENT + r")+"

MESSAGE_PATTERN = (
    r"<(?P<prival>\d{1,3})>(?P<version>\d{1,3}) "
    r"(?P<timestamp>-|" + _TIMESTAMP_SHAPE + r") "
    r"(?P<hostname>-|" + _PRINTUSASCII + r"{1,255}) "
    r"(?P<app_name>-|" + _PRINTUSASCII + r"{1,48}) "
    r"(?P<procid>-|" + _PRINTUSASCII + r"{1,128}) "
    r"(?P<msgid>-|" + _PRINTUSASCII + r"{1,32}) "
    r"(?P<structured_data>" + STRUCTURED_DATA_PATTERN + r")"
    r"(?: (?P<msg>.*))?"
)

TIMESTAMP_RE = re.compile(TIMESTAMP_PATTERN, re.ASCII)
MESSAGE_RE = re.compile(MESSAGE_PATTERN, re.ASCII)
