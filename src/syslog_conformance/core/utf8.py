"""UTF-8 byte-sequence checks."""

from __future__ import annotations

from .models import ConformanceReport, FailureKind

UTF8_BOM = b"\xef\xbb\xbf"


def to_wire_bytes(text: str) -> bytes:
    """Recover the bytes behind text decoded with ``surrogateescape``.

    Lone surrogates that did not come from surrogateescape are encoded with
    ``surrogatepass``, which never yields valid UTF-8.
    """
    try:
        return text.encode("utf-8", errors="surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", errors="surrogatepass")


def validate_utf8(data: bytes, report: ConformanceReport, location: str | None = None) -> bool:
    """Report a failure if data is not a well-formed UTF-8 sequence."""
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as exc:
        report.fail(
            FailureKind.UTF8,
            f"invalid UTF-8 at byte {exc.start}: {exc.reason}",
            location,
        )
        return False
    return True
