from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from syslog_conformance.config import configure_logging
from syslog_conformance.core.file_harness import validate_file_sync
from syslog_conformance.core.message import validate_message
from syslog_conformance.core.models import ConformanceReport

LOGGER = logging.getLogger(__name__)


def _non_negative(s: str) -> int:
    try:
        value = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError("must be an integer") from e
    if value < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return value


def _positive(s: str) -> int:
    value = _non_negative(s)
    if value == 0:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def _print_failures(prefix: str, report: ConformanceReport) -> None:
    for f in report.failures:
        marker = " (fatal)" if f.fatal else ""
        print(f"{prefix}[{f.kind.value}]{marker} {f.message}")


def _check_messages(messages: list[str], *, quiet: bool) -> int:
    failed = 0
    for i, message in enumerate(messages, start=1):
        report = validate_message(message)
        if report.passed:
            if not quiet:
                print(f"message {i}: ok")
            continue
        failed += 1
        _print_failures(f"message {i}: ", report)

    print(f"\n{len(messages) - failed}/{len(messages)} messages conform to RFC 5424.")
    return 0 if failed == 0 else 1


def _check_file(path: Path, expected: int | None, *, workers: int | None, quiet: bool) -> int:
    # Without --expected the count check is trivially satisfied.
    report = validate_file_sync(path, expected if expected is not None else 0, max_workers=workers)
    if expected is None:
        expected = report.line_count

    for result in report.results:
        if result.report.passed:
            if not quiet:
                print(f"{result.line_no}: ok")
            continue
        _print_failures(f"{result.line_no}: ", result.report)

    failed = len(report.failed_lines)
    print(f"\n{report.line_count - failed}/{report.line_count} lines conform to RFC 5424.")
    if report.line_count != expected:
        print(f"Expected {expected} lines, found {report.line_count}.")
        return 1
    return 0 if failed == 0 else 1


def main() -> None:
    p = argparse.ArgumentParser(description="RFC 5424 syslog message conformance checker.")
    p.add_argument("log_path", nargs="?", help="File of newline-delimited messages (plain or .gz)")
    p.add_argument(
        "--message",
        "-m",
        dest="messages",
        action="append",
        default=[],
        help="Validate a single message (repeatable); used instead of log_path",
    )
    p.add_argument("--expected", type=_non_negative, default=None, help="Expected number of lines in log_path")
    p.add_argument("--workers", type=_positive, default=None, help="Validate lines on N threads")
    p.add_argument("--quiet", "-q", action="store_true", help="Only print failures and the summary")

    args = p.parse_args()
    configure_logging()

    if bool(args.log_path) == bool(args.messages):
        p.error("provide either log_path or at least one --message")

    try:
        if args.messages:
            status = _check_messages(args.messages, quiet=args.quiet)
        else:
            status = _check_file(Path(args.log_path), args.expected, workers=args.workers, quiet=args.quiet)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    LOGGER.debug("exit status %d", status)
    raise SystemExit(status)


if __name__ == "__main__":
    main()
