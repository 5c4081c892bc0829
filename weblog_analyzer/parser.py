"""Log Analyzer - Record parsing"""

import logging
from datetime import datetime
from typing import Iterable, Iterator, Optional, Tuple, Union

from .errors import ParseError, ParseErrorKind
from .models import LogRecord
from .patterns import (FIELD_COUNT, FIELD_DELIMITER, STATUS_PATTERN,
                       TIMESTAMP_FORMAT, TIMESTAMP_PATTERN)

logger = logging.getLogger(__name__)

Outcome = Tuple[Optional[LogRecord], Optional[ParseError]]


def _strip_terminator(line: str) -> str:
    if line.endswith('\r\n'):
        return line[:-2]
    if line.endswith('\n'):
        return line[:-1]
    return line


def _valid_timestamp(value: str) -> bool:
    if not TIMESTAMP_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        return False
    return True


def parse_line(line: str, line_number: Optional[int] = None) -> LogRecord:
    """Parse one comma-delimited line into a LogRecord.

    Raises ParseError when the field count, status or timestamp is invalid.
    """
    text = _strip_terminator(line)
    fields = text.split(FIELD_DELIMITER)

    if len(fields) != FIELD_COUNT:
        raise ParseError(
            ParseErrorKind.MALFORMED_LINE,
            f"expected {FIELD_COUNT} fields, got {len(fields)}",
            line_number, text
        )

    address, timestamp, path, status, agent = fields

    if not STATUS_PATTERN.fullmatch(status):
        raise ParseError(
            ParseErrorKind.INVALID_STATUS,
            f"status {status!r} is not a non-negative integer",
            line_number, text
        )

    if not _valid_timestamp(timestamp):
        raise ParseError(
            ParseErrorKind.INVALID_TIMESTAMP,
            f"timestamp {timestamp!r} does not match YYYY-MM-DD HH:MM",
            line_number, text
        )

    return LogRecord(
        address=address,
        timestamp=timestamp,
        path=path,
        status=int(status),
        agent=agent,
        line_number=line_number
    )


def decode_line(raw: bytes, line_number: Optional[int] = None) -> str:
    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise ParseError(
            ParseErrorKind.MALFORMED_LINE,
            f"invalid UTF-8 at byte {e.start}",
            line_number, raw.decode('utf-8', errors='replace').rstrip('\r\n')
        ) from e


def iter_records(lines: Iterable[Union[str, bytes]], strict: bool = True) -> Iterator[Outcome]:
    """Parse numbered lines, applying the strict or skip policy.

    Byte lines are decoded as UTF-8 one at a time. Empty lines are ignored.
    In strict mode the first ParseError propagates; otherwise each failure
    is logged and yielded as ``(None, error)``.
    """
    for line_num, line in enumerate(lines, 1):
        try:
            if isinstance(line, bytes):
                line = decode_line(line, line_num)
            if not _strip_terminator(line):
                continue
            record = parse_line(line, line_num)
        except ParseError as e:
            if strict:
                raise
            logger.warning("Skipping %s", e)
            yield None, e
        else:
            yield record, None
