"""Log Analyzer - Exceptions"""

from enum import Enum
from typing import Optional


class LogAnalyzerError(Exception):
    """Base class for all analyzer errors"""


class ParseErrorKind(Enum):
    MALFORMED_LINE = 'malformed_line'
    INVALID_STATUS = 'invalid_status'
    INVALID_TIMESTAMP = 'invalid_timestamp'


class ParseError(LogAnalyzerError):
    """A log line that failed validation.

    Carries the rule that rejected the line plus, when known, the line
    number and raw content so the driver can report it.
    """

    def __init__(self, kind: ParseErrorKind, message: str,
                 line_number: Optional[int] = None, line: Optional[str] = None):
        self.kind = kind
        self.message = message
        self.line_number = line_number
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        location = f"line {self.line_number}" if self.line_number is not None else "line"
        text = f"{location}: {self.kind.value}: {self.message}"
        if self.line is not None:
            text += f" [{self.line!r}]"
        return text


class ConfigurationError(LogAnalyzerError, ValueError):
    """Invalid analysis parameter (K, threshold, statuses, workers)"""


class AnalysisCancelled(LogAnalyzerError):
    """Raised when a cancellation token fires between aggregation steps"""
