"""Web log analyzer package"""

from .patterns import VERSION
from .errors import (LogAnalyzerError, ParseError, ParseErrorKind,
                     ConfigurationError, AnalysisCancelled)
from .models import LogRecord, SuspiciousAddress, AggregationResult, Report, IngestResult
from .config import AnalysisConfig
from .parser import parse_line, iter_records
from .engine import AggregationEngine
from .detector import detect_suspicious
from .report import CancellationToken, build_report
from .analyzer import LogAnalyzer
from .output import print_report, report_to_json, export_csv

__all__ = [
    'VERSION', 'LogAnalyzerError', 'ParseError', 'ParseErrorKind',
    'ConfigurationError', 'AnalysisCancelled', 'LogRecord', 'SuspiciousAddress',
    'AggregationResult', 'Report', 'IngestResult', 'AnalysisConfig',
    'parse_line', 'iter_records', 'AggregationEngine', 'detect_suspicious',
    'CancellationToken', 'build_report', 'LogAnalyzer', 'print_report',
    'report_to_json', 'export_csv',
]
