"""Log Analyzer - File ingestion and analysis driver"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from rich.progress import Progress, SpinnerColumn, TextColumn

from .config import AnalysisConfig
from .models import IngestResult, Report
from .parser import iter_records
from .report import CancellationToken, build_report

logger = logging.getLogger(__name__)


class LogAnalyzer:
    """Reads log lines, applies the error policy and builds the report"""

    def __init__(self, config: Optional[AnalysisConfig] = None, strict: bool = False,
                 console=None):
        self.config = config or AnalysisConfig()
        self.strict = strict
        self.console = console

    def ingest(self, lines: Iterable[Union[str, bytes]]) -> IngestResult:
        result = IngestResult(records=[], errors=[], lines_read=0)
        for record, error in iter_records(self._count_lines(lines, result), self.strict):
            if error is not None:
                result.errors.append(error)
            else:
                result.records.append(record)

        logger.info("Accepted %d records, rejected %d of %d lines",
                    len(result.records), result.rejected, result.lines_read)
        return result

    def _count_lines(self, lines: Iterable[str], result: IngestResult):
        for line in lines:
            result.lines_read += 1
            yield line

    def load_file(self, filepath: str) -> IngestResult:
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Log file not found: {filepath}")

        # Decoded per line so one bad byte sequence only rejects its own line
        with open(path, 'rb') as f:
            lines = f.readlines()

        if self.console:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=self.console,
                transient=True
            ) as progress:
                task = progress.add_task("Parsing logs...", total=len(lines))

                def advancing():
                    for line in lines:
                        yield line
                        progress.update(task, advance=1)

                return self.ingest(advancing())

        return self.ingest(lines)

    def analyze(self, records, token: Optional[CancellationToken] = None) -> Report:
        return build_report(records, self.config, token)

    def analyze_file(self, filepath: str,
                     token: Optional[CancellationToken] = None) -> Tuple[IngestResult, Report]:
        ingested = self.load_file(filepath)
        return ingested, self.analyze(ingested.records, token)
