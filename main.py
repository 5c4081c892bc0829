#!/usr/bin/env python3
"""Web Log Analyzer - Entry point"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from weblog_analyzer import (VERSION, AnalysisConfig, ConfigurationError,
                             LogAnalyzer, ParseError, export_csv, print_report,
                             report_to_json)
from weblog_analyzer.patterns import (DEFAULT_FAILURE_STATUSES, DEFAULT_THRESHOLD,
                                      DEFAULT_TOP_K)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Web Log Analyzer - request statistics and failed-request detection",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", help="Comma-delimited log file to analyze")
    parser.add_argument("-k", "--top-k", type=int, default=DEFAULT_TOP_K,
                        help="Number of top pages to report")
    parser.add_argument("-t", "--threshold", type=int, default=DEFAULT_THRESHOLD,
                        help="Failed requests an address may have before it is flagged")
    parser.add_argument("-s", "--status", type=int, action="append", dest="statuses",
                        help="Status code counted as a failure (repeatable)")
    parser.add_argument("--strict", action="store_true",
                        help="Abort on the first malformed line")
    parser.add_argument("--parallel", action="store_true",
                        help="Run analyses on worker threads")
    parser.add_argument("--workers", type=int, help="Worker thread count (implies --parallel)")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("--csv-dir", help="Directory to export CSV reports into")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"WebLogAnalyzer v{VERSION}")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()
    err_console = Console(stderr=True)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)]
    )

    try:
        config = AnalysisConfig(
            top_k=args.top_k,
            threshold=args.threshold,
            failure_statuses=frozenset(args.statuses) if args.statuses else DEFAULT_FAILURE_STATUSES,
            parallel=args.parallel or args.workers is not None,
            max_workers=args.workers
        )
    except ConfigurationError as e:
        parser.error(str(e))

    analyzer = LogAnalyzer(config, strict=args.strict, console=None if args.json else err_console)

    try:
        ingested, report = analyzer.analyze_file(args.logfile)
    except (OSError, ParseError) as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False)
        sys.exit(1)

    if args.json:
        print(report_to_json(report))
    else:
        print_report(report, console, rejected=ingested.rejected)

    if args.output:
        with open(args.output, 'w') as f:
            f.write(report_to_json(report))
        err_console.print(f"\n[green]Report saved to:[/] {args.output}")

    if args.csv_dir:
        export_csv(report, args.csv_dir)
        err_console.print(f"[green]CSV reports written to:[/] {args.csv_dir}")


if __name__ == "__main__":
    main()
