"""Log Analyzer - Report output"""

import csv
import json
from pathlib import Path
from typing import List

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import AggregationResult, Report


def report_to_json(report: Report, indent: int = 2) -> str:
    return json.dumps(report.to_dict(), indent=indent)


def _write_rows(path: Path, header, rows) -> Path:
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)
    return path


def export_csv(report: Report, directory: str) -> List[Path]:
    """Write one comma-delimited file per report section into ``directory``."""
    out = Path(directory)
    out.mkdir(parents=True, exist_ok=True)

    summary = report.to_dict()['summary']
    written = [_write_rows(out / 'summary.csv', ('metric', 'value'), summary.items())]

    sections = (
        ('status_distribution', report.status_distribution),
        ('top_pages', report.top_pages),
        ('traffic_trend', report.traffic_trend),
        ('agent_distribution', report.agent_distribution),
        ('top_addresses', report.top_addresses),
    )
    for name, result in sections:
        written.append(_write_rows(out / f'{name}.csv', (result.key_name, 'count'), result.items()))

    written.append(_write_rows(
        out / 'suspicious_addresses.csv',
        ('address', 'failed_count'),
        ((s.address, s.failed_count) for s in report.suspicious_addresses)
    ))
    return written


def _count_table(result: AggregationResult, key_title: str, key_style: str = "cyan") -> Table:
    table = Table(box=box.ROUNDED)
    table.add_column(key_title, style=key_style)
    table.add_column("Requests", style="white", justify="right")
    for key, count in result.items():
        table.add_row(escape(str(key)) if key != "" else "(empty)", str(count))
    return table


def _section(console, title: str, style: str = "bold"):
    console.print("\n" + "─" * 70, style="cyan")
    console.print(title, style=style)


def print_report(report: Report, console, rejected: int = 0):
    console.print("\n" + "═" * 70, style="cyan")
    console.print("              WEB LOG REPORT", style="bold cyan")
    console.print("═" * 70, style="cyan")

    suspicious = len(report.suspicious_addresses)
    console.print(Panel.fit(
        f"Total Requests: [cyan]{report.total_requests:,}[/]\n"
        f"Rejected Lines: [{'yellow' if rejected else 'green'}]{rejected:,}[/]\n"
        f"Unique Addresses: [cyan]{report.unique_addresses:,}[/]\n"
        f"Unique Paths: [cyan]{report.unique_paths:,}[/]\n"
        f"Suspicious Addresses: [{'red' if suspicious else 'green'}]{suspicious:,}[/]",
        title="Summary",
        border_style="cyan"
    ))

    if report.suspicious_addresses:
        _section(console, "SUSPICIOUS ADDRESSES", style="bold red")
        table = Table(box=box.ROUNDED)
        table.add_column("Address", style="red")
        table.add_column("Failed Requests", style="yellow", justify="right")
        for entry in report.suspicious_addresses:
            table.add_row(escape(entry.address), str(entry.failed_count))
        console.print(table)

    _section(console, "STATUS CODES")
    for code, count in report.status_distribution.items():
        color = 'green' if code < 400 else 'yellow' if code < 500 else 'red'
        console.print(f"  {code}: [{color}]{count}[/]")

    _section(console, f"TOP PAGES (top {len(report.top_pages)})")
    console.print(_count_table(report.top_pages, "Path"))

    _section(console, "TOP ADDRESSES (by requests)")
    console.print(_count_table(report.top_addresses, "Address"))

    _section(console, "USER AGENTS")
    console.print(_count_table(report.agent_distribution, "Agent"))

    _section(console, "TRAFFIC TREND (per minute)")
    console.print(_count_table(report.traffic_trend, "Minute"))

    console.print("\n" + "═" * 70, style="cyan")
