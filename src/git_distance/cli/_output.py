"""Terminal and JSON rendering for a distance Report."""

import json
from typing import Optional, Union

from rich.console import Console
from rich.table import Table

from ..metrics import DESCRIPTIONS, MetricKind
from ..report import Report

SEPARATOR = "─"

FLAG_NAMES = {
    MetricKind.LEVENSHTEIN: "levenshtein",
    MetricKind.HAMMING: "hamming",
    MetricKind.ADDITIONS: "additions",
    MetricKind.DAMERAU_LEVENSHTEIN: "damerau",
    MetricKind.JARO_WINKLER: "jaro-winkler",
    MetricKind.LCS: "lcs",
    MetricKind.LINES: "lines",
    MetricKind.WORDS: "words",
}


def format_value(value: Union[int, float]) -> str:
    """Integers as-is; fractional metrics with four decimals."""
    if isinstance(value, float):
        return f"{value:.4f}"
    return str(value)


class ReportFormatter:
    """Render a Report to a console.

    Usage::

        formatter = ReportFormatter()
        formatter.render(report)                       # total only
        formatter.render(report, list_files=True)      # per-file rows + total
        formatter.render(report, fmt="json")           # machine-readable
    """

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    def render(
        self,
        report: Report,
        fmt: str = "text",
        list_files: bool = False,
        old_ref: Optional[str] = None,
        new_ref: Optional[str] = None,
    ) -> None:
        if fmt == "json":
            self._render_json(report, old_ref, new_ref)
        else:
            self._render_text(report, list_files=list_files)

    def _render_text(self, report: Report, list_files: bool) -> None:
        if list_files and report.rows:
            width = max(len(row.identifier) for row in report.rows)
            for row in report.rows:
                self._plain(f"{row.identifier.ljust(width)}  {format_value(row.value)}")
            self._plain(SEPARATOR * (width + 10))
        self._plain(format_value(report.total))

    def _render_json(
        self, report: Report, old_ref: Optional[str], new_ref: Optional[str]
    ) -> None:
        output = {"from": old_ref, "to": new_ref}
        output.update(report.to_dict())
        # bypass rich so the JSON is never wrapped or highlighted
        print(json.dumps(output, indent=2))

    def _plain(self, line: str) -> None:
        self._console.print(line, markup=False, highlight=False, soft_wrap=True)


def render_metric_table(console: Console) -> None:
    """Print the metric catalogue with its descriptions."""
    table = Table(title="Metrics", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Flag")
    table.add_column("Signed")
    table.add_column("Description")
    for kind in MetricKind:
        table.add_row(
            kind.value,
            f"--{FLAG_NAMES[kind]}",
            "yes" if kind.signed else "no",
            DESCRIPTIONS[kind],
        )
    console.print(table)
