"""Summary computation and report rendering."""

from unitbench.reporting.console import ConsoleReporter
from unitbench.reporting.export import save_results
from unitbench.reporting.formatting import format_bytes, format_diff
from unitbench.reporting.summary import SummaryEntry, SummaryReport, SummaryReporter

__all__ = [
    "ConsoleReporter",
    "SummaryEntry",
    "SummaryReport",
    "SummaryReporter",
    "format_bytes",
    "format_diff",
    "save_results",
]
