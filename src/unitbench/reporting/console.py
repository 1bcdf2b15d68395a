"""Console rendering of benchmark runs and the comparative summary.

Output goes through a ``rich`` console; the default one soft-wraps so long
artifact paths stay on one line when piped. Names supplied by callers are escaped
before they are embedded in markup.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape

from unitbench.core.models import BenchmarkResult, FileStats, MemoryDelta, MemorySnapshot
from unitbench.reporting.formatting import format_bytes, format_diff
from unitbench.reporting.summary import SummaryEntry, SummaryReport

RULE_WIDTH = 50
EMPTY_SESSION_MESSAGE = "No benchmarks were executed."


def _format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}x"


class ConsoleReporter:
    """Print per-run blocks and the closing summary."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(soft_wrap=True)

    def _line(self, text: str) -> None:
        self.console.print(text, highlight=False)

    def run_started(self, name: str) -> None:
        self.console.print(f"\n[bold cyan]=== {escape(name.upper())} ===[/]", highlight=False)

    def run_failed(self, name: str, artifact_path: str, error: Exception) -> None:
        self.console.print(
            f"[bold red]Error:[/] could not run '{escape(artifact_path)}' ({escape(name)}): {escape(str(error))}",
            highlight=False,
        )
        self._line("Make sure the file exists and is a valid Python unit.")

    def inspection_failed(self, artifact_path: str, error: Exception) -> None:
        self.console.print(
            f"[yellow]Warning:[/] could not analyze '{escape(artifact_path)}': {escape(str(error))}",
            highlight=False,
        )

    def memory_usage(self, snapshot: MemorySnapshot, delta: Optional[MemoryDelta] = None) -> None:
        rows = (
            ("RSS memory", snapshot.rss, delta.rss if delta else None),
            ("Heap total", snapshot.heap_total, delta.heap_total if delta else None),
            ("Heap used", snapshot.heap_used, delta.heap_used if delta else None),
        )
        for label, value, change in rows:
            suffix = f" ({format_diff(change)})" if change is not None else ""
            self._line(f"{label}: {format_bytes(value)}{suffix}")

    def file_stats(self, stats: FileStats) -> None:
        self._line(f"File: {escape(stats.file_name)}")
        self._line(f"Total lines: {stats.total_lines}")
        self._line(f"Code lines: {stats.code_lines}")
        self._line(f"Blank lines: {stats.blank_lines}")
        self._line(f"Characters: {stats.character_count}")
        self._line(f"Size: {format_bytes(stats.byte_size)}")

    def run_completed(self, result: BenchmarkResult) -> None:
        self._line(f"Time {escape(result.name)}: {result.execution_time_ms:.3f} ms")
        self.memory_usage(result.memory_snapshot, result.memory_delta)
        if result.file_stats is not None:
            self.file_stats(result.file_stats)

    def _summary_entry(self, entry: SummaryEntry) -> None:
        self.console.print(f"\n  [bold]{escape(entry.name)}:[/]", highlight=False)
        self._line(f"  Time: {entry.execution_time_ms:.2f}ms ({_format_ratio(entry.speed_ratio)})")
        self._line(f"  Memory: {format_bytes(entry.heap_used)} ({_format_ratio(entry.memory_ratio)})")
        if entry.code_lines is not None:
            self._line(f"  Complexity: {entry.code_lines} lines of code")

    def summary(self, report: SummaryReport) -> None:
        self._line("\n" + "=" * RULE_WIDTH)
        self.console.print("[bold] COMPARATIVE SUMMARY[/]", highlight=False)
        self._line("=" * RULE_WIDTH)

        for entry in report.entries:
            self._summary_entry(entry)

        self.console.print(f"\n[green]Fastest:[/] {escape(report.fastest)}", highlight=False)
        self.console.print(
            f"[green]Most memory-efficient:[/] {escape(report.most_memory_efficient)}", highlight=False
        )

    def empty_session(self) -> None:
        self._line(f"\n{EMPTY_SESSION_MESSAGE}")
