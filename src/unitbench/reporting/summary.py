"""
Comparative summary of a benchmark session.

The summary ranks every result against the best performer in two dimensions:

- speed: ``execution_time_ms / fastest.execution_time_ms``
- memory: ``memory_snapshot.heap_used / most_efficient.memory_snapshot.heap_used``

Ties go to the earliest result in session order. Ratios are rounded half-up
to two decimals with ``decimal`` so the same session always yields the same
values.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, List, Optional, Sequence, Tuple

from unitbench.core.exceptions import EmptyResultSet
from unitbench.core.models import BenchmarkResult

logger = logging.getLogger(__name__)

RATIO_PRECISION = Decimal("0.01")


def round_ratio(value: float) -> float:
    """Round a ratio half-up to two decimals; infinities pass through."""
    if math.isinf(value):
        return value
    return float(Decimal(repr(value)).quantize(RATIO_PRECISION, rounding=ROUND_HALF_UP))


def compute_ratio(value: float, best: float) -> float:
    """Return ``value / best`` rounded for display.

    A zero ``best`` gives ``1.0`` for entries that are also zero and ``inf``
    for everything else.
    """
    if best == 0:
        return 1.0 if value == 0 else math.inf
    return round_ratio(value / best)


def _first_minimum(results: Sequence[BenchmarkResult], key: Callable[[BenchmarkResult], float]) -> BenchmarkResult:
    best = results[0]
    for result in results[1:]:
        if key(result) < key(best):
            best = result
    return best


def _execution_time(result: BenchmarkResult) -> float:
    return result.execution_time_ms


def _heap_used(result: BenchmarkResult) -> float:
    return result.memory_snapshot.heap_used


@dataclass(frozen=True)
class SummaryEntry:
    """One row of the comparative summary."""
    name: str
    execution_time_ms: float
    speed_ratio: float
    heap_used: int
    memory_ratio: float
    code_lines: Optional[int] = None


@dataclass(frozen=True)
class SummaryReport:
    """Ranked comparison of every result in a session."""
    entries: Tuple[SummaryEntry, ...]
    fastest: str
    most_memory_efficient: str

    def entry(self, name: str) -> SummaryEntry:
        """Return the first entry called ``name``."""
        for entry in self.entries:
            if entry.name == name:
                return entry
        raise KeyError(name)


class SummaryReporter:
    """Build a ``SummaryReport`` from a completed list of results."""

    def summarize(self, results: Sequence[BenchmarkResult]) -> SummaryReport:
        """
        Compute speed and memory ratios for every result.

        Args:
            results: Results in session order; never modified

        Returns:
            SummaryReport with one entry per result, in the same order

        Raises:
            EmptyResultSet: If ``results`` is empty
        """
        results = tuple(results)
        if not results:
            raise EmptyResultSet()

        fastest = _first_minimum(results, _execution_time)
        most_efficient = _first_minimum(results, _heap_used)

        entries: List[SummaryEntry] = []
        for result in results:
            entries.append(
                SummaryEntry(
                    name=result.name,
                    execution_time_ms=result.execution_time_ms,
                    speed_ratio=compute_ratio(result.execution_time_ms, fastest.execution_time_ms),
                    heap_used=result.memory_snapshot.heap_used,
                    memory_ratio=compute_ratio(
                        result.memory_snapshot.heap_used, most_efficient.memory_snapshot.heap_used
                    ),
                    code_lines=result.file_stats.code_lines if result.file_stats else None,
                )
            )

        logger.debug(
            "Summarized %s results: fastest=%s, most memory-efficient=%s",
            len(entries),
            fastest.name,
            most_efficient.name,
        )
        return SummaryReport(
            entries=tuple(entries),
            fastest=fastest.name,
            most_memory_efficient=most_efficient.name,
        )
