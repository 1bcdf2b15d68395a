"""Ordered, append-only collection of benchmark results."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from unitbench.core.models import BenchmarkResult


class Session:
    """Results accumulated during one harness invocation.

    Entries are only ever appended; nothing is removed or reordered. Readers get
    tuple snapshots, so summarizing a session cannot alter it.
    """

    def __init__(self) -> None:
        self._results: List[BenchmarkResult] = []

    def append(self, result: BenchmarkResult) -> None:
        self._results.append(result)

    @property
    def results(self) -> Tuple[BenchmarkResult, ...]:
        return tuple(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[BenchmarkResult]:
        return iter(self.results)

    def __bool__(self) -> bool:
        return bool(self._results)

    def __repr__(self) -> str:
        return f"Session(results={len(self._results)})"
