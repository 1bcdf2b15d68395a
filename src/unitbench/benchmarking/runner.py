"""
Benchmark orchestration.

``BenchmarkRunner`` drives one named run at a time: it executes the unit,
inspects its source artifact and appends a ``BenchmarkResult`` to its
``Session``. Runs are strictly sequential; overlapping runs would mix one
unit's allocations into another's measurement window.

Failure policy (no retries anywhere):
- artifact not reachable, or the unit raised: log, record nothing, continue
- artifact not readable for statistics after a successful run: keep the
  measurement with ``file_stats=None``
- memory statistics unavailable: propagate, the session cannot continue
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from unitbench.benchmarking.session import Session
from unitbench.core.exceptions import ArtifactError, ArtifactUnreadable, EmptyResultSet, UnitExecutionFailed
from unitbench.core.models import BenchmarkResult, FileStats
from unitbench.execution.executor import UnitExecutor
from unitbench.inspection.file_stats import FileStatInspector
from unitbench.monitoring.memory import MemoryProbe, memory_delta
from unitbench.reporting.console import ConsoleReporter
from unitbench.reporting.summary import SummaryReport, SummaryReporter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class BenchmarkRunner:
    """Run named benchmarks and accumulate their results in a session."""

    def __init__(
        self,
        executor: Optional[UnitExecutor] = None,
        inspector: Optional[FileStatInspector] = None,
        session: Optional[Session] = None,
        reporter: Optional[ConsoleReporter] = None,
    ):
        """
        Args:
            executor: Executes units; a default one owns its own memory probe
            inspector: Computes file statistics for executed artifacts
            session: Session to append to, a fresh one by default
            reporter: Prints per-run blocks; silent when omitted
        """
        self.executor = executor or UnitExecutor()
        self.inspector = inspector or FileStatInspector()
        self.session = session if session is not None else Session()
        self.reporter = reporter

    def run(self, name: str, artifact_path: PathLike) -> Optional[BenchmarkResult]:
        """
        Execute one named benchmark and record its result.

        Returns:
            The recorded result, or None when the run produced no entry
        """
        if self.reporter:
            self.reporter.run_started(name)

        try:
            outcome = self.executor.execute(artifact_path)
        except (ArtifactError, UnitExecutionFailed) as exc:
            logger.error(f"Benchmark '{name}' skipped: {exc.message}")
            if self.reporter:
                self.reporter.run_failed(name, str(artifact_path), exc)
            return None

        file_stats = self._inspect(artifact_path)

        result = BenchmarkResult(
            name=name,
            execution_time_ms=outcome.elapsed_ms,
            memory_snapshot=outcome.after,
            memory_delta=memory_delta(outcome.before, outcome.after),
            file_stats=file_stats,
            artifact_path=str(artifact_path),
        )
        self.session.append(result)
        logger.info(f"Benchmark '{name}' completed in {result.execution_time_ms:.3f} ms")

        if self.reporter:
            self.reporter.run_completed(result)
        return result

    def _inspect(self, artifact_path: PathLike) -> Optional[FileStats]:
        try:
            return self.inspector.inspect(artifact_path)
        except ArtifactUnreadable as exc:
            logger.warning(f"Could not analyze '{artifact_path}': {exc.message}")
            if self.reporter:
                self.reporter.inspection_failed(str(artifact_path), exc)
            return None

    def results(self) -> Tuple[BenchmarkResult, ...]:
        """Results recorded so far, in run order."""
        return self.session.results


@dataclass(frozen=True)
class RunOutcome:
    """A finished session and its summary (None when nothing was recorded)."""
    session: Session
    report: Optional[SummaryReport]


def run_benchmarks(
    benchmarks: Iterable[Tuple[str, PathLike]],
    *,
    runner: Optional[BenchmarkRunner] = None,
    reporter: Optional[ConsoleReporter] = None,
    summary_reporter: Optional[SummaryReporter] = None,
    pause_seconds: float = 0.0,
) -> RunOutcome:
    """
    Run ``(name, path)`` pairs in order, then summarize the session.

    When no runner is given, one is built around a memory probe that is closed
    before returning, so heap tracing started here does not outlive the call.

    Args:
        benchmarks: Ordered benchmark pairs
        runner: Runner to use; built with ``reporter`` when omitted
        reporter: Console reporter for per-run blocks and the summary
        summary_reporter: Computes the comparative summary
        pause_seconds: Sleep between consecutive runs

    Returns:
        RunOutcome with the session and its summary report
    """
    if runner is None:
        with MemoryProbe() as probe:
            runner = BenchmarkRunner(executor=UnitExecutor(probe=probe), reporter=reporter)
            return _drive(runner, benchmarks, reporter, summary_reporter, pause_seconds)
    return _drive(runner, benchmarks, reporter, summary_reporter, pause_seconds)


def _drive(
    runner: BenchmarkRunner,
    benchmarks: Iterable[Tuple[str, PathLike]],
    reporter: Optional[ConsoleReporter],
    summary_reporter: Optional[SummaryReporter],
    pause_seconds: float,
) -> RunOutcome:
    reporter = reporter or runner.reporter
    summary_reporter = summary_reporter or SummaryReporter()

    pairs: List[Tuple[str, PathLike]] = list(benchmarks)
    logger.info(f"Running {len(pairs)} benchmark(s)")

    for index, (name, artifact_path) in enumerate(pairs):
        if index and pause_seconds > 0:
            time.sleep(pause_seconds)
        runner.run(name, artifact_path)

    try:
        report = summary_reporter.summarize(runner.results())
    except EmptyResultSet as exc:
        logger.info(f"Nothing to summarize: {exc.message}")
        if reporter:
            reporter.empty_session()
        return RunOutcome(session=runner.session, report=None)

    if reporter:
        reporter.summary(report)
    return RunOutcome(session=runner.session, report=report)
