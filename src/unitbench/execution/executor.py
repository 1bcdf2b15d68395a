"""Execute a single unit under test with timing and memory brackets.

A unit is a Python source file. It is compiled and evaluated from scratch on
every call through ``runpy.run_path``, so a second run of the same artifact
repeats all of its top-level side effects instead of reusing a previous
evaluation. Units run in the harness process and may print or write files
freely; nothing is captured.
"""

from __future__ import annotations

import logging
import os
import runpy
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from unitbench.core.exceptions import ArtifactNotFound, UnitExecutionFailed
from unitbench.core.models import MemorySnapshot
from unitbench.monitoring.memory import MemoryProbe

logger = logging.getLogger(__name__)

NANOSECONDS_PER_MILLISECOND = 1_000_000


@dataclass(frozen=True)
class ExecutionOutcome:
    """Raw measurements from one execution of a unit."""
    elapsed_ms: float
    before: MemorySnapshot
    after: MemorySnapshot


def ensure_accessible(path: Union[str, Path]) -> Path:
    """Return the resolved artifact path or raise ``ArtifactNotFound``."""
    artifact = Path(path)
    try:
        resolved = artifact.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ArtifactNotFound(artifact, cause=exc) from exc

    if not resolved.is_file():
        raise ArtifactNotFound(artifact, message=f"Artifact '{artifact}' is not a regular file")
    if not os.access(resolved, os.R_OK):
        raise ArtifactNotFound(artifact, message=f"Artifact '{artifact}' is not readable")
    return resolved


def _is_clean_exit(exc: SystemExit) -> bool:
    return exc.code is None or exc.code == 0


class UnitExecutor:
    """Load and run one unit per call, bracketed by snapshots and timestamps."""

    def __init__(self, probe: Optional[MemoryProbe] = None, run_name: str = "__main__"):
        """
        Args:
            probe: Memory probe used for the before/after snapshots
            run_name: Value of ``__name__`` while the unit runs
        """
        self.probe = probe or MemoryProbe()
        self.run_name = run_name

    def execute(self, artifact_path: Union[str, Path]) -> ExecutionOutcome:
        """
        Run the unit at ``artifact_path`` to completion exactly once.

        Returns:
            ExecutionOutcome with the elapsed milliseconds and both snapshots

        Raises:
            ArtifactNotFound: If the artifact is not reachable for execution
            UnitExecutionFailed: If the unit raises, or exits with a non-zero
                status
        """
        artifact = ensure_accessible(artifact_path)
        unit_dir = str(artifact.parent)

        # Script semantics: the unit's own directory comes first on sys.path.
        sys.path.insert(0, unit_dir)
        try:
            before = self.probe.capture()
            start = time.perf_counter_ns()
            try:
                runpy.run_path(str(artifact), run_name=self.run_name)
            except SystemExit as exc:
                if not _is_clean_exit(exc):
                    raise UnitExecutionFailed(artifact, exc) from exc
            except Exception as exc:
                raise UnitExecutionFailed(artifact, exc) from exc
            end = time.perf_counter_ns()
            after = self.probe.capture()
        finally:
            if unit_dir in sys.path:
                sys.path.remove(unit_dir)

        elapsed_ms = (end - start) / NANOSECONDS_PER_MILLISECOND
        logger.debug("Executed %s in %.3f ms", artifact, elapsed_ms)
        return ExecutionOutcome(elapsed_ms=elapsed_ms, before=before, after=after)
