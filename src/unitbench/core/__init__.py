"""Core data model and exception hierarchy for unitbench."""

from unitbench.core.exceptions import (
    ArtifactError,
    ArtifactNotFound,
    ArtifactUnreadable,
    ConfigurationError,
    EmptyResultSet,
    MemoryStatsUnavailable,
    UnitBenchError,
    UnitExecutionFailed,
)
from unitbench.core.models import BenchmarkResult, FileStats, MemoryDelta, MemorySnapshot

__all__ = [
    "ArtifactError",
    "ArtifactNotFound",
    "ArtifactUnreadable",
    "BenchmarkResult",
    "ConfigurationError",
    "EmptyResultSet",
    "FileStats",
    "MemoryDelta",
    "MemorySnapshot",
    "MemoryStatsUnavailable",
    "UnitBenchError",
    "UnitExecutionFailed",
]
