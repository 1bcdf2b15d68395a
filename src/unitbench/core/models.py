"""
Data model shared by the benchmark harness.

All records are immutable once built: a result, its memory snapshot and its
file statistics never change after the run that produced them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MemorySnapshot:
    """Absolute process memory profile at one point in time, in bytes."""
    rss: int
    heap_total: int
    heap_used: int


@dataclass(frozen=True)
class MemoryDelta:
    """Signed change between two snapshots (``after - before``), in bytes."""
    rss: int
    heap_total: int
    heap_used: int


@dataclass(frozen=True)
class FileStats:
    """Structural metrics of a unit's source artifact."""
    file_name: str
    total_lines: int
    code_lines: int
    blank_lines: int
    character_count: int
    byte_size: int


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of a single named benchmark run."""
    name: str
    execution_time_ms: float
    memory_snapshot: MemorySnapshot
    memory_delta: MemoryDelta
    file_stats: Optional[FileStats] = None
    artifact_path: Optional[str] = None
