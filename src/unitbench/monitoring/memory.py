"""Process memory snapshots for the benchmark harness.

Fields map onto the host as follows:

- ``rss``: resident-set size reported by ``psutil``.
- ``heap_total``: virtual memory size reported by ``psutil`` (memory the
  process has reserved, whether or not it is resident).
- ``heap_used``: bytes held by live Python allocations, as traced by
  ``tracemalloc``.

The probe turns ``tracemalloc`` on when it is created and only turns it off
again on ``close()`` if it was the one that turned it on.
"""

from __future__ import annotations

import logging
import os
import tracemalloc
from typing import Optional

import psutil

from unitbench.core.exceptions import MemoryStatsUnavailable
from unitbench.core.models import MemoryDelta, MemorySnapshot

logger = logging.getLogger(__name__)


def memory_delta(before: MemorySnapshot, after: MemorySnapshot) -> MemoryDelta:
    """Return ``after - before`` field by field; results may be negative."""
    return MemoryDelta(
        rss=after.rss - before.rss,
        heap_total=after.heap_total - before.heap_total,
        heap_used=after.heap_used - before.heap_used,
    )


class MemoryProbe:
    """Capture memory snapshots of the current (or a given) process."""

    def __init__(self, process_id: Optional[int] = None, trace_heap: bool = True):
        """
        Initialize the probe and check that the host can report memory.

        Args:
            process_id: Process to observe, defaults to the current process
            trace_heap: Start ``tracemalloc`` so ``heap_used`` reflects live
                Python allocations; when False ``heap_used`` is always 0

        Raises:
            MemoryStatsUnavailable: If process memory cannot be read at all
        """
        self.process_id = process_id or os.getpid()
        self.trace_heap = trace_heap
        self._started_tracing = False

        try:
            self._process = psutil.Process(self.process_id)
            self._process.memory_info()
        except (psutil.Error, OSError) as exc:
            raise MemoryStatsUnavailable(cause=exc) from exc

        if trace_heap and not tracemalloc.is_tracing():
            tracemalloc.start()
            self._started_tracing = True

        logger.debug("MemoryProbe initialized for process %s", self.process_id)

    def capture(self) -> MemorySnapshot:
        """Take a point-in-time memory snapshot."""
        try:
            info = self._process.memory_info()
        except (psutil.Error, OSError) as exc:
            raise MemoryStatsUnavailable(cause=exc) from exc

        heap_used = tracemalloc.get_traced_memory()[0] if self.trace_heap and tracemalloc.is_tracing() else 0
        return MemorySnapshot(rss=int(info.rss), heap_total=int(info.vms), heap_used=int(heap_used))

    def close(self) -> None:
        """Stop heap tracing if this probe started it."""
        if self._started_tracing and tracemalloc.is_tracing():
            tracemalloc.stop()
        self._started_tracing = False

    def __enter__(self) -> "MemoryProbe":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
