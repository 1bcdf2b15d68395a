import tracemalloc
from types import SimpleNamespace

import psutil
import pytest

from unitbench.core.exceptions import MemoryStatsUnavailable
from unitbench.core.models import MemorySnapshot
from unitbench.monitoring.memory import MemoryProbe, memory_delta


def test_delta_subtracts_each_field_independently():
    before = MemorySnapshot(rss=1000, heap_total=5000, heap_used=300)
    after = MemorySnapshot(rss=1500, heap_total=4000, heap_used=300)

    delta = memory_delta(before, after)

    assert delta.rss == 500
    assert delta.heap_total == -1000
    assert delta.heap_used == 0


def test_delta_can_be_negative_everywhere():
    before = MemorySnapshot(rss=10, heap_total=20, heap_used=30)
    after = MemorySnapshot(rss=1, heap_total=2, heap_used=3)

    delta = memory_delta(before, after)

    assert (delta.rss, delta.heap_total, delta.heap_used) == (-9, -18, -27)


def test_capture_reports_non_negative_values():
    with MemoryProbe() as probe:
        snapshot = probe.capture()

    assert snapshot.rss > 0
    assert snapshot.heap_total > 0
    assert snapshot.heap_used >= 0


def test_heap_used_tracks_live_allocations():
    with MemoryProbe() as probe:
        before = probe.capture()
        payload = [bytearray(1024) for _ in range(512)]
        after = probe.capture()

    assert len(payload) == 512
    assert memory_delta(before, after).heap_used >= 512 * 1024


def test_probe_stops_tracing_it_started():
    assert not tracemalloc.is_tracing()

    probe = MemoryProbe()
    assert tracemalloc.is_tracing()

    probe.close()
    assert not tracemalloc.is_tracing()


def test_probe_leaves_existing_tracing_alone():
    tracemalloc.start()

    probe = MemoryProbe()
    probe.close()

    assert tracemalloc.is_tracing()


def test_heap_used_is_zero_without_tracing():
    probe = MemoryProbe(trace_heap=False)

    assert not tracemalloc.is_tracing()
    assert probe.capture().heap_used == 0


def test_unreadable_process_memory_is_fatal(monkeypatch):
    def _denied(pid):
        raise psutil.AccessDenied(pid)

    monkeypatch.setattr(psutil, "Process", _denied)

    with pytest.raises(MemoryStatsUnavailable) as exc_info:
        MemoryProbe()

    assert exc_info.value.error_code == "MEMORY_STATS_UNAVAILABLE"


def test_capture_failure_is_fatal(monkeypatch):
    probe = MemoryProbe(trace_heap=False)

    def _gone():
        raise psutil.NoSuchProcess(probe.process_id)

    monkeypatch.setattr(probe, "_process", SimpleNamespace(memory_info=_gone))

    with pytest.raises(MemoryStatsUnavailable):
        probe.capture()
