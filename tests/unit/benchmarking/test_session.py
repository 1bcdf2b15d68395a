from unitbench.benchmarking.session import Session
from unitbench.core.models import BenchmarkResult, MemoryDelta, MemorySnapshot


def _result(name: str) -> BenchmarkResult:
    return BenchmarkResult(
        name=name,
        execution_time_ms=1.0,
        memory_snapshot=MemorySnapshot(rss=1, heap_total=1, heap_used=1),
        memory_delta=MemoryDelta(rss=0, heap_total=0, heap_used=0),
    )


def test_new_session_is_empty():
    session = Session()

    assert len(session) == 0
    assert not session
    assert session.results == ()


def test_append_preserves_order():
    session = Session()
    for name in ("first", "second", "third"):
        session.append(_result(name))

    assert [result.name for result in session] == ["first", "second", "third"]


def test_results_snapshot_is_not_affected_by_later_appends():
    session = Session()
    session.append(_result("first"))

    snapshot = session.results
    session.append(_result("second"))

    assert len(snapshot) == 1
    assert len(session) == 2
