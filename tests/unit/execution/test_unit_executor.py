import sys

import pytest

from unitbench.core.exceptions import ArtifactNotFound, UnitExecutionFailed
from unitbench.execution.executor import UnitExecutor, ensure_accessible
from unitbench.monitoring.memory import MemoryProbe


@pytest.fixture
def executor():
    probe = MemoryProbe()
    yield UnitExecutor(probe=probe)
    probe.close()


def test_elapsed_time_covers_the_unit(write_unit, executor):
    unit = write_unit(
        """
        import time
        time.sleep(0.05)
        """
    )

    outcome = executor.execute(unit)

    assert outcome.elapsed_ms >= 50.0


def test_elapsed_time_is_fractional_milliseconds(write_unit, executor):
    unit = write_unit("x = 1\n")

    outcome = executor.execute(unit)

    assert isinstance(outcome.elapsed_ms, float)
    assert outcome.elapsed_ms >= 0.0


def test_snapshots_bracket_the_execution(write_unit, executor):
    unit = write_unit(
        """
        retained = [bytearray(1024) for _ in range(256)]
        """
    )

    outcome = executor.execute(unit)

    assert outcome.before.rss > 0
    assert outcome.after.rss > 0
    assert outcome.after.heap_used >= 0


def test_each_execution_reruns_top_level_side_effects(tmp_path, write_unit, executor):
    counter = tmp_path / "counter.txt"
    counter.write_text("0", encoding="utf-8")
    unit = write_unit(
        f"""
        from pathlib import Path
        counter = Path({str(counter)!r})
        counter.write_text(str(int(counter.read_text()) + 1))
        """
    )

    executor.execute(unit)
    executor.execute(unit)

    assert counter.read_text(encoding="utf-8") == "2"


def test_unit_runs_as_main(tmp_path, write_unit, executor):
    marker = tmp_path / "marker.txt"
    unit = write_unit(
        f"""
        if __name__ == "__main__":
            __import__("pathlib").Path({str(marker)!r}).write_text("ran")
        """
    )

    executor.execute(unit)

    assert marker.read_text() == "ran"


def test_run_name_is_configurable(tmp_path, write_unit):
    marker = tmp_path / "marker.txt"
    unit = write_unit(
        f"""
        __import__("pathlib").Path({str(marker)!r}).write_text(__name__)
        """
    )

    UnitExecutor(probe=MemoryProbe(trace_heap=False), run_name="bench_unit").execute(unit)

    assert marker.read_text() == "bench_unit"


def test_unit_can_import_sibling_modules(tmp_path, write_unit, executor):
    write_unit("VALUE = 42\n", name="helper_for_unit.py")
    marker = tmp_path / "marker.txt"
    unit = write_unit(
        f"""
        import helper_for_unit
        __import__("pathlib").Path({str(marker)!r}).write_text(str(helper_for_unit.VALUE))
        """
    )

    executor.execute(unit)

    assert marker.read_text() == "42"
    assert str(tmp_path) not in sys.path
    sys.modules.pop("helper_for_unit", None)


def test_missing_artifact_raises_not_found(tmp_path, executor):
    with pytest.raises(ArtifactNotFound) as exc_info:
        executor.execute(tmp_path / "nope.py")

    assert exc_info.value.error_code == "ARTIFACT_NOT_FOUND"


def test_directory_artifact_raises_not_found(tmp_path, executor):
    with pytest.raises(ArtifactNotFound):
        executor.execute(tmp_path)


def test_unit_error_is_wrapped_with_cause(write_unit, executor):
    unit = write_unit("raise ValueError('boom')\n")

    with pytest.raises(UnitExecutionFailed) as exc_info:
        executor.execute(unit)

    assert isinstance(exc_info.value.cause, ValueError)
    assert isinstance(exc_info.value.__cause__, ValueError)
    assert "boom" in exc_info.value.message


def test_syntax_error_is_an_execution_failure(write_unit, executor):
    unit = write_unit("def broken(:\n")

    with pytest.raises(UnitExecutionFailed) as exc_info:
        executor.execute(unit)

    assert isinstance(exc_info.value.cause, SyntaxError)


def test_clean_sys_exit_counts_as_completion(write_unit, executor):
    unit = write_unit("import sys\nsys.exit(0)\n")

    outcome = executor.execute(unit)

    assert outcome.elapsed_ms >= 0.0


def test_non_zero_sys_exit_is_a_failure(write_unit, executor):
    unit = write_unit("import sys\nsys.exit(3)\n")

    with pytest.raises(UnitExecutionFailed) as exc_info:
        executor.execute(unit)

    assert isinstance(exc_info.value.cause, SystemExit)


def test_failed_unit_does_not_leave_its_directory_on_sys_path(tmp_path, write_unit, executor):
    unit = write_unit("raise RuntimeError('x')\n")

    with pytest.raises(UnitExecutionFailed):
        executor.execute(unit)

    assert str(tmp_path.resolve()) not in sys.path


def test_ensure_accessible_resolves_relative_paths(tmp_path, monkeypatch, write_unit):
    write_unit("pass\n", name="rel.py")
    monkeypatch.chdir(tmp_path)

    assert ensure_accessible("rel.py") == (tmp_path / "rel.py").resolve()
