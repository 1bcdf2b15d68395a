import csv

import pytest

from unitbench.execution.executor import UnitExecutor
from unitbench.inspection.file_stats import FileStatInspector
from unitbench.monitoring.memory import MemoryProbe
from unitbench.workloads import DATA_FILE, default_benchmarks


@pytest.fixture
def executor():
    return UnitExecutor(probe=MemoryProbe(trace_heap=False))


def test_default_benchmarks_are_fixed_and_present():
    pairs = default_benchmarks()

    assert [name for name, _ in pairs] == ["Estruturado", "POO"]
    assert all(path.is_file() for _, path in pairs)
    assert DATA_FILE.is_file()


def test_structured_unit_prints_word_count(executor, capsys):
    _, path = default_benchmarks()[0]

    executor.execute(path)

    output = capsys.readouterr().out
    assert "=== Estruturado ===" in output
    assert "Total words:" in output
    assert "After removing id 2:" in output


def test_object_oriented_unit_saves_new_csv(executor, capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _, path = default_benchmarks()[1]

    executor.execute(path)

    assert "=== POO ===" in capsys.readouterr().out
    with open(tmp_path / "dados_novo.csv", newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    ids = {row["id"] for row in rows}
    assert "2" not in ids
    assert "6" in ids


def test_workloads_can_be_inspected():
    inspector = FileStatInspector()

    for _, path in default_benchmarks():
        stats = inspector.inspect(path)
        assert stats.code_lines > 0
        assert stats.total_lines == stats.code_lines + stats.blank_lines
