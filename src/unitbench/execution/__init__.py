"""Execution of units under test."""

from unitbench.execution.executor import ExecutionOutcome, UnitExecutor, ensure_accessible

__all__ = ["ExecutionOutcome", "UnitExecutor", "ensure_accessible"]
