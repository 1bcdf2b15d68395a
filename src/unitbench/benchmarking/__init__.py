"""Benchmark orchestration and session bookkeeping."""

from unitbench.benchmarking.runner import BenchmarkRunner, RunOutcome, run_benchmarks
from unitbench.benchmarking.session import Session

__all__ = ["BenchmarkRunner", "RunOutcome", "Session", "run_benchmarks"]
