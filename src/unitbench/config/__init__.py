"""Environment settings and benchmark plan files."""

from unitbench.config.plan import BenchmarkSpec, load_plan, parse_pair
from unitbench.config.settings import BenchSettings

__all__ = ["BenchSettings", "BenchmarkSpec", "load_plan", "parse_pair"]
