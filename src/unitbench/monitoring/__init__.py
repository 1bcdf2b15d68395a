"""Process memory monitoring."""

from unitbench.monitoring.memory import MemoryProbe, memory_delta

__all__ = ["MemoryProbe", "memory_delta"]
