"""Source artifact inspection."""

from unitbench.inspection.file_stats import FileStatInspector, compute_file_stats

__all__ = ["FileStatInspector", "compute_file_stats"]
