"""JSON export of a finished benchmark session."""

from __future__ import annotations

import json
import logging
import math
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

from unitbench import __version__
from unitbench.core.models import BenchmarkResult
from unitbench.reporting.summary import SummaryReport

logger = logging.getLogger(__name__)


def _json_ratio(value: float) -> Union[float, str]:
    # JSON has no infinity literal
    return "inf" if math.isinf(value) else value


def build_export(results: Sequence[BenchmarkResult], report: Optional[SummaryReport] = None) -> Dict[str, Any]:
    """Convert results (and the summary, when there is one) to plain data."""
    payload: Dict[str, Any] = {
        "tool": "unitbench",
        "version": __version__,
        "generated_at": time.strftime("%Y-%m-%dT%H:%M:%S%z"),
        "results": [asdict(result) for result in results],
        "summary": None,
    }

    if report is not None:
        entries = []
        for entry in report.entries:
            data = asdict(entry)
            data["speed_ratio"] = _json_ratio(entry.speed_ratio)
            data["memory_ratio"] = _json_ratio(entry.memory_ratio)
            entries.append(data)
        payload["summary"] = {
            "entries": entries,
            "fastest": report.fastest,
            "most_memory_efficient": report.most_memory_efficient,
        }

    return payload


def save_results(
    path: Union[str, Path],
    results: Sequence[BenchmarkResult],
    report: Optional[SummaryReport] = None,
) -> Path:
    """Write the session to ``path`` as indented JSON and return the path."""
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(build_export(results, report), f, indent=2)

    logger.info(f"Benchmark results saved to {filepath}")
    return filepath
