"""
Benchmark plan files.

A plan is an ordered list of ``(name, path)`` pairs stored as YAML or JSON,
either as a top-level list or under a ``benchmarks`` key::

    benchmarks:
      - name: Estruturado
        path: units/estruturado.py
      - name: POO
        path: units/poo.py

Relative paths are resolved against the plan file's directory.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Tuple, Union

import yaml

from unitbench.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkSpec:
    """A named unit to benchmark."""
    name: str
    path: Path

    def as_pair(self) -> Tuple[str, Path]:
        return self.name, self.path


def parse_pair(value: str) -> BenchmarkSpec:
    """Parse a ``NAME=PATH`` command line argument."""
    name, sep, path = value.partition("=")
    name = name.strip()
    path = path.strip()
    if not sep or not name or not path:
        raise ConfigurationError(f"Invalid benchmark '{value}', expected NAME=PATH", context={"value": value})
    return BenchmarkSpec(name=name, path=Path(path))


def _read_plan(plan_path: Path) -> Any:
    suffix = plan_path.suffix.lower()
    try:
        with open(plan_path, encoding="utf-8") as f:
            if suffix in (".yaml", ".yml"):
                return yaml.safe_load(f)
            if suffix == ".json":
                return json.load(f)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to parse plan file: {str(e)}") from e
    except OSError as e:
        raise ConfigurationError(f"Error loading plan file: {str(e)}") from e
    raise ConfigurationError(f"Unsupported plan format: {plan_path.suffix}")


def load_plan(path: Union[str, Path]) -> List[BenchmarkSpec]:
    """
    Load benchmark pairs from a YAML or JSON plan file.

    Args:
        path: Plan file location

    Returns:
        BenchmarkSpec entries in file order

    Raises:
        ConfigurationError: If the file is missing, malformed, or has entries
            without a name or path
    """
    plan_path = Path(path)
    if not plan_path.exists():
        raise ConfigurationError(f"Plan file not found: {plan_path}")

    data = _read_plan(plan_path)
    if isinstance(data, dict):
        data = data.get("benchmarks")
    if not isinstance(data, list):
        raise ConfigurationError(
            f"Plan file {plan_path} must contain a list of benchmarks",
            context={"path": str(plan_path)},
        )

    specs: List[BenchmarkSpec] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict) or not item.get("name") or not item.get("path"):
            raise ConfigurationError(
                f"Benchmark #{index + 1} in {plan_path} needs both 'name' and 'path'",
                context={"path": str(plan_path), "index": index},
            )
        artifact = Path(str(item["path"]))
        if not artifact.is_absolute():
            artifact = plan_path.parent / artifact
        specs.append(BenchmarkSpec(name=str(item["name"]), path=artifact))

    logger.debug(f"Loaded {len(specs)} benchmark(s) from {plan_path}")
    return specs
