"""Sample units under test used by the default benchmark driver.

Each module is a standalone script: it does its work at import time when run
with ``runpy`` and must not be imported as part of the package API.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

WORKLOADS_DIR = Path(__file__).resolve().parent
DATA_FILE = WORKLOADS_DIR / "dados.csv"


def default_benchmarks() -> List[Tuple[str, Path]]:
    """The fixed comparison run when the CLI is invoked without arguments."""
    return [
        ("Estruturado", WORKLOADS_DIR / "estruturado.py"),
        ("POO", WORKLOADS_DIR / "poo.py"),
    ]
