"""
unitbench: a micro-benchmark harness for comparing units of Python code.

Each unit under test is a Python source file. The harness executes it once,
brackets the execution with timing and memory snapshots, inspects the source
file, and ranks every run by speed and memory efficiency.

Examples:
- unitbench                       # run the bundled Estruturado vs POO comparison
- unitbench run A=a.py B=b.py     # compare two arbitrary units
- python -m unitbench --help
"""

from __future__ import annotations

__version__ = "0.1.0"
__all__ = ["__version__"]
