"""Global pytest configuration for unitbench.

The module ensures the ``src`` tree is importable regardless of whether the
package was installed, and provides helpers for writing throwaway units under
test into a temporary directory.
"""

import io
import sys
import textwrap
import tracemalloc
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

# Add the src directory to the Python path so imports can work correctly
project_root = Path(__file__).parent.parent
src_dir = project_root / 'src'

if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def _stop_heap_tracing():
    """Leave tracemalloc off between tests so one test's probe cannot leak."""
    yield
    if tracemalloc.is_tracing():
        tracemalloc.stop()


@pytest.fixture
def write_unit(tmp_path: Path) -> Callable[..., Path]:
    """Write a Python unit under test and return its path."""

    def _write(source: str, name: str = "unit.py") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def capture_console() -> Console:
    """A rich console writing plain text into memory."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)
