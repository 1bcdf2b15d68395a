"""Human-readable formatting helpers for byte counts."""

from __future__ import annotations

BYTE_UNITS = ("B", "KB", "MB", "GB")
BYTE_BASE = 1024


def format_bytes(num_bytes: int) -> str:
    """Format a byte count with a base-1024 unit and two decimals.

    Negative values keep their sign, e.g. ``-1536`` -> ``"-1.50 KB"``.
    """
    if num_bytes == 0:
        return "0 B"

    exponent = 0
    magnitude = abs(num_bytes)
    while magnitude >= BYTE_BASE ** (exponent + 1) and exponent < len(BYTE_UNITS) - 1:
        exponent += 1
    return f"{num_bytes / BYTE_BASE ** exponent:.2f} {BYTE_UNITS[exponent]}"


def format_diff(num_bytes: int) -> str:
    """Format a signed byte delta, prefixing ``+`` for non-negative values."""
    sign = "+" if num_bytes >= 0 else ""
    return f"{sign}{format_bytes(num_bytes)}"
