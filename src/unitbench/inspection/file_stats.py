"""Structural metrics for a unit's source artifact.

Line policy:
    The file is read without newline translation and split strictly on
    ``"\\n"``. A line is blank when it is empty after ``str.strip()``, which
    also removes a trailing ``"\\r"`` left by CRLF files. A trailing newline
    therefore produces a final blank line, and an empty file has exactly one
    (blank) line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from unitbench.core.exceptions import ArtifactUnreadable
from unitbench.core.models import FileStats

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def compute_file_stats(text: str, file_name: str, encoding: str = ENCODING) -> FileStats:
    """Derive line, character and byte counts from raw text.

    ``byte_size`` is the length of ``text`` encoded with ``encoding``.
    """

    lines = text.split("\n")
    blank_lines = sum(1 for line in lines if not line.strip())

    return FileStats(
        file_name=file_name,
        total_lines=len(lines),
        code_lines=len(lines) - blank_lines,
        blank_lines=blank_lines,
        character_count=len(text),
        byte_size=len(text.encode(encoding)),
    )


class FileStatInspector:
    """Read a source artifact and report its structural metrics."""

    def __init__(self, encoding: str = ENCODING):
        self.encoding = encoding

    def inspect(self, path: Union[str, Path]) -> FileStats:
        """
        Inspect the artifact at ``path``.

        Args:
            path: Location of the source artifact

        Returns:
            FileStats for the artifact, named by its base file name

        Raises:
            ArtifactUnreadable: If the path is missing, is not a regular file,
                or cannot be decoded as text
        """
        artifact = Path(path)
        try:
            with open(artifact, "r", encoding=self.encoding, newline="") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ArtifactUnreadable(artifact, cause=exc) from exc

        stats = compute_file_stats(text, artifact.name, self.encoding)
        logger.debug(
            "Inspected %s: %s lines (%s code, %s blank), %s bytes",
            stats.file_name,
            stats.total_lines,
            stats.code_lines,
            stats.blank_lines,
            stats.byte_size,
        )
        return stats
