"""
Core Exceptions for unitbench.

This module defines the exception classes used throughout the benchmark
harness. They are organized into categories:
- Artifact Exceptions (the unit's source file cannot be located or read)
- Execution Exceptions (the unit raised while running)
- Reporting Exceptions
- Host Capability Exceptions
- Configuration Exceptions

Artifact, execution and reporting errors are recovered locally by the runner
or the driver. Host capability errors are fatal for the whole session.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class UnitBenchError(Exception):
    """Base exception class for all unitbench errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        """
        Initialize a unitbench error.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional context information for debugging
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

        logger.debug(f"UnitBenchError: {message}", extra={
            "error_code": error_code,
            "context": self.context
        })


# Artifact Exceptions

class ArtifactError(UnitBenchError):
    """Base exception for problems with a unit's source artifact."""

    def __init__(self, path: PathLike, message: str, error_code: str, cause: Optional[BaseException] = None):
        self.path = str(path)
        self.cause = cause
        super().__init__(
            message,
            error_code=error_code,
            context={"path": self.path, "cause": str(cause) if cause else None}
        )


class ArtifactNotFound(ArtifactError):
    """Raised when a unit's source artifact cannot be reached for execution."""

    def __init__(self, path: PathLike, message: Optional[str] = None, cause: Optional[BaseException] = None):
        default_message = f"Artifact '{path}' not found or not accessible"
        if cause:
            default_message += f": {cause}"
        super().__init__(path, message or default_message, "ARTIFACT_NOT_FOUND", cause)


class ArtifactUnreadable(ArtifactError):
    """Raised when a unit's source artifact cannot be read as text."""

    def __init__(self, path: PathLike, message: Optional[str] = None, cause: Optional[BaseException] = None):
        default_message = f"Artifact '{path}' could not be read as text"
        if cause:
            default_message += f": {cause}"
        super().__init__(path, message or default_message, "ARTIFACT_UNREADABLE", cause)


# Execution Exceptions

class UnitExecutionFailed(UnitBenchError):
    """Raised when a unit under test raises an error while it runs."""

    def __init__(self, path: PathLike, cause: BaseException, message: Optional[str] = None):
        """
        Initialize a unit execution error.

        Args:
            path: The artifact whose execution failed
            cause: The underlying exception raised by the unit
            message: Optional custom message
        """
        self.path = str(path)
        self.cause = cause
        default_message = f"Unit '{path}' failed: {type(cause).__name__}: {cause}"
        super().__init__(
            message or default_message,
            error_code="UNIT_EXECUTION_FAILED",
            context={"path": self.path, "cause": repr(cause)}
        )


# Reporting Exceptions

class EmptyResultSet(UnitBenchError):
    """Raised when a summary is requested for a session without results."""

    def __init__(self, message: str = "no benchmarks were executed"):
        super().__init__(message, error_code="EMPTY_RESULT_SET")


# Host Capability Exceptions

class MemoryStatsUnavailable(UnitBenchError):
    """Raised when the host cannot report process memory statistics."""

    def __init__(self, message: Optional[str] = None, cause: Optional[BaseException] = None):
        self.cause = cause
        default_message = "Process memory statistics are unavailable on this host"
        if cause:
            default_message += f": {cause}"
        super().__init__(
            message or default_message,
            error_code="MEMORY_STATS_UNAVAILABLE",
            context={"cause": str(cause) if cause else None}
        )


# Configuration Exceptions

class ConfigurationError(UnitBenchError):
    """Exception raised for configuration-related errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code="CONFIGURATION_ERROR", context=context)
