"""
Runtime settings for unitbench.

Settings come from environment variables only; there is no settings file.

Environment Variables:
    UNITBENCH_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    UNITBENCH_PAUSE_MS: Pause between consecutive runs in milliseconds
    UNITBENCH_RUN_NAME: Value of ``__name__`` while a unit runs
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from unitbench.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "UNITBENCH_"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PAUSE_MS = 100
DEFAULT_RUN_NAME = "__main__"


@dataclass(frozen=True)
class BenchSettings:
    """Settings shared by the CLI and the programmatic driver."""
    log_level: str = DEFAULT_LOG_LEVEL
    pause_ms: int = DEFAULT_PAUSE_MS
    run_name: str = DEFAULT_RUN_NAME

    @property
    def pause_seconds(self) -> float:
        return self.pause_ms / 1000.0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BenchSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            BenchSettings with defaults for unset variables

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid {ENV_PREFIX}LOG_LEVEL '{log_level}', expected one of {', '.join(VALID_LOG_LEVELS)}",
                context={"variable": f"{ENV_PREFIX}LOG_LEVEL", "value": log_level},
            )

        raw_pause = env.get(f"{ENV_PREFIX}PAUSE_MS", str(DEFAULT_PAUSE_MS)).strip()
        try:
            pause_ms = int(raw_pause)
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid {ENV_PREFIX}PAUSE_MS '{raw_pause}', expected an integer",
                context={"variable": f"{ENV_PREFIX}PAUSE_MS", "value": raw_pause},
            ) from exc
        if pause_ms < 0:
            raise ConfigurationError(
                f"Invalid {ENV_PREFIX}PAUSE_MS '{raw_pause}', must not be negative",
                context={"variable": f"{ENV_PREFIX}PAUSE_MS", "value": raw_pause},
            )

        run_name = env.get(f"{ENV_PREFIX}RUN_NAME", DEFAULT_RUN_NAME).strip() or DEFAULT_RUN_NAME

        settings = cls(log_level=log_level, pause_ms=pause_ms, run_name=run_name)
        logger.debug(f"Loaded settings: {settings}")
        return settings
