"""Process-level settings for the CLI and HTTP drivers."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ENV_LOG_LEVEL = "STATION_UPTIME_LOG_LEVEL"


class RuntimeConfig(BaseModel):
    """Logging and driver settings."""

    log_level: LogLevel = Field(
        default="WARNING",
        description="Root log level for diagnostics written to stderr. "
                    "Validation failure details are logged at DEBUG.",
    )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> RuntimeConfig:
        """Build from ``STATION_UPTIME_LOG_LEVEL`` (case-insensitive), else defaults."""
        env = os.environ if environ is None else environ
        level = env.get(ENV_LOG_LEVEL)
        if level:
            return cls(log_level=level.strip().upper())
        return cls()
