"""Configuration models — grammar and runtime settings."""

from station_uptime.config.parser import ParserConfig
from station_uptime.config.runtime import RuntimeConfig

__all__ = [
    "ParserConfig",
    "RuntimeConfig",
]
