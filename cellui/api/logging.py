"""Public logging configuration API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    console_enabled: bool = True
    file_path: str | None = None
    file_format: str = "json"  # text|json


__all__ = ["LoggingConfig"]
