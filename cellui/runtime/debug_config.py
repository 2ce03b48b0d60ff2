"""Runtime configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from cellui.input.frame_events import EventPolicy


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _event_policy(name: str, default: EventPolicy) -> EventPolicy:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return EventPolicy(raw.strip().lower())
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Immutable host-loop and logging configuration."""

    log_level: str
    log_file: str | None
    log_format: str
    poll_interval_ms: int
    event_policy: EventPolicy
    input_trace_enabled: bool
    mouse_motion_enabled: bool


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with the package-prefixed override."""
    value = os.getenv("CELLUI_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_runtime_config() -> RuntimeConfig:
    """Load immutable runtime configuration from env vars."""
    log_file = os.getenv("CELLUI_LOG_FILE", "").strip() or None
    return RuntimeConfig(
        log_level=resolve_log_level_name(),
        log_file=log_file,
        log_format=os.getenv("CELLUI_LOG_FORMAT", "json").strip().lower() or "json",
        poll_interval_ms=max(1, _int("CELLUI_POLL_INTERVAL_MS", 100)),
        event_policy=_event_policy("CELLUI_EVENT_POLICY", EventPolicy.REUSE_LAST),
        input_trace_enabled=_flag("CELLUI_DEBUG_INPUT", False),
        mouse_motion_enabled=_flag("CELLUI_MOUSE_MOTION", True),
    )


def enabled_input_trace() -> bool:
    return load_runtime_config().input_trace_enabled
