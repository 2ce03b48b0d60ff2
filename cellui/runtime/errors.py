"""Runtime exception types and tolerated-error observability helpers."""

from __future__ import annotations

import logging


class TerminalError(RuntimeError):
    """Terminal backend setup, teardown or drawing failed."""


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True)
