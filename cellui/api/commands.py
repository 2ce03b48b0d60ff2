"""Public click-command contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClickCommand(Protocol):
    """Zero-argument action bound to one pointer button of a widget."""

    def invoke(self) -> None:
        """Run the action synchronously."""


@dataclass(frozen=True, slots=True)
class CallbackCommand:
    """Click command backed by a plain callable."""

    callback: Callable[[], object]

    def invoke(self) -> None:
        self.callback()


def as_command(action: ClickCommand | Callable[[], object]) -> ClickCommand:
    """Normalize a callable or command object into a click command."""
    if isinstance(action, ClickCommand):
        return action
    if not callable(action):
        raise TypeError(f"click action must be callable, got {type(action).__name__}")
    return CallbackCommand(action)


__all__ = ["CallbackCommand", "ClickCommand", "as_command"]
