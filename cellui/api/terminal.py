"""Terminal backend contract."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cellui.ui_runtime.buffer import Buffer
    from cellui.ui_runtime.frame import Frame
    from cellui.ui_runtime.geometry import Rect


class TerminalPort(Protocol):
    """Host-facing terminal ownership contract."""

    def enter(self) -> None:
        """Switch the terminal into raw, mouse-capturing full-screen mode."""

    def exit(self) -> None:
        """Restore the terminal to its original mode."""

    def size(self) -> Rect:
        """Return the drawable area in cells."""

    def draw(self, render: Callable[[Frame], None]) -> Buffer:
        """Run ``render`` against a fresh frame and present the result."""


__all__ = ["TerminalPort"]
