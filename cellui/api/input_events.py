"""Public input event types."""

from __future__ import annotations

from typing import TypeAlias

from dataclasses import dataclass
from enum import StrEnum


class PointerButton(StrEnum):
    """Pointer buttons a widget can bind a click command to."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class PointerEventKind(StrEnum):
    """Pointer event kinds in terminal cell space."""

    MOVED = "moved"
    PRESSED = "pressed"
    RELEASED = "released"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Raw pointer event in cell coordinates."""

    kind: PointerEventKind
    column: int
    row: int
    button: PointerButton | None = None

    def __post_init__(self) -> None:
        if self.kind in (PointerEventKind.PRESSED, PointerEventKind.RELEASED) and self.button is None:
            raise ValueError(f"{self.kind} pointer event requires a button")


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key/char event."""

    event_type: str
    value: str


@dataclass(frozen=True, slots=True)
class FocusEvent:
    """Terminal focus change."""

    focused: bool


@dataclass(frozen=True, slots=True)
class ResizeEvent:
    """Terminal resize in cells."""

    width: int
    height: int


InputEvent: TypeAlias = PointerEvent | KeyEvent | FocusEvent | ResizeEvent


def pointer_moved(column: int, row: int) -> PointerEvent:
    """Build a pointer-move event."""
    return PointerEvent(kind=PointerEventKind.MOVED, column=column, row=row)


def pointer_pressed(column: int, row: int, button: PointerButton = PointerButton.LEFT) -> PointerEvent:
    """Build a pointer-press event."""
    return PointerEvent(kind=PointerEventKind.PRESSED, column=column, row=row, button=button)


def pointer_released(column: int, row: int, button: PointerButton = PointerButton.LEFT) -> PointerEvent:
    """Build a pointer-release event."""
    return PointerEvent(kind=PointerEventKind.RELEASED, column=column, row=row, button=button)


__all__ = [
    "FocusEvent",
    "InputEvent",
    "KeyEvent",
    "PointerButton",
    "PointerEvent",
    "PointerEventKind",
    "ResizeEvent",
    "pointer_moved",
    "pointer_pressed",
    "pointer_released",
]
