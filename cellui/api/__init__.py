"""Public cellui API contracts."""

from cellui.api.commands import CallbackCommand, ClickCommand, as_command
from cellui.api.input_events import (
    FocusEvent,
    InputEvent,
    KeyEvent,
    PointerButton,
    PointerEvent,
    PointerEventKind,
    ResizeEvent,
    pointer_moved,
    pointer_pressed,
    pointer_released,
)
from cellui.api.logging import LoggingConfig
from cellui.api.terminal import TerminalPort
from cellui.api.ui_style import (
    DEFAULT_HOVERED_BLOCK,
    DEFAULT_NORMAL_BLOCK,
    DEFAULT_PRESSED_BLOCK,
    Alignment,
    Block,
    Borders,
    BorderSymbols,
    BorderType,
    Color,
    Wrap,
)

__all__ = [
    "Alignment",
    "Block",
    "BorderSymbols",
    "BorderType",
    "Borders",
    "CallbackCommand",
    "ClickCommand",
    "Color",
    "DEFAULT_HOVERED_BLOCK",
    "DEFAULT_NORMAL_BLOCK",
    "DEFAULT_PRESSED_BLOCK",
    "FocusEvent",
    "InputEvent",
    "KeyEvent",
    "LoggingConfig",
    "PointerButton",
    "PointerEvent",
    "PointerEventKind",
    "ResizeEvent",
    "TerminalPort",
    "Wrap",
    "as_command",
    "pointer_moved",
    "pointer_pressed",
    "pointer_released",
]
