"""Clickable bordered button widget for character-grid user interfaces."""

from cellui.api.input_events import PointerButton, PointerEvent, PointerEventKind
from cellui.api.ui_style import Alignment, Block, Borders, BorderType, Color, Wrap
from cellui.ui_runtime.button import Button
from cellui.ui_runtime.geometry import Margin, Rect
from cellui.ui_runtime.interactions import VisualState
from cellui.ui_runtime.render import render_button

__all__ = [
    "Alignment",
    "Block",
    "BorderType",
    "Borders",
    "Button",
    "Color",
    "Margin",
    "PointerButton",
    "PointerEvent",
    "PointerEventKind",
    "Rect",
    "VisualState",
    "Wrap",
    "render_button",
]
