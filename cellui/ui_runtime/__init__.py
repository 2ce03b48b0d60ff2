"""Cell-grid UI runtime: geometry, buffers, painters and the button widget."""

from cellui.ui_runtime.block import render_block
from cellui.ui_runtime.buffer import Buffer, Cell
from cellui.ui_runtime.button import Button, ClickAction
from cellui.ui_runtime.frame import Frame
from cellui.ui_runtime.geometry import Margin, Rect, point_in_rect
from cellui.ui_runtime.interactions import (
    ButtonInteraction,
    VisualState,
    block_for_state,
    resolve_button_interaction,
    resolve_visual_state,
)
from cellui.ui_runtime.layout import Constraint, ConstraintKind, Direction, Layout, split_rect
from cellui.ui_runtime.paragraph import Paragraph, alignment_offset, layout_lines, render_paragraph
from cellui.ui_runtime.render import paint_button, render_button

__all__ = [
    "Button",
    "ButtonInteraction",
    "Buffer",
    "Cell",
    "ClickAction",
    "Constraint",
    "ConstraintKind",
    "Direction",
    "Frame",
    "Layout",
    "Margin",
    "Paragraph",
    "Rect",
    "VisualState",
    "alignment_offset",
    "block_for_state",
    "layout_lines",
    "paint_button",
    "point_in_rect",
    "render_block",
    "render_button",
    "render_paragraph",
    "resolve_button_interaction",
    "resolve_visual_state",
    "split_rect",
]
