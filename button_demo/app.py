"""Demo screen composition: a status line and two buttons that rewrite it."""

from __future__ import annotations

from dataclasses import dataclass

from cellui.api.input_events import InputEvent
from cellui.api.ui_style import Alignment, Block, Borders, BorderType
from cellui.runtime.shared_state import SharedCell
from cellui.ui_runtime.button import Button
from cellui.ui_runtime.frame import Frame
from cellui.ui_runtime.geometry import Rect
from cellui.ui_runtime.layout import Constraint, Direction, split_rect
from cellui.ui_runtime.paragraph import Paragraph

INITIAL_STATUS = "that is a button.\ntry clicking it"
DEFAULT_BUTTON_STATUS = "you clicked the button"
CUSTOM_BUTTON_STATUS = "you made the right choice"


@dataclass(frozen=True, slots=True)
class DemoLayout:
    """Rectangles of the demo screen."""

    status: Rect
    default_button: Rect
    custom_button: Rect


def build_layout(area: Rect) -> DemoLayout:
    """Split the screen into a status area above a row of two buttons."""
    _top, middle, _bottom = split_rect(
        area,
        Direction.VERTICAL,
        (Constraint.percentage(25), Constraint.percentage(50), Constraint.percentage(25)),
        margin=1,
    )
    status, buttons = split_rect(
        middle,
        Direction.VERTICAL,
        (Constraint.percentage(50), Constraint.percentage(50)),
        margin=1,
    )
    left, right = split_rect(
        buttons,
        Direction.HORIZONTAL,
        (Constraint.percentage(50), Constraint.percentage(50)),
    )
    return DemoLayout(status=status, default_button=left, custom_button=right)


def build_default_button(status: SharedCell[str]) -> Button:
    return (
        Button()
        .with_text("default button,\nclick me")
        .with_alignment(Alignment.CENTER)
        .on_left(status.setter(DEFAULT_BUTTON_STATUS))
    )


def build_custom_button(status: SharedCell[str]) -> Button:
    """Button with its own border glyphs per state and default colors."""
    return (
        Button()
        .with_text("custom button,\nno, click me")
        .with_alignment(Alignment.CENTER)
        .with_normal_block(Block(borders=Borders.ALL, border_type=BorderType.ROUNDED))
        .with_hovered_block(Block(borders=Borders.ALL, border_type=BorderType.THICK))
        .with_pressed_block(Block(borders=Borders.ALL, border_type=BorderType.PLAIN))
        .on_left(status.setter(CUSTOM_BUTTON_STATUS))
    )


def draw_demo(frame: Frame, event: InputEvent | None, status: SharedCell[str]) -> None:
    """Draw one demo frame; buttons render before the status line reads the shared text."""
    layout = build_layout(frame.area)
    frame.render_button(build_default_button(status), layout.default_button, event)
    frame.render_button(build_custom_button(status), layout.custom_button, event)
    frame.render_paragraph(Paragraph(text=status.get(), alignment=Alignment.CENTER), layout.status)
