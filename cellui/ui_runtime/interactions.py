"""Visual-state derivation and click dispatch resolution for buttons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from cellui.api.commands import ClickCommand
from cellui.api.input_events import InputEvent, PointerButton, PointerEvent, PointerEventKind
from cellui.api.ui_style import Block
from cellui.ui_runtime.button import Button
from cellui.ui_runtime.geometry import Rect, point_in_rect


class VisualState(StrEnum):
    """Per-frame button appearance; never stored between frames."""

    NORMAL = "normal"
    HOVERED = "hovered"
    PRESSED = "pressed"


@dataclass(frozen=True, slots=True)
class ButtonInteraction:
    """Resolved style and pending click side effect for one render."""

    state: VisualState
    block: Block
    command: ClickCommand | None = None
    button: PointerButton | None = None


def resolve_visual_state(event: InputEvent | None, rect: Rect) -> VisualState:
    """Derive the visual state a rectangle shows for the current event."""
    if not isinstance(event, PointerEvent):
        return VisualState.NORMAL
    if not point_in_rect(event.column, event.row, rect):
        return VisualState.NORMAL
    if event.kind is PointerEventKind.MOVED:
        return VisualState.HOVERED
    if event.kind is PointerEventKind.PRESSED:
        return VisualState.PRESSED
    return VisualState.NORMAL


def block_for_state(button: Button, state: VisualState) -> Block:
    if state is VisualState.HOVERED:
        return button.hovered_block
    if state is VisualState.PRESSED:
        return button.pressed_block
    return button.normal_block


def resolve_button_interaction(button: Button, rect: Rect, event: InputEvent | None) -> ButtonInteraction:
    """Choose the border style and the command a press should run.

    Nothing is invoked here; the render step runs ``command`` exactly once.
    A press with no command bound to its pointer button still shows the
    pressed style.
    """
    state = resolve_visual_state(event, rect)
    block = block_for_state(button, state)
    if state is not VisualState.PRESSED or not isinstance(event, PointerEvent):
        return ButtonInteraction(state=state, block=block)
    return ButtonInteraction(
        state=state,
        block=block,
        command=button.command_for(event.button),
        button=event.button,
    )
