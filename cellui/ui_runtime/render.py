"""Button render step: resolve, dispatch, then paint text and border."""

from __future__ import annotations

import logging

from cellui.api.input_events import InputEvent, PointerEvent
from cellui.api.ui_style import Block
from cellui.ui_runtime.block import render_block
from cellui.ui_runtime.buffer import Buffer
from cellui.ui_runtime.button import Button
from cellui.ui_runtime.geometry import Rect
from cellui.ui_runtime.interactions import VisualState, resolve_button_interaction
from cellui.ui_runtime.paragraph import Paragraph, render_paragraph

logger = logging.getLogger(__name__)


def paint_button(button: Button, block: Block, rect: Rect, buffer: Buffer) -> None:
    """Paint the text inside the margin, then the border over the full rect."""
    paragraph = Paragraph(
        text=button.text,
        alignment=button.alignment,
        wrap=button.wrap,
        scroll=button.scroll,
    )
    render_paragraph(paragraph, rect.inner(button.margin), buffer)
    render_block(block, rect, buffer)


def render_button(button: Button, rect: Rect, buffer: Buffer, event: InputEvent | None) -> VisualState:
    """Render one button for the current frame and return its visual state.

    A press inside ``rect`` runs the command bound to that pointer button
    before painting. Exceptions raised by the command propagate.
    """
    interaction = resolve_button_interaction(button, rect, event)
    if interaction.command is not None:
        if isinstance(event, PointerEvent):
            logger.debug(
                "button_dispatch button=%s column=%d row=%d",
                interaction.button,
                event.column,
                event.row,
            )
        interaction.command.invoke()
    paint_button(button, interaction.block, rect, buffer)
    return interaction.state
