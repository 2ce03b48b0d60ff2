"""Per-frame drawing handle given to host draw callbacks."""

from __future__ import annotations

from cellui.api.input_events import InputEvent
from cellui.ui_runtime.buffer import Buffer
from cellui.ui_runtime.button import Button
from cellui.ui_runtime.geometry import Rect
from cellui.ui_runtime.interactions import VisualState
from cellui.ui_runtime.paragraph import Paragraph, render_paragraph
from cellui.ui_runtime.render import render_button


class Frame:
    """Draw target for one frame, backed by a fresh buffer."""

    def __init__(self, buffer: Buffer) -> None:
        self._buffer = buffer

    @property
    def area(self) -> Rect:
        return self._buffer.area

    @property
    def buffer(self) -> Buffer:
        return self._buffer

    def render_button(self, button: Button, rect: Rect, event: InputEvent | None) -> VisualState:
        return render_button(button, rect, self._buffer, event)

    def render_paragraph(self, paragraph: Paragraph, rect: Rect) -> None:
        render_paragraph(paragraph, rect, self._buffer)
