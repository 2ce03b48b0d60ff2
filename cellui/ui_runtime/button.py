"""Clickable bordered button descriptor."""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Callable
from dataclasses import dataclass, field, replace

from cellui.api.commands import ClickCommand, as_command
from cellui.api.input_events import PointerButton
from cellui.api.ui_style import (
    DEFAULT_HOVERED_BLOCK,
    DEFAULT_NORMAL_BLOCK,
    DEFAULT_PRESSED_BLOCK,
    Alignment,
    Block,
    Wrap,
)
from cellui.ui_runtime.geometry import Margin

ClickAction: TypeAlias = ClickCommand | Callable[[], object]


@dataclass(frozen=True, slots=True)
class Button:
    """Immutable per-frame description of one clickable button.

    A button is built, rendered once against one input event and discarded.
    Each ``with_*`` call returns a new descriptor.
    """

    text: str = ""
    normal_block: Block = DEFAULT_NORMAL_BLOCK
    hovered_block: Block = DEFAULT_HOVERED_BLOCK
    pressed_block: Block = DEFAULT_PRESSED_BLOCK
    alignment: Alignment = Alignment.LEFT
    wrap: Wrap | None = field(default_factory=Wrap)
    margin: Margin = field(default_factory=lambda: Margin(horizontal=1, vertical=1))
    scroll: tuple[int, int] = (0, 0)
    on_left_click: ClickCommand | None = None
    on_right_click: ClickCommand | None = None
    on_middle_click: ClickCommand | None = None

    def __post_init__(self) -> None:
        for name in ("on_left_click", "on_right_click", "on_middle_click"):
            action = getattr(self, name)
            if action is not None:
                object.__setattr__(self, name, as_command(action))

    def with_text(self, text: str) -> Button:
        return replace(self, text=text)

    def with_normal_block(self, block: Block) -> Button:
        return replace(self, normal_block=block)

    def with_hovered_block(self, block: Block) -> Button:
        return replace(self, hovered_block=block)

    def with_pressed_block(self, block: Block) -> Button:
        return replace(self, pressed_block=block)

    def with_alignment(self, alignment: Alignment) -> Button:
        return replace(self, alignment=alignment)

    def with_wrap(self, wrap: Wrap | None) -> Button:
        """Set the wrap policy; ``None`` disables wrapping."""
        return replace(self, wrap=wrap)

    def with_margin(self, margin: Margin) -> Button:
        return replace(self, margin=margin)

    def with_scroll(self, rows: int, columns: int = 0) -> Button:
        if rows < 0 or columns < 0:
            raise ValueError(f"scroll offsets must be >= 0, got ({rows}, {columns})")
        return replace(self, scroll=(rows, columns))

    def on_left(self, action: ClickAction) -> Button:
        return self.on_click(PointerButton.LEFT, action)

    def on_right(self, action: ClickAction) -> Button:
        return self.on_click(PointerButton.RIGHT, action)

    def on_middle(self, action: ClickAction) -> Button:
        return self.on_click(PointerButton.MIDDLE, action)

    def on_click(self, button: PointerButton, action: ClickAction | None) -> Button:
        """Bind (or clear, with ``None``) the command for one pointer button."""
        command = as_command(action) if action is not None else None
        if button is PointerButton.LEFT:
            return replace(self, on_left_click=command)
        if button is PointerButton.RIGHT:
            return replace(self, on_right_click=command)
        if button is PointerButton.MIDDLE:
            return replace(self, on_middle_click=command)
        raise ValueError(f"unknown pointer button: {button!r}")

    def command_for(self, button: PointerButton | None) -> ClickCommand | None:
        """Return the command bound to ``button``, if any."""
        if button is PointerButton.LEFT:
            return self.on_left_click
        if button is PointerButton.RIGHT:
            return self.on_right_click
        if button is PointerButton.MIDDLE:
            return self.on_middle_click
        return None
