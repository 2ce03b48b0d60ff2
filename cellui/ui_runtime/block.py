"""Border painter for ``Block`` decorations."""

from __future__ import annotations

from cellui.api.ui_style import Block, Borders
from cellui.ui_runtime.buffer import Buffer
from cellui.ui_runtime.geometry import Rect


def render_block(block: Block, rect: Rect, buffer: Buffer) -> None:
    """Paint the block edges, corners and title over ``rect``."""
    if rect.is_empty():
        return
    symbols = block.border_type.symbols
    borders = block.borders
    left, top = rect.x, rect.y
    right, bottom = rect.right - 1, rect.bottom - 1

    if Borders.TOP in borders:
        buffer.set_string(left, top, symbols.horizontal * rect.width, block.fg, clip=rect)
    if Borders.BOTTOM in borders:
        buffer.set_string(left, bottom, symbols.horizontal * rect.width, block.fg, clip=rect)
    if Borders.LEFT in borders:
        for row in range(top, bottom + 1):
            buffer.set_cell(left, row, symbols.vertical, block.fg)
    if Borders.RIGHT in borders:
        for row in range(top, bottom + 1):
            buffer.set_cell(right, row, symbols.vertical, block.fg)

    corners = (
        (Borders.TOP | Borders.LEFT, left, top, symbols.top_left),
        (Borders.TOP | Borders.RIGHT, right, top, symbols.top_right),
        (Borders.BOTTOM | Borders.LEFT, left, bottom, symbols.bottom_left),
        (Borders.BOTTOM | Borders.RIGHT, right, bottom, symbols.bottom_right),
    )
    for required, column, row, symbol in corners:
        if required in borders:
            buffer.set_cell(column, row, symbol, block.fg)

    if block.title:
        title_left = left + 1 if Borders.LEFT in borders else left
        title_right = right if Borders.RIGHT in borders else right + 1
        title_area = Rect(title_left, top, max(0, title_right - title_left), 1)
        buffer.set_string(title_left, top, block.title, block.fg, clip=title_area)
