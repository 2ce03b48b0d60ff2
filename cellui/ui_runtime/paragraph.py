"""Paragraph layout: line splitting, word wrap, scrolling and alignment."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass

from cellui.api.ui_style import Alignment, Color, Wrap
from cellui.ui_runtime.buffer import Buffer, strip_control
from cellui.ui_runtime.geometry import Rect


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Block of text painted into a rectangle.

    ``scroll`` is ``(rows, columns)``. The column offset only applies when
    wrapping is off, since wrapped lines never exceed the width.
    """

    text: str
    alignment: Alignment = Alignment.LEFT
    wrap: Wrap | None = None
    scroll: tuple[int, int] = (0, 0)
    fg: Color = Color.DEFAULT


def layout_lines(text: str, width: int, wrap: Wrap | None) -> list[str]:
    """Split text on newlines and word-wrap each line to ``width`` cells."""
    raw_lines = [strip_control(line) for line in text.split("\n")]
    if wrap is None or width <= 0:
        return raw_lines
    wrapped: list[str] = []
    for line in raw_lines:
        source = line.strip() if wrap.trim else line.rstrip()
        pieces = textwrap.wrap(
            source,
            width=width,
            expand_tabs=False,
            replace_whitespace=False,
            drop_whitespace=True,
            break_long_words=True,
            break_on_hyphens=False,
        )
        wrapped.extend(pieces or [""])
    return wrapped


def alignment_offset(line_width: int, area_width: int, alignment: Alignment) -> int:
    """Return the column offset that aligns a line inside an area."""
    free = max(0, area_width - line_width)
    if alignment is Alignment.CENTER:
        return free // 2
    if alignment is Alignment.RIGHT:
        return free
    return 0


def render_paragraph(paragraph: Paragraph, rect: Rect, buffer: Buffer) -> None:
    """Paint a paragraph, clipped to ``rect``."""
    if rect.is_empty():
        return
    scroll_rows, scroll_columns = paragraph.scroll
    lines = layout_lines(paragraph.text, rect.width, paragraph.wrap)
    visible = lines[max(0, scroll_rows) : max(0, scroll_rows) + rect.height]
    for offset, line in enumerate(visible):
        if paragraph.wrap is None:
            line = line[max(0, scroll_columns) :]
        line = line[: rect.width]
        column = rect.x + alignment_offset(len(line), rect.width, paragraph.alignment)
        buffer.set_string(column, rect.y + offset, line, paragraph.fg, clip=rect)
