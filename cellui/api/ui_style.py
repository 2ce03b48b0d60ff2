"""Cell-grid style tokens: colors, border glyph sets and block decorations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntFlag, StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cellui.ui_runtime.geometry import Rect


class Color(StrEnum):
    """Terminal foreground colors."""

    DEFAULT = "default"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


class Alignment(StrEnum):
    """Horizontal text alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Wrap:
    """Word-wrap policy; ``trim`` drops whitespace around wrapped lines."""

    trim: bool = False


@dataclass(frozen=True, slots=True)
class BorderSymbols:
    """Glyph set used to draw one border style."""

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str


PLAIN_SYMBOLS = BorderSymbols("┌", "┐", "└", "┘", "─", "│")
ROUNDED_SYMBOLS = BorderSymbols("╭", "╮", "╰", "╯", "─", "│")
DOUBLE_SYMBOLS = BorderSymbols("╔", "╗", "╚", "╝", "═", "║")
THICK_SYMBOLS = BorderSymbols("┏", "┓", "┗", "┛", "━", "┃")


class BorderType(StrEnum):
    """Named border glyph styles."""

    PLAIN = "plain"
    ROUNDED = "rounded"
    DOUBLE = "double"
    THICK = "thick"

    @property
    def symbols(self) -> BorderSymbols:
        return BORDER_SYMBOLS[self]


BORDER_SYMBOLS: dict[BorderType, BorderSymbols] = {
    BorderType.PLAIN: PLAIN_SYMBOLS,
    BorderType.ROUNDED: ROUNDED_SYMBOLS,
    BorderType.DOUBLE: DOUBLE_SYMBOLS,
    BorderType.THICK: THICK_SYMBOLS,
}


class Borders(IntFlag):
    """Which edges of a block carry a border."""

    NONE = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 4
    LEFT = 8
    ALL = TOP | RIGHT | BOTTOM | LEFT


@dataclass(frozen=True, slots=True)
class Block:
    """Border decoration painted around a rectangle."""

    borders: Borders = Borders.NONE
    border_type: BorderType = BorderType.PLAIN
    fg: Color = Color.DEFAULT
    title: str | None = None

    def with_borders(self, borders: Borders) -> Block:
        return replace(self, borders=borders)

    def with_border_type(self, border_type: BorderType) -> Block:
        return replace(self, border_type=border_type)

    def with_fg(self, fg: Color) -> Block:
        return replace(self, fg=fg)

    def with_title(self, title: str | None) -> Block:
        return replace(self, title=title)

    def inner(self, rect: Rect) -> Rect:
        """Return the area left inside the drawn edges."""
        left = 1 if Borders.LEFT in self.borders else 0
        right = 1 if Borders.RIGHT in self.borders else 0
        top = 1 if Borders.TOP in self.borders or self.title else 0
        bottom = 1 if Borders.BOTTOM in self.borders else 0
        return rect.inset(left=left, top=top, right=right, bottom=bottom)


DEFAULT_NORMAL_BLOCK = Block(borders=Borders.ALL, border_type=BorderType.ROUNDED, fg=Color.WHITE)
DEFAULT_HOVERED_BLOCK = Block(borders=Borders.ALL, border_type=BorderType.ROUNDED, fg=Color.GREEN)
DEFAULT_PRESSED_BLOCK = Block(borders=Borders.ALL, border_type=BorderType.ROUNDED, fg=Color.RED)


__all__ = [
    "Alignment",
    "BORDER_SYMBOLS",
    "Block",
    "BorderSymbols",
    "BorderType",
    "Borders",
    "Color",
    "DEFAULT_HOVERED_BLOCK",
    "DEFAULT_NORMAL_BLOCK",
    "DEFAULT_PRESSED_BLOCK",
    "Wrap",
]
