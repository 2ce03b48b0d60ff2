"""Cell buffer used as the output surface for one frame."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass

from cellui.api.ui_style import Color
from cellui.ui_runtime.geometry import Rect


@dataclass(frozen=True, slots=True)
class Cell:
    """One terminal cell."""

    symbol: str = " "
    fg: Color = Color.DEFAULT


EMPTY_CELL = Cell()


def strip_control(text: str) -> str:
    """Drop control characters (``Cc``), which never occupy a cell."""
    return "".join(ch for ch in text if unicodedata.category(ch) != "Cc")


class Buffer:
    """Row-major grid of cells covering ``area``; writes outside it are dropped."""

    def __init__(self, area: Rect) -> None:
        self._area = area
        self._cells: list[Cell] = [EMPTY_CELL] * area.area

    @property
    def area(self) -> Rect:
        return self._area

    def _index(self, column: int, row: int) -> int | None:
        if not self._area.owns_cell(column, row):
            return None
        return (row - self._area.y) * self._area.width + (column - self._area.x)

    def get(self, column: int, row: int) -> Cell:
        index = self._index(column, row)
        if index is None:
            raise IndexError(f"cell ({column}, {row}) outside buffer area {self._area}")
        return self._cells[index]

    def set_cell(self, column: int, row: int, symbol: str, fg: Color = Color.DEFAULT) -> bool:
        """Write one cell; return whether it landed inside the buffer."""
        index = self._index(column, row)
        if index is None:
            return False
        self._cells[index] = Cell(symbol=symbol, fg=fg)
        return True

    def set_string(
        self,
        column: int,
        row: int,
        text: str,
        fg: Color = Color.DEFAULT,
        *,
        clip: Rect | None = None,
    ) -> int:
        """Write ``text`` left to right starting at a cell; return cells written."""
        written = 0
        for offset, symbol in enumerate(strip_control(text)):
            target = column + offset
            if clip is not None and not clip.owns_cell(target, row):
                continue
            if self.set_cell(target, row, symbol, fg):
                written += 1
        return written

    def paint_region(self, rect: Rect, symbol: str = " ", fg: Color = Color.DEFAULT) -> None:
        """Fill every cell of ``rect`` that overlaps the buffer."""
        region = rect.intersection(self._area)
        for row in range(region.y, region.bottom):
            for column in range(region.x, region.right):
                self.set_cell(column, row, symbol, fg)

    def reset(self) -> None:
        self._cells = [EMPTY_CELL] * self._area.area

    def lines(self) -> list[str]:
        """Return the buffer symbols as one string per row."""
        width = self._area.width
        if width == 0:
            return []
        return [
            "".join(cell.symbol for cell in self._cells[start : start + width])
            for start in range(0, len(self._cells), width)
        ]

    def diff(self, previous: Buffer | None) -> list[tuple[int, int, Cell]]:
        """Return cells that changed relative to ``previous`` (all cells when sizes differ)."""
        changed: list[tuple[int, int, Cell]] = []
        same_area = previous is not None and previous.area == self._area
        width = self._area.width
        for index, cell in enumerate(self._cells):
            if same_area and previous is not None and previous._cells[index] == cell:
                continue
            column = self._area.x + index % width
            row = self._area.y + index // width
            changed.append((column, row, cell))
        return changed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self._area == other._area and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Buffer(area={self._area!r})"
