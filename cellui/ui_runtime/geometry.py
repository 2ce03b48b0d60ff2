"""Cell-grid geometry primitives and hit testing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Margin:
    """Symmetric inset applied on each side of a rectangle."""

    horizontal: int = 0
    vertical: int = 0

    def __post_init__(self) -> None:
        if self.horizontal < 0 or self.vertical < 0:
            raise ValueError(f"margin must be >= 0, got {self.horizontal}x{self.vertical}")


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle in cell units, origin top-left."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"rect size must be >= 0, got {self.width}x{self.height}")

    @property
    def right(self) -> int:
        """First column past the rectangle."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """First row past the rectangle."""
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, column: int, row: int) -> bool:
        """Return whether a point is inside the rectangle.

        Both bounds are inclusive, so the column at ``x + width`` and the row at
        ``y + height`` still hit. Empty rectangles never hit.
        """
        if self.is_empty():
            return False
        return self.x <= column <= self.x + self.width and self.y <= row <= self.y + self.height

    def owns_cell(self, column: int, row: int) -> bool:
        """Return whether a cell lies inside the paintable area."""
        return self.x <= column < self.right and self.y <= row < self.bottom

    def inset(self, *, left: int = 0, top: int = 0, right: int = 0, bottom: int = 0) -> Rect:
        """Shrink each side, never producing a negative size."""
        width = max(0, self.width - left - right)
        height = max(0, self.height - top - bottom)
        return Rect(
            x=min(self.x + left, self.right),
            y=min(self.y + top, self.bottom),
            width=width,
            height=height,
        )

    def inner(self, margin: Margin) -> Rect:
        """Return the rectangle shrunk by ``margin`` on every side."""
        return self.inset(
            left=margin.horizontal,
            top=margin.vertical,
            right=margin.horizontal,
            bottom=margin.vertical,
        )

    def intersection(self, other: Rect) -> Rect:
        """Return the overlap of two rectangles (empty when disjoint)."""
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x=x, y=y, width=max(0, right - x), height=max(0, bottom - y))


def point_in_rect(column: int, row: int, rect: Rect) -> bool:
    """Hit-test one pointer position against a widget rectangle."""
    return rect.contains(column, row)
