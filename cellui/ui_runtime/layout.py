"""Constraint-based rectangle splitting."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from cellui.ui_runtime.geometry import Margin, Rect


class Direction(StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ConstraintKind(StrEnum):
    PERCENTAGE = "percentage"
    LENGTH = "length"


@dataclass(frozen=True, slots=True)
class Constraint:
    """Size request for one layout segment."""

    kind: ConstraintKind
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"constraint value must be >= 0, got {self.value}")
        if self.kind is ConstraintKind.PERCENTAGE and self.value > 100:
            raise ValueError(f"percentage must be <= 100, got {self.value}")

    @classmethod
    def percentage(cls, value: int) -> Constraint:
        return cls(ConstraintKind.PERCENTAGE, value)

    @classmethod
    def length(cls, value: int) -> Constraint:
        return cls(ConstraintKind.LENGTH, value)

    def size_for(self, total: int) -> int:
        if self.kind is ConstraintKind.PERCENTAGE:
            return total * self.value // 100
        return self.value


@dataclass(frozen=True, slots=True)
class Layout:
    """Split a rectangle into consecutive segments along one axis.

    Segments are laid out in order and clipped to the available space; any
    space left over goes to the last segment.
    """

    direction: Direction = Direction.VERTICAL
    constraints: tuple[Constraint, ...] = ()
    margin: Margin = field(default_factory=Margin)

    def split(self, area: Rect) -> list[Rect]:
        inner = area.inner(self.margin)
        if not self.constraints:
            return []
        horizontal = self.direction is Direction.HORIZONTAL
        total = inner.width if horizontal else inner.height
        sizes = _segment_sizes(self.constraints, total)
        rects: list[Rect] = []
        offset = 0
        for size in sizes:
            if horizontal:
                rects.append(Rect(inner.x + offset, inner.y, size, inner.height))
            else:
                rects.append(Rect(inner.x, inner.y + offset, inner.width, size))
            offset += size
        return rects


def _segment_sizes(constraints: Sequence[Constraint], total: int) -> list[int]:
    sizes: list[int] = []
    remaining = total
    for constraint in constraints:
        size = min(constraint.size_for(total), remaining)
        sizes.append(size)
        remaining -= size
    sizes[-1] += remaining
    return sizes


def split_rect(
    area: Rect,
    direction: Direction,
    constraints: Sequence[Constraint],
    *,
    margin: int = 0,
) -> list[Rect]:
    """Convenience wrapper around ``Layout.split``."""
    layout = Layout(
        direction=direction,
        constraints=tuple(constraints),
        margin=Margin(horizontal=margin, vertical=margin),
    )
    return layout.split(area)
