"""Layout modes and pane rectangle calculation.

A layout mode partitions a bounding rectangle into an ordered list of pane
rectangles. Splits are 50/50 bisections; grid modes apply them recursively.
Any bounds, including zero-sized ones, produce one rectangle per pane.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

from serialdeck.core.cycling import step_index


class Rect(NamedTuple):
    """A cell rectangle: origin column/row plus size."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, column: int, row: int) -> bool:
        return self.x <= column < self.right and self.y <= row < self.bottom


def split_rows(area: Rect) -> tuple[Rect, Rect]:
    """Bisect into a top and a bottom half."""
    top = max(area.height, 0) // 2
    return (
        Rect(area.x, area.y, area.width, top),
        Rect(area.x, area.y + top, area.width, max(area.height, 0) - top),
    )


def split_columns(area: Rect) -> tuple[Rect, Rect]:
    """Bisect into a left and a right half."""
    left = max(area.width, 0) // 2
    return (
        Rect(area.x, area.y, left, area.height),
        Rect(area.x + left, area.y, max(area.width, 0) - left, area.height),
    )


class LayoutMode(StrEnum):
    """Ways of dividing the workspace into panes, in cycling order."""
    SINGLE = "single"
    SPLIT_HORIZONTAL = "split_horizontal"
    SPLIT_VERTICAL = "split_vertical"
    GRID_2X2 = "grid_2x2"
    GRID_1X2 = "grid_1x2"
    GRID_2X1 = "grid_2x1"

    @classmethod
    def catalogue(cls) -> tuple[LayoutMode, ...]:
        return tuple(cls)

    @property
    def label(self) -> str:
        return _LABELS[self]

    def max_panes(self) -> int:
        return _PANE_COUNTS[self]

    def next(self) -> LayoutMode:
        modes = self.catalogue()
        return modes[step_index(modes.index(self), len(modes), 1)]

    def prev(self) -> LayoutMode:
        modes = self.catalogue()
        return modes[step_index(modes.index(self), len(modes), -1)]

    def calculate_areas(self, bounds: Rect) -> list[Rect]:
        """Return the pane rectangles for ``bounds`` in pane-slot order."""
        if self is LayoutMode.SINGLE:
            return [bounds]
        if self is LayoutMode.SPLIT_HORIZONTAL:
            return list(split_rows(bounds))
        if self is LayoutMode.SPLIT_VERTICAL:
            return list(split_columns(bounds))
        if self is LayoutMode.GRID_2X2:
            top, bottom = split_rows(bounds)
            return [*split_columns(top), *split_columns(bottom)]
        if self is LayoutMode.GRID_1X2:
            top, bottom = split_rows(bounds)
            return [top, *split_columns(bottom)]
        left, right = split_columns(bounds)
        return [left, *split_rows(right)]


_PANE_COUNTS: dict[LayoutMode, int] = {
    LayoutMode.SINGLE: 1,
    LayoutMode.SPLIT_HORIZONTAL: 2,
    LayoutMode.SPLIT_VERTICAL: 2,
    LayoutMode.GRID_2X2: 4,
    LayoutMode.GRID_1X2: 3,
    LayoutMode.GRID_2X1: 3,
}

_LABELS: dict[LayoutMode, str] = {
    LayoutMode.SINGLE: "Single",
    LayoutMode.SPLIT_HORIZONTAL: "Split Horizontal",
    LayoutMode.SPLIT_VERTICAL: "Split Vertical",
    LayoutMode.GRID_2X2: "Grid 2x2",
    LayoutMode.GRID_1X2: "Grid 1x2",
    LayoutMode.GRID_2X1: "Grid 2x1",
}
