"""Unit tests for layout modes and pane rectangle calculation."""

from __future__ import annotations

import pytest

from serialdeck.core.layout import LayoutMode, Rect, split_columns, split_rows


class TestRect:
    """Test the cell rectangle helper."""

    def test_right_and_bottom(self):
        rect = Rect(2, 3, 10, 4)
        assert rect.right == 12
        assert rect.bottom == 7

    def test_contains_is_half_open(self):
        rect = Rect(0, 0, 10, 5)
        assert rect.contains(0, 0)
        assert rect.contains(9, 4)
        assert not rect.contains(10, 4)
        assert not rect.contains(9, 5)

    def test_empty_rect_contains_nothing(self):
        assert not Rect(0, 0, 0, 0).contains(0, 0)


class TestSplits:
    """Test 50/50 bisection."""

    def test_split_rows_even(self):
        top, bottom = split_rows(Rect(0, 0, 80, 24))
        assert top == Rect(0, 0, 80, 12)
        assert bottom == Rect(0, 12, 80, 12)

    def test_split_rows_odd_gives_extra_row_to_bottom(self):
        top, bottom = split_rows(Rect(0, 1, 80, 25))
        assert top.height == 12
        assert bottom.height == 13
        assert bottom.y == 13

    def test_split_columns_even(self):
        left, right = split_columns(Rect(0, 0, 80, 24))
        assert left == Rect(0, 0, 40, 24)
        assert right == Rect(40, 0, 40, 24)

    def test_split_of_single_cell(self):
        left, right = split_columns(Rect(5, 5, 1, 1))
        assert left.width == 0
        assert right == Rect(5, 5, 1, 1)


class TestLayoutModeCatalogue:
    """Test the ordered catalogue and its cycling."""

    def test_catalogue_order(self):
        assert LayoutMode.catalogue() == (
            LayoutMode.SINGLE,
            LayoutMode.SPLIT_HORIZONTAL,
            LayoutMode.SPLIT_VERTICAL,
            LayoutMode.GRID_2X2,
            LayoutMode.GRID_1X2,
            LayoutMode.GRID_2X1,
        )

    @pytest.mark.parametrize("mode, panes", [
        (LayoutMode.SINGLE, 1),
        (LayoutMode.SPLIT_HORIZONTAL, 2),
        (LayoutMode.SPLIT_VERTICAL, 2),
        (LayoutMode.GRID_2X2, 4),
        (LayoutMode.GRID_1X2, 3),
        (LayoutMode.GRID_2X1, 3),
    ])
    def test_max_panes(self, mode, panes):
        assert mode.max_panes() == panes

    def test_next_wraps(self):
        assert LayoutMode.SINGLE.next() is LayoutMode.SPLIT_HORIZONTAL
        assert LayoutMode.GRID_2X1.next() is LayoutMode.SINGLE

    def test_prev_wraps(self):
        assert LayoutMode.SINGLE.prev() is LayoutMode.GRID_2X1
        assert LayoutMode.GRID_2X2.prev() is LayoutMode.SPLIT_VERTICAL

    def test_next_then_prev_is_identity(self):
        for mode in LayoutMode.catalogue():
            assert mode.next().prev() is mode

    def test_labels(self):
        assert LayoutMode.GRID_2X2.label == "Grid 2x2"
        assert LayoutMode.SPLIT_HORIZONTAL.label == "Split Horizontal"

    def test_modes_are_strings(self):
        assert LayoutMode.GRID_2X2 == "grid_2x2"
        assert LayoutMode("split_vertical") is LayoutMode.SPLIT_VERTICAL


class TestCalculateAreas:
    """Test pane rectangles produced for each mode."""

    BOUNDS = Rect(0, 0, 80, 24)

    def test_single_fills_bounds(self):
        assert LayoutMode.SINGLE.calculate_areas(self.BOUNDS) == [self.BOUNDS]

    def test_split_horizontal_is_stacked(self):
        top, bottom = LayoutMode.SPLIT_HORIZONTAL.calculate_areas(self.BOUNDS)
        assert top.x == bottom.x == 0
        assert top.width == bottom.width == 80
        assert bottom.y == top.bottom

    def test_split_vertical_is_side_by_side(self):
        left, right = LayoutMode.SPLIT_VERTICAL.calculate_areas(self.BOUNDS)
        assert left.y == right.y == 0
        assert right.x == left.right

    def test_grid_2x2_order(self):
        areas = LayoutMode.GRID_2X2.calculate_areas(self.BOUNDS)
        assert areas == [
            Rect(0, 0, 40, 12),
            Rect(40, 0, 40, 12),
            Rect(0, 12, 40, 12),
            Rect(40, 12, 40, 12),
        ]

    def test_grid_1x2_has_full_width_top(self):
        top, left, right = LayoutMode.GRID_1X2.calculate_areas(self.BOUNDS)
        assert top == Rect(0, 0, 80, 12)
        assert left == Rect(0, 12, 40, 12)
        assert right == Rect(40, 12, 40, 12)

    def test_grid_2x1_has_full_height_left(self):
        left, top, bottom = LayoutMode.GRID_2X1.calculate_areas(self.BOUNDS)
        assert left == Rect(0, 0, 40, 24)
        assert top == Rect(40, 0, 40, 12)
        assert bottom == Rect(40, 12, 40, 12)

    @pytest.mark.parametrize("bounds", [
        Rect(0, 0, 0, 0),
        Rect(0, 0, 1, 1),
        Rect(3, 7, 1, 0),
        Rect(0, 0, 81, 25),
    ])
    def test_every_mode_yields_one_rect_per_pane(self, bounds):
        for mode in LayoutMode.catalogue():
            areas = mode.calculate_areas(bounds)
            assert len(areas) == mode.max_panes()
            for area in areas:
                assert area.width >= 0
                assert area.height >= 0

    def test_areas_tile_the_bounds(self):
        bounds = Rect(1, 2, 81, 25)
        for mode in LayoutMode.catalogue():
            total = sum(a.width * a.height for a in mode.calculate_areas(bounds))
            assert total == bounds.width * bounds.height

    def test_calculation_is_deterministic(self):
        for mode in LayoutMode.catalogue():
            assert mode.calculate_areas(self.BOUNDS) == mode.calculate_areas(self.BOUNDS)
