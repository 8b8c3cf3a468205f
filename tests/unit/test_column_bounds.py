"""Unit tests for column count and width bounds."""

import math

import pytest

from wardrobes.domain import Column, CornerConstraint, CornerType, Section
from wardrobes.domain.services import (
    column_count_bounds,
    column_width_bounds,
    corner_count_range,
    generate_columns,
    max_columns,
    min_columns,
    refresh_bounds,
)

LAST_86 = CornerConstraint(corner_type=CornerType.LAST, min_last_column_width=86)
BOTH_86 = CornerConstraint(
    corner_type=CornerType.BOTH, min_first_column_width=86, min_last_column_width=86
)


class TestColumnCountBounds:
    """Tests for min_columns and max_columns without corners."""

    def test_min_columns(self) -> None:
        """Two 120cm columns and panels (246cm) do not fill 300cm; three do."""
        assert min_columns(300, 2) == 3

    def test_single_column_fits(self) -> None:
        assert min_columns(60, 2) == 1
        assert max_columns(60, 2) == 1

    def test_max_columns(self) -> None:
        """floor((200 - 2) / (30 + 2)) = 6."""
        assert max_columns(200, 2) == 6

    def test_max_never_below_min(self) -> None:
        for width in (36, 60, 125, 250, 600):
            lower, upper = column_count_bounds(width, 2)
            assert lower <= upper


class TestCornerCountBounds:
    """Tests for count bounds of corner sections."""

    def test_angle_section(self) -> None:
        """160cm with an 86cm last corner allows two or three columns."""
        assert column_count_bounds(160, 2, LAST_86) == (2, 3)

    def test_forme_u_section(self) -> None:
        assert column_count_bounds(260, 2, BOTH_86) == (3, 4)

    def test_single_corner_column_fits(self) -> None:
        """100cm leaves 96cm, which a lone corner column can take."""
        assert column_count_bounds(100, 2, LAST_86) == (1, 1)

    def test_corner_wider_than_section_falls_back_to_one(self) -> None:
        assert column_count_bounds(80, 2, LAST_86) == (1, 1)

    def test_no_room_for_an_interior_column(self) -> None:
        """A 126cm corner in 160cm leaves 28cm beside it, under the 30cm minimum."""
        deep = CornerConstraint(corner_type=CornerType.LAST, min_last_column_width=126)
        assert corner_count_range(160, 2, deep) is None
        assert column_count_bounds(160, 2, deep) == (1, 1)

    def test_two_corner_columns_may_grow(self) -> None:
        """Two corners of up to 120cm each fill 200cm without an interior column."""
        assert corner_count_range(200, 2, BOTH_86) == (2, 2)
        assert column_count_bounds(200, 2, BOTH_86) == (2, 2)

    @pytest.mark.parametrize("corner", [86, 106, 126, 136])
    def test_generation_fills_every_count_in_bounds(self, corner: int) -> None:
        """Every count the bounds allow is generated as asked and fills the section."""
        constraints = CornerConstraint(
            corner_type=CornerType.LAST, min_last_column_width=corner
        )
        for width in range(corner + 4, 301, 3):
            lower, upper = column_count_bounds(width, 2, constraints)
            for count in range(lower, upper + 1):
                columns = generate_columns(count, width, 2, constraints)
                assert len(columns) == count, (width, count)
                assert Section(width, 60, columns).occupied_width(2) == width


class TestColumnWidthBounds:
    """Tests for column_width_bounds."""

    def test_regular_column(self) -> None:
        assert column_width_bounds(0, 3) == (30, 120)

    def test_corner_column(self) -> None:
        assert column_width_bounds(2, 3, LAST_86) == (86, 120)
        assert column_width_bounds(0, 3, LAST_86) == (30, 120)

    def test_corner_minimum_above_max_width(self) -> None:
        """The upper bound never drops under the corner minimum."""
        wide = CornerConstraint(corner_type=CornerType.FIRST, min_first_column_width=130)
        assert column_width_bounds(0, 2, wide) == (130, 130)

    def test_lone_corner_column_has_no_upper_bound(self) -> None:
        assert column_width_bounds(0, 1, LAST_86) == (86, math.inf)


class TestRefreshBounds:
    """Tests for refresh_bounds."""

    def test_updates_bounds(self) -> None:
        section = Section(200, 60, (Column("a", 97), Column("b", 97)))
        refreshed = refresh_bounds(section, 2)
        assert (refreshed.min_columns, refreshed.max_columns) == (2, 6)

    def test_returns_same_object_when_unchanged(self) -> None:
        section = Section(60, 60, (Column("a", 56),))
        assert refresh_bounds(section, 2) is section
