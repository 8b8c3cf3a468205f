"""Unit tests for domain entities and value objects."""

from dataclasses import FrozenInstanceError

import pytest

from wardrobes.domain import (
    Column,
    CornerConstraint,
    CornerType,
    LayoutLimits,
    Section,
    SectionKey,
    ShelfConfiguration,
    WardrobeConfiguration,
    WardrobeShape,
)


class TestWardrobeShape:
    """Tests for WardrobeShape."""

    def test_section_keys_per_shape(self) -> None:
        """Each shape exposes exactly its sections, in display order."""
        assert WardrobeShape.LINEAR.section_keys == (SectionKey.A,)
        assert WardrobeShape.ANGLE.section_keys == (SectionKey.A, SectionKey.B)
        assert WardrobeShape.FORME_U.section_keys == (
            SectionKey.A,
            SectionKey.B,
            SectionKey.C,
        )

    def test_labels(self) -> None:
        """Shapes have display labels."""
        assert WardrobeShape.LINEAR.label == "Linéaire"
        assert WardrobeShape.FORME_U.label == "Forme U"

    def test_parse_from_value(self) -> None:
        """Shapes parse from their file values."""
        assert WardrobeShape("forme_u") is WardrobeShape.FORME_U


class TestLayoutLimits:
    """Tests for LayoutLimits validation."""

    def test_defaults(self) -> None:
        limits = LayoutLimits()
        assert limits.min_column_width == 30
        assert limits.max_column_width == 120
        assert limits.min_shelf_spacing == 10
        assert limits.corner_clearance == 30

    def test_max_column_width_below_min_raises(self) -> None:
        """A maximum below the minimum is rejected."""
        with pytest.raises(ValueError) as exc_info:
            LayoutLimits(min_column_width=50, max_column_width=40)
        assert "max_column_width" in str(exc_info.value)

    def test_negative_clearance_raises(self) -> None:
        with pytest.raises(ValueError):
            LayoutLimits(corner_clearance=-1)


class TestCornerConstraint:
    """Tests for CornerConstraint."""

    def test_no_corner(self) -> None:
        constraint = CornerConstraint()
        assert not constraint.is_corner
        assert constraint.reserved_widths == ()
        assert constraint.largest_minimum == 0

    def test_both_corners(self) -> None:
        """A BOTH constraint reserves first then last."""
        constraint = CornerConstraint(
            corner_type=CornerType.BOTH,
            min_first_column_width=86,
            min_last_column_width=66,
        )
        assert constraint.has_first and constraint.has_last
        assert constraint.reserved_widths == (86, 66)
        assert constraint.largest_minimum == 86

    def test_missing_minimum_raises(self) -> None:
        """A corner type without its minimum width is rejected."""
        with pytest.raises(ValueError) as exc_info:
            CornerConstraint(corner_type=CornerType.LAST)
        assert "min_last_column_width" in str(exc_info.value)


class TestShelfConfiguration:
    """Tests for ShelfConfiguration."""

    def test_shelf_count_is_one_less_than_spacings(self) -> None:
        shelves = ShelfConfiguration((41, 41, 41, 40))
        assert shelves.shelf_count == 3
        assert shelves.total_spacing == 163

    def test_list_is_stored_as_tuple(self) -> None:
        shelves = ShelfConfiguration([50, 50])  # type: ignore[arg-type]
        assert shelves.spacings == (50, 50)

    def test_single_spacing_raises(self) -> None:
        """A single gap would mean no shelf at all."""
        with pytest.raises(ValueError):
            ShelfConfiguration((100,))

    def test_negative_spacing_raises(self) -> None:
        with pytest.raises(ValueError):
            ShelfConfiguration((50, -1))


class TestColumn:
    """Tests for Column."""

    def test_shelf_count_without_shelves(self) -> None:
        assert Column("c", 60).shelf_count == 0

    def test_with_width_keeps_id_and_shelves(self) -> None:
        shelves = ShelfConfiguration((80, 80))
        column = Column("c", 60, shelves).with_width(70)
        assert column.id == "c"
        assert column.width == 70
        assert column.shelves is shelves

    def test_frozen(self) -> None:
        column = Column("c", 60)
        with pytest.raises(FrozenInstanceError):
            column.width = 70  # type: ignore[misc]

    def test_empty_id_raises(self) -> None:
        with pytest.raises(ValueError):
            Column("", 60)

    def test_non_positive_width_raises(self) -> None:
        with pytest.raises(ValueError):
            Column("c", 0)


class TestSection:
    """Tests for Section."""

    def test_occupied_width_counts_panels(self) -> None:
        """Three columns have four panels."""
        section = Section(200, 60, (Column("a", 64), Column("b", 64), Column("c", 64)))
        assert section.occupied_width(2) == 200

    def test_duplicate_column_ids_raise(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            Section(200, 60, (Column("a", 64), Column("a", 64)))
        assert "unique" in str(exc_info.value)

    def test_with_column_replaces_by_id(self) -> None:
        section = Section(130, 60, (Column("a", 62), Column("b", 62)))
        updated = section.with_column(Column("b", 50))
        assert [c.width for c in updated.columns] == [62, 50]
        assert [c.width for c in section.columns] == [62, 62]

    def test_column_lookup(self) -> None:
        section = Section(130, 60, (Column("a", 62), Column("b", 62)))
        assert section.column_index("b") == 1
        assert section.column_index("z") is None
        assert section.get_column("a") == Column("a", 62)


class TestWardrobeConfiguration:
    """Tests for WardrobeConfiguration."""

    def test_interior_height(self) -> None:
        config = WardrobeConfiguration(
            WardrobeShape.LINEAR, 180, 2, 7, {SectionKey.A: Section(60, 60)}
        )
        assert config.interior_height == 169

    def test_sections_must_match_shape(self) -> None:
        """An Angle wardrobe needs both A and B."""
        with pytest.raises(ValueError) as exc_info:
            WardrobeConfiguration(
                WardrobeShape.ANGLE, 180, 2, 7, {SectionKey.A: Section(160, 60)}
            )
        assert "A, B" in str(exc_info.value)

    def test_height_must_leave_interior(self) -> None:
        with pytest.raises(ValueError):
            WardrobeConfiguration(
                WardrobeShape.LINEAR, 10, 2, 7, {SectionKey.A: Section(60, 60)}
            )

    def test_with_section_does_not_mutate(self, linear_config: WardrobeConfiguration) -> None:
        """Deriving a configuration leaves the original untouched."""
        replacement = Section(100, 60, (Column("x", 96),))
        updated = linear_config.with_section(SectionKey.A, replacement)
        assert updated.sections[SectionKey.A] is replacement
        assert linear_config.sections[SectionKey.A] is not replacement

    def test_find_column(self, angle_config: WardrobeConfiguration) -> None:
        found = angle_config.find_column("sectionB-col-2")
        assert found is not None
        key, column = found
        assert key is SectionKey.B
        assert column.width == 38
        assert angle_config.find_column("missing") is None
