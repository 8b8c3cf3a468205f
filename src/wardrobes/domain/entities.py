"""Domain entities for wardrobe configuration.

Every entity is immutable: edits build new objects and swap whole sub-trees
into a new ``WardrobeConfiguration``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from .value_objects import DEFAULT_LIMITS, LayoutLimits, SectionKey, WardrobeShape


@dataclass(frozen=True)
class ShelfConfiguration:
    """Vertical gaps of a column, from the floor up to the ceiling.

    Entry ``i`` is the gap between element ``i`` and element ``i + 1``,
    where element 0 is the floor and the last element is the ceiling, so a
    column with ``n`` shelves has ``n + 1`` spacings.
    """

    spacings: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "spacings", tuple(self.spacings))
        if len(self.spacings) < 2:
            raise ValueError("A shelf configuration needs at least one shelf")
        if any(s < 0 for s in self.spacings):
            raise ValueError("Shelf spacings cannot be negative")

    @property
    def shelf_count(self) -> int:
        """Number of shelves."""
        return len(self.spacings) - 1

    @property
    def total_spacing(self) -> float:
        return sum(self.spacings)


@dataclass(frozen=True)
class Column:
    """A vertical compartment within a section.

    Attributes:
        id: Stable identifier, preserved across structural edits so that
            shelf assignments follow the column rather than its index.
        width: Interior width in centimetres.
        shelves: Shelf layout, or None when the column has no shelves.
    """

    id: str
    width: float
    shelves: ShelfConfiguration | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Column id must not be empty")
        if self.width <= 0:
            raise ValueError("Column width must be positive")

    @property
    def shelf_count(self) -> int:
        return self.shelves.shelf_count if self.shelves else 0

    def with_width(self, width: float) -> "Column":
        return replace(self, width=width)

    def with_shelves(self, shelves: ShelfConfiguration | None) -> "Column":
        return replace(self, shelves=shelves)


@dataclass(frozen=True)
class Section:
    """A rectangular wardrobe segment split into columns.

    Column order is left to right and determines adjacency and corner
    position. ``min_columns``/``max_columns`` are recomputed by the layout
    services whenever the section's geometry changes.
    """

    width: float
    depth: float
    columns: tuple[Column, ...] = field(default_factory=tuple)
    min_columns: int = 1
    max_columns: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        if self.width <= 0 or self.depth <= 0:
            raise ValueError("Section width and depth must be positive")
        if self.min_columns < 1:
            raise ValueError("min_columns must be at least 1")
        if self.max_columns < self.min_columns:
            raise ValueError("max_columns must be >= min_columns")
        ids = [c.id for c in self.columns]
        if len(ids) != len(set(ids)):
            raise ValueError("Column ids must be unique within a section")

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def column_index(self, column_id: str) -> int | None:
        """Index of the column with the given id, or None."""
        for i, column in enumerate(self.columns):
            if column.id == column_id:
                return i
        return None

    def get_column(self, column_id: str) -> Column | None:
        index = self.column_index(column_id)
        return None if index is None else self.columns[index]

    def occupied_width(self, thickness: float) -> float:
        """Column widths plus one panel on each side of every column."""
        return sum(c.width for c in self.columns) + (len(self.columns) + 1) * thickness

    def with_columns(self, columns: Iterable[Column]) -> "Section":
        return replace(self, columns=tuple(columns))

    def with_column(self, column: Column) -> "Section":
        """Replace the column that has the same id."""
        return self.with_columns(column if c.id == column.id else c for c in self.columns)


@dataclass(frozen=True)
class WardrobeConfiguration:
    """Aggregate root of a wardrobe.

    Attributes:
        shape: Overall carcass shape, which fixes the section keys present.
        height: Overall height, base bar included.
        thickness: Panel thickness applied uniformly.
        base_bar_height: Plinth height.
        sections: Section by key. Never mutated in place; use
            ``with_section`` to derive a new configuration.
        limits: Dimensional limits for the layout engine.
    """

    shape: WardrobeShape
    height: float
    thickness: float
    base_bar_height: float
    sections: dict[SectionKey, Section]
    limits: LayoutLimits = DEFAULT_LIMITS

    def __post_init__(self) -> None:
        if self.height <= 0:
            raise ValueError("Height must be positive")
        if self.thickness <= 0:
            raise ValueError("Thickness must be positive")
        if self.base_bar_height < 0:
            raise ValueError("Base bar height cannot be negative")
        if self.interior_height <= 0:
            raise ValueError("Height leaves no interior space above the base bar")
        if set(self.sections) != set(self.shape.section_keys):
            expected = ", ".join(k.value for k in self.shape.section_keys)
            raise ValueError(f"Shape '{self.shape.value}' requires sections: {expected}")

    @property
    def interior_height(self) -> float:
        """Height between bottom and top panels."""
        return self.height - self.base_bar_height - 2 * self.thickness

    def section(self, key: SectionKey) -> Section | None:
        return self.sections.get(key)

    def with_section(self, key: SectionKey, section: Section) -> "WardrobeConfiguration":
        return self.with_sections({key: section})

    def with_sections(
        self, updates: dict[SectionKey, Section]
    ) -> "WardrobeConfiguration":
        """Derive a configuration with several sections swapped in at once."""
        sections = dict(self.sections)
        sections.update(updates)
        return replace(self, sections=sections)

    def find_column(self, column_id: str) -> tuple[SectionKey, Column] | None:
        """Locate a column by id across all sections."""
        for key in self.shape.section_keys:
            column = self.sections[key].get_column(column_id)
            if column is not None:
                return key, column
        return None
