"""Value objects for the wardrobe domain.

All dimensions are expressed in centimetres.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WardrobeShape(str, Enum):
    """Overall carcass shape.

    - LINEAR: a single straight run (section A only)
    - ANGLE: L-shaped, section B sits perpendicular to the end of section A
    - FORME_U: U-shaped, section B meets the start of A and C meets its end
    """

    LINEAR = "linear"
    ANGLE = "angle"
    FORME_U = "forme_u"

    @property
    def section_keys(self) -> tuple["SectionKey", ...]:
        """Section keys present for this shape, in display order."""
        if self is WardrobeShape.LINEAR:
            return (SectionKey.A,)
        if self is WardrobeShape.ANGLE:
            return (SectionKey.A, SectionKey.B)
        return (SectionKey.A, SectionKey.B, SectionKey.C)

    @property
    def label(self) -> str:
        """Human-readable shape name."""
        return {
            WardrobeShape.LINEAR: "Linéaire",
            WardrobeShape.ANGLE: "Angle",
            WardrobeShape.FORME_U: "Forme U",
        }[self]


class SectionKey(str, Enum):
    """Identifier of a rectangular wardrobe segment."""

    A = "A"
    B = "B"
    C = "C"


class CornerType(str, Enum):
    """Which end(s) of a section carry a corner column."""

    FIRST = "first"
    LAST = "last"
    BOTH = "both"


class MergedColumnKey(str, Enum):
    """Synthetic keys for two coincident corner columns edited as one."""

    ANGLE_AB = "angle-ab"
    ANGLE_AC = "angle-ac"


@dataclass(frozen=True)
class LayoutLimits:
    """Dimensional limits consumed by the layout engine.

    Attributes:
        min_column_width: Smallest width of a regular column.
        max_column_width: Largest width of a regular column.
        min_shelf_spacing: Smallest gap between two vertically adjacent
            elements (floor, shelf, ceiling) in a column.
        corner_clearance: Livable residual width added to a corner column on
            top of the perpendicular section's inner depth.
        min_section_width: Smallest width of a section without corner
            requirements.
        max_section_width: Largest width of any section.
        min_section_depth: Smallest section depth.
        max_section_depth: Largest section depth.
    """

    min_column_width: float = 30
    max_column_width: float = 120
    min_shelf_spacing: float = 10
    corner_clearance: float = 30
    min_section_width: float = 36
    max_section_width: float = 600
    min_section_depth: float = 20
    max_section_depth: float = 110

    def __post_init__(self) -> None:
        if self.min_column_width <= 0:
            raise ValueError("min_column_width must be positive")
        if self.max_column_width < self.min_column_width:
            raise ValueError("max_column_width must be >= min_column_width")
        if self.min_shelf_spacing <= 0:
            raise ValueError("min_shelf_spacing must be positive")
        if self.corner_clearance < 0:
            raise ValueError("corner_clearance cannot be negative")
        if self.max_section_width < self.min_section_width:
            raise ValueError("max_section_width must be >= min_section_width")
        if self.max_section_depth < self.min_section_depth:
            raise ValueError("max_section_depth must be >= min_section_depth")


DEFAULT_LIMITS = LayoutLimits()


@dataclass(frozen=True)
class CornerConstraint:
    """Corner requirements of one section.

    A section sitting at an L/U joint has one or two columns whose minimum
    width is dictated by the adjoining perpendicular section's depth.
    """

    corner_type: CornerType | None = None
    min_first_column_width: float | None = None
    min_last_column_width: float | None = None

    def __post_init__(self) -> None:
        if self.corner_type in (CornerType.FIRST, CornerType.BOTH):
            if self.min_first_column_width is None:
                raise ValueError("First corner requires min_first_column_width")
        if self.corner_type in (CornerType.LAST, CornerType.BOTH):
            if self.min_last_column_width is None:
                raise ValueError("Last corner requires min_last_column_width")

    @property
    def is_corner(self) -> bool:
        """True if the section has at least one corner column."""
        return self.corner_type is not None

    @property
    def has_first(self) -> bool:
        return self.corner_type in (CornerType.FIRST, CornerType.BOTH)

    @property
    def has_last(self) -> bool:
        return self.corner_type in (CornerType.LAST, CornerType.BOTH)

    @property
    def reserved_widths(self) -> tuple[float, ...]:
        """Minimum widths of the corner columns, first before last."""
        widths: list[float] = []
        if self.has_first:
            assert self.min_first_column_width is not None
            widths.append(self.min_first_column_width)
        if self.has_last:
            assert self.min_last_column_width is not None
            widths.append(self.min_last_column_width)
        return tuple(widths)

    @property
    def largest_minimum(self) -> float:
        """Largest corner minimum, 0 when the section has no corner."""
        return max(self.reserved_widths, default=0)


NO_CORNER = CornerConstraint()
