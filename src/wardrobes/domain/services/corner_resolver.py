"""Corner constraint resolution for L and U shaped wardrobes.

A column sitting at a joint must be wide enough that the perpendicular
section's side panel does not protrude past it, plus a livable residual.
Only section A carries corner columns:

- Angle: section B meets the last column of A.
- Forme U: section B meets the first column of A, section C meets the last.
"""

from __future__ import annotations

from ..entities import WardrobeConfiguration
from ..value_objects import (
    DEFAULT_LIMITS,
    NO_CORNER,
    CornerConstraint,
    CornerType,
    LayoutLimits,
    SectionKey,
    WardrobeShape,
)


def corner_minimum_width(
    adjoining_depth: float,
    thickness: float,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> float:
    """Minimum width of a column meeting a perpendicular section.

    Example:
        >>> corner_minimum_width(60, 2)
        86
    """
    return max(
        limits.min_column_width,
        adjoining_depth - 2 * thickness + limits.corner_clearance,
    )


def resolve_corner_constraints(
    config: WardrobeConfiguration,
    section_key: SectionKey,
) -> CornerConstraint:
    """Determine the corner columns of a section and their minimum widths.

    Args:
        config: Current configuration (provides shape and section depths).
        section_key: Section to inspect.

    Returns:
        ``NO_CORNER`` for linear shapes and for any section other than A.
    """
    if section_key is not SectionKey.A:
        return NO_CORNER

    limits = config.limits
    thickness = config.thickness

    if config.shape is WardrobeShape.ANGLE:
        section_b = config.section(SectionKey.B)
        if section_b is None:
            return NO_CORNER
        return CornerConstraint(
            corner_type=CornerType.LAST,
            min_last_column_width=corner_minimum_width(section_b.depth, thickness, limits),
        )

    if config.shape is WardrobeShape.FORME_U:
        section_b = config.section(SectionKey.B)
        section_c = config.section(SectionKey.C)
        if section_b is None or section_c is None:
            return NO_CORNER
        return CornerConstraint(
            corner_type=CornerType.BOTH,
            min_first_column_width=corner_minimum_width(section_b.depth, thickness, limits),
            min_last_column_width=corner_minimum_width(section_c.depth, thickness, limits),
        )

    return NO_CORNER
