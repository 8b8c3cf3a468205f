"""Vertical separator panels between adjacent columns.

Dragging a separator trades width between exactly the two columns it
divides; the rest of the section is untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..entities import Section
from ..value_objects import DEFAULT_LIMITS, NO_CORNER, CornerConstraint, LayoutLimits
from .column_bounds import column_width_bounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnSeparator:
    """A panel between two columns.

    Attributes:
        id: ``sep-<left id>-<right id>``.
        position: Distance of the panel's left face from the section's
            left edge.
        left_column_id: Column on the left of the panel.
        right_column_id: Column on the right of the panel.
    """

    id: str
    position: float
    left_column_id: str
    right_column_id: str


def calculate_separators(section: Section, thickness: float) -> list[ColumnSeparator]:
    """List the separators of a section from left to right."""
    separators: list[ColumnSeparator] = []
    position = thickness
    for left, right in zip(section.columns, section.columns[1:]):
        position += left.width
        separators.append(
            ColumnSeparator(
                id=f"sep-{left.id}-{right.id}",
                position=position,
                left_column_id=left.id,
                right_column_id=right.id,
            )
        )
        position += thickness
    return separators


def _neighbour_edges(
    section: Section, index: int, thickness: float
) -> tuple[float, float]:
    """Left face of the left column and right face of the right column."""
    left_start = thickness + sum(c.width + thickness for c in section.columns[:index])
    left = section.columns[index]
    right = section.columns[index + 1]
    right_end = left_start + left.width + thickness + right.width
    return left_start, right_end


def separator_range(
    section: Section,
    index: int,
    thickness: float,
    constraints: CornerConstraint = NO_CORNER,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> tuple[float, float]:
    """Positions a separator may take while both neighbours stay in bounds.

    Returns ``(0, 0)`` for an unknown separator index.
    """
    if not 0 <= index < section.column_count - 1:
        return 0, 0

    count = section.column_count
    left_lower, left_upper = column_width_bounds(index, count, constraints, limits)
    right_lower, right_upper = column_width_bounds(index + 1, count, constraints, limits)
    left_start, right_end = _neighbour_edges(section, index, thickness)

    minimum = max(left_start + left_lower, right_end - thickness - right_upper)
    maximum = min(left_start + left_upper, right_end - thickness - right_lower)
    return minimum, maximum


def move_separator(
    section: Section,
    index: int,
    new_position: float,
    thickness: float,
    constraints: CornerConstraint = NO_CORNER,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> Section:
    """Move one separator, resizing the two columns it divides.

    Returns ``section`` unchanged when the index is unknown or the position
    lies outside ``separator_range``.
    """
    if not 0 <= index < section.column_count - 1:
        logger.warning(f"Separator {index} does not exist")
        return section

    minimum, maximum = separator_range(section, index, thickness, constraints, limits)
    if not minimum <= new_position <= maximum:
        logger.warning(
            f"Invalid separator position {new_position}cm; "
            f"allowed range is {minimum}-{maximum}cm"
        )
        return section

    left_start, right_end = _neighbour_edges(section, index, thickness)
    columns = list(section.columns)
    columns[index] = columns[index].with_width(new_position - left_start)
    columns[index + 1] = columns[index + 1].with_width(
        right_end - new_position - thickness
    )
    return section.with_columns(columns)
