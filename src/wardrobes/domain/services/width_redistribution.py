"""Single-column width edits with a one-neighbour cascade.

Changing one column's width hands the difference to exactly one neighbour:
the right one when it exists, otherwise the left one. The neighbour only
gives or takes what its own bounds allow; beyond that both columns stop at
the boundary and the edit silently saturates.
"""

from __future__ import annotations

import logging

from ..entities import Section
from ..value_objects import DEFAULT_LIMITS, NO_CORNER, CornerConstraint, LayoutLimits
from .column_bounds import column_width_bounds

logger = logging.getLogger(__name__)

FOOTPRINT_TOLERANCE = 1e-6


def update_column_width(
    section: Section,
    column_id: str,
    new_width: float,
    thickness: float,
    constraints: CornerConstraint = NO_CORNER,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> Section:
    """Set one column's width and cascade the difference to a neighbour.

    Args:
        section: Section holding the column.
        column_id: Id of the edited column.
        new_width: Requested width.
        thickness: Panel thickness.
        constraints: Corner requirements of the section.
        limits: Dimensional limits.

    Returns:
        A new section, or ``section`` itself when the edit is rejected
        (unknown column, single column, width outside the column's bounds,
        or a footprint mismatch after the cascade).

    Example:
        Two 60cm columns, column 0 set to 80: the right neighbour can give
        up to 30, so 20 is applied and the widths become [80, 40].
    """
    index = section.column_index(column_id)
    if index is None:
        logger.warning(f"Column '{column_id}' not found; width edit ignored")
        return section

    count = section.column_count
    lower, upper = column_width_bounds(index, count, constraints, limits)
    if not lower <= new_width <= upper:
        logger.warning(
            f"Column width must be between {lower}-{upper}cm, got {new_width}cm"
        )
        return section

    if count == 1:
        logger.warning(
            f"Column '{column_id}' has no neighbour to absorb a width change"
        )
        return section

    column = section.columns[index]
    delta = new_width - column.width
    if delta == 0:
        return section

    neighbour_index = index + 1 if index + 1 < count else index - 1
    neighbour = section.columns[neighbour_index]
    neighbour_lower, neighbour_upper = column_width_bounds(
        neighbour_index, count, constraints, limits
    )

    if delta > 0:
        capacity = max(0, neighbour.width - neighbour_lower)
        applied = min(delta, capacity)
    else:
        capacity = max(0, neighbour_upper - neighbour.width)
        applied = -min(-delta, capacity)

    if applied != delta:
        logger.debug(
            f"Neighbour '{neighbour.id}' absorbs {applied}cm of the requested "
            f"{delta}cm; edit saturated"
        )

    columns = list(section.columns)
    columns[index] = column.with_width(column.width + applied)
    columns[neighbour_index] = neighbour.with_width(neighbour.width - applied)
    updated = section.with_columns(columns)

    before = section.occupied_width(thickness)
    after = updated.occupied_width(thickness)
    if abs(before - after) > FOOTPRINT_TOLERANCE:
        logger.warning(
            f"Width cascade changed the occupied width ({before} -> {after}); "
            f"edit discarded"
        )
        return section

    return updated
