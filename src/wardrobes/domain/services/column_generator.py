"""Optimal column width generation.

Produces a concrete column layout for a target column count. Generation
never fails: when corner minimums leave too little room for the interior
columns it retries with one column fewer, down to a single column.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..entities import Column, Section
from ..value_objects import (
    DEFAULT_LIMITS,
    NO_CORNER,
    CornerConstraint,
    CornerType,
    LayoutLimits,
)
from .column_bounds import refresh_bounds
from .distribution import clamp, split_evenly

logger = logging.getLogger(__name__)


def generate_columns(
    count: int,
    section_width: float,
    thickness: float,
    constraints: CornerConstraint = NO_CORNER,
    existing_columns: Sequence[Column] = (),
    limits: LayoutLimits = DEFAULT_LIMITS,
    id_prefix: str = "col",
) -> tuple[Column, ...]:
    """Generate a column layout that fills the section.

    Ids and shelf configurations are reused positionally from
    ``existing_columns``; positions beyond it get freshly minted ids of the
    form ``<id_prefix>-<n>``.

    Args:
        count: Target column count (at least 1).
        section_width: Outer width of the section.
        thickness: Panel thickness.
        constraints: Corner requirements of the section.
        existing_columns: Current columns, for identity preservation.
        limits: Dimensional limits.
        id_prefix: Prefix for minted column ids.

    Returns:
        The generated columns. May hold fewer than ``count`` columns when
        the corner minimums make ``count`` infeasible.

    Example:
        >>> [c.width for c in generate_columns(3, 200, 2)]
        [64, 64, 64]
    """
    if count < 1:
        raise ValueError("Column count must be at least 1")

    widths = _column_widths(count, section_width, thickness, constraints, limits)
    return _assign_ids(widths, existing_columns, id_prefix)


def redistribute_evenly(
    section: Section,
    thickness: float,
    constraints: CornerConstraint = NO_CORNER,
    limits: LayoutLimits = DEFAULT_LIMITS,
    id_prefix: str = "col",
) -> Section:
    """Reset a section's column widths to the optimal layout for its count."""
    columns = generate_columns(
        max(1, section.column_count),
        section.width,
        thickness,
        constraints,
        section.columns,
        limits,
        id_prefix,
    )
    return refresh_bounds(section.with_columns(columns), thickness, constraints, limits)


def _column_widths(
    count: int,
    section_width: float,
    thickness: float,
    constraints: CornerConstraint,
    limits: LayoutLimits,
) -> list[float]:
    min_width = limits.min_column_width
    max_width = limits.max_column_width

    while True:
        if not constraints.is_corner:
            available = section_width - (count + 1) * thickness
            return [clamp(w, min_width, max_width) for w in split_evenly(available, count)]

        if count == 1:
            return [max(constraints.largest_minimum, section_width - 2 * thickness)]

        if constraints.corner_type is CornerType.BOTH and count == 2:
            pair = _corner_pair_widths(section_width, thickness, constraints, limits)
            if pair is not None:
                return pair
            count -= 1
            continue

        reserved = constraints.reserved_widths
        interior_count = count - len(reserved)
        interior_space = section_width - (count + 1) * thickness - sum(reserved)

        if interior_space < interior_count * min_width:
            logger.warning(
                f"{count} columns do not fit in {section_width}cm next to corner "
                f"minimums {reserved}; retrying with {count - 1}"
            )
            count -= 1
            continue

        interior = [
            clamp(w, min_width, max_width)
            for w in split_evenly(interior_space, interior_count)
        ]
        widths: list[float] = []
        if constraints.has_first:
            assert constraints.min_first_column_width is not None
            widths.append(constraints.min_first_column_width)
        widths.extend(interior)
        if constraints.has_last:
            assert constraints.min_last_column_width is not None
            widths.append(constraints.min_last_column_width)
        return widths


def _corner_pair_widths(
    section_width: float,
    thickness: float,
    constraints: CornerConstraint,
    limits: LayoutLimits,
) -> list[float] | None:
    """Two columns that are both corner columns (U shape, count 2).

    Returns None when the two corner minimums do not fit side by side.
    """
    first_min, last_min = constraints.reserved_widths
    available = section_width - 3 * thickness

    if first_min + last_min > available:
        logger.warning(
            f"Corner minimums {first_min} + {last_min} exceed the {available}cm "
            f"available; retrying with 1"
        )
        return None

    first_extra, _ = split_evenly(available - first_min - last_min, 2)
    first = min(first_min + first_extra, max(limits.max_column_width, first_min))
    last = available - first
    last_max = max(limits.max_column_width, last_min)
    if last > last_max:
        # The first column takes what the last cannot
        first, last = available - last_max, last_max
    return [first, last]


def _assign_ids(
    widths: Sequence[float],
    existing_columns: Sequence[Column],
    id_prefix: str,
) -> tuple[Column, ...]:
    kept = list(existing_columns[: len(widths)])
    taken = {c.id for c in kept}

    columns: list[Column] = [c.with_width(w) for c, w in zip(kept, widths)]
    for index in range(len(kept), len(widths)):
        number = index + 1
        column_id = f"{id_prefix}-{number}"
        while column_id in taken:
            number += 1
            column_id = f"{id_prefix}-{number}"
        taken.add(column_id)
        columns.append(Column(id=column_id, width=widths[index]))
    return tuple(columns)
