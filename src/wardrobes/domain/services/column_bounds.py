"""Feasible column counts and per-column width bounds.

With ``n`` columns a section holds ``n + 1`` vertical panels, so the space
left for columns is ``section_width - (n + 1) * thickness``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from ..entities import Section
from ..value_objects import DEFAULT_LIMITS, NO_CORNER, CornerConstraint, LayoutLimits

logger = logging.getLogger(__name__)


def column_width_bounds(
    index: int,
    count: int,
    constraints: CornerConstraint = NO_CORNER,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> tuple[float, float]:
    """Allowed (min, max) width of the column at ``index`` among ``count``.

    Corner columns are bounded below by their corner minimum; their upper
    bound never drops under that minimum.
    """
    corner_minimums: list[float] = []
    if constraints.has_first and index == 0:
        assert constraints.min_first_column_width is not None
        corner_minimums.append(constraints.min_first_column_width)
    if constraints.has_last and index == count - 1:
        assert constraints.min_last_column_width is not None
        corner_minimums.append(constraints.min_last_column_width)

    if corner_minimums:
        lower = max(corner_minimums)
        if count == 1:
            # A lone corner column spans the whole section
            return lower, math.inf
        return lower, max(limits.max_column_width, lower)
    return limits.min_column_width, limits.max_column_width


def _single_column_fits(
    section_width: float,
    thickness: float,
    constraints: CornerConstraint,
    limits: LayoutLimits,
) -> bool:
    lower = limits.min_column_width
    upper = max(limits.max_column_width, constraints.largest_minimum)
    if constraints.is_corner:
        lower = constraints.largest_minimum
    return lower <= section_width - 2 * thickness <= upper


def corner_count_range(
    section_width: float,
    thickness: float,
    constraints: CornerConstraint,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> tuple[int, int] | None:
    """Multi-column counts a corner section can be laid out with.

    Corner columns sit at their minimum and interior columns take between
    the minimum and maximum column width. When the corner columns are the
    only columns they may grow up to their own upper bound instead.

    Returns:
        ``(lowest, highest)`` column count of at least 2, or None when no
        layout with two or more columns fills the section. The section is
        then a single corner column spanning its full width.

    Example:
        A 160cm Angle section next to a 100cm deep section has a 126cm
        corner minimum. Two columns leave 28cm for the interior column,
        so there is no multi-column layout.
    """
    reserved = constraints.reserved_widths
    max_width = limits.max_column_width
    per_column = limits.min_column_width + thickness

    remaining = section_width - sum(reserved) - (len(reserved) + 1) * thickness
    if remaining < 0:
        return None
    highest = len(reserved) + math.floor(remaining / per_column)
    if highest < 2:
        return None

    count = 2
    while True:
        if count == len(reserved):
            widest = sum(max(max_width, width) for width in reserved)
        else:
            widest = sum(reserved) + (count - len(reserved)) * max_width
        if widest + (count + 1) * thickness >= section_width:
            break
        count += 1

    if count > highest:
        return None
    return count, highest


def min_columns(
    section_width: float,
    thickness: float,
    constraints: CornerConstraint = NO_CORNER,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> int:
    """Smallest column count that can fill the section.

    Without corners this is the smallest ``n`` for which ``n`` maximum-width
    columns and their panels reach the section width. With corners it is the
    lowest count of ``corner_count_range``, or 1 when that range is empty.

    Example:
        >>> min_columns(300, 2)
        3
    """
    if _single_column_fits(section_width, thickness, constraints, limits):
        return 1

    if not constraints.is_corner:
        max_width = limits.max_column_width
        count = 1
        while count * max_width + (count + 1) * thickness < section_width:
            count += 1
        return count

    counts = corner_count_range(section_width, thickness, constraints, limits)
    if counts is None:
        logger.debug(
            f"No multi-column layout fits {section_width}cm next to corner "
            f"minimums {constraints.reserved_widths}; using one column"
        )
        return 1
    return counts[0]


def max_columns(
    section_width: float,
    thickness: float,
    constraints: CornerConstraint = NO_CORNER,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> int:
    """Largest column count that still leaves every column its minimum width.

    Never smaller than ``min_columns`` for the same inputs.

    Example:
        >>> max_columns(200, 2)
        6
    """
    if not constraints.is_corner:
        lower = min_columns(section_width, thickness, constraints, limits)
        per_column = limits.min_column_width + thickness
        count = math.floor((section_width - thickness) / per_column)
        return max(lower, count)

    counts = corner_count_range(section_width, thickness, constraints, limits)
    return 1 if counts is None else counts[1]


def column_count_bounds(
    section_width: float,
    thickness: float,
    constraints: CornerConstraint = NO_CORNER,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> tuple[int, int]:
    """Return ``(min_columns, max_columns)``."""
    return (
        min_columns(section_width, thickness, constraints, limits),
        max_columns(section_width, thickness, constraints, limits),
    )


def refresh_bounds(
    section: Section,
    thickness: float,
    constraints: CornerConstraint = NO_CORNER,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> Section:
    """Return the section with ``min_columns``/``max_columns`` recomputed."""
    lower, upper = column_count_bounds(section.width, thickness, constraints, limits)
    if (lower, upper) == (section.min_columns, section.max_columns):
        return section
    return replace(section, min_columns=lower, max_columns=upper)
