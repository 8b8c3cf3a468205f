"""Shelf spacing layout and single-gap edits.

A column's interior height is split into ``shelf_count + 1`` gaps (floor to
first shelf, shelf to shelf, last shelf to ceiling). The gaps, the shelf
panels, the top and bottom panels and the base bar always add up to the
wardrobe height.

Editing a gap moves height to or from a neighbouring gap. The next gap is
tried first; the previous gap is only used when there is no next gap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..entities import Column, ShelfConfiguration, WardrobeConfiguration
from ..value_objects import DEFAULT_LIMITS, LayoutLimits
from .distribution import split_evenly

logger = logging.getLogger(__name__)

SHELF_HEIGHT_TOLERANCE = 1e-6

# Comfortable storage range for a single gap (cm)
OPTIMAL_SPACING_RANGE: tuple[float, float] = (20, 50)


def optimal_spacings(
    shelf_count: int,
    total_height: float,
    base_bar_height: float,
    thickness: float,
) -> tuple[float, ...]:
    """Evenly distributed gap heights for ``shelf_count`` shelves.

    Example:
        >>> optimal_spacings(3, 180, 7, 2)
        (41, 41, 41, 40)
    """
    if shelf_count < 0:
        raise ValueError("Shelf count cannot be negative")

    available = (
        total_height - base_bar_height - 2 * thickness - shelf_count * thickness
    )
    return tuple(split_evenly(available, shelf_count + 1))


def max_shelf_count(
    height: float,
    base_bar_height: float,
    thickness: float,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> int:
    """Largest shelf count that keeps every gap at the minimum spacing."""

    def needed(count: int) -> float:
        return (
            base_bar_height
            + 2 * thickness
            + count * thickness
            + (count + 1) * limits.min_shelf_spacing
        )

    count = 0
    while needed(count + 1) <= height:
        count += 1
    return count


def set_shelf_count(
    column: Column,
    new_count: int,
    config: WardrobeConfiguration,
) -> Column:
    """Replace a column's shelves with ``new_count`` evenly spaced shelves.

    A count of 0 removes the shelf configuration. Previous individual
    spacings are not preserved. Counts outside ``[0, max_shelf_count]`` are
    rejected and ``column`` is returned unchanged.
    """
    limit = max_shelf_count(
        config.height, config.base_bar_height, config.thickness, config.limits
    )
    if not 0 <= new_count <= limit:
        logger.warning(
            f"Shelf count must be between 0 and {limit}, got {new_count}"
        )
        return column

    if new_count == 0:
        if column.shelves is None:
            return column
        return column.with_shelves(None)

    spacings = optimal_spacings(
        new_count, config.height, config.base_bar_height, config.thickness
    )
    return column.with_shelves(ShelfConfiguration(spacings))


def redistribute_shelves_evenly(column: Column, config: WardrobeConfiguration) -> Column:
    """Reset the gaps of a column to the even layout for its shelf count."""
    if column.shelves is None:
        return column
    return set_shelf_count(column, column.shelf_count, config)


def edit_spacing(
    column: Column,
    index: int,
    new_value: float,
    limits: LayoutLimits = DEFAULT_LIMITS,
) -> Column:
    """Set one gap and cascade the difference to a neighbouring gap.

    The value is first raised to the minimum spacing. The next gap absorbs
    the difference when it can stay at or above the minimum; otherwise it is
    pinned at the minimum and the edited gap only grows by what the next gap
    could give. The last gap has no next gap and uses the previous one the
    same way.

    Returns ``column`` unchanged when it has no shelves or the index is out
    of range.

    Example:
        Spacings [40, 40, 40, 43], gap 1 set to 55: the next gap gives 15
        and the result is [40, 55, 25, 43].
    """
    if column.shelves is None:
        logger.warning(f"Column '{column.id}' has no shelves to space")
        return column

    spacings = list(column.shelves.spacings)
    if not 0 <= index < len(spacings):
        logger.warning(f"Spacing index {index} out of range for column '{column.id}'")
        return column

    minimum = limits.min_shelf_spacing
    new_value = max(minimum, new_value)
    old_value = spacings[index]
    diff = new_value - old_value
    if diff == 0:
        return column

    spacings[index] = new_value
    applied = False

    if index < len(spacings) - 1:
        next_value = spacings[index + 1]
        if next_value - diff >= minimum:
            spacings[index + 1] = next_value - diff
        else:
            spacings[index] = old_value + (next_value - minimum)
            spacings[index + 1] = minimum
        applied = True

    if not applied and index > 0:
        previous_value = spacings[index - 1]
        if previous_value - diff >= minimum:
            spacings[index - 1] = previous_value - diff
        else:
            spacings[index] = old_value + (previous_value - minimum)
            spacings[index - 1] = minimum

    return column.with_shelves(ShelfConfiguration(spacings))


def shelf_positions(column: Column, config: WardrobeConfiguration) -> tuple[float, ...]:
    """Height of each shelf's bottom face above the floor, lowest first."""
    if column.shelves is None:
        return ()

    positions: list[float] = []
    current = config.base_bar_height + config.thickness
    for spacing in column.shelves.spacings[:-1]:
        current += spacing
        positions.append(current)
        current += config.thickness
    return tuple(positions)


def shelf_height_matches(column: Column, config: WardrobeConfiguration) -> bool:
    """True if the column's gaps and panels add up to the wardrobe height."""
    if column.shelves is None:
        return True
    total = (
        column.shelves.total_spacing
        + column.shelf_count * config.thickness
        + 2 * config.thickness
        + config.base_bar_height
    )
    return abs(total - config.height) <= SHELF_HEIGHT_TOLERANCE


@dataclass(frozen=True)
class SpacingInfo:
    """One gap of a column with its quality flags."""

    index: int
    height: float
    is_valid: bool
    is_optimal: bool


@dataclass(frozen=True)
class SpacingAnalysis:
    """Summary of a column's gaps for display."""

    shelf_count: int
    spacings: tuple[SpacingInfo, ...]
    average_spacing: float

    @property
    def has_valid_spacing(self) -> bool:
        return all(s.is_valid for s in self.spacings)


def analyze_spacings(
    column: Column, limits: LayoutLimits = DEFAULT_LIMITS
) -> SpacingAnalysis | None:
    """Flag gaps below the minimum or outside the optimal storage range."""
    if column.shelves is None:
        return None

    low, high = OPTIMAL_SPACING_RANGE
    infos = tuple(
        SpacingInfo(
            index=i,
            height=height,
            is_valid=height >= limits.min_shelf_spacing,
            is_optimal=low <= height <= high,
        )
        for i, height in enumerate(column.shelves.spacings)
    )
    return SpacingAnalysis(
        shelf_count=column.shelf_count,
        spacings=infos,
        average_spacing=column.shelves.total_spacing / len(infos),
    )
