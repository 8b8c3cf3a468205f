"""Configuration-level layout operations.

These functions take a whole ``WardrobeConfiguration``, resolve the corner
constraints of the section they touch and delegate to the section-level
services. Rejected requests return the input configuration itself.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..entities import Section, WardrobeConfiguration
from ..value_objects import SectionKey, WardrobeShape
from .column_bounds import column_count_bounds, refresh_bounds
from .column_generator import generate_columns, redistribute_evenly
from .corner_resolver import resolve_corner_constraints
from .distribution import clamp
from .separators import move_separator
from .width_redistribution import update_column_width

logger = logging.getLogger(__name__)


def column_id_prefix(key: SectionKey) -> str:
    """Prefix of generated column ids, e.g. ``sectionA-col``."""
    return f"section{key.value}-col"


def _get_section(config: WardrobeConfiguration, key: SectionKey) -> Section | None:
    section = config.section(key)
    if section is None:
        logger.warning(
            f"Section {key.value} does not exist for shape '{config.shape.value}'"
        )
    return section


def section_min_width(config: WardrobeConfiguration, key: SectionKey) -> float:
    """Smallest width a section may take.

    Section A of an Angle must span B's depth plus the corner clearance; of a
    Forme U, both B's and C's depths plus the clearance.
    """
    limits = config.limits
    minimum = limits.min_section_width
    if key is not SectionKey.A:
        return minimum

    if config.shape is WardrobeShape.ANGLE:
        depth = config.sections[SectionKey.B].depth
        return max(minimum, depth + limits.corner_clearance)
    if config.shape is WardrobeShape.FORME_U:
        depth = config.sections[SectionKey.B].depth + config.sections[SectionKey.C].depth
        return max(minimum, depth + limits.corner_clearance)
    return minimum


def layout_section(
    config: WardrobeConfiguration,
    key: SectionKey,
    count: int | None = None,
) -> Section:
    """Regenerate a section's columns for ``count``, clamped into its bounds.

    ``count`` defaults to the current column count. Existing ids and shelf
    configurations are kept positionally.
    """
    section = config.sections[key]
    constraints = resolve_corner_constraints(config, key)
    lower, upper = column_count_bounds(
        section.width, config.thickness, constraints, config.limits
    )
    target = section.column_count if count is None else count
    target = int(clamp(target, lower, upper))

    columns = generate_columns(
        target,
        section.width,
        config.thickness,
        constraints,
        section.columns,
        config.limits,
        column_id_prefix(key),
    )
    return refresh_bounds(
        section.with_columns(columns), config.thickness, constraints, config.limits
    )


def layout_configuration(config: WardrobeConfiguration) -> WardrobeConfiguration:
    """Lay out every section at its current (clamped) column count."""
    return config.with_sections(
        {key: layout_section(config, key) for key in config.shape.section_keys}
    )


def set_column_count(
    config: WardrobeConfiguration,
    key: SectionKey,
    count: int,
) -> WardrobeConfiguration:
    """Change a section's column count and regenerate its widths.

    Columns past the new count are dropped along with their shelves. Counts
    outside ``[min_columns, max_columns]`` are rejected.
    """
    section = _get_section(config, key)
    if section is None:
        return config

    constraints = resolve_corner_constraints(config, key)
    lower, upper = column_count_bounds(
        section.width, config.thickness, constraints, config.limits
    )
    if not lower <= count <= upper:
        logger.warning(
            f"Column count for section {key.value} must be between "
            f"{lower} and {upper}, got {count}"
        )
        return config

    if count == section.column_count:
        return config

    logger.debug(f"Section {key.value}: {section.column_count} -> {count} columns")
    return config.with_section(key, layout_section(config, key, count))


def add_column(config: WardrobeConfiguration, key: SectionKey) -> WardrobeConfiguration:
    section = _get_section(config, key)
    if section is None:
        return config
    return set_column_count(config, key, section.column_count + 1)


def remove_column(config: WardrobeConfiguration, key: SectionKey) -> WardrobeConfiguration:
    section = _get_section(config, key)
    if section is None:
        return config
    return set_column_count(config, key, section.column_count - 1)


def change_section_width(
    config: WardrobeConfiguration,
    key: SectionKey,
    width: float,
) -> WardrobeConfiguration:
    """Resize a section and re-lay out its columns.

    The column count is clamped into the bounds of the new width.
    """
    section = _get_section(config, key)
    if section is None:
        return config

    minimum = section_min_width(config, key)
    maximum = config.limits.max_section_width
    if not minimum <= width <= maximum:
        logger.warning(
            f"Section {key.value} width must be between {minimum}-{maximum}cm, "
            f"got {width}cm"
        )
        return config

    if width == section.width:
        return config

    staged = config.with_section(key, replace(section, width=width))
    return staged.with_section(key, layout_section(staged, key))


def change_section_depth(
    config: WardrobeConfiguration,
    key: SectionKey,
    depth: float,
) -> WardrobeConfiguration:
    """Change a section's depth.

    Deepening B or C raises the corner minimums of section A; A is widened
    to its new minimum width when needed and re-laid out in the same
    configuration.
    """
    section = _get_section(config, key)
    if section is None:
        return config

    limits = config.limits
    if not limits.min_section_depth <= depth <= limits.max_section_depth:
        logger.warning(
            f"Section {key.value} depth must be between {limits.min_section_depth}-"
            f"{limits.max_section_depth}cm, got {depth}cm"
        )
        return config

    if depth == section.depth:
        return config

    staged = config.with_section(key, replace(section, depth=depth))
    if key is SectionKey.A or config.shape is WardrobeShape.LINEAR:
        return staged

    section_a = staged.sections[SectionKey.A]
    minimum = section_min_width(staged, SectionKey.A)
    if section_a.width < minimum:
        logger.info(
            f"Section A widened from {section_a.width}cm to {minimum}cm to fit "
            f"section {key.value} depth {depth}cm"
        )
        staged = staged.with_section(SectionKey.A, replace(section_a, width=minimum))

    return staged.with_section(SectionKey.A, layout_section(staged, SectionKey.A))


def update_width(
    config: WardrobeConfiguration,
    column_id: str,
    new_width: float,
) -> WardrobeConfiguration:
    """Set one column's width, cascading to a single neighbour."""
    found = config.find_column(column_id)
    if found is None:
        logger.warning(f"Column '{column_id}' not found")
        return config

    key, _ = found
    section = config.sections[key]
    constraints = resolve_corner_constraints(config, key)
    updated = update_column_width(
        section, column_id, new_width, config.thickness, constraints, config.limits
    )
    if updated is section:
        return config
    return config.with_section(key, updated)


def redistribute_section(
    config: WardrobeConfiguration, key: SectionKey
) -> WardrobeConfiguration:
    """Reset a section's column widths to the optimal layout."""
    section = _get_section(config, key)
    if section is None:
        return config

    constraints = resolve_corner_constraints(config, key)
    updated = redistribute_evenly(
        section, config.thickness, constraints, config.limits, column_id_prefix(key)
    )
    return config.with_section(key, updated)


def move_section_separator(
    config: WardrobeConfiguration,
    key: SectionKey,
    index: int,
    position: float,
) -> WardrobeConfiguration:
    section = _get_section(config, key)
    if section is None:
        return config

    constraints = resolve_corner_constraints(config, key)
    updated = move_separator(
        section, index, position, config.thickness, constraints, config.limits
    )
    if updated is section:
        return config
    return config.with_section(key, updated)
