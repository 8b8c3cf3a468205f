"""Merged corner columns.

At an L or U joint the corner column of section A and the end column of the
perpendicular section are physically the same compartment. Shelf edits
addressed to the merged key are replayed on both columns and committed in
one configuration, so the shelf line stays continuous across the seam.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from ..entities import Column, Section, WardrobeConfiguration
from ..value_objects import MergedColumnKey, SectionKey, WardrobeShape
from .shelf_spacing import (
    edit_spacing,
    max_shelf_count,
    redistribute_shelves_evenly,
    set_shelf_count,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnRef:
    """A concrete column addressed by section and id."""

    section_key: SectionKey
    column_id: str


class ShelfOperation(Protocol):
    """A shelf edit that can be replayed on any column."""

    def accepts(self, column: Column, config: WardrobeConfiguration) -> bool:
        ...

    def apply(self, column: Column, config: WardrobeConfiguration) -> Column:
        ...


@dataclass(frozen=True)
class SetShelfCount:
    """Replace the shelves of a column with ``count`` evenly spaced shelves."""

    count: int

    def accepts(self, column: Column, config: WardrobeConfiguration) -> bool:
        limit = max_shelf_count(
            config.height, config.base_bar_height, config.thickness, config.limits
        )
        return 0 <= self.count <= limit

    def apply(self, column: Column, config: WardrobeConfiguration) -> Column:
        return set_shelf_count(column, self.count, config)


@dataclass(frozen=True)
class EditSpacing:
    """Set one gap of a column, cascading to a neighbouring gap."""

    index: int
    value: float

    def accepts(self, column: Column, config: WardrobeConfiguration) -> bool:
        if column.shelves is None:
            return False
        return 0 <= self.index < len(column.shelves.spacings)

    def apply(self, column: Column, config: WardrobeConfiguration) -> Column:
        return edit_spacing(column, self.index, self.value, config.limits)


@dataclass(frozen=True)
class RedistributeShelves:
    """Reset a column's gaps to the even layout for its shelf count."""

    def accepts(self, column: Column, config: WardrobeConfiguration) -> bool:
        return column.shelves is not None

    def apply(self, column: Column, config: WardrobeConfiguration) -> Column:
        return redistribute_shelves_evenly(column, config)


def _end_column(config: WardrobeConfiguration, key: SectionKey, last: bool) -> ColumnRef | None:
    section = config.section(key)
    if section is None or not section.columns:
        return None
    column = section.columns[-1] if last else section.columns[0]
    return ColumnRef(key, column.id)


def resolve_merged_column(
    config: WardrobeConfiguration,
    key: MergedColumnKey | str,
) -> tuple[ColumnRef, ColumnRef] | None:
    """Map a merged key to its two underlying columns for the active shape.

    - Angle, ``angle-ab``: last column of A and first column of B.
    - Forme U, ``angle-ab``: first column of A and last column of B.
    - Forme U, ``angle-ac``: last column of A and first column of C.

    Returns None when the key does not exist for the shape.
    """
    try:
        key = MergedColumnKey(key)
    except ValueError:
        return None

    pair: tuple[ColumnRef | None, ColumnRef | None]
    if config.shape is WardrobeShape.ANGLE and key is MergedColumnKey.ANGLE_AB:
        pair = (
            _end_column(config, SectionKey.A, last=True),
            _end_column(config, SectionKey.B, last=False),
        )
    elif config.shape is WardrobeShape.FORME_U and key is MergedColumnKey.ANGLE_AB:
        pair = (
            _end_column(config, SectionKey.A, last=False),
            _end_column(config, SectionKey.B, last=True),
        )
    elif config.shape is WardrobeShape.FORME_U and key is MergedColumnKey.ANGLE_AC:
        pair = (
            _end_column(config, SectionKey.A, last=True),
            _end_column(config, SectionKey.C, last=False),
        )
    else:
        return None

    first, second = pair
    if first is None or second is None:
        return None
    return first, second


def merged_keys(shape: WardrobeShape) -> tuple[MergedColumnKey, ...]:
    """Merged keys available for a shape."""
    if shape is WardrobeShape.ANGLE:
        return (MergedColumnKey.ANGLE_AB,)
    if shape is WardrobeShape.FORME_U:
        return (MergedColumnKey.ANGLE_AB, MergedColumnKey.ANGLE_AC)
    return ()


def merged_key_for_column(
    config: WardrobeConfiguration, column_id: str
) -> MergedColumnKey | None:
    """Merged key of the corner pair ``column_id`` belongs to, if any."""
    for key in merged_keys(config.shape):
        refs = resolve_merged_column(config, key)
        if refs is not None and column_id in (ref.column_id for ref in refs):
            return key
    return None


def apply_shelf_operation(
    config: WardrobeConfiguration,
    ref: ColumnRef,
    operation: ShelfOperation,
) -> WardrobeConfiguration:
    """Apply a shelf operation to one concrete column."""
    section = config.section(ref.section_key)
    column = section.get_column(ref.column_id) if section else None
    if section is None or column is None:
        logger.warning(
            f"Column '{ref.column_id}' not found in section {ref.section_key.value}"
        )
        return config

    updated = operation.apply(column, config)
    if updated is column:
        return config
    return config.with_section(ref.section_key, section.with_column(updated))


def apply_to_merged(
    config: WardrobeConfiguration,
    key: MergedColumnKey | str,
    operation: ShelfOperation,
) -> WardrobeConfiguration:
    """Replay a shelf operation on both columns of a merged corner column.

    The operation is all-or-nothing: if either column cannot take it the
    configuration is returned unchanged. Both columns are swapped in with a
    single ``with_sections`` call.
    """
    refs = resolve_merged_column(config, key)
    if refs is None:
        logger.warning(
            f"Merged column '{key}' does not exist for shape '{config.shape.value}'"
        )
        return config

    targets: list[tuple[ColumnRef, Column]] = []
    for ref in refs:
        section = config.sections[ref.section_key]
        column = section.get_column(ref.column_id)
        assert column is not None
        if not operation.accepts(column, config):
            logger.warning(
                f"{operation} rejected by column '{column.id}'; merged column "
                f"'{key}' left unchanged"
            )
            return config
        targets.append((ref, column))

    updates: dict[SectionKey, Section] = {}
    changed = False
    for ref, column in targets:
        updated = operation.apply(column, config)
        changed = changed or updated is not column
        section = updates.get(ref.section_key, config.sections[ref.section_key])
        updates[ref.section_key] = section.with_column(updated)

    if not changed:
        return config
    return config.with_sections(updates)


@dataclass(frozen=True)
class ShelfEditTarget:
    """A column, or merged corner column, whose shelves can be edited.

    Attributes:
        key: Column id, or the merged key for a corner pair.
        label: Display label.
        refs: Underlying concrete columns (two for a merged target).
    """

    key: str
    label: str
    refs: tuple[ColumnRef, ...]

    @property
    def is_merged(self) -> bool:
        return len(self.refs) > 1


def shelf_edit_targets(config: WardrobeConfiguration) -> list[ShelfEditTarget]:
    """List every shelf-editable target of the configuration.

    Columns that belong to a merged corner pair are hidden and replaced by
    one target carrying the merged key.
    """
    merged: list[ShelfEditTarget] = []
    hidden: set[ColumnRef] = set()
    for key in merged_keys(config.shape):
        refs = resolve_merged_column(config, key)
        if refs is None:
            continue
        hidden.update(refs)
        sections = "/".join(ref.section_key.value for ref in refs)
        merged.append(ShelfEditTarget(key.value, f"Corner {sections}", refs))

    targets: list[ShelfEditTarget] = []
    for section_key in config.shape.section_keys:
        section = config.sections[section_key]
        for index, column in enumerate(section.columns):
            ref = ColumnRef(section_key, column.id)
            if ref in hidden:
                continue
            targets.append(
                ShelfEditTarget(
                    column.id,
                    f"Section {section_key.value} column {index + 1}",
                    (ref,),
                )
            )
    return targets + merged
