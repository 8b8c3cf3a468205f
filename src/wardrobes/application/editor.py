"""Editing facade over the configuration store.

``WardrobeEditor`` is the function surface a UI drives: it reads the live
configuration from the store, runs one layout operation and commits the
result. Every method returns True when the configuration changed and False
when the edit was rejected (the reason is logged as a warning).

Continuous edits (column widths, separators, section dimensions, spacings)
are committed with ``commit_debounced`` so that a drag produces one undo
step. Structural edits (counts, redistribution, shape switch) are committed
immediately.
"""

from __future__ import annotations

import logging

from wardrobes.application.store import ConfigurationStore
from wardrobes.application.templates import TemplateManager
from wardrobes.domain import SectionKey, WardrobeConfiguration, WardrobeShape
from wardrobes.domain.services import (
    ColumnRef,
    EditSpacing,
    RedistributeShelves,
    SetShelfCount,
    ShelfEditTarget,
    add_column,
    apply_shelf_operation,
    apply_to_merged,
    change_section_depth,
    change_section_width,
    merged_key_for_column,
    move_section_separator,
    redistribute_section,
    remove_column,
    resolve_merged_column,
    set_column_count,
    shelf_edit_targets,
    update_width,
)
from wardrobes.domain.services.merged_columns import ShelfOperation

logger = logging.getLogger(__name__)


class WardrobeEditor:
    """Apply user edits to the configuration held by a store.

    Args:
        store: Store owning the live configuration.
        template_manager: Source of shape templates for ``switch_shape``.

    Example:
        >>> editor = WardrobeEditor(ConfigurationStore(config))
        >>> editor.set_column_count("A", 3)
        True
        >>> editor.set_shelf_count("angle-ab", 4)
        True
        >>> editor.undo()
        True
    """

    def __init__(
        self,
        store: ConfigurationStore,
        template_manager: TemplateManager | None = None,
    ) -> None:
        self.store = store
        self.template_manager = template_manager or TemplateManager()

    @property
    def configuration(self) -> WardrobeConfiguration:
        return self.store.configuration

    # --- columns ---------------------------------------------------------

    def set_column_count(self, section: SectionKey | str, count: int) -> bool:
        key = self._section_key(section)
        if key is None:
            return False
        return self.store.commit(set_column_count(self.configuration, key, count))

    def add_column(self, section: SectionKey | str) -> bool:
        key = self._section_key(section)
        if key is None:
            return False
        return self.store.commit(add_column(self.configuration, key))

    def remove_column(self, section: SectionKey | str) -> bool:
        key = self._section_key(section)
        if key is None:
            return False
        return self.store.commit(remove_column(self.configuration, key))

    def update_column_width(self, column_id: str, width: float) -> bool:
        updated = update_width(self.configuration, column_id, width)
        return self.store.commit_debounced(updated, f"width:{column_id}")

    def redistribute_evenly(self, section: SectionKey | str) -> bool:
        key = self._section_key(section)
        if key is None:
            return False
        return self.store.commit(redistribute_section(self.configuration, key))

    def move_separator(
        self, section: SectionKey | str, index: int, position: float
    ) -> bool:
        key = self._section_key(section)
        if key is None:
            return False
        updated = move_section_separator(self.configuration, key, index, position)
        return self.store.commit_debounced(updated, f"separator:{key.value}:{index}")

    # --- sections --------------------------------------------------------

    def set_section_width(self, section: SectionKey | str, width: float) -> bool:
        key = self._section_key(section)
        if key is None:
            return False
        updated = change_section_width(self.configuration, key, width)
        return self.store.commit_debounced(updated, f"section-width:{key.value}")

    def set_section_depth(self, section: SectionKey | str, depth: float) -> bool:
        key = self._section_key(section)
        if key is None:
            return False
        updated = change_section_depth(self.configuration, key, depth)
        return self.store.commit_debounced(updated, f"section-depth:{key.value}")

    def switch_shape(self, shape: WardrobeShape | str) -> bool:
        """Replace the wardrobe with the template of ``shape``.

        Height, thickness, base bar height and limits are carried over.
        """
        try:
            shape = WardrobeShape(shape)
        except ValueError:
            logger.warning(f"Unknown wardrobe shape '{shape}'")
            return False

        current = self.configuration
        updated = self.template_manager.create_configuration(
            shape,
            height=current.height,
            thickness=current.thickness,
            base_bar_height=current.base_bar_height,
            limits=current.limits,
        )
        logger.info(f"Switched wardrobe shape {current.shape.value} -> {shape.value}")
        return self.store.commit(updated)

    # --- shelves ---------------------------------------------------------

    def set_shelf_count(self, target: str, count: int) -> bool:
        """Set the shelf count of a column id or merged corner key."""
        return self.store.commit(self._apply_shelf(target, SetShelfCount(count)))

    def edit_spacing(self, target: str, index: int, value: float) -> bool:
        updated = self._apply_shelf(target, EditSpacing(index, value))
        return self.store.commit_debounced(updated, f"spacing:{target}:{index}")

    def redistribute_shelves(self, target: str) -> bool:
        return self.store.commit(self._apply_shelf(target, RedistributeShelves()))

    def shelf_edit_targets(self) -> list[ShelfEditTarget]:
        return shelf_edit_targets(self.configuration)

    # --- history ---------------------------------------------------------

    def undo(self) -> bool:
        return self.store.undo()

    # --- helpers ---------------------------------------------------------

    def _section_key(self, section: SectionKey | str) -> SectionKey | None:
        try:
            return SectionKey(section)
        except ValueError:
            logger.warning(f"Unknown section '{section}'")
            return None

    def _apply_shelf(
        self, target: str, operation: ShelfOperation
    ) -> WardrobeConfiguration:
        config = self.configuration
        if resolve_merged_column(config, target) is not None:
            return apply_to_merged(config, target, operation)

        found = config.find_column(target)
        if found is None:
            logger.warning(f"No column or merged corner column named '{target}'")
            return config

        merged = merged_key_for_column(config, target)
        if merged is not None:
            logger.debug(f"Column '{target}' is part of '{merged.value}'")
            return apply_to_merged(config, merged, operation)

        key, _ = found
        return apply_shelf_operation(config, ColumnRef(key, target), operation)
