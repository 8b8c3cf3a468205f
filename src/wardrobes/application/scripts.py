"""Replay of edit scripts through a ``WardrobeEditor``."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wardrobes.application.config.schema import (
    AddColumnEdit,
    EditOperation,
    EditScriptSchema,
    EditSpacingEdit,
    MoveSeparatorEdit,
    RedistributeColumnsEdit,
    RedistributeShelvesEdit,
    RemoveColumnEdit,
    SetColumnCountEdit,
    SetColumnWidthEdit,
    SetSectionDepthEdit,
    SetSectionWidthEdit,
    SetShelfCountEdit,
    SwitchShapeEdit,
    UndoEdit,
)
from wardrobes.application.editor import WardrobeEditor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditOutcome:
    """Result of one scripted edit."""

    index: int
    op: str
    applied: bool


def apply_edit(editor: WardrobeEditor, edit: EditOperation) -> bool:
    """Dispatch one validated edit to the editor."""
    if isinstance(edit, SetColumnCountEdit):
        return editor.set_column_count(edit.section, edit.count)
    elif isinstance(edit, AddColumnEdit):
        return editor.add_column(edit.section)
    elif isinstance(edit, RemoveColumnEdit):
        return editor.remove_column(edit.section)
    elif isinstance(edit, SetColumnWidthEdit):
        return editor.update_column_width(edit.column, edit.width)
    elif isinstance(edit, RedistributeColumnsEdit):
        return editor.redistribute_evenly(edit.section)
    elif isinstance(edit, MoveSeparatorEdit):
        return editor.move_separator(edit.section, edit.index, edit.position)
    elif isinstance(edit, SetSectionWidthEdit):
        return editor.set_section_width(edit.section, edit.width)
    elif isinstance(edit, SetSectionDepthEdit):
        return editor.set_section_depth(edit.section, edit.depth)
    elif isinstance(edit, SetShelfCountEdit):
        return editor.set_shelf_count(edit.target, edit.count)
    elif isinstance(edit, EditSpacingEdit):
        return editor.edit_spacing(edit.target, edit.index, edit.value)
    elif isinstance(edit, RedistributeShelvesEdit):
        return editor.redistribute_shelves(edit.target)
    elif isinstance(edit, SwitchShapeEdit):
        return editor.switch_shape(edit.shape)
    elif isinstance(edit, UndoEdit):
        return editor.undo()
    raise TypeError(f"Unsupported edit: {edit!r}")


def run_edit_script(editor: WardrobeEditor, script: EditScriptSchema) -> list[EditOutcome]:
    """Apply every edit of a script in order.

    Rejected edits are reported in the outcomes and do not stop the script.
    """
    outcomes: list[EditOutcome] = []
    for index, edit in enumerate(script.edits):
        applied = apply_edit(editor, edit)
        if not applied:
            logger.info(f"Edit {index} ({edit.op}) was not applied")
        outcomes.append(EditOutcome(index=index, op=edit.op, applied=applied))
    return outcomes
