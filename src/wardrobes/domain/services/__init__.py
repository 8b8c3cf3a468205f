"""Domain services for wardrobe layout.

This package provides the layout and constraint engine:
- Corner constraint resolution and column bounds
- Optimal column generation and single-neighbour width edits
- Shelf spacing with bidirectional gap cascades
- Merged corner columns and configuration-level section edits
"""

from .column_bounds import (
    column_count_bounds,
    column_width_bounds,
    corner_count_range,
    max_columns,
    min_columns,
    refresh_bounds,
)
from .column_generator import generate_columns, redistribute_evenly
from .corner_resolver import corner_minimum_width, resolve_corner_constraints
from .distribution import split_evenly
from .merged_columns import (
    ColumnRef,
    EditSpacing,
    RedistributeShelves,
    SetShelfCount,
    ShelfEditTarget,
    apply_shelf_operation,
    apply_to_merged,
    merged_key_for_column,
    merged_keys,
    resolve_merged_column,
    shelf_edit_targets,
)
from .pricing import PriceEstimate, estimate_price
from .section_layout import (
    add_column,
    change_section_depth,
    change_section_width,
    column_id_prefix,
    layout_configuration,
    layout_section,
    move_section_separator,
    redistribute_section,
    remove_column,
    section_min_width,
    set_column_count,
    update_width,
)
from .separators import (
    ColumnSeparator,
    calculate_separators,
    move_separator,
    separator_range,
)
from .shelf_spacing import (
    OPTIMAL_SPACING_RANGE,
    SpacingAnalysis,
    SpacingInfo,
    analyze_spacings,
    edit_spacing,
    max_shelf_count,
    optimal_spacings,
    redistribute_shelves_evenly,
    set_shelf_count,
    shelf_height_matches,
    shelf_positions,
)
from .width_redistribution import FOOTPRINT_TOLERANCE, update_column_width

__all__ = [
    "FOOTPRINT_TOLERANCE",
    "OPTIMAL_SPACING_RANGE",
    "ColumnRef",
    "ColumnSeparator",
    "EditSpacing",
    "PriceEstimate",
    "RedistributeShelves",
    "SetShelfCount",
    "ShelfEditTarget",
    "SpacingAnalysis",
    "SpacingInfo",
    "add_column",
    "analyze_spacings",
    "apply_shelf_operation",
    "apply_to_merged",
    "calculate_separators",
    "change_section_depth",
    "change_section_width",
    "column_count_bounds",
    "column_id_prefix",
    "column_width_bounds",
    "corner_count_range",
    "corner_minimum_width",
    "edit_spacing",
    "estimate_price",
    "generate_columns",
    "layout_configuration",
    "layout_section",
    "max_columns",
    "max_shelf_count",
    "merged_key_for_column",
    "merged_keys",
    "min_columns",
    "move_section_separator",
    "move_separator",
    "optimal_spacings",
    "redistribute_evenly",
    "redistribute_section",
    "redistribute_shelves_evenly",
    "refresh_bounds",
    "remove_column",
    "resolve_corner_constraints",
    "resolve_merged_column",
    "section_min_width",
    "separator_range",
    "set_column_count",
    "set_shelf_count",
    "shelf_edit_targets",
    "shelf_height_matches",
    "shelf_positions",
    "split_evenly",
    "update_column_width",
    "update_width",
]
