"""Adapter between the configuration schema and the domain model.

``config_to_wardrobe`` builds a laid-out ``WardrobeConfiguration`` from a
validated schema, generating any column widths or shelf spacings the file
leaves implicit. ``wardrobe_to_dict`` dumps a configuration back to the
schema's JSON shape with every column made explicit.
"""

import logging
from dataclasses import asdict
from typing import Any

from wardrobes.application.config.loader import ConfigError
from wardrobes.application.config.schema import (
    ColumnConfig,
    LimitsConfig,
    SectionConfig,
    WardrobeConfig,
    WardrobeConfigSchema,
)
from wardrobes.domain import (
    Column,
    LayoutLimits,
    Section,
    SectionKey,
    ShelfConfiguration,
    WardrobeConfiguration,
)
from wardrobes.domain.services import (
    column_id_prefix,
    layout_section,
    optimal_spacings,
    refresh_bounds,
    resolve_corner_constraints,
)

logger = logging.getLogger(__name__)

# Width given to columns whose width is left to the layout engine
_PROVISIONAL_WIDTH = 1.0


def config_to_limits(config: LimitsConfig) -> LayoutLimits:
    return LayoutLimits(**config.model_dump())


def _column_to_domain(
    column_config: ColumnConfig,
    index: int,
    key: SectionKey,
    wardrobe: WardrobeConfig,
) -> Column:
    shelves: ShelfConfiguration | None = None
    if column_config.spacings is not None:
        shelves = ShelfConfiguration(tuple(column_config.spacings))
    elif column_config.shelves:
        shelves = ShelfConfiguration(
            optimal_spacings(
                column_config.shelves,
                wardrobe.height,
                wardrobe.base_bar_height,
                wardrobe.thickness,
            )
        )

    return Column(
        id=column_config.id or f"{column_id_prefix(key)}-{index + 1}",
        width=column_config.width or _PROVISIONAL_WIDTH,
        shelves=shelves,
    )


def _section_to_domain(
    section_config: SectionConfig, key: SectionKey, wardrobe: WardrobeConfig
) -> Section:
    columns = [
        _column_to_domain(c, i, key, wardrobe)
        for i, c in enumerate(section_config.columns or [])
    ]
    return Section(width=section_config.width, depth=section_config.depth, columns=columns)


def config_to_wardrobe(config: WardrobeConfigSchema) -> WardrobeConfiguration:
    """Convert a validated schema into a laid-out domain configuration.

    Sections with explicit column widths keep them as given (only their
    column count bounds are computed), so the result may violate layout
    invariants; ``validate_config`` reports those. Every other section is
    laid out by the column generator.

    Raises:
        ConfigError: If the values are rejected by the domain model.
    """
    wardrobe = config.wardrobe
    try:
        limits = config_to_limits(config.limits)
        sections = {
            key: _section_to_domain(section_config, key, wardrobe)
            for key, section_config in wardrobe.sections.items()
        }
        result = WardrobeConfiguration(
            shape=wardrobe.shape,
            height=wardrobe.height,
            thickness=wardrobe.thickness,
            base_bar_height=wardrobe.base_bar_height,
            sections=sections,
            limits=limits,
        )
    except ValueError as e:
        raise ConfigError(message=f"Invalid wardrobe configuration: {e}", error_type="layout")

    updates: dict[SectionKey, Section] = {}
    for key, section_config in wardrobe.sections.items():
        if section_config.has_explicit_widths:
            constraints = resolve_corner_constraints(result, key)
            updates[key] = refresh_bounds(
                result.sections[key], result.thickness, constraints, limits
            )
        else:
            count = section_config.column_count
            if count is None and section_config.columns:
                count = len(section_config.columns)
            updates[key] = layout_section(result, key, count)
            logger.debug(
                f"Section {key.value} laid out with {updates[key].column_count} columns"
            )
    return result.with_sections(updates)


def _column_to_dict(column: Column) -> dict[str, Any]:
    data: dict[str, Any] = {"id": column.id, "width": column.width}
    if column.shelves is not None:
        data["shelves"] = column.shelf_count
        data["spacings"] = list(column.shelves.spacings)
    return data


def wardrobe_to_dict(config: WardrobeConfiguration, schema_version: str = "1.0") -> dict[str, Any]:
    """Dump a configuration in the configuration file format.

    The result validates against ``WardrobeConfigSchema`` and loads back to
    an identical layout.
    """
    sections = {
        key.value: {
            "width": config.sections[key].width,
            "depth": config.sections[key].depth,
            "columns": [_column_to_dict(c) for c in config.sections[key].columns],
        }
        for key in config.shape.section_keys
    }
    schema = WardrobeConfigSchema.model_validate(
        {
            "schema_version": schema_version,
            "wardrobe": {
                "shape": config.shape.value,
                "height": config.height,
                "thickness": config.thickness,
                "base_bar_height": config.base_bar_height,
                "sections": sections,
            },
            "limits": asdict(config.limits),
        }
    )
    return schema.model_dump(mode="json", exclude_none=True)
