"""Output formatters for wardrobe layouts."""

from __future__ import annotations

import json
from typing import Any

from wardrobes.domain import Column, Section, SectionKey, WardrobeConfiguration
from wardrobes.domain.services import (
    analyze_spacings,
    calculate_separators,
    column_count_bounds,
    estimate_price,
    resolve_corner_constraints,
    shelf_edit_targets,
    shelf_positions,
)


def _fmt(value: float) -> str:
    return f"{value:g}"


class LayoutReportFormatter:
    """Formats a text report of every section, column and shelf."""

    def format(self, config: WardrobeConfiguration) -> str:
        lines = [
            "WARDROBE LAYOUT",
            "=" * 70,
            f"Shape: {config.shape.label}",
            f"Height: {_fmt(config.height)}cm  Thickness: {_fmt(config.thickness)}cm  "
            f"Base bar: {_fmt(config.base_bar_height)}cm",
            "",
        ]

        for key in config.shape.section_keys:
            lines.extend(self._format_section(config, key))
            lines.append("")

        targets = [t for t in shelf_edit_targets(config) if t.is_merged]
        if targets:
            lines.append("Corner columns:")
            for target in targets:
                columns = ", ".join(ref.column_id for ref in target.refs)
                lines.append(f"  {target.key:<10} {target.label} ({columns})")
            lines.append("")

        price = estimate_price(config)
        lines.append("-" * 70)
        lines.append(
            f"Price: {price.price:.2f}  (was {price.original_price:.2f}, "
            f"-{price.discount_percentage}%)"
        )
        return "\n".join(lines)

    def _format_section(self, config: WardrobeConfiguration, key: SectionKey) -> list[str]:
        section = config.sections[key]
        constraints = resolve_corner_constraints(config, key)
        lower, upper = column_count_bounds(
            section.width, config.thickness, constraints, config.limits
        )

        lines = [
            f"Section {key.value}: {_fmt(section.width)}cm W x {_fmt(section.depth)}cm D",
            f"  Columns: {section.column_count} (allowed {lower}-{upper})",
        ]
        if constraints.has_first:
            lines.append(f"  Corner minimum (first column): {_fmt(constraints.min_first_column_width or 0)}cm")
        if constraints.has_last:
            lines.append(f"  Corner minimum (last column): {_fmt(constraints.min_last_column_width or 0)}cm")

        lines.append(f"  {'Column':<16} {'Width':<8} {'Shelves':<8} {'Spacings'}")
        for column in section.columns:
            spacings = (
                " / ".join(_fmt(s) for s in column.shelves.spacings)
                if column.shelves
                else "-"
            )
            lines.append(
                f"  {column.id:<16} {_fmt(column.width):<8} {column.shelf_count:<8} {spacings}"
            )
        return lines


class SectionDiagramFormatter:
    """Formats an ASCII elevation of one section.

    Column widths are drawn proportionally; shelves are placed at their
    real height.
    """

    def format(
        self,
        config: WardrobeConfiguration,
        key: SectionKey,
        width: int = 60,
        height: int = 20,
    ) -> str:
        section = config.sections.get(key)
        if section is None or not section.columns:
            return f"No columns to display for section {key.value}."

        grid = [[" " for _ in range(width)] for _ in range(height)]
        self._draw_box(grid, 0, 0, width - 1, height - 1)

        scale_x = (width - 1) / section.width
        scale_y = (height - 1) / config.height
        x = config.thickness
        for index, column in enumerate(section.columns):
            left = round(x * scale_x)
            right = round((x + column.width) * scale_x)
            if index < section.column_count - 1:
                for y in range(1, height - 1):
                    grid[y][min(right, width - 2)] = "|"
            self._draw_shelves(grid, config, column, left, right, scale_y)
            x += column.width + config.thickness

        lines = [f"SECTION {key.value}", "=" * width, ""]
        lines.extend("".join(row) for row in grid)
        lines.append("")
        lines.append(
            f"{_fmt(section.width)}cm W x {_fmt(config.height)}cm H, "
            f"{section.column_count} columns"
        )
        return "\n".join(lines)

    def _draw_shelves(
        self,
        grid: list[list[str]],
        config: WardrobeConfiguration,
        column: Column,
        left: int,
        right: int,
        scale_y: float,
    ) -> None:
        height = len(grid)
        for position in shelf_positions(column, config):
            row = height - 1 - round(position * scale_y)
            if 0 < row < height - 1:
                for x in range(left + 1, right):
                    grid[row][x] = "-"

    def _draw_box(
        self, grid: list[list[str]], x1: int, y1: int, x2: int, y2: int
    ) -> None:
        grid[y1][x1] = "+"
        grid[y1][x2] = "+"
        grid[y2][x1] = "+"
        grid[y2][x2] = "+"
        for x in range(x1 + 1, x2):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1 + 1, y2):
            grid[y][x1] = "|"
            grid[y][x2] = "|"


class JsonExporter:
    """Exports a laid-out configuration as JSON.

    Includes the derived layout (column count bounds, corner minimums,
    separator positions, shelf heights, spacing analysis) alongside the
    stored dimensions.
    """

    def export(self, config: WardrobeConfiguration) -> str:
        price = estimate_price(config)
        data = {
            "wardrobe": {
                "shape": config.shape.value,
                "height": config.height,
                "thickness": config.thickness,
                "base_bar_height": config.base_bar_height,
                "sections": {
                    key.value: self._format_section(config, key)
                    for key in config.shape.section_keys
                },
            },
            "shelf_targets": [
                {"key": t.key, "label": t.label, "columns": [r.column_id for r in t.refs]}
                for t in shelf_edit_targets(config)
            ],
            "price": {
                "price": price.price,
                "original_price": price.original_price,
                "discount_percentage": price.discount_percentage,
            },
        }
        return json.dumps(data, indent=2, ensure_ascii=False)

    def _format_section(self, config: WardrobeConfiguration, key: SectionKey) -> dict[str, Any]:
        section: Section = config.sections[key]
        constraints = resolve_corner_constraints(config, key)
        lower, upper = column_count_bounds(
            section.width, config.thickness, constraints, config.limits
        )
        result: dict[str, Any] = {
            "width": section.width,
            "depth": section.depth,
            "min_columns": lower,
            "max_columns": upper,
            "columns": [self._format_column(config, c) for c in section.columns],
            "separators": [
                {"id": s.id, "position": s.position}
                for s in calculate_separators(section, config.thickness)
            ],
        }
        if constraints.is_corner:
            result["corner"] = {
                "type": constraints.corner_type.value if constraints.corner_type else None,
                "min_first_column_width": constraints.min_first_column_width,
                "min_last_column_width": constraints.min_last_column_width,
            }
        return result

    def _format_column(self, config: WardrobeConfiguration, column: Column) -> dict[str, Any]:
        result: dict[str, Any] = {"id": column.id, "width": column.width}
        analysis = analyze_spacings(column, config.limits)
        if column.shelves is not None and analysis is not None:
            result["shelves"] = {
                "count": column.shelf_count,
                "spacings": list(column.shelves.spacings),
                "positions": list(shelf_positions(column, config)),
                "average_spacing": analysis.average_spacing,
                "valid": analysis.has_valid_spacing,
                "optimal": [s.is_optimal for s in analysis.spacings],
            }
        return result
