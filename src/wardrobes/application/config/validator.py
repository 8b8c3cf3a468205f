"""Validation structures and layout invariant checks.

Pydantic handles structural validation of configuration files. This module
checks what only the laid-out wardrobe can tell: column widths that fill
each section exactly, widths and counts inside their bounds, and shelf gaps
that add up to the wardrobe height.
"""

from dataclasses import dataclass, field
from typing import Any

from wardrobes.application.config.adapter import config_to_wardrobe
from wardrobes.application.config.loader import ConfigError
from wardrobes.application.config.schema import WardrobeConfigSchema
from wardrobes.domain import WardrobeConfiguration
from wardrobes.domain.services import (
    FOOTPRINT_TOLERANCE,
    OPTIMAL_SPACING_RANGE,
    column_count_bounds,
    column_width_bounds,
    merged_keys,
    resolve_corner_constraints,
    resolve_merged_column,
    section_min_width,
    shelf_height_matches,
)


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "wardrobe.sections.A.width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_sections(config: WardrobeConfiguration) -> ValidationResult:
    """Check section dimensions, column widths, counts and footprints."""
    result = ValidationResult()
    limits = config.limits
    thickness = config.thickness

    for key in config.shape.section_keys:
        section = config.sections[key]
        path = f"wardrobe.sections.{key.value}"

        min_width = section_min_width(config, key)
        if not min_width <= section.width <= limits.max_section_width:
            result.add_error(
                f"{path}.width",
                f"Section width must be between {min_width}-{limits.max_section_width}cm",
                section.width,
            )
        if not limits.min_section_depth <= section.depth <= limits.max_section_depth:
            result.add_error(
                f"{path}.depth",
                f"Section depth must be between {limits.min_section_depth}-"
                f"{limits.max_section_depth}cm",
                section.depth,
            )

        constraints = resolve_corner_constraints(config, key)
        lower, upper = column_count_bounds(section.width, thickness, constraints, limits)
        count = section.column_count
        if not lower <= count <= upper:
            result.add_error(
                f"{path}.columns",
                f"Column count must be between {lower} and {upper}",
                count,
            )

        occupied = section.occupied_width(thickness)
        if abs(occupied - section.width) > FOOTPRINT_TOLERANCE:
            result.add_error(
                f"{path}.columns",
                f"Columns and panels occupy {occupied:g}cm but the section is "
                f"{section.width:g}cm wide",
                occupied,
            )

        for i, column in enumerate(section.columns):
            low, high = column_width_bounds(i, count, constraints, limits)
            if not low <= column.width <= high:
                result.add_error(
                    f"{path}.columns[{i}].width",
                    f"Column width must be between {low:g}-{high:g}cm",
                    column.width,
                )
    return result


def check_shelves(config: WardrobeConfiguration) -> ValidationResult:
    """Check shelf heights and gap sizes of every column."""
    result = ValidationResult()
    low, high = OPTIMAL_SPACING_RANGE
    minimum = config.limits.min_shelf_spacing

    for key in config.shape.section_keys:
        for i, column in enumerate(config.sections[key].columns):
            if column.shelves is None:
                continue
            path = f"wardrobe.sections.{key.value}.columns[{i}].spacings"

            if not shelf_height_matches(column, config):
                result.add_error(
                    path,
                    f"Spacings, shelves and panels do not add up to the wardrobe "
                    f"height ({config.height:g}cm)",
                    list(column.shelves.spacings),
                )

            for j, spacing in enumerate(column.shelves.spacings):
                if spacing < minimum:
                    result.add_error(
                        f"{path}[{j}]",
                        f"Gap is below the minimum spacing of {minimum:g}cm",
                        spacing,
                    )
                elif not low <= spacing <= high:
                    result.add_warning(
                        f"{path}[{j}]",
                        f"Gap of {spacing:g}cm is outside the {low:g}-{high:g}cm "
                        f"storage range",
                        suggestion="Adjust the shelf count or redistribute the shelves",
                    )
    return result


def check_merged_columns(config: WardrobeConfiguration) -> ValidationResult:
    """Warn when the two halves of a corner column have different shelves."""
    result = ValidationResult()
    for key in merged_keys(config.shape):
        refs = resolve_merged_column(config, key)
        if refs is None:
            continue
        first, second = (
            config.sections[ref.section_key].get_column(ref.column_id) for ref in refs
        )
        assert first is not None and second is not None
        if first.shelves != second.shelves:
            result.add_warning(
                "wardrobe.sections",
                f"Corner columns '{first.id}' and '{second.id}' ({key.value}) have "
                f"different shelves",
                suggestion=f"Edit the shelves through '{key.value}' to keep them aligned",
            )
    return result


def check_layout(config: WardrobeConfiguration) -> ValidationResult:
    """Run every layout check on a domain configuration."""
    result = ValidationResult()
    result.merge(check_sections(config))
    result.merge(check_shelves(config))
    result.merge(check_merged_columns(config))
    return result


def validate_config(config: WardrobeConfigSchema) -> ValidationResult:
    """Perform full validation of a wardrobe configuration.

    Args:
        config: A WardrobeConfigSchema instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    try:
        wardrobe = config_to_wardrobe(config)
    except ConfigError as e:
        return ValidationResult().add_error("wardrobe", e.message)
    return check_layout(wardrobe)
