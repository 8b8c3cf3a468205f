"""Validate command for wardrobe configuration files.

The file is loaded, laid out and checked against the layout rules: every
section filled exactly by its columns and panels, column widths and counts
inside their bounds, shelf gaps adding up to the usable height. A summary
of each section is printed before the findings.
"""

from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application.config import ValidationResult, check_layout
from wardrobes.cli.commands.loading import load_wardrobe_or_exit
from wardrobes.domain import WardrobeConfiguration
from wardrobes.domain.services import column_count_bounds, resolve_corner_constraints


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Check a wardrobe configuration file.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        wardrobes validate my-wardrobe.json
    """
    typer.echo(f"Checking {config_file}")
    typer.echo()

    wardrobe = load_wardrobe_or_exit(config_file, footer="Validation failed.")
    result = check_layout(wardrobe)

    _print_sections(wardrobe)
    _print_findings(result)
    raise typer.Exit(code=result.exit_code)


def _print_sections(wardrobe: WardrobeConfiguration) -> None:
    typer.echo(f"{wardrobe.shape.label}, {wardrobe.height:g}cm high")
    for key in wardrobe.shape.section_keys:
        section = wardrobe.sections[key]
        constraints = resolve_corner_constraints(wardrobe, key)
        lower, upper = column_count_bounds(
            section.width, wardrobe.thickness, constraints, wardrobe.limits
        )
        line = (
            f"  Section {key.value}: {section.width:g}cm, "
            f"{section.column_count} of {lower}-{upper} columns, "
            f"{section.occupied_width(wardrobe.thickness):g}cm occupied"
        )
        if constraints.is_corner:
            line += f", corner minimum {constraints.largest_minimum:g}cm"
        typer.echo(line)
    typer.echo()


def _print_findings(result: ValidationResult) -> None:
    for error in result.errors:
        typer.echo(f"Error: {error.path}: {error.message}", err=True)
        if error.value is not None:
            typer.echo(f"  got {error.value!r}", err=True)

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
