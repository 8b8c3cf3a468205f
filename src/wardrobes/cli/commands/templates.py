"""Templates command group: one starting configuration per wardrobe shape.

``templates list`` lays out every template and prints its sections, so the
column counts and corner minimums a shape starts with are visible before a
file is created. ``templates init`` writes a template to disk.
"""

from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application.templates import TemplateManager, TemplateNotFoundError
from wardrobes.domain import WardrobeConfiguration
from wardrobes.domain.services import resolve_corner_constraints

templates_app = typer.Typer(
    name="templates",
    help="Starting configurations for each wardrobe shape.",
)


def _section_summary(config: WardrobeConfiguration) -> list[str]:
    lines = []
    for key in config.shape.section_keys:
        section = config.sections[key]
        widths = ", ".join(f"{c.width:g}" for c in section.columns)
        line = f"{key.value} {section.width:g}x{section.depth:g}cm [{widths}]"
        constraints = resolve_corner_constraints(config, key)
        if constraints.is_corner:
            line += f" corner min {constraints.largest_minimum:g}cm"
        lines.append(line)
    return lines


@templates_app.command(name="list")
def list_templates() -> None:
    """List the shape templates with their laid-out sections.

    Example:
        wardrobes templates list
    """
    manager = TemplateManager()

    typer.echo("Available templates:")
    for name, description in manager.list_templates():
        typer.echo()
        typer.echo(f"  {name}: {description}")
        for line in _section_summary(manager.create_configuration(name)):
            typer.echo(f"    {line}")

    typer.echo()
    typer.echo("Create a file with: wardrobes templates init <shape> [-o FILE]")


@templates_app.command(name="init")
def init_template(
    shape: Annotated[
        str,
        typer.Argument(help="Wardrobe shape: linear, angle or forme_u"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <shape>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Write the template of a shape to a configuration file.

    Examples:
        wardrobes templates init angle
        wardrobes templates init forme_u --output my-wardrobe.json
    """
    manager = TemplateManager()
    target = output or Path(f"{shape}.json")

    if target.exists() and not force:
        typer.echo(f"Error: File already exists: {target} (use --force)", err=True)
        raise typer.Exit(code=1)

    try:
        manager.init_template(shape, target)
    except TemplateNotFoundError as e:
        shapes = ", ".join(name for name, _ in manager.list_templates())
        typer.echo(f"Error: {e}. Shapes: {shapes}", err=True)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not write {target}: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Created: {target}")
