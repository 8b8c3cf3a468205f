"""Typer CLI for wardrobe layout."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application import ConfigurationStore, WardrobeEditor, run_edit_script
from wardrobes.application.config import wardrobe_to_dict
from wardrobes.cli.commands import (
    load_script_or_exit,
    load_wardrobe_or_exit,
    templates_app,
    validate_command,
)
from wardrobes.domain import WardrobeConfiguration
from wardrobes.infrastructure import (
    JsonExporter,
    LayoutReportFormatter,
    SectionDiagramFormatter,
)

OUTPUT_FORMATS = ("text", "json", "diagram")

app = typer.Typer(
    name="wardrobes",
    help="Lay out modular wardrobes: sections, columns and shelves.",
)

# Register validate command
app.command(name="validate")(validate_command)

# Register templates subcommand group
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging from the layout engine"),
    ] = False,
) -> None:
    """Lay out modular wardrobes: sections, columns and shelves."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _render(config: WardrobeConfiguration, output_format: str) -> str:
    if output_format == "json":
        return JsonExporter().export(config)
    if output_format == "diagram":
        formatter = SectionDiagramFormatter()
        return "\n\n".join(formatter.format(config, key) for key in config.shape.section_keys)
    return LayoutReportFormatter().format(config)


def _check_format(output_format: str) -> None:
    if output_format not in OUTPUT_FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(OUTPUT_FORMATS)}", err=True)
        raise typer.Exit(code=1)


@app.command()
def show(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, diagram"),
    ] = "text",
) -> None:
    """Lay out a configuration and print it.

    Example:
        wardrobes show my-wardrobe.json --format json
    """
    _check_format(output_format)
    typer.echo(_render(load_wardrobe_or_exit(config_file), output_format))


@app.command()
def apply(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    edits_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON edit script"),
    ],
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the edited configuration to this file"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, diagram"),
    ] = "text",
) -> None:
    """Replay an edit script against a configuration.

    Edits are applied in order through the editor, with undo history and
    debouncing as in an interactive session. Rejected edits are reported and
    skipped.

    Example:
        wardrobes apply my-wardrobe.json edits.json --output edited.json
    """
    _check_format(output_format)
    wardrobe = load_wardrobe_or_exit(config_file)
    script = load_script_or_exit(edits_file)

    editor = WardrobeEditor(ConfigurationStore(wardrobe))
    outcomes = run_edit_script(editor, script)

    applied = sum(1 for o in outcomes if o.applied)
    typer.echo(f"Applied {applied} of {len(outcomes)} edits")
    for outcome in outcomes:
        if not outcome.applied:
            typer.echo(f"  [{outcome.index}] {outcome.op}: not applied")
    typer.echo()

    if output_file is not None:
        try:
            output_file.write_text(
                json.dumps(wardrobe_to_dict(editor.configuration), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            typer.echo(f"Error: Could not write file: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Wrote: {output_file}")
        typer.echo()

    typer.echo(_render(editor.configuration, output_format))


if __name__ == "__main__":
    app()
