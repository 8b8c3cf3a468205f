"""Shared loading helpers for wardrobe CLI commands.

Every command reads a configuration file (and ``apply`` an edit script as
well). Load failures are reported the same way everywhere and end the
command with exit code 1.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

from wardrobes.application.config import (
    ConfigError,
    EditScriptSchema,
    WardrobeConfigSchema,
    config_to_wardrobe,
    load_config,
    load_edit_script,
)
from wardrobes.domain import WardrobeConfiguration

__all__ = [
    "load_schema_or_exit",
    "load_script_or_exit",
    "load_wardrobe_or_exit",
    "report_config_error",
]

_HEADLINES = {
    "file_not_found": "File not found",
    "permission_denied": "Permission denied",
    "file_read_error": "Could not read file",
    "json_parse": "Invalid JSON syntax",
    "validation": "Schema validation failed",
    "layout": "Wardrobe cannot be laid out",
}


def _describe_detail(detail: dict[str, Any]) -> str:
    message = detail.get("message", "Unknown error")
    if "path" in detail:
        text = f"{detail['path']}: {message}"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            text += f" (got {value!r})"
        return text
    if "line" in detail:
        return f"line {detail['line']}, column {detail.get('column', '?')}: {message}"
    return message


def report_config_error(error: ConfigError, footer: str | None = None) -> None:
    """Print a load error to stderr: a headline, then one line per detail."""
    headline = _HEADLINES.get(error.error_type, "Configuration error")
    source = f": {error.path}" if error.path is not None else ""
    typer.echo(f"Error: {headline}{source}", err=True)

    if error.details:
        for detail in error.details:
            typer.echo(f"  {_describe_detail(detail)}", err=True)
    elif error.error_type not in ("file_not_found", "permission_denied"):
        typer.echo(f"  {error.message}", err=True)

    if footer:
        typer.echo(footer, err=True)


def load_schema_or_exit(
    config_file: Path, footer: str | None = None
) -> WardrobeConfigSchema:
    try:
        return load_config(config_file)
    except ConfigError as e:
        report_config_error(e, footer)
        raise typer.Exit(code=1)


def load_wardrobe_or_exit(
    config_file: Path, footer: str | None = None
) -> WardrobeConfiguration:
    """Load a configuration file and lay it out as a domain wardrobe."""
    schema = load_schema_or_exit(config_file, footer)
    try:
        return config_to_wardrobe(schema)
    except ConfigError as e:
        report_config_error(e, footer)
        raise typer.Exit(code=1)


def load_script_or_exit(edits_file: Path) -> EditScriptSchema:
    try:
        return load_edit_script(edits_file)
    except ConfigError as e:
        report_config_error(e)
        raise typer.Exit(code=1)
