"""CLI command implementations for the wardrobes application.

This package contains subcommands for the wardrobes CLI, including:
- validate: Check a configuration file against the layout rules
- templates: List and write the shape templates
"""

from wardrobes.cli.commands.loading import load_script_or_exit, load_wardrobe_or_exit
from wardrobes.cli.commands.templates import templates_app
from wardrobes.cli.commands.validate import validate_command

__all__ = [
    "load_script_or_exit",
    "load_wardrobe_or_exit",
    "templates_app",
    "validate_command",
]
