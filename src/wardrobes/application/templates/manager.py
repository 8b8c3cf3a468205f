"""Template manager for bundled wardrobe configuration templates.

This module provides the TemplateManager class for accessing and copying
bundled template configurations, and for building a laid-out wardrobe from
the template of a shape.
"""

import json
from dataclasses import asdict
from importlib import resources
from pathlib import Path
from typing import Any

from wardrobes.application.config import (
    WardrobeConfigSchema,
    config_to_wardrobe,
    load_config_from_dict,
)
from wardrobes.domain import LayoutLimits, WardrobeConfiguration, WardrobeShape


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


# Template metadata: name -> description. Names are the shape values.
TEMPLATE_METADATA: dict[str, str] = {
    WardrobeShape.LINEAR.value: "Linéaire - straight wardrobe, one 60cm section",
    WardrobeShape.ANGLE.value: "Angle - L-shaped wardrobe, two 160cm sections",
    WardrobeShape.FORME_U.value: "Forme U - U-shaped wardrobe, 260cm back and two 160cm sides",
}


class TemplateManager:
    """Manager for bundled wardrobe configuration templates.

    Example:
        manager = TemplateManager()
        for name, description in manager.list_templates():
            print(f"{name}: {description}")

        manager.init_template("angle", Path("my-wardrobe.json"))
        config = manager.create_configuration(WardrobeShape.ANGLE)
    """

    def __init__(self) -> None:
        self._data_package = "wardrobes.application.templates.data"

    def list_templates(self) -> list[tuple[str, str]]:
        """List all available templates as (name, description) tuples."""
        return [(name, desc) for name, desc in TEMPLATE_METADATA.items()]

    def template_exists(self, name: str) -> bool:
        return name in TEMPLATE_METADATA

    def get_template(self, name: str) -> str:
        """Get the JSON content of a template.

        Args:
            name: The template name (without .json extension).

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        if name not in TEMPLATE_METADATA:
            raise TemplateNotFoundError(name)

        try:
            data_files = resources.files(self._data_package)
            return data_files.joinpath(f"{name}.json").read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise TemplateNotFoundError(name) from e

    def init_template(self, name: str, output_path: Path) -> None:
        """Copy a template to the specified output path.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        content = self.get_template(name)
        output_path.write_text(content, encoding="utf-8")

    def load_template(self, name: str) -> WardrobeConfigSchema:
        """Parse and validate a template."""
        return load_config_from_dict(json.loads(self.get_template(name)))

    def create_configuration(
        self,
        shape: WardrobeShape | str,
        height: float | None = None,
        thickness: float | None = None,
        base_bar_height: float | None = None,
        limits: LayoutLimits | None = None,
    ) -> WardrobeConfiguration:
        """Build a laid-out configuration from the template of a shape.

        Template column counts are clamped into each section's feasible range
        before layout. Any dimension given overrides the template's.

        Raises:
            TemplateNotFoundError: If the shape has no template.
            ConfigError: If an override makes the template invalid.
        """
        name = WardrobeShape(shape).value
        data: dict[str, Any] = json.loads(self.get_template(name))

        overrides = {
            "height": height,
            "thickness": thickness,
            "base_bar_height": base_bar_height,
        }
        for field_name, value in overrides.items():
            if value is not None:
                data["wardrobe"][field_name] = value
        if limits is not None:
            data["limits"] = asdict(limits)

        return config_to_wardrobe(load_config_from_dict(data))
