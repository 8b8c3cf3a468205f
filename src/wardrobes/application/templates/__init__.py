"""Wardrobe templates and preset configurations.

This package provides bundled template configurations for each wardrobe
shape and a TemplateManager class for accessing them.
"""

from wardrobes.application.templates.manager import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)

__all__ = [
    "TEMPLATE_METADATA",
    "TemplateManager",
    "TemplateNotFoundError",
]
