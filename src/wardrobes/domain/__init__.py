"""Domain layer - wardrobe model and layout engine."""

from .entities import Column, Section, ShelfConfiguration, WardrobeConfiguration
from .value_objects import (
    DEFAULT_LIMITS,
    NO_CORNER,
    CornerConstraint,
    CornerType,
    LayoutLimits,
    MergedColumnKey,
    SectionKey,
    WardrobeShape,
)

__all__ = [
    "DEFAULT_LIMITS",
    "NO_CORNER",
    "Column",
    "CornerConstraint",
    "CornerType",
    "LayoutLimits",
    "MergedColumnKey",
    "Section",
    "SectionKey",
    "ShelfConfiguration",
    "WardrobeConfiguration",
    "WardrobeShape",
]
