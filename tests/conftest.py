"""Pytest configuration and shared fixtures for wardrobe tests."""

from __future__ import annotations

import pytest

from wardrobes.domain import (
    Section,
    SectionKey,
    WardrobeConfiguration,
    WardrobeShape,
)
from wardrobes.domain.services import layout_section


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI")


def build_config(
    shape: WardrobeShape,
    sections: dict[str, tuple[float, float, int]],
    height: float = 180,
    thickness: float = 2,
    base_bar_height: float = 7,
) -> WardrobeConfiguration:
    """Build a laid-out configuration from ``key -> (width, depth, count)``."""
    config = WardrobeConfiguration(
        shape=shape,
        height=height,
        thickness=thickness,
        base_bar_height=base_bar_height,
        sections={
            SectionKey(key): Section(width=width, depth=depth)
            for key, (width, depth, _) in sections.items()
        },
    )
    return config.with_sections(
        {
            SectionKey(key): layout_section(config, SectionKey(key), count)
            for key, (_, _, count) in sections.items()
        }
    )


@pytest.fixture
def config_factory():
    """Return ``build_config`` for tests that need custom dimensions."""
    return build_config


@pytest.fixture
def linear_config() -> WardrobeConfiguration:
    """Linear wardrobe, 200cm section A laid out as [64, 64, 64]."""
    return build_config(WardrobeShape.LINEAR, {"A": (200, 60, 3)})


@pytest.fixture
def angle_config() -> WardrobeConfiguration:
    """Angle wardrobe: A [33, 33, 86] and B [38, 38, 37, 37]."""
    return build_config(
        WardrobeShape.ANGLE,
        {"A": (160, 60, 3), "B": (160, 60, 4)},
    )


@pytest.fixture
def forme_u_config() -> WardrobeConfiguration:
    """Forme U wardrobe: A [86, 39, 39, 86], B and C [38, 38, 37, 37]."""
    return build_config(
        WardrobeShape.FORME_U,
        {"A": (260, 60, 4), "B": (160, 60, 4), "C": (160, 60, 4)},
    )
