"""Unit tests for the TemplateManager class."""

import json
from pathlib import Path

import pytest

from wardrobes.application.config import WardrobeConfigSchema, validate_config
from wardrobes.application.templates import (
    TEMPLATE_METADATA,
    TemplateManager,
    TemplateNotFoundError,
)
from wardrobes.domain import LayoutLimits, SectionKey, WardrobeShape


@pytest.fixture
def manager() -> TemplateManager:
    return TemplateManager()


class TestTemplateListing:
    """Tests for listing and reading templates."""

    def test_one_template_per_shape(self, manager: TemplateManager) -> None:
        names = [name for name, _ in manager.list_templates()]
        assert names == [shape.value for shape in WardrobeShape]

    def test_template_exists(self, manager: TemplateManager) -> None:
        assert manager.template_exists("angle")
        assert not manager.template_exists("nonexistent")

    def test_get_template_returns_json(self, manager: TemplateManager) -> None:
        data = json.loads(manager.get_template("forme_u"))
        assert data["wardrobe"]["shape"] == "forme_u"

    def test_get_unknown_template_raises(self, manager: TemplateManager) -> None:
        with pytest.raises(TemplateNotFoundError) as exc_info:
            manager.get_template("nonexistent")
        assert exc_info.value.name == "nonexistent"
        assert "Template not found: nonexistent" in str(exc_info.value)

    @pytest.mark.parametrize("name", list(TEMPLATE_METADATA))
    def test_every_template_validates_cleanly(
        self, manager: TemplateManager, name: str
    ) -> None:
        schema = manager.load_template(name)
        assert isinstance(schema, WardrobeConfigSchema)
        assert validate_config(schema).exit_code == 0


class TestInitTemplate:
    """Tests for init_template."""

    def test_writes_template(self, manager: TemplateManager, tmp_path: Path) -> None:
        output = tmp_path / "mine.json"
        manager.init_template("linear", output)
        assert json.loads(output.read_text())["wardrobe"]["shape"] == "linear"

    def test_unknown_template(self, manager: TemplateManager, tmp_path: Path) -> None:
        output = tmp_path / "mine.json"
        with pytest.raises(TemplateNotFoundError):
            manager.init_template("nonexistent", output)
        assert not output.exists()


class TestCreateConfiguration:
    """Tests for create_configuration."""

    def test_linear(self, manager: TemplateManager) -> None:
        config = manager.create_configuration(WardrobeShape.LINEAR)
        assert [c.width for c in config.sections[SectionKey.A].columns] == [56]

    def test_angle_count_is_clamped(self, manager: TemplateManager) -> None:
        config = manager.create_configuration("angle")
        assert [c.width for c in config.sections[SectionKey.A].columns] == [33, 33, 86]
        assert [c.width for c in config.sections[SectionKey.B].columns] == [38, 38, 37, 37]

    def test_forme_u(self, manager: TemplateManager) -> None:
        config = manager.create_configuration("forme_u")
        assert [c.width for c in config.sections[SectionKey.A].columns] == [86, 39, 39, 86]

    def test_overrides(self, manager: TemplateManager) -> None:
        limits = LayoutLimits(corner_clearance=20)
        config = manager.create_configuration(
            "angle", height=220, base_bar_height=10, limits=limits
        )
        assert config.height == 220
        assert config.base_bar_height == 10
        assert config.limits == limits
        assert config.sections[SectionKey.A].columns[-1].width == 76

    def test_unknown_shape_raises(self, manager: TemplateManager) -> None:
        with pytest.raises(ValueError):
            manager.create_configuration("circle")
