"""Unit tests for layout validation."""

from wardrobes.application.config import (
    ValidationResult,
    check_layout,
    load_config_from_dict,
    validate_config,
)
from wardrobes.domain import SectionKey, WardrobeConfiguration
from wardrobes.domain.services import ColumnRef, SetShelfCount, apply_shelf_operation


def validate(sections: dict, shape: str = "linear") -> ValidationResult:
    return validate_config(
        load_config_from_dict(
            {"schema_version": "1.0", "wardrobe": {"shape": shape, "sections": sections}}
        )
    )


class TestValidationResult:
    """Tests for ValidationResult exit codes."""

    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("p", "m").exit_code == 2
        assert ValidationResult().add_warning("p", "m").add_error("p", "m").exit_code == 1


class TestValidateConfig:
    """Tests for validate_config."""

    def test_laid_out_configuration_is_valid(self) -> None:
        result = validate({"A": {"width": 200, "column_count": 3}})
        assert result.is_valid
        assert not result.has_warnings

    def test_footprint_mismatch(self) -> None:
        result = validate({"A": {"width": 130, "columns": [{"width": 60}, {"width": 60}]}})
        assert not result.is_valid
        assert any("occupy 126cm" in e.message for e in result.errors)

    def test_column_width_out_of_bounds(self) -> None:
        result = validate({"A": {"width": 130, "columns": [{"width": 20}, {"width": 104}]}})
        assert [e.path for e in result.errors] == ["wardrobe.sections.A.columns[0].width"]

    def test_corner_column_below_minimum(self) -> None:
        result = validate(
            {
                "A": {"width": 160, "columns": [{"width": 40}, {"width": 40}, {"width": 72}]},
                "B": {"width": 160, "column_count": 4},
            },
            shape="angle",
        )
        assert "wardrobe.sections.A.columns[2].width" in [e.path for e in result.errors]

    def test_section_width_below_corner_minimum(self) -> None:
        result = validate(
            {
                "A": {"width": 80, "columns": [{"width": 76}]},
                "B": {"width": 160, "column_count": 4},
            },
            shape="angle",
        )
        assert "wardrobe.sections.A.width" in [e.path for e in result.errors]

    def test_spacings_must_match_height(self) -> None:
        result = validate({"A": {"width": 60, "columns": [{"spacings": [40, 40]}]}})
        assert "wardrobe.sections.A.columns[0].spacings" in [e.path for e in result.errors]

    def test_gap_below_minimum(self) -> None:
        result = validate({"A": {"width": 60, "columns": [{"spacings": [5, 162]}]}})
        assert "wardrobe.sections.A.columns[0].spacings[0]" in [
            e.path for e in result.errors
        ]

    def test_gap_outside_storage_range_warns(self) -> None:
        result = validate({"A": {"width": 60, "columns": [{"spacings": [60, 107]}]}})
        assert result.is_valid
        assert result.exit_code == 2
        assert len(result.warnings) == 2
        assert result.warnings[0].suggestion is not None

    def test_layout_error_is_reported(self) -> None:
        result = validate({"A": {"width": 130, "columns": [{}, {"id": "sectionA-col-1"}]}})
        assert [e.path for e in result.errors] == ["wardrobe"]


class TestCheckLayout:
    """Tests for check_layout on domain configurations."""

    def test_generated_layouts_are_valid(
        self,
        angle_config: WardrobeConfiguration,
        forme_u_config: WardrobeConfiguration,
    ) -> None:
        assert check_layout(angle_config).exit_code == 0
        assert check_layout(forme_u_config).exit_code == 0

    def test_misaligned_corner_shelves_warn(
        self, angle_config: WardrobeConfiguration
    ) -> None:
        config = apply_shelf_operation(
            angle_config, ColumnRef(SectionKey.A, "sectionA-col-3"), SetShelfCount(3)
        )
        result = check_layout(config)
        assert result.is_valid
        assert any("angle-ab" in w.message for w in result.warnings)
