"""Unit tests for WardrobeEditor."""

import pytest

from wardrobes.application import ConfigurationStore, WardrobeEditor
from wardrobes.domain import SectionKey, WardrobeConfiguration, WardrobeShape


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def editor(angle_config: WardrobeConfiguration, clock: FakeClock) -> WardrobeEditor:
    return WardrobeEditor(ConfigurationStore(angle_config, clock=clock))


def column(editor: WardrobeEditor, column_id: str):
    found = editor.configuration.find_column(column_id)
    assert found is not None
    return found[1]


class TestColumnEdits:
    """Tests for column structure and width edits."""

    def test_set_column_count(self, editor: WardrobeEditor) -> None:
        assert editor.set_column_count("A", 2)
        assert editor.configuration.sections[SectionKey.A].column_count == 2

    def test_rejected_count(self, editor: WardrobeEditor) -> None:
        """Rejected edits leave the store untouched."""
        assert not editor.set_column_count("A", 9)
        assert not editor.store.can_undo

    def test_unknown_section(self, editor: WardrobeEditor) -> None:
        assert not editor.set_column_count("Z", 2)
        assert not editor.add_column("C")

    def test_add_and_remove(self, editor: WardrobeEditor) -> None:
        assert editor.add_column("B")
        assert editor.configuration.sections[SectionKey.B].column_count == 5
        assert editor.remove_column("B")
        assert editor.configuration.sections[SectionKey.B].column_count == 4

    def test_width_drag_is_one_undo_step(
        self, editor: WardrobeEditor, clock: FakeClock
    ) -> None:
        for width in (40, 42, 45):
            clock.now += 0.1
            assert editor.update_column_width("sectionB-col-2", width)
        assert column(editor, "sectionB-col-2").width == 45
        assert editor.store.history_size == 1

        editor.undo()
        assert column(editor, "sectionB-col-2").width == 38

    def test_redistribute(self, editor: WardrobeEditor) -> None:
        editor.update_column_width("sectionB-col-2", 45)
        assert editor.redistribute_evenly("B")
        assert column(editor, "sectionB-col-2").width == 38

    def test_move_separator(self, editor: WardrobeEditor) -> None:
        """Separator 0 of B sits at 40; moving it to 45 widens column 1."""
        assert editor.move_separator("B", 0, 45)
        assert column(editor, "sectionB-col-1").width == 43
        assert column(editor, "sectionB-col-2").width == 33

    def test_move_separator_out_of_range(self, editor: WardrobeEditor) -> None:
        assert not editor.move_separator("B", 0, 50)


class TestSectionEdits:
    """Tests for section dimension and shape edits."""

    def test_set_section_depth_cascades_to_a(self, editor: WardrobeEditor) -> None:
        assert editor.set_section_depth("B", 90)
        assert [c.width for c in editor.configuration.sections[SectionKey.A].columns] == [
            38,
            116,
        ]

    def test_set_section_width(self, editor: WardrobeEditor) -> None:
        assert editor.set_section_width("B", 200)
        assert editor.configuration.sections[SectionKey.B].width == 200

    def test_switch_shape_keeps_dimensions(self, config_factory) -> None:
        config = config_factory(WardrobeShape.LINEAR, {"A": (60, 60, 1)}, height=200)
        editor = WardrobeEditor(ConfigurationStore(config))
        assert editor.switch_shape("forme_u")
        assert editor.configuration.shape is WardrobeShape.FORME_U
        assert editor.configuration.height == 200
        assert set(editor.configuration.sections) == {
            SectionKey.A,
            SectionKey.B,
            SectionKey.C,
        }

        assert editor.undo()
        assert editor.configuration.shape is WardrobeShape.LINEAR

    def test_unknown_shape(self, editor: WardrobeEditor) -> None:
        assert not editor.switch_shape("circle")


class TestShelfEdits:
    """Tests for shelf edits on columns and merged corner columns."""

    def test_set_shelf_count_on_column(self, editor: WardrobeEditor) -> None:
        assert editor.set_shelf_count("sectionB-col-2", 2)
        assert column(editor, "sectionB-col-2").shelves.spacings == (55, 55, 55)

    def test_set_shelf_count_on_merged_column(self, editor: WardrobeEditor) -> None:
        assert editor.set_shelf_count("angle-ab", 3)
        assert column(editor, "sectionA-col-3").shelf_count == 3
        assert column(editor, "sectionB-col-1").shelf_count == 3
        assert editor.store.history_size == 1

    def test_edit_spacing_on_merged_column(self, editor: WardrobeEditor) -> None:
        editor.set_shelf_count("angle-ab", 3)
        assert editor.edit_spacing("angle-ab", 1, 55)
        expected = (41, 55, 27, 40)
        assert column(editor, "sectionA-col-3").shelves.spacings == expected
        assert column(editor, "sectionB-col-1").shelves.spacings == expected

    def test_corner_column_id_edits_both_halves(self, editor: WardrobeEditor) -> None:
        """A shelf edit addressed to one corner column reaches its partner too."""
        editor.set_shelf_count("angle-ab", 3)
        assert editor.set_shelf_count("sectionA-col-3", 5)
        expected = (27, 27, 27, 26, 26, 26)
        assert column(editor, "sectionA-col-3").shelves.spacings == expected
        assert column(editor, "sectionB-col-1").shelves.spacings == expected

        assert editor.edit_spacing("sectionB-col-1", 0, 37)
        assert column(editor, "sectionA-col-3").shelves.spacings[:2] == (37, 17)
        assert column(editor, "sectionB-col-1").shelves.spacings[:2] == (37, 17)

    def test_undo_restores_both_halves(self, editor: WardrobeEditor) -> None:
        editor.set_shelf_count("angle-ab", 3)
        editor.undo()
        assert column(editor, "sectionA-col-3").shelves is None
        assert column(editor, "sectionB-col-1").shelves is None

    def test_redistribute_shelves(self, editor: WardrobeEditor) -> None:
        editor.set_shelf_count("sectionA-col-1", 3)
        editor.edit_spacing("sectionA-col-1", 0, 30)
        assert editor.redistribute_shelves("sectionA-col-1")
        assert column(editor, "sectionA-col-1").shelves.spacings == (41, 41, 41, 40)

    def test_unknown_target(self, editor: WardrobeEditor) -> None:
        assert not editor.set_shelf_count("angle-ac", 2)
        assert not editor.set_shelf_count("missing", 2)

    def test_shelf_edit_targets(self, editor: WardrobeEditor) -> None:
        keys = [t.key for t in editor.shelf_edit_targets()]
        assert keys[-1] == "angle-ab"
        assert "sectionA-col-3" not in keys
