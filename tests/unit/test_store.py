"""Unit tests for ConfigurationStore."""

import pytest

from wardrobes.application import ConfigurationStore
from wardrobes.domain import SectionKey, WardrobeConfiguration
from wardrobes.domain.services import add_column, change_section_width, set_column_count


class FakeClock:
    """Manually advanced time source."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(linear_config: WardrobeConfiguration, clock: FakeClock) -> ConfigurationStore:
    return ConfigurationStore(linear_config, clock=clock)


def widths(config: WardrobeConfiguration) -> list[float]:
    return [c.width for c in config.sections[SectionKey.A].columns]


class TestCommit:
    """Tests for commit and undo."""

    def test_commit_and_undo(
        self, store: ConfigurationStore, linear_config: WardrobeConfiguration
    ) -> None:
        edited = add_column(linear_config, SectionKey.A)
        assert store.commit(edited)
        assert store.configuration is edited
        assert store.can_undo

        assert store.undo()
        assert store.configuration == linear_config
        assert not store.can_undo

    def test_undo_restores_a_copy(
        self, store: ConfigurationStore, linear_config: WardrobeConfiguration
    ) -> None:
        """Snapshots are deep copies, equal but not shared."""
        store.commit(add_column(linear_config, SectionKey.A))
        store.undo()
        assert store.configuration == linear_config
        assert store.configuration is not linear_config

    def test_committing_same_object_is_noop(
        self, store: ConfigurationStore, linear_config: WardrobeConfiguration
    ) -> None:
        assert not store.commit(linear_config)
        assert store.history_size == 0

    def test_untracked_commit(
        self, store: ConfigurationStore, linear_config: WardrobeConfiguration
    ) -> None:
        store.commit(add_column(linear_config, SectionKey.A), track_history=False)
        assert store.history_size == 0

    def test_undo_with_empty_history(self, store: ConfigurationStore) -> None:
        assert not store.undo()

    def test_history_capacity(self, linear_config: WardrobeConfiguration) -> None:
        """The oldest snapshot is evicted once the history is full."""
        store = ConfigurationStore(linear_config, history_capacity=3)
        for count in (2, 4, 5, 6, 3):
            store.commit(set_column_count(store.configuration, SectionKey.A, count))
        assert store.history_size == 3

        while store.undo():
            pass
        assert len(widths(store.configuration)) == 4

    def test_invalid_capacity(self, linear_config: WardrobeConfiguration) -> None:
        with pytest.raises(ValueError):
            ConfigurationStore(linear_config, history_capacity=0)

    def test_clear_history(
        self, store: ConfigurationStore, linear_config: WardrobeConfiguration
    ) -> None:
        store.commit(add_column(linear_config, SectionKey.A))
        store.clear_history()
        assert not store.can_undo


class TestCommitDebounced:
    """Tests for commit_debounced."""

    def test_burst_is_one_undo_step(
        self,
        store: ConfigurationStore,
        clock: FakeClock,
        linear_config: WardrobeConfiguration,
    ) -> None:
        for width in (210, 220, 230):
            clock.now += 0.1
            config = change_section_width(store.configuration, SectionKey.A, width)
            store.commit_debounced(config, "section-width:A")

        assert store.history_size == 1
        store.undo()
        assert store.configuration == linear_config

    def test_pause_starts_a_new_step(
        self, store: ConfigurationStore, clock: FakeClock
    ) -> None:
        first = change_section_width(store.configuration, SectionKey.A, 210)
        store.commit_debounced(first, "section-width:A")
        clock.now += 1.0
        second = change_section_width(store.configuration, SectionKey.A, 220)
        store.commit_debounced(second, "section-width:A")

        assert store.history_size == 2
        store.undo()
        assert store.configuration == first

    def test_different_key_starts_a_new_step(
        self, store: ConfigurationStore, clock: FakeClock
    ) -> None:
        store.commit_debounced(
            change_section_width(store.configuration, SectionKey.A, 210), "section-width:A"
        )
        clock.now += 0.1
        store.commit_debounced(
            change_section_width(store.configuration, SectionKey.A, 220), "other"
        )
        assert store.history_size == 2

    def test_undo_ends_the_burst(
        self, store: ConfigurationStore, clock: FakeClock
    ) -> None:
        store.commit_debounced(
            change_section_width(store.configuration, SectionKey.A, 210), "section-width:A"
        )
        store.undo()
        clock.now += 0.1
        store.commit_debounced(
            change_section_width(store.configuration, SectionKey.A, 220), "section-width:A"
        )
        assert store.history_size == 1

    def test_rejected_edit_is_noop(
        self, store: ConfigurationStore, linear_config: WardrobeConfiguration
    ) -> None:
        assert not store.commit_debounced(linear_config, "section-width:A")
        assert store.history_size == 0


class TestListeners:
    """Tests for subscribe."""

    def test_listener_receives_new_configuration(
        self, store: ConfigurationStore, linear_config: WardrobeConfiguration
    ) -> None:
        received: list[WardrobeConfiguration] = []
        store.subscribe(received.append)
        edited = add_column(linear_config, SectionKey.A)
        store.commit(edited)
        store.undo()
        assert received[0] is edited
        assert received[1] == linear_config

    def test_unsubscribe(
        self, store: ConfigurationStore, linear_config: WardrobeConfiguration
    ) -> None:
        received: list[WardrobeConfiguration] = []
        unsubscribe = store.subscribe(received.append)
        unsubscribe()
        store.commit(add_column(linear_config, SectionKey.A))
        assert received == []
