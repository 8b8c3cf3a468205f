"""Configuration store with undo history.

The store is the single owner of the live ``WardrobeConfiguration``. Every
tracked commit pushes a deep copy of the previous snapshot onto a bounded
history; the oldest snapshot is evicted once the history is full.

Continuous edits (dragging a width, typing a spacing) go through
``commit_debounced``: edits that share a coalescing key and arrive within
the quiet period form one burst, and only the snapshot taken before the
burst is pushed. One undo therefore reverts the whole burst.
"""

from __future__ import annotations

import copy
import logging
import time
from collections import deque
from typing import Callable

from wardrobes.domain import WardrobeConfiguration

logger = logging.getLogger(__name__)

MAX_HISTORY = 100
DEBOUNCE_SECONDS = 0.5

Listener = Callable[[WardrobeConfiguration], None]


class ConfigurationStore:
    """Owner of the current configuration and its undo history.

    Args:
        configuration: Initial configuration.
        history_capacity: Maximum number of undo snapshots.
        debounce_seconds: Quiet period that ends a burst of debounced edits.
        clock: Monotonic time source, in seconds.

    Example:
        >>> store = ConfigurationStore(config)
        >>> store.commit(edited)
        >>> store.undo()
        True
    """

    def __init__(
        self,
        configuration: WardrobeConfiguration,
        history_capacity: int = MAX_HISTORY,
        debounce_seconds: float = DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if history_capacity < 1:
            raise ValueError("history_capacity must be at least 1")
        self._configuration = configuration
        self._history: deque[WardrobeConfiguration] = deque(maxlen=history_capacity)
        self._debounce_seconds = debounce_seconds
        self._clock = clock
        self._burst_key: str | None = None
        self._burst_time = 0.0
        self._listeners: list[Listener] = []

    @property
    def configuration(self) -> WardrobeConfiguration:
        return self._configuration

    @property
    def history_size(self) -> int:
        return len(self._history)

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with every new configuration.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def commit(
        self, configuration: WardrobeConfiguration, track_history: bool = True
    ) -> bool:
        """Replace the current configuration.

        Committing the current object itself is a no-op.

        Returns:
            True if the configuration changed.
        """
        if configuration is self._configuration:
            return False

        self._end_burst()
        if track_history:
            self._push_history()
        self._set(configuration)
        return True

    def commit_debounced(self, configuration: WardrobeConfiguration, key: str) -> bool:
        """Replace the current configuration, coalescing rapid edits.

        Args:
            configuration: New configuration.
            key: Coalescing key identifying the logical edit, e.g.
                ``width:sectionA-col-1``.

        Returns:
            True if the configuration changed.
        """
        if configuration is self._configuration:
            return False

        now = self._clock()
        in_burst = (
            self._burst_key == key and now - self._burst_time <= self._debounce_seconds
        )
        if not in_burst:
            self._push_history()
        else:
            logger.debug(f"Coalescing '{key}' into the current history entry")

        self._burst_key = key
        self._burst_time = now
        self._set(configuration)
        return True

    def undo(self) -> bool:
        """Restore the most recent snapshot.

        Returns:
            False if there is nothing to undo.
        """
        self._end_burst()
        if not self._history:
            return False
        self._set(self._history.pop())
        return True

    def clear_history(self) -> None:
        self._end_burst()
        self._history.clear()

    def _push_history(self) -> None:
        if len(self._history) == self._history.maxlen:
            logger.debug("Undo history full; dropping the oldest snapshot")
        self._history.append(copy.deepcopy(self._configuration))

    def _end_burst(self) -> None:
        self._burst_key = None

    def _set(self, configuration: WardrobeConfiguration) -> None:
        self._configuration = configuration
        for listener in list(self._listeners):
            listener(configuration)
