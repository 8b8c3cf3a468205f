"""Application layer - configuration store, editing and configuration files."""

from .editor import WardrobeEditor
from .scripts import EditOutcome, apply_edit, run_edit_script
from .store import DEBOUNCE_SECONDS, MAX_HISTORY, ConfigurationStore

__all__ = [
    "DEBOUNCE_SECONDS",
    "MAX_HISTORY",
    "ConfigurationStore",
    "EditOutcome",
    "WardrobeEditor",
    "apply_edit",
    "run_edit_script",
]
