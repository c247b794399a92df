"""Storage package - the user config store and the system settings reader."""

from .results import Corrupt, Loaded, LoadResult, Missing, value_or_none
from .store import SettingsStore
from .system import SystemSettingsReader, extract_system_config

__all__ = [
    "Corrupt",
    "LoadResult",
    "Loaded",
    "Missing",
    "SettingsStore",
    "SystemSettingsReader",
    "extract_system_config",
    "value_or_none",
]
