"""Configuration models and locations.

This package provides:
- UserConfig, SystemConfig, EffectiveConfig, DisplayConfig: the data model
- ConfigPaths: where the user and system files live
"""

from chatconf.settings.models import (
    CamelModel,
    DisplayConfig,
    EffectiveConfig,
    SystemConfig,
    UserConfig,
)
from chatconf.settings.paths import ConfigPaths

__all__ = [
    "CamelModel",
    "ConfigPaths",
    "DisplayConfig",
    "EffectiveConfig",
    "SystemConfig",
    "UserConfig",
]
