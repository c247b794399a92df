"""Configuration resolution and persistence for an API-backed chat client."""

__version__ = "0.1.0"

from .di import Container
from .errors import ConfigError, ConfigSaveError
from .masking import SecretMasker
from .resolver import ConfigResolver
from .service import ConfigService
from .settings import ConfigPaths, DisplayConfig, EffectiveConfig, SystemConfig, UserConfig
from .storage import SettingsStore, SystemSettingsReader
from .validation import ConfigValidator, ValidationResult

__all__ = [
    "ConfigError",
    "ConfigPaths",
    "ConfigResolver",
    "ConfigSaveError",
    "ConfigService",
    "ConfigValidator",
    "Container",
    "DisplayConfig",
    "EffectiveConfig",
    "SecretMasker",
    "SettingsStore",
    "SystemConfig",
    "SystemSettingsReader",
    "UserConfig",
    "ValidationResult",
]
