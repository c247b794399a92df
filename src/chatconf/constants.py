from pathlib import Path
from typing import Final

# Built-in fallbacks used when neither the user nor the system supplies a value
DEFAULT_BASE_URL: Final = "https://api.anthropic.com"
DEFAULT_MODEL: Final = "claude-sonnet-4-20250514"

# Default on-disk locations
USER_CONFIG_DIR_NAME: Final = ".claude-webui"
USER_CONFIG_FILE_NAME: Final = "config.json"
SYSTEM_SETTINGS_PATH: Final = Path(".claude") / "settings.json"

# Owner-only permissions for the user config directory and file
CONFIG_DIR_MODE: Final = 0o700
CONFIG_FILE_MODE: Final = 0o600

# Environment overrides for the locations above
CONFIG_DIR_ENV: Final = "CHATCONF_CONFIG_DIR"
SYSTEM_SETTINGS_ENV: Final = "CHATCONF_SYSTEM_SETTINGS"

# Keys read from the "env" block of the system settings file, in priority order
SYSTEM_API_KEY_KEYS: Final = ("ANTHROPIC_AUTH_TOKEN", "ANTHROPIC_API_KEY")
SYSTEM_BASE_URL_KEYS: Final = ("ANTHROPIC_BASE_URL",)
SYSTEM_MODEL_KEYS: Final = ("ANTHROPIC_MODEL", "ANTHROPIC_DEFAULT_SONNET_MODEL")

# Secret masking
MASK_PLACEHOLDER: Final = "***"
MASK_SEPARATOR: Final = "..."
MASK_MIN_LENGTH: Final = 10  # secrets this short or shorter are fully hidden
MASK_PREFIX_CHARS: Final = 7
MASK_SUFFIX_CHARS: Final = 3
