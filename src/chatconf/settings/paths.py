"""Locations of the user config file and the external system settings file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from chatconf.constants import (
    CONFIG_DIR_ENV,
    SYSTEM_SETTINGS_ENV,
    SYSTEM_SETTINGS_PATH,
    USER_CONFIG_DIR_NAME,
    USER_CONFIG_FILE_NAME,
)

# Load environment variables from .env file(s)
load_dotenv()


@dataclass(frozen=True)
class ConfigPaths:
    """File and directory paths used by the configuration subsystem.

    ``config_dir`` and ``user_config_file`` belong to this package.
    ``system_settings_file`` belongs to another program and is only read.
    """

    config_dir: Path
    system_settings_file: Path

    @property
    def user_config_file(self) -> Path:
        return self.config_dir / USER_CONFIG_FILE_NAME

    @classmethod
    def from_home(cls, home: Path | None = None) -> ConfigPaths:
        """Create the default per-user paths.

        Args:
            home: Home directory (default: the current user's)
        """
        home = home or Path.home()
        return cls(
            config_dir=home / USER_CONFIG_DIR_NAME,
            system_settings_file=home / SYSTEM_SETTINGS_PATH,
        )

    @classmethod
    def from_env(
        cls,
        config_dir: Path | None = None,
        system_settings_file: Path | None = None,
    ) -> ConfigPaths:
        """Resolve paths from explicit values, then the environment, then defaults.

        Args:
            config_dir: Explicit config directory (e.g. from a CLI option)
            system_settings_file: Explicit system settings file

        Returns:
            Paths with ``~`` expanded
        """
        defaults = cls.from_home()

        if config_dir is None:
            env_dir = os.environ.get(CONFIG_DIR_ENV)
            config_dir = Path(env_dir) if env_dir else defaults.config_dir
        if system_settings_file is None:
            env_file = os.environ.get(SYSTEM_SETTINGS_ENV)
            system_settings_file = Path(env_file) if env_file else defaults.system_settings_file

        return cls(
            config_dir=config_dir.expanduser(),
            system_settings_file=system_settings_file.expanduser(),
        )
