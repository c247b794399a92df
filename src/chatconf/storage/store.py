"""Persistence of the user configuration file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Final, Optional

from pydantic import ValidationError

from chatconf.constants import CONFIG_DIR_MODE, CONFIG_FILE_MODE
from chatconf.errors import ConfigSaveError
from chatconf.settings.models import UserConfig
from chatconf.storage.results import Corrupt, Loaded, LoadResult, Missing, value_or_none
from chatconf.utils.file import atomic_write_text, ensure_directory_exists, remove_file

logger: Final = logging.getLogger(__name__)


class SettingsStore:
    """Reads and writes the user configuration as a JSON document.

    Writes are atomic: the new document is written to a temporary sibling and
    renamed over the canonical file, so a reader sees either the previous
    content or the new one. The directory and file are restricted to the
    owning user because the document may hold a credential.

    Concurrent saves are not serialized; the last rename wins.
    """

    def __init__(
        self,
        path: Path,
        dir_mode: int = CONFIG_DIR_MODE,
        file_mode: int = CONFIG_FILE_MODE,
    ) -> None:
        """Initialize the store.

        Args:
            path: Canonical location of the user config file
            dir_mode: Permissions for a newly created parent directory
            file_mode: Permissions for the config file
        """
        self._path = path
        self._dir_mode = dir_mode
        self._file_mode = file_mode

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read(self) -> LoadResult[UserConfig]:
        """Read the config file without collapsing failures.

        Returns:
            Loaded, Missing or Corrupt
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No user config found at %s", self._path)
            return Missing(self._path)
        except (OSError, UnicodeDecodeError) as exc:
            return self._corrupt(f"unable to read file: {exc}")

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            return self._corrupt(f"invalid JSON: {exc}")

        if not isinstance(data, dict):
            return self._corrupt(f"expected a JSON object, got {type(data).__name__}")

        try:
            config = UserConfig.model_validate(data)
        except ValidationError as err:
            return self._corrupt(f"invalid configuration:\n{err}")

        logger.info("Loaded user config from %s", self._path)
        return Loaded(self._path, config)

    def load(self) -> Optional[UserConfig]:
        """Load the user config.

        Returns:
            The config, or None if the file is missing or corrupt
        """
        return value_or_none(self.read())

    def save(self, config: UserConfig) -> None:
        """Persist ``config``, replacing any previous content.

        Args:
            config: Configuration to write

        Raises:
            ConfigSaveError: If the directory, file or rename could not be
                written. The previous file, if any, is still in place.
        """
        content = json.dumps(config.to_payload(), indent=2) + "\n"
        try:
            ensure_directory_exists(self._path.parent, self._dir_mode)
            atomic_write_text(self._path, content, self._file_mode)
        except OSError as exc:
            raise ConfigSaveError(self._path, "Failed to save user config", exc) from exc

        logger.info("Saved user config to %s", self._path)

    def clear(self) -> bool:
        """Delete the user config file, returning to "no user config".

        Returns:
            True if a file was removed

        Raises:
            ConfigSaveError: If the file exists but could not be removed
        """
        try:
            removed = remove_file(self._path)
        except OSError as exc:
            logger.exception("Failed to remove user config %s", self._path)
            raise ConfigSaveError(self._path, "Failed to remove user config", exc) from exc

        if removed:
            logger.info("Removed user config %s", self._path)
        return removed

    def _corrupt(self, details: str) -> Corrupt:
        logger.warning("Failed to read user config %s: %s", self._path, details)
        return Corrupt(self._path, details)
