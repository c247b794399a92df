"""Exception classes for configuration persistence.

Only the write path raises. Reading either configuration source degrades to
"no configuration" instead, see ``chatconf.storage.results``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """Base class for configuration errors."""


class ConfigSaveError(ConfigError):
    """Raised when the user configuration could not be persisted.

    The canonical file is left untouched: either the previous content is still
    in place or, if there never was one, no file exists.
    """

    def __init__(
        self, path: Path, message: str, original_error: Optional[OSError] = None
    ) -> None:
        """Initialize with the failing path and underlying error.

        Args:
            path: Canonical config file that was being written
            message: Human-readable error message
            original_error: The OS error that caused the failure
        """
        super().__init__(f"{message}: {path}")
        self.path = path
        self.message = message
        self.original_error = original_error
