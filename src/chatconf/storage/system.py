"""Read-only access to the externally owned system settings file."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final, Optional, cast

from typing_extensions import TypedDict

from chatconf.constants import SYSTEM_API_KEY_KEYS, SYSTEM_BASE_URL_KEYS, SYSTEM_MODEL_KEYS
from chatconf.settings.models import SystemConfig
from chatconf.storage.results import Corrupt, Loaded, LoadResult, Missing

logger: Final = logging.getLogger(__name__)


class SystemSettingsEnv(TypedDict, total=False):
    """The part of the settings file's ``env`` block this reader understands."""

    ANTHROPIC_AUTH_TOKEN: str
    ANTHROPIC_API_KEY: str
    ANTHROPIC_BASE_URL: str
    ANTHROPIC_MODEL: str
    ANTHROPIC_DEFAULT_SONNET_MODEL: str


def _first_value(env: SystemSettingsEnv, keys: tuple[str, ...]) -> Optional[str]:
    """Return the first non-empty string among ``keys``."""
    for key in keys:
        value: Any = env.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def extract_system_config(settings: Mapping[str, Any]) -> SystemConfig:
    """Pick the recognised keys out of a parsed settings document.

    Args:
        settings: Top-level settings object

    Returns:
        SystemConfig with any field the document does not provide left as None
    """
    raw_env = settings.get("env")
    env = cast(SystemSettingsEnv, raw_env if isinstance(raw_env, Mapping) else {})

    return SystemConfig(
        api_key=_first_value(env, SYSTEM_API_KEY_KEYS),
        base_url=_first_value(env, SYSTEM_BASE_URL_KEYS),
        model=_first_value(env, SYSTEM_MODEL_KEYS),
    )


class SystemSettingsReader:
    """Reads credentials, endpoint and model from another program's settings.

    The file is never written. Whatever shape it has, reading degrades to an
    empty :class:`SystemConfig` rather than raising.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> LoadResult[SystemConfig]:
        """Read the settings file without collapsing failures."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("No system config found at %s", self._path)
            return Missing(self._path)
        except (OSError, UnicodeDecodeError) as exc:
            return self._corrupt(f"unable to read file: {exc}")

        try:
            settings = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            return self._corrupt(f"invalid JSON: {exc}")

        if not isinstance(settings, dict):
            return self._corrupt(f"expected a JSON object, got {type(settings).__name__}")

        config = extract_system_config(settings)
        logger.info("Loaded system config from %s", self._path)
        return Loaded(self._path, config)

    def load(self) -> SystemConfig:
        """Load the system config.

        Returns:
            The extracted config; empty if the file is missing or unusable
        """
        result = self.read()
        if isinstance(result, Loaded):
            return result.value
        return SystemConfig()

    def _corrupt(self, details: str) -> Corrupt:
        logger.warning("Failed to read system config %s: %s", self._path, details)
        return Corrupt(self._path, details)
