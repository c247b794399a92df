"""Merge user config, system config and built-in defaults."""

from __future__ import annotations

import logging
from typing import Final, Optional, Protocol

from chatconf.constants import DEFAULT_BASE_URL, DEFAULT_MODEL
from chatconf.settings.models import EffectiveConfig, SystemConfig, UserConfig

logger: Final = logging.getLogger(__name__)


class UserConfigSource(Protocol):
    """Anything that can load the user config (e.g. ``SettingsStore``)."""

    def load(self) -> Optional[UserConfig]: ...


class SystemConfigSource(Protocol):
    """Anything that can load the system config (e.g. ``SystemSettingsReader``)."""

    def load(self) -> SystemConfig: ...


class ConfigResolver:
    """Computes the effective configuration on demand.

    Both sources are read on every call, so edits to either file are picked
    up immediately. Precedence:

    - No user config, or the user chose system defaults: every field comes
      from the system config, then the built-in default (empty credential).
    - Custom user config: the credential comes from the user, then the
      system, then empty. Endpoint and model come from the user, then the
      built-in default; system values are not consulted for them.
    """

    def __init__(
        self,
        user_source: UserConfigSource,
        system_source: SystemConfigSource,
        default_base_url: str = DEFAULT_BASE_URL,
        default_model: str = DEFAULT_MODEL,
    ) -> None:
        """Initialize the resolver.

        Args:
            user_source: Source of the user config
            system_source: Source of the system config
            default_base_url: Endpoint used when nothing else provides one
            default_model: Model used when nothing else provides one
        """
        if not default_base_url or not default_model:
            raise ValueError("Built-in base URL and model defaults must be non-empty")
        self.user_source = user_source
        self.system_source = system_source
        self.default_base_url = default_base_url
        self.default_model = default_model

    def resolve_effective(self) -> EffectiveConfig:
        """Resolve the configuration currently in effect.

        Returns:
            EffectiveConfig with non-empty base URL and model
        """
        user = self.user_source.load()
        system = self.system_source.load()
        return self.merge(user, system)

    def merge(self, user: Optional[UserConfig], system: SystemConfig) -> EffectiveConfig:
        """Apply precedence to already-loaded sources."""
        if user is None or user.use_system_defaults:
            logger.debug("Resolving from system config")
            return EffectiveConfig(
                api_key=system.api_key or "",
                base_url=system.base_url or self.default_base_url,
                model=system.model or self.default_model,
            )

        logger.debug("Resolving from custom user config")
        return EffectiveConfig(
            api_key=user.api_key or system.api_key or "",
            base_url=user.base_url or self.default_base_url,
            model=user.model or self.default_model,
        )
