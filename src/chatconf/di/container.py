# src/chatconf/di/container.py
"""Explicit construction of the configuration object graph."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from chatconf.resolver import ConfigResolver
from chatconf.service import ConfigService
from chatconf.settings.paths import ConfigPaths
from chatconf.storage.store import SettingsStore
from chatconf.storage.system import SystemSettingsReader
from chatconf.validation import ConfigValidator


@dataclass
class Container:
    """Holds one instance of each component, wired together.

    Nothing here is process-global: build a container per application (or
    per test) and pass it, or its parts, to whoever needs them.
    """

    paths: ConfigPaths
    store: SettingsStore
    system_reader: SystemSettingsReader
    resolver: ConfigResolver
    service: ConfigService

    @classmethod
    def build(cls, paths: ConfigPaths) -> Container:
        """Create all components for the given locations.

        Args:
            paths: Where the user and system files live

        Returns:
            A fully wired container
        """
        store = SettingsStore(paths.user_config_file)
        system_reader = SystemSettingsReader(paths.system_settings_file)
        resolver = ConfigResolver(store, system_reader)
        service = ConfigService(store, system_reader, resolver, ConfigValidator())
        return cls(
            paths=paths,
            store=store,
            system_reader=system_reader,
            resolver=resolver,
            service=service,
        )

    @classmethod
    def from_env(
        cls,
        config_dir: Optional[Path] = None,
        system_settings_file: Optional[Path] = None,
    ) -> Container:
        """Build with paths from explicit values, the environment or defaults."""
        return cls.build(ConfigPaths.from_env(config_dir, system_settings_file))


# Example usage in application initialization
"""
container = Container.from_env()
effective = container.resolver.resolve_effective()
response = container.service.save_user_config({"useSystemDefaults": True})
"""
