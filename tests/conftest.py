import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from chatconf.di.container import Container
from chatconf.resolver import ConfigResolver
from chatconf.service import ConfigService
from chatconf.settings.paths import ConfigPaths
from chatconf.storage.store import SettingsStore
from chatconf.storage.system import SystemSettingsReader

SystemWriter = Callable[[dict[str, Any]], Path]


@pytest.fixture
def paths(tmp_path: Path) -> ConfigPaths:
    return ConfigPaths(
        config_dir=tmp_path / "home" / ".claude-webui",
        system_settings_file=tmp_path / "home" / ".claude" / "settings.json",
    )


@pytest.fixture
def write_system_settings(paths: ConfigPaths) -> SystemWriter:
    """Write the external settings file with the given ``env`` block."""

    def _write(env: dict[str, Any]) -> Path:
        target = paths.system_settings_file
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps({"env": env}), encoding="utf-8")
        return target

    return _write


@pytest.fixture
def store(paths: ConfigPaths) -> SettingsStore:
    return SettingsStore(paths.user_config_file)


@pytest.fixture
def reader(paths: ConfigPaths) -> SystemSettingsReader:
    return SystemSettingsReader(paths.system_settings_file)


@pytest.fixture
def resolver(store: SettingsStore, reader: SystemSettingsReader) -> ConfigResolver:
    return ConfigResolver(store, reader)


@pytest.fixture
def container(paths: ConfigPaths) -> Container:
    return Container.build(paths)


@pytest.fixture
def service(container: Container) -> ConfigService:
    return container.service
