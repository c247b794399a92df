import json
from pathlib import Path

import pytest

from chatconf.settings.models import SystemConfig
from chatconf.storage.results import Corrupt, Loaded, Missing
from chatconf.storage.system import SystemSettingsReader, extract_system_config


def test_missing_file_yields_empty_config(reader: SystemSettingsReader) -> None:
    assert isinstance(reader.read(), Missing)
    assert reader.load() == SystemConfig()


def test_reads_recognised_keys(reader: SystemSettingsReader, write_system_settings) -> None:
    write_system_settings(
        {
            "ANTHROPIC_API_KEY": "sys-key",
            "ANTHROPIC_BASE_URL": "https://proxy.example",
            "ANTHROPIC_MODEL": "model-a",
            "UNRELATED": "ignored",
        }
    )
    result = reader.read()
    assert isinstance(result, Loaded)
    assert result.value == SystemConfig(
        api_key="sys-key", base_url="https://proxy.example", model="model-a"
    )


def test_auth_token_wins_over_api_key(reader: SystemSettingsReader, write_system_settings) -> None:
    write_system_settings({"ANTHROPIC_AUTH_TOKEN": "token", "ANTHROPIC_API_KEY": "key"})
    assert reader.load().api_key == "token"


def test_empty_auth_token_falls_back_to_api_key(
    reader: SystemSettingsReader, write_system_settings
) -> None:
    write_system_settings({"ANTHROPIC_AUTH_TOKEN": "", "ANTHROPIC_API_KEY": "key"})
    assert reader.load().api_key == "key"


def test_model_precedence(reader: SystemSettingsReader, write_system_settings) -> None:
    write_system_settings(
        {"ANTHROPIC_MODEL": "primary", "ANTHROPIC_DEFAULT_SONNET_MODEL": "sonnet"}
    )
    assert reader.load().model == "primary"

    write_system_settings({"ANTHROPIC_DEFAULT_SONNET_MODEL": "sonnet"})
    assert reader.load().model == "sonnet"


@pytest.mark.parametrize(
    "content",
    ["{not json", "[1, 2, 3]", '"just a string"', "9" * 5000, "[" * 200000 + "]" * 200000],
    ids=["broken", "array", "string", "huge-int", "deep-nesting"],
)
def test_unusable_file_is_corrupt_and_degrades(
    reader: SystemSettingsReader, content: str
) -> None:
    reader.path.parent.mkdir(parents=True, exist_ok=True)
    reader.path.write_text(content, encoding="utf-8")

    result = reader.read()
    assert isinstance(result, Corrupt)
    assert result.details
    assert reader.load() == SystemConfig()


@pytest.mark.parametrize(
    "settings",
    [
        {},
        {"env": None},
        {"env": ["ANTHROPIC_API_KEY"]},
        {"env": {"ANTHROPIC_API_KEY": 12345, "ANTHROPIC_MODEL": None}},
    ],
)
def test_unexpected_shapes_yield_empty_fields(settings: dict) -> None:
    assert extract_system_config(settings) == SystemConfig()


def test_reader_never_writes(reader: SystemSettingsReader, write_system_settings) -> None:
    path: Path = write_system_settings({"ANTHROPIC_API_KEY": "sys-key"})
    before = path.read_bytes()
    reader.load()
    reader.load()
    assert path.read_bytes() == before
    assert json.loads(before)["env"]["ANTHROPIC_API_KEY"] == "sys-key"
