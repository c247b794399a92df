import pytest

from chatconf.service import ConfigTestRequest
from chatconf.settings.models import UserConfig
from chatconf.validation import API_KEY_REQUIRED, ConfigValidator, ValidationResult


@pytest.mark.parametrize("api_key", [None, "", "   ", "\t\n"])
def test_custom_config_requires_credential(api_key: str | None) -> None:
    result = ConfigValidator.validate_for_save(UserConfig(use_system_defaults=False, api_key=api_key))
    assert result == ValidationResult(False, API_KEY_REQUIRED)
    assert not result


@pytest.mark.parametrize("api_key", [None, "", "key"])
def test_system_defaults_always_accepted(api_key: str | None) -> None:
    result = ConfigValidator.validate_for_save(UserConfig(use_system_defaults=True, api_key=api_key))
    assert result.accepted is True
    assert result.reason is None


def test_custom_config_with_credential_accepted() -> None:
    result = ConfigValidator.validate_for_save(
        UserConfig(use_system_defaults=False, api_key="k", base_url=None, model=None)
    )
    assert result


@pytest.mark.parametrize(
    "api_key, expected",
    [(None, False), ("", False), ("  ", False), ("x", True), ("sk-ant-1234567890", True)],
)
def test_validate_for_test(api_key: str | None, expected: bool) -> None:
    assert ConfigValidator.validate_for_test(ConfigTestRequest(api_key=api_key)) is expected


def test_validate_for_test_ignores_endpoint_and_model() -> None:
    candidate = ConfigTestRequest(api_key="k", base_url="not a url", model="")
    assert ConfigValidator.validate_for_test(candidate) is True
