"""Request/response contract used by settings screens and other front ends.

Every operation returns a response model rather than raising, mirroring the
HTTP handlers these calls back: failures come back as :class:`ErrorResponse`
with a 400 (bad request) or 500 (internal) status.
"""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping, Optional, TypeVar, Union

from pydantic import Field, ValidationError

from chatconf.masking import SecretMasker
from chatconf.resolver import ConfigResolver
from chatconf.settings.models import CamelModel, DisplayConfig, UserConfig
from chatconf.storage.store import SettingsStore
from chatconf.storage.system import SystemSettingsReader
from chatconf.validation import ConfigValidator

logger: Final = logging.getLogger(__name__)

M = TypeVar("M", bound=CamelModel)

INVALID_CONFIGURATION: Final = "Invalid API configuration"
MASKED_SYSTEM_KEY: Final = (
    "The masked system API key cannot be saved; enter an API key or use system defaults"
)


class SystemConfigResponse(CamelModel):
    """Summary of the system settings; the credential itself is never included."""

    has_system_config: bool
    base_url: Optional[str] = None
    model: Optional[str] = None


class ConfigTestRequest(CamelModel):
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: Optional[str] = None


class ConfigTestResponse(CamelModel):
    success: bool
    error: Optional[str] = None


class ErrorResponse(CamelModel):
    """Failure signal, distinct from "no configuration"."""

    error: str
    status: int = Field(500, ge=400, le=599)


UserConfigResponse = DisplayConfig


def _format_validation_error(err: ValidationError) -> str:
    parts = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e["loc"]) or "request"
        parts.append(f"{loc} - {e['msg']}")
    return "Invalid request: " + "; ".join(parts)


def _parse(model: type[M], payload: Union[M, Mapping[str, Any]]) -> M:
    if isinstance(payload, model):
        return payload
    return model.model_validate(payload)


class ConfigService:
    """Front-end facing operations over the store, reader and resolver."""

    def __init__(
        self,
        store: SettingsStore,
        system_reader: SystemSettingsReader,
        resolver: ConfigResolver,
        validator: Optional[ConfigValidator] = None,
    ) -> None:
        self.store = store
        self.system_reader = system_reader
        self.resolver = resolver
        self.validator = validator or ConfigValidator()

    def fetch_user_config(self) -> Union[UserConfigResponse, ErrorResponse]:
        """Return the user config with the credential masked.

        Without a user config this reports system defaults, showing the
        masked system credential and the system endpoint and model.
        """
        try:
            user = self.store.load()
            if user is None:
                return DisplayConfig.from_system(self.system_reader.load())
            return DisplayConfig.from_user(user)
        except Exception:
            logger.exception("Failed to get config")
            return ErrorResponse(error="Failed to get configuration")

    def fetch_system_config_summary(self) -> Union[SystemConfigResponse, ErrorResponse]:
        """Report whether the system settings provide a credential."""
        try:
            system = self.system_reader.load()
            return SystemConfigResponse(
                has_system_config=system.has_api_key,
                base_url=system.base_url,
                model=system.model,
            )
        except Exception:
            logger.exception("Failed to get system config")
            return ErrorResponse(error="Failed to get system configuration")

    def fetch_effective_config(self) -> DisplayConfig:
        """Return the configuration in effect, credential masked."""
        return DisplayConfig.from_effective(self.resolver.resolve_effective())

    def save_user_config(
        self, payload: Union[UserConfig, Mapping[str, Any]]
    ) -> Union[UserConfigResponse, ErrorResponse]:
        """Validate and persist a user config.

        A settings form may echo back the masked credential it was shown.
        The masked stored user key is replaced by the stored key. The masked
        system key is dropped under system defaults and rejected for a custom
        config, since saving it would override the real system key.

        Args:
            payload: UserConfig or its JSON-shaped mapping

        Returns:
            The saved config, masked, or an error. Nothing is written when
            the request is rejected.
        """
        try:
            config = _parse(UserConfig, payload)
        except ValidationError as err:
            return ErrorResponse(error=_format_validation_error(err), status=400)

        try:
            unmasked = self._resolve_masked_echo(config)
            if isinstance(unmasked, ErrorResponse):
                return unmasked
            config = unmasked

            verdict = self.validator.validate_for_save(config)
            if not verdict:
                logger.info("Rejected user config: %s", verdict.reason)
                return ErrorResponse(error=verdict.reason or "Invalid configuration", status=400)

            self.store.save(config)
        except Exception:
            logger.exception("Failed to save config")
            return ErrorResponse(error="Failed to save configuration")

        return DisplayConfig.from_user(config)

    def test_config(
        self, payload: Union[ConfigTestRequest, Mapping[str, Any]]
    ) -> ConfigTestResponse:
        """Check a candidate configuration without persisting it.

        Only structural checks are made; no request is sent to the endpoint.
        """
        try:
            candidate = _parse(ConfigTestRequest, payload)
        except ValidationError as err:
            return ConfigTestResponse(success=False, error=_format_validation_error(err))

        try:
            valid = self.validator.validate_for_test(candidate)
        except Exception:
            logger.exception("Failed to test config")
            return ConfigTestResponse(success=False, error="Failed to test configuration")

        return ConfigTestResponse(success=valid, error=None if valid else INVALID_CONFIGURATION)

    def _resolve_masked_echo(self, config: UserConfig) -> Union[UserConfig, ErrorResponse]:
        if not config.api_key:
            return config

        stored = self.store.load()
        if stored is not None and SecretMasker.is_mask_of(config.api_key, stored.api_key):
            logger.debug("Submitted API key is the masked stored key; keeping stored key")
            return config.model_copy(update={"api_key": stored.api_key})

        system = self.system_reader.load()
        if SecretMasker.is_mask_of(config.api_key, system.api_key):
            if config.use_system_defaults:
                logger.debug("Submitted API key is the masked system key; dropping it")
                return config.model_copy(update={"api_key": None})
            logger.info("Rejected user config: submitted API key is the masked system key")
            return ErrorResponse(error=MASKED_SYSTEM_KEY, status=400)

        return config
