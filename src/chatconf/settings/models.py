"""Configuration models shared by the store, the reader and the resolver."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from chatconf.masking import SecretMasker


class CamelModel(BaseModel):
    """Base model that speaks camelCase JSON and snake_case Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, object]:
        """Serialize with JSON field names, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UserConfig(CamelModel):
    """User preferences persisted by :class:`~chatconf.storage.SettingsStore`.

    When ``use_system_defaults`` is set the other fields are kept for the
    settings form but never take part in resolution.
    """

    use_system_defaults: bool = Field(
        False, description="Defer to the system settings file instead of the fields below"
    )
    api_key: str | None = Field(None, description="API key or auth token")
    base_url: str | None = Field(None, description="API endpoint")
    model: str | None = Field(None, description="Model identifier")


class SystemConfig(CamelModel):
    """Read-only view of the externally owned settings file."""

    api_key: str | None = None
    base_url: str | None = None
    model: str | None = None

    @property
    def has_api_key(self) -> bool:
        """Whether the system settings provide a credential."""
        return bool(self.api_key)


class EffectiveConfig(CamelModel):
    """The configuration actually used to talk to the API.

    ``base_url`` and ``model`` are never empty. An empty ``api_key`` means no
    credential is configured anywhere.
    """

    api_key: str = ""
    base_url: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)


class DisplayConfig(CamelModel):
    """Display-safe projection of a configuration; the credential is masked."""

    use_system_defaults: bool | None = None
    api_key: str | None = None
    base_url: str | None = None
    model: str | None = None

    @classmethod
    def from_user(cls, config: UserConfig) -> DisplayConfig:
        return cls(
            use_system_defaults=config.use_system_defaults,
            api_key=SecretMasker.mask(config.api_key),
            base_url=config.base_url,
            model=config.model,
        )

    @classmethod
    def from_system(cls, config: SystemConfig) -> DisplayConfig:
        """Project the system view as if the user had chosen system defaults."""
        return cls(
            use_system_defaults=True,
            api_key=SecretMasker.mask(config.api_key),
            base_url=config.base_url,
            model=config.model,
        )

    @classmethod
    def from_effective(cls, config: EffectiveConfig) -> DisplayConfig:
        return cls(
            api_key=SecretMasker.mask(config.api_key),
            base_url=config.base_url,
            model=config.model,
        )
