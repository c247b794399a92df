"""Structural checks on proposed configurations.

Nothing here contacts the API; a configuration that passes may still be
rejected by the server.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from chatconf.settings.models import UserConfig

API_KEY_REQUIRED: str = "API key is required"


class Candidate(Protocol):
    """A configuration offered for testing, e.g. ``ConfigTestRequest``."""

    @property
    def api_key(self) -> Optional[str]: ...

    @property
    def base_url(self) -> Optional[str]: ...

    @property
    def model(self) -> Optional[str]: ...


def has_credential(api_key: Optional[str]) -> bool:
    """Whether ``api_key`` is a non-blank string."""
    return bool(api_key and api_key.strip())


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation; ``reason`` is set when rejected."""

    accepted: bool
    reason: Optional[str] = None

    @classmethod
    def accept(cls) -> ValidationResult:
        return cls(True)

    @classmethod
    def reject(cls, reason: str) -> ValidationResult:
        return cls(False, reason)

    def __bool__(self) -> bool:
        return self.accepted


class ConfigValidator:
    """Acceptance checks for saving and testing configurations."""

    @staticmethod
    def validate_for_save(proposed: UserConfig) -> ValidationResult:
        """Check a configuration before it is persisted.

        A user opting out of system defaults must supply a credential.

        Args:
            proposed: Configuration about to be saved

        Returns:
            Accepted, or rejected with a human-readable reason
        """
        if not proposed.use_system_defaults and not has_credential(proposed.api_key):
            return ValidationResult.reject(API_KEY_REQUIRED)
        return ValidationResult.accept()

    @staticmethod
    def validate_for_test(candidate: Candidate) -> bool:
        """Check whether a candidate configuration is worth trying.

        Only the credential is checked today; endpoint and model are carried
        along for connectivity checks.

        Args:
            candidate: Configuration to check

        Returns:
            True if a non-blank credential is present
        """
        return has_credential(candidate.api_key)
