"""One-way redaction of secrets for display."""

from __future__ import annotations

from typing import Optional

from chatconf.constants import (
    MASK_MIN_LENGTH,
    MASK_PLACEHOLDER,
    MASK_PREFIX_CHARS,
    MASK_SEPARATOR,
    MASK_SUFFIX_CHARS,
)


class SecretMasker:
    """Produces display-safe forms of credentials.

    The output can never be turned back into the secret: short secrets are
    replaced entirely by a fixed placeholder that does not reveal their
    length, longer ones keep only a short prefix and suffix.
    """

    @staticmethod
    def mask(secret: Optional[str]) -> Optional[str]:
        """Mask a secret for display.

        Args:
            secret: Secret to mask; ``None`` or empty means no secret

        Returns:
            ``None`` for no secret, ``"***"`` for secrets of at most 10
            characters, otherwise the first 7 and last 3 characters joined
            by ``"..."``
        """
        if not secret:
            return None
        if len(secret) <= MASK_MIN_LENGTH:
            return MASK_PLACEHOLDER
        return f"{secret[:MASK_PREFIX_CHARS]}{MASK_SEPARATOR}{secret[-MASK_SUFFIX_CHARS:]}"

    @staticmethod
    def is_mask_of(candidate: Optional[str], secret: Optional[str]) -> bool:
        """Check whether ``candidate`` is exactly what :meth:`mask` shows for ``secret``.

        Used to recognise a masked value echoed back by a display surface.
        """
        if not candidate or not secret:
            return False
        return candidate == SecretMasker.mask(secret)
