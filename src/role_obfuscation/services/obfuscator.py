"""Role obfuscation for log output.

A RoleObfuscator is configured once with the redact/anonymize switches and
then shared freely between threads: its only state is the resolved policy,
and every digest is computed with a fresh hash object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from role_obfuscation.domain.enums import ObfuscationPolicy
from role_obfuscation.domain.exceptions import HashAlgorithmUnavailableError, InvalidRoleError
from role_obfuscation.infrastructure.hashing import (
    HASH_ALGORITHM,
    ensure_hash_algorithm,
    stable_text_digest,
)
from role_obfuscation.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from role_obfuscation.config import RoleLoggingSettings

logger = get_logger(__name__)

REDACTED: Final[str] = "[REDACTED]"


class RoleObfuscator:
    """Render authentication roles for logging according to a fixed policy."""

    __slots__ = ("_anonymize_enabled", "_policy", "_redact_enabled")

    def __init__(self, redact_enabled: bool = False, anonymize_enabled: bool = False) -> None:
        """Resolve the policy and verify the hash primitive when it is needed.

        Args:
            redact_enabled: Replace roles with the redaction placeholder.
            anonymize_enabled: Replace roles with their digest. Ignored when
                redaction is enabled.

        Raises:
            HashAlgorithmUnavailableError: If anonymization is selected and the
                runtime lacks SHA-256.
        """
        self._redact_enabled = bool(redact_enabled)
        self._anonymize_enabled = bool(anonymize_enabled)
        self._policy = ObfuscationPolicy.from_flags(
            redact_enabled=self._redact_enabled,
            anonymize_enabled=self._anonymize_enabled,
        )

        if self._policy.requires_hashing:
            try:
                ensure_hash_algorithm(HASH_ALGORITHM)
            except HashAlgorithmUnavailableError:
                logger.error("Role hashing unavailable", algorithm=HASH_ALGORITHM)
                raise

        logger.debug(
            "Role obfuscator configured",
            policy=self._policy.value,
            redact_enabled=self._redact_enabled,
            anonymize_enabled=self._anonymize_enabled,
        )

    @classmethod
    def from_settings(cls, settings: RoleLoggingSettings) -> RoleObfuscator:
        """Build an obfuscator from role logging settings."""
        return cls(
            redact_enabled=settings.redacted_in_logging,
            anonymize_enabled=settings.anonymized_in_logging,
        )

    @property
    def policy(self) -> ObfuscationPolicy:
        return self._policy

    @property
    def redact_enabled(self) -> bool:
        return self._redact_enabled

    @property
    def anonymize_enabled(self) -> bool:
        return self._anonymize_enabled

    def obfuscate(self, role: str) -> str:
        """Return the log-safe form of ``role``.

        Args:
            role: Authentication role. The empty string is a valid role.

        Returns:
            ``[REDACTED]``, the Base64 SHA-256 digest of the role's UTF-8
            bytes, or the role itself, depending on the policy.

        Raises:
            InvalidRoleError: If role is None or not a str.
        """
        if not isinstance(role, str):
            raise InvalidRoleError(role)

        if self._policy is ObfuscationPolicy.REDACT:
            return REDACTED
        if self._policy is ObfuscationPolicy.ANONYMIZE:
            return stable_text_digest(role)
        return role

    def __repr__(self) -> str:
        return f"{type(self).__name__}(policy={self._policy.value!r})"
