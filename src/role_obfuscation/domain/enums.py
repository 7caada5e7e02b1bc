"""Domain enumerations for role obfuscation."""

from __future__ import annotations

from enum import StrEnum


class ObfuscationPolicy(StrEnum):
    """How a role is rendered before it reaches a log line.

    Precedence when resolving from flags is fixed: REDACT beats ANONYMIZE,
    which beats IDENTITY.
    """

    IDENTITY = "identity"
    """Role is written unchanged."""

    ANONYMIZE = "anonymize"
    """Role is replaced by a deterministic SHA-256 digest (Base64)."""

    REDACT = "redact"
    """Role is replaced by a fixed placeholder."""

    @classmethod
    def from_flags(cls, *, redact_enabled: bool, anonymize_enabled: bool) -> ObfuscationPolicy:
        """Resolve the two logging switches into a single policy.

        Args:
            redact_enabled: Redact roles in logging.
            anonymize_enabled: Anonymize (hash) roles in logging.

        Returns:
            REDACT if redaction is enabled (even when anonymization is too),
            ANONYMIZE if only anonymization is enabled, IDENTITY otherwise.
        """
        if redact_enabled:
            return cls.REDACT
        if anonymize_enabled:
            return cls.ANONYMIZE
        return cls.IDENTITY

    @property
    def requires_hashing(self) -> bool:
        """Whether this policy needs the hash primitive."""
        return self is ObfuscationPolicy.ANONYMIZE
