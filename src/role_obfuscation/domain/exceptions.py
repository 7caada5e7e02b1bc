"""Domain-specific exceptions for role obfuscation.

This module defines a hierarchical exception system:

    ObfuscationError (base)
    ├── ConfigurationError
    │   └── HashAlgorithmUnavailableError
    └── InvalidRoleError
"""

from __future__ import annotations


class ObfuscationError(Exception):
    """Base class for role obfuscation errors.

    All library exceptions inherit from this class to allow catching
    them with a single except clause.
    """


class ConfigurationError(ObfuscationError):
    """Raised when the obfuscator cannot be configured.

    These errors surface at startup, never while obfuscating a value.
    """


class HashAlgorithmUnavailableError(ConfigurationError):
    """Raised when the runtime lacks the hash algorithm used for anonymization."""

    def __init__(self, algorithm: str) -> None:
        """Initialize with the missing algorithm name.

        Args:
            algorithm: hashlib name of the unavailable algorithm.
        """
        self.algorithm = algorithm
        super().__init__(f"{algorithm} algorithm not found")


class InvalidRoleError(ObfuscationError, TypeError):
    """Raised when a role is missing or is not text."""

    def __init__(self, role: object) -> None:
        self.role_type = type(role).__name__
        super().__init__(f"Role must be a str, got {self.role_type}")
