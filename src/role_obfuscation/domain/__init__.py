"""Domain types for role obfuscation.

Pure Python objects with no external dependencies.

Modules:
    enums: ObfuscationPolicy
    exceptions: Library exception hierarchy

Example:
    >>> from role_obfuscation.domain import ObfuscationPolicy
    >>> ObfuscationPolicy.from_flags(redact_enabled=True, anonymize_enabled=True)
    <ObfuscationPolicy.REDACT: 'redact'>
"""

from role_obfuscation.domain.enums import ObfuscationPolicy
from role_obfuscation.domain.exceptions import (
    ConfigurationError,
    HashAlgorithmUnavailableError,
    InvalidRoleError,
    ObfuscationError,
)

__all__ = [
    "ConfigurationError",
    "HashAlgorithmUnavailableError",
    "InvalidRoleError",
    "ObfuscationError",
    "ObfuscationPolicy",
]
