"""Redact-or-passthrough helper for roles.

No hashing here; use RoleObfuscator when occurrences must stay linkable.
"""

from __future__ import annotations

from role_obfuscation.domain.exceptions import InvalidRoleError
from role_obfuscation.services.obfuscator import REDACTED


def anonymize(role: str, prevent_logging: bool) -> str:
    """Return ``[REDACTED]`` if ``prevent_logging`` is set, else ``role`` unchanged.

    Raises:
        InvalidRoleError: If role is None or not a str.
    """
    if not isinstance(role, str):
        raise InvalidRoleError(role)
    return REDACTED if prevent_logging else role
