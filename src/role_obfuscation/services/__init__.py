"""Role obfuscation services.

Public API:
- RoleObfuscator: Redact, anonymize, or pass through roles per a fixed policy
- anonymize: Redact-or-passthrough helper
- REDACTED: Placeholder written in place of redacted roles
"""

from role_obfuscation.services.obfuscator import REDACTED, RoleObfuscator
from role_obfuscation.services.redaction import anonymize

__all__ = [
    "REDACTED",
    "RoleObfuscator",
    "anonymize",
]
