"""Role Obfuscation: keep authentication roles out of logs."""

from importlib.metadata import PackageNotFoundError, version

from role_obfuscation.services import REDACTED, RoleObfuscator, anonymize

try:
    __version__ = version("role-obfuscation")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
__all__ = ["REDACTED", "RoleObfuscator", "__version__", "anonymize"]
