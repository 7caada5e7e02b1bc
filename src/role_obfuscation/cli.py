"""CLI entry point for role obfuscation.

Prints the log-safe form of each role, one per line. Switches that are not
given on the command line fall back to the AUTHENTICATION_ROLE_* settings.
"""

from __future__ import annotations

import argparse
import sys

import role_obfuscation
from role_obfuscation.config import get_settings
from role_obfuscation.domain.exceptions import ConfigurationError
from role_obfuscation.infrastructure.logging import get_logger, setup_logging
from role_obfuscation.services.obfuscator import RoleObfuscator


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="role-obfuscator",
        description="Render authentication roles the way they would appear in logs",
    )
    parser.add_argument("roles", nargs="+", metavar="ROLE", help="Role(s) to obfuscate")
    parser.add_argument(
        "--redact",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Replace roles with [REDACTED] (default: AUTHENTICATION_ROLE_REDACTED_IN_LOGGING)",
    )
    parser.add_argument(
        "--anonymize",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=(
            "Replace roles with their Base64 SHA-256 digest "
            "(default: AUTHENTICATION_ROLE_ANONYMIZED_IN_LOGGING)"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {role_obfuscation.__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the role-obfuscator CLI."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(settings.logging)
    logger = get_logger(__name__)

    redact = settings.role.redacted_in_logging if args.redact is None else args.redact
    anonymize = settings.role.anonymized_in_logging if args.anonymize is None else args.anonymize

    try:
        obfuscator = RoleObfuscator(redact_enabled=redact, anonymize_enabled=anonymize)
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info("Obfuscating roles", policy=obfuscator.policy.value, count=len(args.roles))
    for role in args.roles:
        print(obfuscator.obfuscate(role))
    return 0


if __name__ == "__main__":
    sys.exit(main())
