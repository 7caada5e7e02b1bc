"""Stable hashing helpers for privacy-safe logging.

Roles are rendered as the Base64 SHA-256 digest of their UTF-8 bytes so the
same role can be correlated across log lines without exposing it. A new hash
object is created for every call; no hashing state is shared between threads.
"""

from __future__ import annotations

import base64
import hashlib
from typing import Final

from role_obfuscation.domain.exceptions import HashAlgorithmUnavailableError

HASH_ALGORITHM: Final[str] = "sha256"
TEXT_ENCODING: Final[str] = "utf-8"
# Lone surrogates (e.g. from os.fsdecode) are encoded, never rejected.
TEXT_ENCODE_ERRORS: Final[str] = "surrogatepass"
DIGEST_SIZE: Final[int] = 32
ENCODED_DIGEST_LENGTH: Final[int] = 44


def ensure_hash_algorithm(algorithm: str = HASH_ALGORITHM) -> None:
    """Fail fast if the runtime cannot provide ``algorithm``.

    Raises:
        HashAlgorithmUnavailableError: If hashlib does not know the algorithm.
    """
    try:
        hashlib.new(algorithm)
    except ValueError as exc:
        raise HashAlgorithmUnavailableError(algorithm) from exc


def stable_bytes_digest(payload: bytes) -> str:
    """Return the standard Base64 (padded) SHA-256 digest of a bytes payload."""
    return base64.b64encode(hashlib.new(HASH_ALGORITHM, payload).digest()).decode("ascii")


def stable_text_digest(text: str) -> str:
    """Return the standard Base64 (padded) SHA-256 digest of a text payload."""
    return stable_bytes_digest(text.encode(TEXT_ENCODING, errors=TEXT_ENCODE_ERRORS))
