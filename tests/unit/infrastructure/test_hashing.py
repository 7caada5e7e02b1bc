from __future__ import annotations

import base64
import hashlib

import pytest

from role_obfuscation.domain.exceptions import HashAlgorithmUnavailableError
from role_obfuscation.infrastructure.hashing import (
    DIGEST_SIZE,
    ENCODED_DIGEST_LENGTH,
    HASH_ALGORITHM,
    ensure_hash_algorithm,
    stable_bytes_digest,
    stable_text_digest,
)

pytestmark = pytest.mark.unit

EMPTY_SHA256_B64 = "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="


class TestStableDigest:
    def test_known_digest_for_alice(self) -> None:
        assert stable_text_digest("alice") == "K9gGyX8OAK8aH8Myj6djqSaXI8jbj6xPk69x2xhtbpA="

    def test_empty_text_is_well_known_digest(self) -> None:
        assert stable_text_digest("") == EMPTY_SHA256_B64

    def test_text_digest_is_deterministic_and_fixed_length(self) -> None:
        value = stable_text_digest("hello world")
        assert value == stable_text_digest("hello world")
        assert len(value) == ENCODED_DIGEST_LENGTH

    def test_digest_decodes_to_raw_sha256(self) -> None:
        raw = base64.b64decode(stable_text_digest("bob"), validate=True)
        assert len(raw) == DIGEST_SIZE
        assert raw == hashlib.sha256(b"bob").digest()

    def test_text_digest_uses_utf8(self) -> None:
        assert stable_text_digest("ünïcødé") == stable_bytes_digest("ünïcødé".encode())
        assert stable_text_digest("ünïcødé") == "VxO+0wPs6OQt1IOK49BPzSRsfOtEaL3zmqQz+v3M/3c="

    def test_bytes_digest_matches_text_digest_for_utf8_payload(self) -> None:
        assert stable_bytes_digest(b"hello") == stable_text_digest("hello")

    def test_lone_surrogate_is_encoded_not_rejected(self) -> None:
        assert stable_text_digest("user-\udcff") == stable_bytes_digest(b"user-\xed\xb3\xbf")
        assert stable_text_digest("user-\udcff") == "fJpy5hejeZoLkL3or9IAPx7LTgySIG+3AFcyQ+OCGRw="

    def test_bytes_digest_uses_configured_algorithm(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("role_obfuscation.infrastructure.hashing.HASH_ALGORITHM", "sha512")
        raw = base64.b64decode(stable_bytes_digest(b"alice"))
        assert raw == hashlib.sha512(b"alice").digest()


class TestEnsureHashAlgorithm:
    def test_sha256_is_available(self) -> None:
        assert HASH_ALGORITHM == "sha256"
        ensure_hash_algorithm()

    def test_unknown_algorithm_fails_fast(self) -> None:
        with pytest.raises(HashAlgorithmUnavailableError, match="not-a-hash algorithm not found"):
            ensure_hash_algorithm("not-a-hash")

    def test_original_error_is_chained(self) -> None:
        with pytest.raises(HashAlgorithmUnavailableError) as exc_info:
            ensure_hash_algorithm("not-a-hash")
        assert isinstance(exc_info.value.__cause__, ValueError)
