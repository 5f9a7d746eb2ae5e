from __future__ import annotations

from skillgap.utils.password_hash import hash_password, verify_password


def test_hash_is_salted_and_verifies() -> None:
    first = hash_password("SecretPass123")
    second = hash_password("SecretPass123")
    assert first != second
    assert first.startswith("pbkdf2_sha256$")
    assert verify_password("SecretPass123", first)
    assert verify_password("SecretPass123", second)
    assert not verify_password("secretpass123", first)


def test_verify_rejects_malformed_hashes() -> None:
    assert not verify_password("anything", "")
    assert not verify_password("anything", "plaintext")
    assert not verify_password("anything", "md5$1$salt$abc")
    assert not verify_password("anything", "pbkdf2_sha256$notanumber$salt$abc")
