# ABOUTME: Unit tests for the argon2 password hasher
# ABOUTME: Verifies hashing, verification and graceful handling of unreadable hashes

import pytest


class TestArgon2PasswordHasher:
    """Tests for Argon2PasswordHasher."""

    @pytest.mark.unit
    def test_hash_is_not_plaintext(self, password_hasher):
        password_hash = password_hasher.hash("password123")

        assert password_hash != "password123"
        assert password_hash.startswith("$argon2id$")

    @pytest.mark.unit
    def test_hashes_are_salted(self, password_hasher):
        assert password_hasher.hash("password123") != password_hasher.hash("password123")

    @pytest.mark.unit
    def test_verify(self, password_hasher):
        password_hash = password_hasher.hash("password123")

        assert password_hasher.verify("password123", password_hash)
        assert not password_hasher.verify("password124", password_hash)

    @pytest.mark.unit
    @pytest.mark.parametrize("bad_hash", ["", "plaintext", "$argon2id$broken"])
    def test_unreadable_hash_does_not_verify(self, password_hasher, bad_hash):
        assert password_hasher.verify("password123", bad_hash) is False

    @pytest.mark.unit
    def test_needs_rehash(self, password_hasher):
        assert not password_hasher.needs_rehash(password_hasher.hash("password123"))
        assert password_hasher.needs_rehash("plaintext")
