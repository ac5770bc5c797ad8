"""Tests for the passlib password hasher."""

import pytest

from blog.adapter.security import PasslibPasswordHasher


@pytest.fixture
def hasher() -> PasslibPasswordHasher:
    # Low round count keeps the suite fast
    return PasslibPasswordHasher(rounds=1000)


class TestPasslibPasswordHasher:
    """Tests for PasslibPasswordHasher."""

    def test_hash_is_not_plaintext(self, hasher):
        hashed = hasher.hash("s3cret")

        assert hashed != "s3cret"
        assert hashed.startswith("$pbkdf2-sha256$")

    def test_hashes_are_salted(self, hasher):
        assert hasher.hash("s3cret") != hasher.hash("s3cret")

    def test_verify(self, hasher):
        hashed = hasher.hash("s3cret")

        assert hasher.verify("s3cret", hashed)
        assert not hasher.verify("S3cret", hashed)

    def test_verify_foreign_hash_format(self, hasher):
        assert hasher.verify("s3cret", "not-a-hash") is False

    def test_default_rounds_verify_low_round_hash(self, hasher):
        """Round count travels with the hash."""
        hashed = hasher.hash("s3cret")

        assert PasslibPasswordHasher().verify("s3cret", hashed)
