"""
Unit tests for password hashing utilities.
"""

import pytest

from notebox.config import Settings
from notebox.security.password import PasswordHasher, get_password_hasher


@pytest.fixture
def hasher():
    # minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


class TestPasswordHasher:
    """Test password hashing and verification."""

    def test_hash_password(self, hasher):
        """Test password hashing."""
        password = "TestPassword123!"
        hashed = hasher.hash(password)

        # Hash should be different from plain password
        assert hashed != password
        assert isinstance(hashed, str)
        assert len(hashed) > 0

        # Hashing same password twice should give different results (due to salt)
        assert hashed != hasher.hash(password)

    def test_verify_password_correct(self, hasher):
        password = "TestPassword123!"
        assert hasher.verify(password, hasher.hash(password)) is True

    def test_verify_password_incorrect(self, hasher):
        hashed = hasher.hash("TestPassword123!")
        assert hasher.verify("WrongPassword123!", hashed) is False

    def test_verify_password_empty(self, hasher):
        hashed = hasher.hash("TestPassword123!")
        assert hasher.verify("", hashed) is False

    def test_long_password_is_not_truncated(self, hasher):
        """bcrypt alone ignores bytes past 72; bcrypt_sha256 does not."""
        base = "a" * 80
        hashed = hasher.hash(base + "1")
        assert hasher.verify(base + "1", hashed) is True
        assert hasher.verify(base + "2", hashed) is False

    def test_default_cost_factor(self):
        hashed = PasswordHasher().hash("p")
        assert PasswordHasher().context.identify(hashed) == "bcrypt_sha256"
        assert "r=10$" in hashed

    def test_cost_factor_from_settings(self):
        settings = Settings(_env_file=None, password_hash_rounds=5)

        hashed = PasswordHasher.from_settings(settings).hash("p")

        assert "r=05$" in hashed or "r=5$" in hashed

    def test_hashes_verify_across_cost_factors(self, hasher):
        hashed = hasher.hash("secret")
        assert PasswordHasher(rounds=10).verify("secret", hashed) is True

    def test_dependency_uses_given_settings(self):
        settings = Settings(_env_file=None, password_hash_rounds=6)
        assert get_password_hasher(settings).rounds == 6
