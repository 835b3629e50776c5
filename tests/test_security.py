"""
Tests for app/core/security.py - password hashing and session tokens.
"""
from app.core.security import generate_session_token, get_password_hash, verify_password


class TestPasswordHashing:

    def test_hash_is_bcrypt(self):
        hashed = get_password_hash("secret123")

        assert hashed.startswith("$2b$")
        assert hashed != "secret123"

    def test_verify_correct_password(self):
        hashed = get_password_hash("secret123")

        assert verify_password("secret123", hashed) is True

    def test_verify_wrong_password(self):
        hashed = get_password_hash("secret123")

        assert verify_password("wrong", hashed) is False

    def test_verify_against_non_bcrypt_value(self):
        assert verify_password("secret123", "secret123") is False


class TestSessionTokens:

    def test_tokens_are_unique(self):
        tokens = {generate_session_token() for _ in range(100)}

        assert len(tokens) == 100
