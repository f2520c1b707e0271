"""
Unit tests for JWT verification.
"""

import pytest
from jose import jwt

from app.domain.models.base import AuthenticationError
from app.infrastructure.auth import JWTHandler


@pytest.fixture
def handler():
    return JWTHandler("secret")


class TestJWTHandler:
    """Test cases for JWTHandler."""

    def test_round_trip(self, handler):
        token = handler.generate_test_token("ext-1", "a@example.com")

        caller = handler.get_caller(token)

        assert caller.external_id == "ext-1"
        assert caller.email == "a@example.com"

    def test_bearer_prefix_stripped(self, handler):
        token = handler.generate_test_token("ext-1")
        assert handler.get_caller(f"Bearer {token}").external_id == "ext-1"

    def test_missing_token(self, handler):
        with pytest.raises(AuthenticationError, match="Missing"):
            handler.verify_token("")

    def test_expired_token(self, handler):
        token = handler.generate_test_token("ext-1", expires_minutes=-5)
        with pytest.raises(AuthenticationError):
            handler.verify_token(token)

    def test_wrong_secret(self, handler):
        token = JWTHandler("other").generate_test_token("ext-1")
        with pytest.raises(AuthenticationError, match="Invalid JWT token"):
            handler.verify_token(token)

    def test_missing_subject(self, handler):
        token = jwt.encode({"exp": 9999999999}, "secret", algorithm="HS256")
        with pytest.raises(AuthenticationError, match="sub claim"):
            handler.verify_token(token)

    def test_missing_expiration(self, handler):
        token = jwt.encode({"sub": "ext-1"}, "secret", algorithm="HS256")
        with pytest.raises(AuthenticationError, match="exp claim"):
            handler.verify_token(token)
