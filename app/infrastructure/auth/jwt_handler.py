"""
JWT token handler for identity provider tokens.
Validates JWT tokens and extracts the caller's external identity.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt as jose_jwt

from app.domain.models.base import AuthenticationError


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated caller as asserted by the identity provider."""
    external_id: str
    email: Optional[str] = None


class JWTHandler:
    """Handles JWT token validation and identity extraction."""

    def __init__(self, jwt_secret: str, jwt_algorithm: str = "HS256"):
        self.jwt_secret = jwt_secret
        self.jwt_algorithm = jwt_algorithm

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode an identity provider JWT.

        Args:
            token: JWT token string

        Returns:
            Dict containing token payload

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        if not token:
            raise AuthenticationError("Missing authentication token")

        if token.startswith('Bearer '):
            token = token[7:]

        try:
            payload = jose_jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "verify_aud": False}
            )
        except JWTError as e:
            raise AuthenticationError(f"Invalid JWT token: {str(e)}")

        if not payload.get('sub'):
            raise AuthenticationError("Token missing user ID (sub claim)")

        if 'exp' not in payload:
            raise AuthenticationError("Token missing expiration (exp claim)")

        return payload

    def get_caller(self, token: str) -> CallerIdentity:
        """
        Extract the caller identity from a token.

        Raises:
            AuthenticationError: If token is invalid
        """
        payload = self.verify_token(token)
        return CallerIdentity(external_id=payload['sub'], email=payload.get('email'))

    def generate_test_token(self, external_id: str, email: str = "test@example.com", expires_minutes: int = 60) -> str:
        """
        Generate a JWT token for development/testing purposes.

        Args:
            external_id: Subject to include in token
            email: Caller email
            expires_minutes: Token expiration in minutes (negative for an expired token)

        Returns:
            JWT token string
        """
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=expires_minutes)

        payload = {
            "sub": external_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
            "aud": "authenticated",
            "iss": "supabase"
        }

        return jose_jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)
