"""JWT token service.

Quote Forge does not manage accounts. It trusts HS256 access tokens signed
with the shared secret by the authentication layer in front of it and uses
the ``user_id`` claim as the caller's identity.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from quoteforge.core.config import get_settings


class JWTError(Exception):
    """Base exception for JWT-related errors."""

    pass


class TokenExpiredError(JWTError):
    """Raised when a token has expired."""

    pass


class InvalidTokenError(JWTError):
    """Raised when a token is invalid."""

    pass


class JWTService:
    """Service for creating and validating access tokens."""

    ALGORITHM = "HS256"
    ISSUER = "quoteforge"

    def __init__(self, secret_key: str | None = None) -> None:
        """Initialize the JWT service.

        Args:
            secret_key: Secret key for signing tokens. Defaults to the
                        configured secret key.
        """
        self._secret_key = secret_key

    @property
    def secret_key(self) -> str:
        """Get the secret key for signing tokens."""
        if self._secret_key:
            return self._secret_key
        return get_settings().secret_key

    def create_access_token(
        self,
        user_id: str,
        email: str | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create an access token.

        Args:
            user_id: The user's unique identifier.
            email: Optional email address carried for display.
            expires_delta: Custom expiration time. Defaults to config value.

        Returns:
            Encoded JWT access token.
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=get_settings().access_token_expire_minutes)

        now = datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            "iss": self.ISSUER,
            "sub": user_id,
            "iat": now,
            "exp": now + expires_delta,
            "user_id": user_id,
            "type": "access",
        }
        if email is not None:
            payload["email"] = email

        return jwt.encode(payload, self.secret_key, algorithm=self.ALGORITHM)

    def decode_token(self, token: str) -> dict[str, Any]:
        """Decode and validate a JWT token.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid.
        """
        try:
            return jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self.ISSUER,
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token") from e

    def validate_access_token(self, token: str) -> dict[str, Any]:
        """Decode a token and check that it is an access token with a user.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid, not an access token,
                or carries no user ID.
        """
        payload = self.decode_token(token)
        if payload.get("type") != "access":
            raise InvalidTokenError("Not an access token")
        if not payload.get("user_id"):
            raise InvalidTokenError("Missing user_id claim")
        return payload


# Default JWT service instance
jwt_service = JWTService()
