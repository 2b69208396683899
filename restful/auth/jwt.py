"""JWT bearer authentication for Django REST Framework.

Tokens are validated locally against the shared ``JWT_SECRET``. The caller's
groups come from the MicroProfile JWT ``groups`` claim.
"""

from typing import Any

from django.conf import settings

import jwt
import structlog
from rest_framework import authentication, exceptions

logger = structlog.get_logger(__name__)

ALLOWED_ALGORITHMS = ["HS256", "HS384", "HS512"]


class JWTUser:
    """Caller identity built from verified token claims.

    This is not a Django User model, just a container for claims.
    """

    def __init__(self, user_id: str, groups: list[str], claims: dict[str, Any]):
        """Initialize JWT user.

        Args:
            user_id: Subject of the token (``upn`` or ``sub`` claim)
            groups: Groups granted to the caller
            claims: Full verified claim set
        """
        self.id = user_id
        self.user_id = user_id
        self.groups = groups
        self.claims = claims
        self.is_authenticated = True

    def in_group(self, group: str) -> bool:
        return group in self.groups

    def __str__(self):
        return f"JWTUser(user_id={self.user_id})"


class JWTAuthentication(authentication.BaseAuthentication):
    """Bearer token authentication with locally verified JWTs."""

    def authenticate(self, request):
        """Authenticate the request using its Bearer token.

        Args:
            request: DRF request object

        Returns:
            Tuple of (user, token) or None if authentication was not attempted

        Raises:
            AuthenticationFailed: If the token is malformed or invalid
        """
        if not settings.JWT_AUTH_ENABLED:
            return None

        auth_header = request.headers.get("authorization")
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise exceptions.AuthenticationFailed("Invalid authorization header format")

        token = parts[1]
        claims = self._decode(token)

        user = JWTUser(
            user_id=claims.get("upn") or claims.get("sub", "unknown"),
            groups=list(claims.get("groups", [])),
            claims=claims,
        )
        return (user, token)

    def _decode(self, token: str) -> dict[str, Any]:
        if not settings.JWT_SECRET:
            logger.error("JWT_SECRET not configured but JWT authentication is enabled")
            raise exceptions.AuthenticationFailed("JWT validation not configured")

        try:
            return jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=ALLOWED_ALGORITHMS,
                options={
                    "verify_signature": True,
                    "verify_exp": True,
                    "verify_iat": True,
                    "verify_nbf": True,
                },
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("JWT token has expired")
            raise exceptions.AuthenticationFailed("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.warning("Invalid JWT token", error=str(e))
            raise exceptions.AuthenticationFailed("Invalid token") from e

    def authenticate_header(self, _request):
        """Return the WWW-Authenticate header value for 401 responses."""
        return f'Bearer realm="{settings.JWT_REALM}"'
