"""JWT token domain service."""

import logfire

from blog.config import AuthSettings
from blog.domain.value import UserRole
from blog.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Tokens are issued by the login flow; this service only needs to read
    them back to learn who is commenting and whether they moderate.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, name: str | None = None, role: UserRole = UserRole.USER
    ) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            name: Display name
            role: User role

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, role=role.value):
            return create_token(user_id, name, role, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.debug("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_from_token(self, token: str | None) -> TokenPayload | None:
        """Decode a token without raising.

        API routes use this to treat missing or invalid tokens as anonymous
        visitors.

        Args:
            token: JWT token string (optional)

        Returns:
            Token payload if the token is valid, None otherwise
        """
        if not token:
            return None

        try:
            return self.verify_token(token)
        except JWTError:
            return None
