"""JWT token domain service."""

from datetime import timedelta

import logfire

from blog.config import AuthSettings
from blog.domain.value import UserId
from blog.util.jwt import TokenClaims, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for issuing and verifying bearer tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    @property
    def token_ttl(self) -> timedelta:
        """Lifetime of issued tokens."""
        return timedelta(hours=self.auth_settings.token_ttl_hours)

    def create_token(self, user_id: UserId, email: str) -> str:
        """Issue a signed token for a user.

        Args:
            user_id: User ID
            email: User email

        Returns:
            JWT token string

        Raises:
            TokenSigningError: If the token cannot be signed
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            token = create_token(
                subject_id=user_id,
                email=email,
                secret=self.auth_settings.jwt_secret.get_secret_value(),
                ttl=self.token_ttl,
                algorithm=self.auth_settings.jwt_algorithm,
            )
            logfire.info("JWT token created", user_id=str(user_id))
            return token

    def verify_token(self, token: str) -> TokenClaims:
        """Verify a token and extract its claims.

        Args:
            token: JWT token string

        Returns:
            Token claims

        Raises:
            TokenExpiredError: If the token has expired
            InvalidTokenError: If the token is malformed or wrongly signed
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                claims = verify_token(
                    token,
                    secret=self.auth_settings.jwt_secret.get_secret_value(),
                    algorithm=self.auth_settings.jwt_algorithm,
                )
            except Exception as e:
                logfire.warn(
                    "JWT token verification failed",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            logfire.debug("JWT token verified", user_id=str(claims.subject_id))
            return claims
