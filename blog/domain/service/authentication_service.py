"""Authentication domain service.

Turns the credential carried by a request into an Identity. Two entry
points are exposed: ``resolve_required`` for authenticated writes and
``resolve_optional`` for public reads and anonymous actions.
"""

from collections.abc import Mapping

from blog.domain.error import AuthenticationError
from blog.domain.value import Identity, UserId
from blog.util.jwt import JWTError, TokenExpiredError

from .base import Service
from .jwt_service import JWTService

BEARER_SCHEME = "bearer"


class AuthenticationService(Service):
    """Resolve bearer credentials into identities."""

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize authentication service.

        Args:
            jwt_service: JWT token domain service
        """
        self.jwt_service = jwt_service

    def resolve_required(self, headers: Mapping[str, str]) -> Identity:
        """Resolve the identity of a request that must be authenticated.

        Args:
            headers: Request headers

        Returns:
            Authenticated identity

        Raises:
            AuthenticationError: If the credential is missing, uses another
                scheme, or does not verify
        """
        identity = self.resolve_optional(headers)
        if identity is None:
            raise AuthenticationError("Authentication required")
        return identity

    def resolve_optional(self, headers: Mapping[str, str]) -> Identity | None:
        """Resolve the identity of a request if it carries a credential.

        A missing Authorization header yields None. A header that is present
        but malformed or invalid is still rejected.

        Args:
            headers: Request headers

        Returns:
            Authenticated identity, or None when no credential was sent

        Raises:
            AuthenticationError: If a credential is present but invalid
        """
        token = self._extract_bearer_token(headers)
        if token is None:
            return None

        try:
            claims = self.jwt_service.verify_token(token)
        except TokenExpiredError as e:
            raise AuthenticationError("Token has expired") from e
        except JWTError as e:
            raise AuthenticationError("Invalid token") from e

        return Identity(id=UserId(claims.subject_id), email=claims.email)

    @staticmethod
    def _extract_bearer_token(headers: Mapping[str, str]) -> str | None:
        """Extract the bearer token from the Authorization header.

        Returns:
            The token, or None if no Authorization header is present

        Raises:
            AuthenticationError: If the header is present but is not a
                well-formed bearer credential
        """
        value = headers.get("authorization")
        if value is None:
            value = headers.get("Authorization")
        if value is None:
            return None

        scheme, _, token = value.strip().partition(" ")
        token = token.strip()
        if scheme.lower() != BEARER_SCHEME or not token:
            raise AuthenticationError("Invalid authorization header")
        return token
