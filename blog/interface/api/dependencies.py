"""Shared API dependencies for authentication."""

from typing import Annotated

from fastapi import Depends, Request

from blog.domain.service import AuthenticationService
from blog.domain.value import Identity


async def _authentication_service(request: Request) -> AuthenticationService:
    """Get the request-scoped authentication service from the DI container."""
    return await request.state.dishka_container.get(AuthenticationService)


async def get_current_identity(request: Request) -> Identity:
    """Resolve the caller's identity, requiring a valid bearer token.

    Args:
        request: Incoming request

    Returns:
        Identity of the authenticated caller

    Raises:
        AuthenticationError: If the header is missing, malformed, or the
            token is invalid or expired
    """
    service = await _authentication_service(request)
    return service.resolve_required(request.headers)


async def get_optional_identity(request: Request) -> Identity | None:
    """Resolve the caller's identity if a bearer token is present.

    A request without an Authorization header is anonymous. A header that
    is present but invalid is still rejected.

    Raises:
        AuthenticationError: If a token is given but cannot be verified
    """
    service = await _authentication_service(request)
    return service.resolve_optional(request.headers)


# Type aliases for identity dependencies
CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]
OptionalIdentity = Annotated[Identity | None, Depends(get_optional_identity)]
