"""Get current user use case."""

from pydantic import BaseModel

from blog.application.usecase.user import UserProfileView
from blog.domain.error import UserNotFoundError
from blog.domain.service import UserService
from blog.domain.value import Identity


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    identity: Identity  # Resolved from the bearer token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    email: str
    profile: UserProfileView | None  # None if the user record is gone


class GetCurrentUserUseCase:
    """Use case for getting the current authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        The identity comes from a verified token and is returned even when
        no stored profile matches it.

        Args:
            request: Request with the resolved identity

        Returns:
            Identity claims with the stored profile, if any
        """
        try:
            user = await self.user_service.get_by_id(request.identity.id)
            profile = UserProfileView.from_user(user)
        except UserNotFoundError:
            profile = None

        return GetCurrentUserResponse(
            user_id=str(request.identity.id),
            email=request.identity.email,
            profile=profile,
        )
