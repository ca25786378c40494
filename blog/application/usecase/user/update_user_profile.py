"""Update user profile use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import UserService
from blog.domain.value import Identity, UserId

from .get_user_profile import UserProfileView


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Fields left as None are not changed.
    """

    user_id: str  # UUID string of the profile being edited
    identity: Identity  # Authenticated actor
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    profile: UserProfileView


class UpdateUserProfileUseCase:
    """Use case for editing a user's own profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Args:
            request: Update profile request

        Returns:
            The updated profile

        Raises:
            UserNotFoundError: If the user does not exist
            NotAuthorizedError: If the actor does not own the profile
            ValidationError: If a field is too long
        """
        user = await self.user_service.update_profile(
            user_id=UserId(UUID(request.user_id)),
            identity=request.identity,
            display_name=request.display_name,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
        return UpdateUserProfileResponse(profile=UserProfileView.from_user(user))
