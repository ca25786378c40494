"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.domain.model import User
from blog.domain.service import FollowService, UserService
from blog.domain.value import Identity, UserId


class UserProfileView(BaseModel):
    """Public profile of a user."""

    id: str
    username: str
    display_name: str | None
    bio: str | None
    avatar_url: str | None
    role: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfileView":
        return cls(
            id=str(user.id),
            username=user.username,
            display_name=user.display_name,
            bio=user.bio,
            avatar_url=user.avatar_url,
            role=user.role.value,
            created_at=user.created_at,
        )


class UserProfileDetailView(UserProfileView):
    """Public profile with follow counts, seen from the caller."""

    followers_count: int
    following_count: int
    is_following: bool  # Whether the caller follows this user


class GetUserProfileRequest(BaseModel):
    """Get user profile request.

    The user is looked up by username when one is given, by ID otherwise.
    """

    user_id: str | None = None  # UUID string
    username: str | None = None
    identity: Identity | None = None  # Caller, if authenticated


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    profile: UserProfileDetailView


class GetUserProfileUseCase:
    """Use case for getting a user's public profile."""

    def __init__(self, user_service: UserService, follow_service: FollowService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            follow_service: Follow domain service (for counts)
        """
        self.user_service = user_service
        self.follow_service = follow_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        if request.username is not None:
            user = await self.user_service.get_by_username(request.username)
        else:
            user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        followers, following = await self.follow_service.count(user.id)
        is_following = await self.follow_service.is_following(request.identity, user.id)

        profile = UserProfileDetailView(
            **UserProfileView.from_user(user).model_dump(),
            followers_count=followers,
            following_count=following,
            is_following=is_following,
        )
        return GetUserProfileResponse(profile=profile)
