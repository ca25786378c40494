"""Follow and unfollow use cases."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.pagination import PaginationView
from blog.domain.service import FollowService
from blog.domain.value import Identity, UserId

from .get_user_profile import UserProfileView


class FollowUserRequest(BaseModel):
    """Follow or unfollow request."""

    user_id: str  # UUID string of the user to (un)follow
    identity: Identity  # Authenticated follower


class ListFollowsRequest(BaseModel):
    """List followers or followees request."""

    user_id: str  # UUID string
    page: int = 1
    per_page: int | None = None


class ListFollowsResponse(BaseModel):
    """Paginated users response."""

    users: list[UserProfileView]
    pagination: PaginationView


class FollowUserUseCase:
    """Use case for following a user."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: FollowUserRequest) -> None:
        """Execute follow flow.

        Raises:
            SelfFollowError: If the caller tries to follow themselves
            UserNotFoundError: If the user does not exist
            AlreadyFollowingError: If the user is already followed
        """
        await self.follow_service.follow(
            request.identity, UserId(UUID(request.user_id))
        )


class UnfollowUserUseCase:
    """Use case for unfollowing a user."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: FollowUserRequest) -> None:
        """Execute unfollow flow.

        Raises:
            SelfFollowError: If the caller tries to unfollow themselves
            UserNotFoundError: If the user does not exist
            NotFollowingError: If the user was not followed
        """
        await self.follow_service.unfollow(
            request.identity, UserId(UUID(request.user_id))
        )


class ListFollowersUseCase:
    """Use case for listing the users following a user."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        """Execute list followers flow.

        Raises:
            UserNotFoundError: If the user does not exist
            ValidationError: If pagination parameters are out of range
        """
        page = await self.follow_service.list_followers(
            UserId(UUID(request.user_id)), page=request.page, per_page=request.per_page
        )
        return ListFollowsResponse(
            users=[UserProfileView.from_user(user) for user in page.items],
            pagination=PaginationView.from_page(page),
        )


class ListFollowingUseCase:
    """Use case for listing the users a user follows."""

    def __init__(self, follow_service: FollowService) -> None:
        self.follow_service = follow_service

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        """Execute list following flow.

        Raises:
            UserNotFoundError: If the user does not exist
            ValidationError: If pagination parameters are out of range
        """
        page = await self.follow_service.list_following(
            UserId(UUID(request.user_id)), page=request.page, per_page=request.per_page
        )
        return ListFollowsResponse(
            users=[UserProfileView.from_user(user) for user in page.items],
            pagination=PaginationView.from_page(page),
        )
