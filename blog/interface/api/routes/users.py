"""User profile and follow routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel

from blog.application.usecase.user import (
    FollowUserRequest,
    FollowUserUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
    UnfollowUserUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from blog.interface.api.dependencies import CurrentIdentity, OptionalIdentity

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating user profile."""

    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None


@router.get("/by-username/{username}", response_model=GetUserProfileResponse)
async def get_user_by_username(
    username: str,
    identity: OptionalIdentity,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile by username."""
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(username=username, identity=identity)
    )


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: UUID,
    identity: OptionalIdentity,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's public profile.

    Example:
        GET /users/123e4567-e89b-12d3-a456-426614174000

        Response:
        {
            "profile": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "username": "alice",
                "display_name": "Alice",
                "bio": null,
                "avatar_url": "https://...",
                "role": "member",
                "created_at": "2024-01-01T00:00:00Z",
                "followers_count": 3,
                "following_count": 1,
                "is_following": false
            }
        }
    """
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=str(user_id), identity=identity)
    )


@router.patch("/{user_id}", response_model=UpdateUserProfileResponse)
async def update_user_profile(
    user_id: UUID,
    request: UpdateUserProfileAPIRequest,
    identity: CurrentIdentity,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
) -> UpdateUserProfileResponse:
    """Update a profile. Only the profile owner can edit it."""
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=str(user_id),
            identity=identity,
            display_name=request.display_name,
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
    )


@router.post("/{user_id}/follow", status_code=status.HTTP_204_NO_CONTENT)
async def follow_user(
    user_id: UUID,
    identity: CurrentIdentity,
    follow_user_use_case: FromDishka[FollowUserUseCase],
) -> Response:
    """Follow a user. Requires authentication."""
    await follow_user_use_case.execute(
        FollowUserRequest(user_id=str(user_id), identity=identity)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}/follow", status_code=status.HTTP_204_NO_CONTENT)
async def unfollow_user(
    user_id: UUID,
    identity: CurrentIdentity,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
) -> Response:
    """Unfollow a user. Requires authentication."""
    await unfollow_user_use_case.execute(
        FollowUserRequest(user_id=str(user_id), identity=identity)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/followers", response_model=ListFollowsResponse)
async def list_followers(
    user_id: UUID,
    list_followers_use_case: FromDishka[ListFollowersUseCase],
    page: int = Query(default=1),
    per_page: int | None = Query(default=None),
) -> ListFollowsResponse:
    """List the users following a user, most recent first."""
    return await list_followers_use_case.execute(
        ListFollowsRequest(user_id=str(user_id), page=page, per_page=per_page)
    )


@router.get("/{user_id}/following", response_model=ListFollowsResponse)
async def list_following(
    user_id: UUID,
    list_following_use_case: FromDishka[ListFollowingUseCase],
    page: int = Query(default=1),
    per_page: int | None = Query(default=None),
) -> ListFollowsResponse:
    """List the users a user follows, most recent first."""
    return await list_following_use_case.execute(
        ListFollowsRequest(user_id=str(user_id), page=page, per_page=per_page)
    )
