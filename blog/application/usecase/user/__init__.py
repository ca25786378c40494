"""User use cases."""

from .follow_user import (
    FollowUserRequest,
    FollowUserUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
    UnfollowUserUseCase,
)
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UserProfileDetailView,
    UserProfileView,
)
from .update_user_profile import (
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)

__all__ = [
    "FollowUserRequest",
    "FollowUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ListFollowersUseCase",
    "ListFollowingUseCase",
    "ListFollowsRequest",
    "ListFollowsResponse",
    "UnfollowUserUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileResponse",
    "UpdateUserProfileUseCase",
    "UserProfileDetailView",
    "UserProfileView",
]
