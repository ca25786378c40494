"""Domain services."""

from .authentication_service import AuthenticationService
from .base import Service
from .comment_service import CommentPage, CommentService
from .follow_service import FollowService
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .ownership_service import OwnershipGuard
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "AuthenticationService",
    "CommentPage",
    "CommentService",
    "FollowService",
    "JWTService",
    "ModerationService",
    "OwnershipGuard",
    "PostService",
    "Service",
    "UserService",
]
