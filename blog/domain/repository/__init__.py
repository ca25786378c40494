"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.base import ResourceRepository, SoftDeletableRepository
from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.follow import FollowRepository
from blog.domain.repository.moderation_log import ModerationLogRepository
from blog.domain.repository.post import PostRepository
from blog.domain.repository.user import UserRepository

__all__ = [
    "ResourceRepository",
    "SoftDeletableRepository",
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ModerationLogRepository",
    "FollowRepository",
]
