"""PostgreSQL repository implementations."""

from blog.persistence.repository.comment import PostgresCommentRepository
from blog.persistence.repository.follow import PostgresFollowRepository
from blog.persistence.repository.moderation_log import PostgresModerationLogRepository
from blog.persistence.repository.post import PostgresPostRepository
from blog.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresModerationLogRepository",
    "PostgresFollowRepository",
]
