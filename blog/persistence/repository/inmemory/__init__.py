"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .follow import InMemoryFollowRepository
from .moderation_log import InMemoryModerationLogRepository
from .post import InMemoryPostRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryFollowRepository",
    "InMemoryModerationLogRepository",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]
