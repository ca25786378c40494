"""Domain value objects."""

from blog.domain.value.identifiers import (
    CommentId,
    ModerationLogId,
    PostId,
    UserId,
)
from blog.domain.value.types import (
    CommentStatus,
    Identity,
    ModerationAction,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ModerationLogId",
    # Types
    "CommentStatus",
    "ModerationAction",
    "UserRole",
    "Identity",
]
