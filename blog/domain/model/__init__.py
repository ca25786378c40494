"""Domain model entities."""

from blog.domain.model.comment import Comment
from blog.domain.model.follow import Follow
from blog.domain.model.moderation_log import ModerationLog
from blog.domain.model.post import Post
from blog.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "ModerationLog",
    "Follow",
]
