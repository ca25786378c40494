"""Comment entity.

Comments are threaded discussions on posts. Nesting is bounded: a reply
stores its nesting level in ``depth`` at creation time so the limit can be
enforced without walking the thread on every write.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import CommentId, CommentStatus, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, parent depth + 1 for replies)

    author_id is None for anonymous comments. Anonymous comments have no
    owner and can only be acted on through moderation.
    """

    id: CommentId
    post_id: PostId
    author_id: Optional[UserId] = None
    parent_id: Optional[CommentId] = None
    content: str = Field(min_length=1)
    status: CommentStatus = CommentStatus.PENDING
    depth: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        """Whether the comment is a tombstone."""
        return self.deleted_at is not None
