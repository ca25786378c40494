"""Moderation audit entry.

One entry is appended per moderation action. Entries are never updated or
deleted; the log is the record of what happened to a comment even when its
current status says otherwise.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import CommentId, ModerationAction, ModerationLogId, UserId


class ModerationLog(DomainModel):
    """Audit record of a single moderation action."""

    id: ModerationLogId
    comment_id: CommentId
    moderator_id: UserId
    action: ModerationAction
    reason: Optional[str] = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=utcnow)
