"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    A post is owned by its author; only the author may edit or delete it.
    """

    id: PostId
    author_id: UserId
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=50000)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    deleted_at: Optional[datetime] = None
