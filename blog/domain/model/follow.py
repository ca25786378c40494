"""Follow relationship between two users."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import UserId


class Follow(DomainModel):
    """A user following another user.

    A pair of users has at most one follow, and users never follow
    themselves.
    """

    follower_id: UserId
    followee_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
