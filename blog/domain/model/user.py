"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel, utcnow
from blog.domain.value import UserId, UserRole


class User(DomainModel):
    """User aggregate root.

    The user's profile (display name, bio, avatar) is owned by the user
    itself. Moderators additionally review comments.
    """

    id: UserId
    username: str = Field(min_length=3, max_length=50)
    email: str = Field(min_length=3, max_length=255)
    display_name: Optional[str] = Field(default=None, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.MEMBER
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_moderator(self) -> bool:
        """Whether the user may moderate comments."""
        return self.role == UserRole.MODERATOR
