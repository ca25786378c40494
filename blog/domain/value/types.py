"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from blog.domain.value.common import ValueObject
from blog.domain.value.identifiers import UserId


class CommentStatus(str, Enum):
    """Review status of a comment.

    Every comment starts as PENDING. APPROVED, REJECTED and SPAM are
    terminal outcomes of moderation.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SPAM = "spam"


class ModerationAction(str, Enum):
    """Action a moderator can take on a pending comment."""

    APPROVE = "approve"
    REJECT = "reject"
    MARK_AS_SPAM = "mark_as_spam"

    @property
    def target_status(self) -> CommentStatus:
        """Status a comment moves to when this action is applied."""
        return _ACTION_TARGETS[self]


_ACTION_TARGETS = {
    ModerationAction.APPROVE: CommentStatus.APPROVED,
    ModerationAction.REJECT: CommentStatus.REJECTED,
    ModerationAction.MARK_AS_SPAM: CommentStatus.SPAM,
}


class UserRole(str, Enum):
    """Capabilities of a user account."""

    MEMBER = "member"
    MODERATOR = "moderator"


class Identity(ValueObject):
    """Authenticated principal resolved from a bearer token.

    Produced only by the authentication service; never persisted.
    """

    id: UserId
    email: str
