"""Moderation log repository interface."""

from abc import ABC, abstractmethod

from blog.domain.model.moderation_log import ModerationLog
from blog.domain.value import CommentId


class ModerationLogRepository(ABC):
    """Append-only store of moderation audit entries."""

    @abstractmethod
    async def append(self, entry: ModerationLog) -> ModerationLog:
        """Append an audit entry.

        Args:
            entry: The entry to store

        Returns:
            The stored entry
        """
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> list[ModerationLog]:
        """Find all audit entries for a comment, oldest first.

        Args:
            comment_id: The comment ID

        Returns:
            List of audit entries
        """
        pass
