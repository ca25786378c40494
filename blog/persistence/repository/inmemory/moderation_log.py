"""In-memory moderation log for testing."""

from blog.domain.model.moderation_log import ModerationLog
from blog.domain.repository.moderation_log import ModerationLogRepository
from blog.domain.value import CommentId


class InMemoryModerationLogRepository(ModerationLogRepository):
    """In-memory implementation of ModerationLogRepository for testing."""

    def __init__(self) -> None:
        self._entries: list[ModerationLog] = []

    async def append(self, entry: ModerationLog) -> ModerationLog:
        """Append an audit entry."""
        self._entries.append(entry)
        return entry

    async def find_by_comment(self, comment_id: CommentId) -> list[ModerationLog]:
        """Find all audit entries for a comment, oldest first."""
        return [e for e in self._entries if e.comment_id == comment_id]
