"""PostgreSQL implementation of the moderation log."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import ModerationLog
from blog.domain.repository import ModerationLogRepository
from blog.domain.value import CommentId
from blog.persistence.error import wrap_database_errors
from blog.persistence.mappers import moderation_log_to_dict, row_to_moderation_log
from blog.persistence.tables import moderation_logs_table


class PostgresModerationLogRepository(ModerationLogRepository):
    """Append-only moderation log backed by PostgreSQL."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @wrap_database_errors
    async def append(self, entry: ModerationLog) -> ModerationLog:
        """Insert an audit entry."""
        stmt = moderation_logs_table.insert().values(**moderation_log_to_dict(entry))
        await self.session.execute(stmt)
        await self.session.flush()
        return entry

    @wrap_database_errors
    async def find_by_comment(self, comment_id: CommentId) -> list[ModerationLog]:
        """Find all audit entries for a comment, oldest first."""
        stmt = (
            select(moderation_logs_table)
            .where(moderation_logs_table.c.comment_id == comment_id)
            .order_by(moderation_logs_table.c.created_at, moderation_logs_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_moderation_log(row._asdict()) for row in result.fetchall()]
