"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, CommentStatus, PostId, UserId
from blog.persistence.error import wrap_database_errors
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @wrap_database_errors
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    @wrap_database_errors
    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment and hold a row lock until the transaction ends."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    @wrap_database_errors
    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
        author_id: Optional[UserId] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Comment], int]:
        """Find a page of comments for a post, oldest first."""
        conditions = [comments_table.c.post_id == post_id]
        if status is not None:
            conditions.append(comments_table.c.status == status.value)
        if author_id is not None:
            conditions.append(comments_table.c.author_id == author_id)

        count_stmt = select(func.count()).select_from(comments_table).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(comments_table)
            .where(*conditions)
            .order_by(comments_table.c.created_at, comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()], total

    @wrap_database_errors
    async def find_children(
        self,
        parent_id: CommentId,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Comment], int]:
        """Find a page of direct replies to a comment, oldest first."""
        condition = comments_table.c.parent_id == parent_id

        count_stmt = select(func.count()).select_from(comments_table).where(condition)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(comments_table)
            .where(condition)
            .order_by(comments_table.c.created_at, comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()], total

    @wrap_database_errors
    async def count_replies(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, int]:
        """Count non-deleted direct replies for each comment."""
        counts: dict[CommentId, int] = {cid: 0 for cid in comment_ids}
        if not comment_ids:
            return counts

        stmt = (
            select(comments_table.c.parent_id, func.count())
            .where(comments_table.c.parent_id.in_(comment_ids))
            .where(comments_table.c.deleted_at.is_(None))
            .group_by(comments_table.c.parent_id)
        )
        result = await self.session.execute(stmt)
        for parent_id, count in result.fetchall():
            counts[CommentId(parent_id)] = count
        return counts

    @wrap_database_errors
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    @wrap_database_errors
    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment as deleted."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=deleted_at, updated_at=deleted_at)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        await self.session.flush()
        return row_to_comment(row._asdict())

    @wrap_database_errors
    async def update_content(
        self, comment_id: CommentId, content: str, updated_at: datetime
    ) -> Optional[Comment]:
        """Update the content of a non-deleted comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(content=content, updated_at=updated_at)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        await self.session.flush()
        return row_to_comment(row._asdict())

    @wrap_database_errors
    async def transition_status(
        self,
        comment_id: CommentId,
        from_status: CommentStatus,
        to_status: CommentStatus,
        updated_at: datetime,
    ) -> Optional[Comment]:
        """Change status only if the row still has ``from_status``."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.status == from_status.value)
            .where(comments_table.c.deleted_at.is_(None))
            .values(status=to_status.value, updated_at=updated_at)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        await self.session.flush()
        return row_to_comment(row._asdict())
