"""PostgreSQL implementation of Follow repository."""

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Follow
from blog.domain.repository import FollowRepository
from blog.domain.value import UserId
from blog.persistence.error import wrap_database_errors
from blog.persistence.mappers import follow_to_dict
from blog.persistence.tables import follows_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @wrap_database_errors
    async def add(self, follow: Follow) -> bool:
        """Insert a follow unless the pair already exists."""
        stmt = (
            insert(follows_table)
            .values(**follow_to_dict(follow))
            .on_conflict_do_nothing(index_elements=["follower_id", "followee_id"])
            .returning(follows_table.c.follower_id)
        )
        result = await self.session.execute(stmt)
        inserted = result.fetchone() is not None
        await self.session.flush()
        return inserted

    @wrap_database_errors
    async def remove(self, follower_id: UserId, followee_id: UserId) -> bool:
        """Delete a follow."""
        stmt = delete(follows_table).where(
            and_(
                follows_table.c.follower_id == follower_id,
                follows_table.c.followee_id == followee_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @wrap_database_errors
    async def exists(self, follower_id: UserId, followee_id: UserId) -> bool:
        """Check whether the follower follows the followee."""
        stmt = select(follows_table.c.follower_id).where(
            and_(
                follows_table.c.follower_id == follower_id,
                follows_table.c.followee_id == followee_id,
            )
        )
        result = await self.session.execute(stmt)
        return result.fetchone() is not None

    @wrap_database_errors
    async def find_followers(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> tuple[list[UserId], int]:
        """Find a page of the users following a user, most recent first."""
        return await self._find_page(
            follows_table.c.followee_id == user_id,
            follows_table.c.follower_id,
            limit,
            offset,
        )

    @wrap_database_errors
    async def find_following(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> tuple[list[UserId], int]:
        """Find a page of the users a user follows, most recent first."""
        return await self._find_page(
            follows_table.c.follower_id == user_id,
            follows_table.c.followee_id,
            limit,
            offset,
        )

    @wrap_database_errors
    async def count(self, user_id: UserId) -> tuple[int, int]:
        """Count a user's followers and followees."""
        followers_stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.followee_id == user_id)
        )
        following_stmt = (
            select(func.count())
            .select_from(follows_table)
            .where(follows_table.c.follower_id == user_id)
        )
        followers = (await self.session.execute(followers_stmt)).scalar() or 0
        following = (await self.session.execute(following_stmt)).scalar() or 0
        return followers, following

    async def _find_page(self, condition, column, limit: int, offset: int):
        count_stmt = select(func.count()).select_from(follows_table).where(condition)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(column)
            .where(condition)
            .order_by(follows_table.c.created_at.desc(), column)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [UserId(row[0]) for row in result.fetchall()], total
