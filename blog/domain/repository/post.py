"""Post repository interface."""

from abc import abstractmethod
from typing import Optional

from blog.domain.model.post import Post
from blog.domain.repository.base import SoftDeletableRepository
from blog.domain.value import PostId, UserId


class PostRepository(SoftDeletableRepository[Post, PostId]):
    """Repository for Post aggregate."""

    @abstractmethod
    async def find_recent(
        self,
        author_id: Optional[UserId] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        """Find a page of live posts, newest first.

        Deleted posts are never returned or counted.

        Args:
            author_id: Only include posts by this author
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Tuple of (page of posts, total matching posts)
        """
        pass
