"""Follow repository interface."""

from abc import ABC, abstractmethod

from blog.domain.model.follow import Follow
from blog.domain.value import UserId


class FollowRepository(ABC):
    """Repository for follow relationships."""

    @abstractmethod
    async def add(self, follow: Follow) -> bool:
        """Store a follow.

        Args:
            follow: The follow to store

        Returns:
            True if stored, False if the follower already follows the followee
        """
        pass

    @abstractmethod
    async def remove(self, follower_id: UserId, followee_id: UserId) -> bool:
        """Remove a follow.

        Returns:
            True if a follow was removed, False if none existed
        """
        pass

    @abstractmethod
    async def exists(self, follower_id: UserId, followee_id: UserId) -> bool:
        """Check whether the follower follows the followee."""
        pass

    @abstractmethod
    async def find_followers(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> tuple[list[UserId], int]:
        """Find a page of the users following a user, most recent first.

        Args:
            user_id: The followed user
            limit: Maximum number of IDs to return
            offset: Number of IDs to skip

        Returns:
            Tuple of (page of follower IDs, total followers)
        """
        pass

    @abstractmethod
    async def find_following(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> tuple[list[UserId], int]:
        """Find a page of the users a user follows, most recent first.

        Returns:
            Tuple of (page of followee IDs, total followees)
        """
        pass

    @abstractmethod
    async def count(self, user_id: UserId) -> tuple[int, int]:
        """Count a user's follows.

        Returns:
            Tuple of (followers, following)
        """
        pass
