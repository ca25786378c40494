"""In-memory follow repository for testing."""

from blog.domain.model.follow import Follow
from blog.domain.repository.follow import FollowRepository
from blog.domain.value import UserId


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self) -> None:
        self._follows: dict[tuple[UserId, UserId], Follow] = {}

    async def add(self, follow: Follow) -> bool:
        """Store a follow unless the pair already exists."""
        key = (follow.follower_id, follow.followee_id)
        if key in self._follows:
            return False
        self._follows[key] = follow
        return True

    async def remove(self, follower_id: UserId, followee_id: UserId) -> bool:
        """Remove a follow."""
        return self._follows.pop((follower_id, followee_id), None) is not None

    async def exists(self, follower_id: UserId, followee_id: UserId) -> bool:
        """Check whether the follower follows the followee."""
        return (follower_id, followee_id) in self._follows

    async def find_followers(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> tuple[list[UserId], int]:
        """Find a page of the users following a user, most recent first."""
        follows = [f for f in self._follows.values() if f.followee_id == user_id]
        follows.sort(key=lambda f: f.created_at, reverse=True)
        ids = [f.follower_id for f in follows]
        return ids[offset : offset + limit], len(ids)

    async def find_following(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> tuple[list[UserId], int]:
        """Find a page of the users a user follows, most recent first."""
        follows = [f for f in self._follows.values() if f.follower_id == user_id]
        follows.sort(key=lambda f: f.created_at, reverse=True)
        ids = [f.followee_id for f in follows]
        return ids[offset : offset + limit], len(ids)

    async def count(self, user_id: UserId) -> tuple[int, int]:
        """Count a user's followers and followees."""
        followers = sum(1 for f in self._follows.values() if f.followee_id == user_id)
        following = sum(1 for f in self._follows.values() if f.follower_id == user_id)
        return followers, following
