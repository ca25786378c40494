"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_recent(
        self,
        author_id: Optional[UserId] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        """Find a page of live posts, newest first."""
        posts = [
            post
            for post in self._posts.values()
            if post.deleted_at is None
            and (author_id is None or post.author_id == author_id)
        ]
        posts.sort(key=lambda post: post.created_at, reverse=True)
        return posts[offset : offset + limit], len(posts)

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        self._posts[post.id] = post
        return post

    async def soft_delete(self, post_id: PostId, deleted_at: datetime) -> Optional[Post]:
        """Mark a post as deleted."""
        post = self._posts.get(post_id)
        if post is None or post.deleted_at is not None:
            return None
        updated = post.model_copy(
            update={"deleted_at": deleted_at, "updated_at": deleted_at}
        )
        self._posts[post_id] = updated
        return updated
