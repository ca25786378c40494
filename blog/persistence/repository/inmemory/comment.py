"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, CommentStatus, PostId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID (no locking needed in memory)."""
        return self._comments.get(comment_id)

    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
        author_id: Optional[UserId] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Comment], int]:
        """Find a page of comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]

        if status is not None:
            comments = [c for c in comments if c.status == status]
        if author_id is not None:
            comments = [c for c in comments if c.author_id == author_id]

        comments.sort(key=lambda c: c.created_at)
        return comments[offset : offset + limit], len(comments)

    async def find_children(
        self,
        parent_id: CommentId,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Comment], int]:
        """Find a page of direct replies to a comment, oldest first."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        comments.sort(key=lambda c: c.created_at)
        return comments[offset : offset + limit], len(comments)

    async def count_replies(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, int]:
        """Count non-deleted direct replies for each comment."""
        counts: dict[CommentId, int] = {cid: 0 for cid in comment_ids}
        for comment in self._comments.values():
            if comment.parent_id in counts and comment.deleted_at is None:
                counts[comment.parent_id] += 1
        return counts

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        self._comments[comment.id] = comment
        return comment

    async def soft_delete(
        self, comment_id: CommentId, deleted_at: datetime
    ) -> Optional[Comment]:
        """Mark a comment as deleted."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            return None
        updated = comment.model_copy(
            update={"deleted_at": deleted_at, "updated_at": deleted_at}
        )
        self._comments[comment_id] = updated
        return updated

    async def update_content(
        self, comment_id: CommentId, content: str, updated_at: datetime
    ) -> Optional[Comment]:
        """Update the content of a non-deleted comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.deleted_at is not None:
            return None
        updated = comment.model_copy(
            update={"content": content, "updated_at": updated_at}
        )
        self._comments[comment_id] = updated
        return updated

    async def transition_status(
        self,
        comment_id: CommentId,
        from_status: CommentStatus,
        to_status: CommentStatus,
        updated_at: datetime,
    ) -> Optional[Comment]:
        """Change status only if the comment still has ``from_status``."""
        comment = self._comments.get(comment_id)
        if (
            comment is None
            or comment.deleted_at is not None
            or comment.status != from_status
        ):
            return None
        updated = comment.model_copy(
            update={"status": to_status, "updated_at": updated_at}
        )
        self._comments[comment_id] = updated
        return updated
