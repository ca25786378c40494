"""Comment repository interface."""

from abc import abstractmethod
from datetime import datetime
from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.repository.base import SoftDeletableRepository
from blog.domain.value import CommentId, CommentStatus, PostId, UserId


class CommentRepository(SoftDeletableRepository[Comment, CommentId]):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id_for_update(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment and lock it for the rest of the transaction.

        Used when creating a reply so the parent's existence, status and
        depth are read and the reply is written in one atomic step.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[CommentStatus] = None,
        author_id: Optional[UserId] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Comment], int]:
        """Find a page of comments for a post, oldest first.

        Soft-deleted comments are included so threads stay addressable.

        Args:
            post_id: The post ID
            status: Only return comments with this status
            author_id: Only return comments by this author
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Tuple of (page of comments, total matching comments)
        """
        pass

    @abstractmethod
    async def find_children(
        self,
        parent_id: CommentId,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Comment], int]:
        """Find a page of direct replies to a comment, oldest first.

        Args:
            parent_id: The parent comment ID
            limit: Maximum number of replies to return
            offset: Number of replies to skip

        Returns:
            Tuple of (page of replies, total replies)
        """
        pass

    @abstractmethod
    async def count_replies(
        self, comment_ids: list[CommentId]
    ) -> dict[CommentId, int]:
        """Count non-deleted direct replies for each comment.

        Args:
            comment_ids: Comments to count replies for

        Returns:
            Mapping of comment ID to reply count (0 for comments without replies)
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, updated_at: datetime
    ) -> Optional[Comment]:
        """Update the content of a non-deleted comment.

        Args:
            comment_id: Comment ID
            content: New content
            updated_at: Modification timestamp

        Returns:
            Updated comment, or None if the comment is missing or deleted
        """
        pass

    @abstractmethod
    async def transition_status(
        self,
        comment_id: CommentId,
        from_status: CommentStatus,
        to_status: CommentStatus,
        updated_at: datetime,
    ) -> Optional[Comment]:
        """Change a comment's status only if it still has ``from_status``.

        The check and the write happen in a single statement so that two
        concurrent moderators cannot both move the same comment.

        Args:
            comment_id: Comment ID
            from_status: Status the comment must currently have
            to_status: New status
            updated_at: Modification timestamp

        Returns:
            Updated comment, or None if the comment is missing, deleted or
            no longer in ``from_status``
        """
        pass
