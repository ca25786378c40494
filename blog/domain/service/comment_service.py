"""Comment domain service.

Manages comment threads: creation with nesting and parent-state rules,
author edits, soft deletion and paginated reads.
"""

from uuid import uuid4

import logfire

from blog.config import CommentSettings
from blog.domain.error import (
    CommentDeletedError,
    CommentNotFoundError,
    MaxNestingLevelError,
    ParentNotApprovedError,
    ParentNotFoundError,
    ThreadIntegrityError,
    ValidationError,
)
from blog.domain.model.comment import Comment
from blog.domain.model.common import Page, utcnow
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, CommentStatus, Identity, PostId, UserId

from .base import Service, validate_pagination
from .ownership_service import OwnershipGuard


class CommentPage(Page[Comment]):
    """A page of comments with pagination totals."""


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        ownership_guard: OwnershipGuard,
        settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            ownership_guard: Guard for author-only mutations
            settings: Comment thread settings
        """
        self.comment_repository = comment_repository
        self.ownership_guard = ownership_guard
        self.settings = settings

    async def create_comment(
        self,
        post_id: PostId,
        content: str,
        author_id: UserId | None = None,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or a reply to another comment.

        New comments always start in the pending state. A reply is only
        accepted under an approved, non-deleted parent of the same post, and
        only while the parent chain stays below the nesting limit.

        Args:
            post_id: Post ID
            content: Comment content
            author_id: Author user ID (None for anonymous comments)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is invalid or the parent belongs to
                another post
            ParentNotFoundError: If the parent is missing or deleted
            ParentNotApprovedError: If the parent is not approved
            MaxNestingLevelError: If the reply would be nested too deeply
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id) if author_id else None,
            parent_id=str(parent_id) if parent_id else None,
        ):
            self._validate_content(content)

            depth = 0
            if parent_id:
                # Lock the parent so its state and depth cannot change
                # between this check and the insert below
                parent = await self.comment_repository.find_by_id_for_update(parent_id)
                depth = await self._reply_depth(parent, parent_id, post_id)

            now = utcnow()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                parent_id=parent_id,
                content=content,
                status=CommentStatus.PENDING,
                depth=depth,
                created_at=now,
                updated_at=now,
                deleted_at=None,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
                anonymous=author_id is None,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Soft-deleted comments are returned; callers decide how to present
        them.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            CommentNotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise CommentNotFoundError(str(comment_id))
            return comment

    async def update_content(
        self,
        comment_id: CommentId,
        identity: Identity | None,
        content: str,
    ) -> Comment:
        """Update the content of a comment.

        Only the author may edit. The moderation status is left unchanged.

        Args:
            comment_id: Comment ID
            identity: Identity of the actor
            content: New content

        Returns:
            Updated comment

        Raises:
            ValidationError: If content is invalid
            CommentNotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
            CommentDeletedError: If the comment has been deleted
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            self._validate_content(content)

            comment = await self.get_comment(comment_id)
            self.ownership_guard.authorize_mutation(
                identity, comment.author_id, "comment", comment_id
            )
            if comment.is_deleted:
                raise CommentDeletedError(str(comment_id))

            updated = await self.comment_repository.update_content(
                comment_id, content, utcnow()
            )
            if updated is None:
                # Deleted concurrently after the read above
                raise CommentDeletedError(str(comment_id))

            logfire.info("Comment content updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(
        self, comment_id: CommentId, identity: Identity | None
    ) -> Comment:
        """Soft-delete a comment.

        The comment becomes a tombstone: it stays addressable so replies
        under it remain reachable. Replies are not deleted.

        Args:
            comment_id: Comment ID
            identity: Identity of the actor

        Returns:
            The tombstoned comment

        Raises:
            CommentNotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
            CommentDeletedError: If the comment was already deleted
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            comment = await self.get_comment(comment_id)
            self.ownership_guard.authorize_mutation(
                identity, comment.author_id, "comment", comment_id
            )
            if comment.is_deleted:
                raise CommentDeletedError(str(comment_id))

            deleted = await self.comment_repository.soft_delete(comment_id, utcnow())
            if deleted is None:
                raise CommentDeletedError(str(comment_id))

            logfire.info("Comment deleted", comment_id=str(comment_id))
            return deleted

    async def list_for_post(
        self,
        post_id: PostId,
        page: int = 1,
        per_page: int | None = None,
        status: CommentStatus | None = None,
        author_id: UserId | None = None,
    ) -> CommentPage:
        """List a page of comments on a post, oldest first.

        Pages past the end are empty but still report the correct totals.

        Args:
            post_id: Post ID
            page: 1-based page number
            per_page: Page size (defaults to the configured size)
            status: Only include comments with this status
            author_id: Only include comments by this author

        Returns:
            Page of comments

        Raises:
            ValidationError: If page or per_page are out of range
        """
        per_page = self._validate_page(page, per_page)
        with logfire.span(
            "comment_service.list_for_post",
            post_id=str(post_id),
            page=page,
            per_page=per_page,
            status=status.value if status else None,
        ):
            items, total = await self.comment_repository.find_by_post(
                post_id=post_id,
                status=status,
                author_id=author_id,
                limit=per_page,
                offset=(page - 1) * per_page,
            )
            logfire.info(
                "Comments listed for post",
                post_id=str(post_id),
                count=len(items),
                total=total,
            )
            return CommentPage(items=items, total=total, page=page, per_page=per_page)

    async def list_replies(
        self,
        parent_id: CommentId,
        page: int = 1,
        per_page: int | None = None,
    ) -> CommentPage:
        """List a page of direct replies to a comment, oldest first.

        Args:
            parent_id: Parent comment ID
            page: 1-based page number
            per_page: Page size (defaults to the configured size)

        Returns:
            Page of replies

        Raises:
            ValidationError: If page or per_page are out of range
            CommentNotFoundError: If the parent comment does not exist
        """
        per_page = self._validate_page(page, per_page)
        with logfire.span(
            "comment_service.list_replies",
            parent_id=str(parent_id),
            page=page,
            per_page=per_page,
        ):
            await self.get_comment(parent_id)
            items, total = await self.comment_repository.find_children(
                parent_id=parent_id,
                limit=per_page,
                offset=(page - 1) * per_page,
            )
            return CommentPage(items=items, total=total, page=page, per_page=per_page)

    async def count_replies(self, comment_ids: list[CommentId]) -> dict[CommentId, int]:
        """Count non-deleted direct replies for each comment.

        Args:
            comment_ids: Comment IDs

        Returns:
            Mapping of comment ID to reply count
        """
        if not comment_ids:
            return {}
        return await self.comment_repository.count_replies(comment_ids)

    async def _reply_depth(
        self,
        parent: Comment | None,
        parent_id: CommentId,
        post_id: PostId,
    ) -> int:
        """Validate a reply's parent and compute the reply's depth."""
        if parent is None or parent.is_deleted:
            logfire.warn(
                "Parent comment not found",
                parent_id=str(parent_id),
                deleted=parent is not None,
            )
            raise ParentNotFoundError(str(parent_id))

        if parent.post_id != post_id:
            logfire.warn(
                "Parent comment does not belong to post",
                parent_id=str(parent_id),
                parent_post_id=str(parent.post_id),
                target_post_id=str(post_id),
            )
            raise ValidationError("Parent comment does not belong to this post")

        if parent.status != CommentStatus.APPROVED:
            logfire.warn(
                "Reply to unapproved comment rejected",
                parent_id=str(parent_id),
                parent_status=parent.status.value,
            )
            raise ParentNotApprovedError(str(parent_id))

        # Ancestors of the new reply, counting the direct parent as 1
        ancestors = parent.depth + 1
        walked = await self._count_ancestors(parent)
        if walked != ancestors:
            logfire.warn(
                "Stored comment depth disagrees with parent chain",
                parent_id=str(parent_id),
                stored=ancestors,
                walked=walked,
            )
            ancestors = max(ancestors, walked)

        if ancestors >= self.settings.max_nesting_level:
            logfire.warn(
                "Maximum nesting level reached",
                parent_id=str(parent_id),
                ancestors=ancestors,
            )
            raise MaxNestingLevelError(self.settings.max_nesting_level)

        return ancestors

    async def _count_ancestors(self, parent: Comment) -> int:
        """Walk up the parent chain starting at ``parent``.

        The walk stops after max_nesting_level + 1 steps, which is enough to
        know whether the limit is exceeded and guarantees termination on
        corrupted data.

        Raises:
            ThreadIntegrityError: If the chain contains a cycle
        """
        limit = self.settings.max_nesting_level + 1
        seen = {parent.id}
        count = 1
        current = parent

        while current.parent_id is not None and count < limit:
            if current.parent_id in seen:
                logfire.error(
                    "Cycle detected in comment thread",
                    comment_id=str(current.id),
                    parent_id=str(current.parent_id),
                )
                raise ThreadIntegrityError(
                    f"Comment thread containing {current.id} has a parent cycle"
                )
            ancestor = await self.comment_repository.find_by_id(current.parent_id)
            if ancestor is None:
                break
            seen.add(ancestor.id)
            count += 1
            current = ancestor

        return count

    def _validate_content(self, content: str) -> None:
        """Validate comment content length."""
        max_length = self.settings.max_content_length
        if not 1 <= len(content) <= max_length:
            raise ValidationError(
                f"Comment must be between 1 and {max_length} characters"
            )

    def _validate_page(self, page: int, per_page: int | None) -> int:
        """Validate pagination parameters and return the effective page size."""
        return validate_pagination(
            page,
            per_page,
            default_per_page=self.settings.default_per_page,
            max_per_page=self.settings.max_per_page,
        )
