"""Moderation domain service.

Comments move from PENDING to exactly one of APPROVED, REJECTED or SPAM.
Each successful transition appends an entry to the moderation log. A
comment that has left PENDING cannot be moderated again.
"""

from uuid import uuid4

import logfire

from blog.domain.error import (
    AlreadyModeratedError,
    CommentDeletedError,
    CommentNotFoundError,
    InvalidModerationError,
)
from blog.domain.model.comment import Comment
from blog.domain.model.common import utcnow
from blog.domain.model.moderation_log import ModerationLog
from blog.domain.repository import CommentRepository, ModerationLogRepository
from blog.domain.value import (
    CommentId,
    CommentStatus,
    ModerationAction,
    ModerationLogId,
    UserId,
)

from .base import Service


class ModerationService(Service):
    """Domain service for the comment moderation state machine."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        moderation_log_repository: ModerationLogRepository,
    ) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
            moderation_log_repository: Append-only audit log
        """
        self.comment_repository = comment_repository
        self.moderation_log_repository = moderation_log_repository

    @staticmethod
    def parse_action(action: ModerationAction | str) -> ModerationAction:
        """Convert a raw action name into a ModerationAction.

        Raises:
            InvalidModerationError: If the action is not recognised
        """
        if isinstance(action, ModerationAction):
            return action
        try:
            return ModerationAction(action)
        except ValueError:
            raise InvalidModerationError(str(action))

    async def moderate(
        self,
        comment_id: CommentId,
        moderator_id: UserId,
        action: ModerationAction | str,
        reason: str | None = None,
    ) -> Comment:
        """Apply a moderation action to a pending comment.

        The status change is a conditional write: if another moderator acts
        on the same comment first, this call fails with AlreadyModeratedError
        instead of overwriting their decision.

        Args:
            comment_id: Comment ID
            moderator_id: ID of the moderator acting
            action: Moderation action
            reason: Optional reason recorded in the audit log

        Returns:
            The moderated comment

        Raises:
            InvalidModerationError: If the action is not recognised
            CommentNotFoundError: If the comment does not exist
            CommentDeletedError: If the comment has been deleted
            AlreadyModeratedError: If the comment is no longer pending
        """
        action = self.parse_action(action)
        target = action.target_status

        with logfire.span(
            "moderation_service.moderate",
            comment_id=str(comment_id),
            moderator_id=str(moderator_id),
            action=action.value,
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise CommentNotFoundError(str(comment_id))
            if comment.is_deleted:
                raise CommentDeletedError(str(comment_id))
            if comment.status != CommentStatus.PENDING:
                logfire.warn(
                    "Comment already moderated",
                    comment_id=str(comment_id),
                    status=comment.status.value,
                )
                raise AlreadyModeratedError(str(comment_id), comment.status.value)

            now = utcnow()
            updated = await self.comment_repository.transition_status(
                comment_id,
                from_status=CommentStatus.PENDING,
                to_status=target,
                updated_at=now,
            )
            if updated is None:
                # Lost a race with another moderator (or a delete)
                current = await self.comment_repository.find_by_id(comment_id)
                if current is not None and current.is_deleted:
                    raise CommentDeletedError(str(comment_id))
                status = current.status.value if current else "unknown"
                logfire.warn(
                    "Concurrent moderation detected",
                    comment_id=str(comment_id),
                    status=status,
                )
                raise AlreadyModeratedError(str(comment_id), status)

            await self.moderation_log_repository.append(
                ModerationLog(
                    id=ModerationLogId(uuid4()),
                    comment_id=comment_id,
                    moderator_id=moderator_id,
                    action=action,
                    reason=reason,
                    created_at=now,
                )
            )

            logfire.info(
                "Comment moderated",
                comment_id=str(comment_id),
                moderator_id=str(moderator_id),
                action=action.value,
                status=target.value,
            )
            return updated

    async def get_history(self, comment_id: CommentId) -> list[ModerationLog]:
        """Get the moderation audit trail of a comment.

        Args:
            comment_id: Comment ID

        Returns:
            Audit entries, oldest first

        Raises:
            CommentNotFoundError: If the comment does not exist
        """
        with logfire.span(
            "moderation_service.get_history", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise CommentNotFoundError(str(comment_id))
            return await self.moderation_log_repository.find_by_comment(comment_id)
