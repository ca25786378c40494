"""Moderate comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService, ModerationService, UserService
from blog.domain.value import CommentId, Identity

from .view import CommentView, build_comment_view


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    comment_id: str  # UUID string
    action: str  # approve | reject | mark_as_spam
    reason: str | None = None
    identity: Identity  # Authenticated actor, must be a moderator


class ModerateCommentResponse(BaseModel):
    """Moderate comment response."""

    comment: CommentView


class ModerateCommentUseCase:
    """Use case for approving, rejecting or marking a comment as spam."""

    def __init__(
        self,
        moderation_service: ModerationService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize moderate comment use case.

        Args:
            moderation_service: Moderation domain service
            comment_service: Comment domain service (for reply counts)
            user_service: User domain service (moderator check and authors)
        """
        self.moderation_service = moderation_service
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: ModerateCommentRequest) -> ModerateCommentResponse:
        """Execute moderation flow.

        Steps:
        1. Require moderator capability for the actor
        2. Parse the action
        3. Transition the comment and append the audit entry

        Args:
            request: Moderate comment request

        Returns:
            Moderate comment response with the updated comment

        Raises:
            NotAuthorizedError: If the actor is not a moderator
            InvalidModerationError: If the action is not recognised
            CommentNotFoundError: If the comment does not exist
            CommentDeletedError: If the comment has been deleted
            AlreadyModeratedError: If the comment is no longer pending
        """
        moderator = await self.user_service.require_moderator(request.identity)
        action = self.moderation_service.parse_action(request.action)

        comment = await self.moderation_service.moderate(
            comment_id=CommentId(UUID(request.comment_id)),
            moderator_id=moderator.id,
            action=action,
            reason=request.reason,
        )
        view = await build_comment_view(comment, self.comment_service, self.user_service)
        return ModerateCommentResponse(comment=view)
