"""Get moderation log use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import ModerationService, UserService
from blog.domain.value import CommentId, Identity


class ModerationLogEntry(BaseModel):
    """Audit entry in response."""

    id: str
    comment_id: str
    moderator_id: str
    action: str
    reason: str | None
    created_at: datetime


class GetModerationLogRequest(BaseModel):
    """Get moderation log request."""

    comment_id: str  # UUID string
    identity: Identity  # Authenticated actor, must be a moderator


class GetModerationLogResponse(BaseModel):
    """Get moderation log response."""

    entries: list[ModerationLogEntry]


class GetModerationLogUseCase:
    """Use case for reading the moderation audit trail of a comment."""

    def __init__(
        self, moderation_service: ModerationService, user_service: UserService
    ) -> None:
        self.moderation_service = moderation_service
        self.user_service = user_service

    async def execute(self, request: GetModerationLogRequest) -> GetModerationLogResponse:
        """Execute get moderation log flow.

        Raises:
            NotAuthorizedError: If the actor is not a moderator
            CommentNotFoundError: If the comment does not exist
        """
        await self.user_service.require_moderator(request.identity)

        history = await self.moderation_service.get_history(
            CommentId(UUID(request.comment_id))
        )
        return GetModerationLogResponse(
            entries=[
                ModerationLogEntry(
                    id=str(entry.id),
                    comment_id=str(entry.comment_id),
                    moderator_id=str(entry.moderator_id),
                    action=entry.action.value,
                    reason=entry.reason,
                    created_at=entry.created_at,
                )
                for entry in history
            ]
        )
