"""Delete comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, Identity


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    identity: Identity  # Authenticated actor


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted_at: datetime


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Replies under the comment are left untouched.

        Raises:
            CommentNotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
            CommentDeletedError: If the comment was already deleted
        """
        comment = await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), request.identity
        )
        return DeleteCommentResponse(
            comment_id=str(comment.id),
            deleted_at=comment.deleted_at,
        )
