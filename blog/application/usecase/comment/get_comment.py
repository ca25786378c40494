"""Get comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService, UserService
from blog.domain.value import CommentId

from .view import CommentView, build_comment_view


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string


class GetCommentResponse(BaseModel):
    """Get comment response."""

    comment: CommentView


class GetCommentUseCase:
    """Use case for reading a single comment (tombstones included)."""

    def __init__(self, comment_service: CommentService, user_service: UserService) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            CommentNotFoundError: If the comment does not exist
        """
        comment = await self.comment_service.get_comment(
            CommentId(UUID(request.comment_id))
        )
        view = await build_comment_view(comment, self.comment_service, self.user_service)
        return GetCommentResponse(comment=view)
