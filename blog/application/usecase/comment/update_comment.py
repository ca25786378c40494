"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService, UserService
from blog.domain.value import CommentId, Identity

from .view import CommentView, build_comment_view


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    content: str
    identity: Identity  # Authenticated actor


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentView


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService, user_service: UserService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service (for author summaries)
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        The moderation status is left unchanged by an edit.

        Args:
            request: Update comment request

        Returns:
            Update comment response with the edited comment

        Raises:
            ValidationError: If the new content is invalid
            CommentNotFoundError: If the comment does not exist
            NotAuthorizedError: If the actor is not the author
            CommentDeletedError: If the comment has been deleted
        """
        comment = await self.comment_service.update_content(
            comment_id=CommentId(UUID(request.comment_id)),
            identity=request.identity,
            content=request.content,
        )
        view = await build_comment_view(comment, self.comment_service, self.user_service)
        return UpdateCommentResponse(comment=view)
