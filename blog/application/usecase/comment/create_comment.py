"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.error import (
    CommentNotFoundError,
    ParentNotFoundError,
    ValidationError,
)
from blog.domain.service import CommentService, PostService, UserService
from blog.domain.value import CommentId, Identity, PostId

from .view import CommentView, build_comment_view


class CreateCommentRequest(BaseModel):
    """Create comment request.

    Either ``post_id`` or ``parent_id`` must be given. A reply created
    through ``/comments/{id}/replies`` only knows its parent; the post is
    taken from the parent in that case.
    """

    content: str
    post_id: str | None = None  # UUID string
    parent_id: str | None = None  # Parent comment ID for replies
    identity: Identity | None = None  # None for anonymous comments


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentView


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service (for author summaries)
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Resolve the post (from the request or from the parent comment)
        2. Verify the post exists via post service
        3. Create the comment via comment service (validates parent and nesting)

        Args:
            request: Create comment request

        Returns:
            Create comment response with the new comment

        Raises:
            ValidationError: If neither post nor parent is given, or the
                content is invalid
            PostNotFoundError: If the post does not exist
            ParentNotFoundError: If the parent comment does not exist
        """
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        if request.post_id:
            post_id = PostId(UUID(request.post_id))
        elif parent_id:
            try:
                parent = await self.comment_service.get_comment(parent_id)
            except CommentNotFoundError as e:
                raise ParentNotFoundError(str(parent_id)) from e
            post_id = parent.post_id
        else:
            raise ValidationError("post_id or parent_id is required")

        await self.post_service.get_post(post_id)

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            content=request.content,
            author_id=request.identity.id if request.identity else None,
            parent_id=parent_id,
        )

        view = await build_comment_view(comment, self.comment_service, self.user_service)
        return CreateCommentResponse(comment=view)
