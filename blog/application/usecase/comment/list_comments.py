"""List comments use cases."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.pagination import PaginationView
from blog.domain.service import CommentService, PostService, UserService
from blog.domain.value import CommentId, CommentStatus, PostId, UserId

from .view import CommentView, build_comment_views


class ListCommentsRequest(BaseModel):
    """List comments for a post request."""

    post_id: str  # UUID string
    page: int = 1
    per_page: int | None = None
    status: CommentStatus | None = None
    author_id: str | None = None


class ListRepliesRequest(BaseModel):
    """List direct replies to a comment request."""

    comment_id: str  # UUID string
    page: int = 1
    per_page: int | None = None


class ListCommentsResponse(BaseModel):
    """Paginated comments response."""

    comments: list[CommentView]
    pagination: PaginationView


class ListCommentsUseCase:
    """Use case for listing the comments of a post, oldest first."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service (for author summaries)
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Deleted comments are included as tombstones so that replies under
        them can still be rendered in place.

        Args:
            request: List comments request with filters and page

        Returns:
            Page of comment views with pagination totals

        Raises:
            PostNotFoundError: If the post does not exist
            ValidationError: If pagination parameters are out of range
        """
        post_id = PostId(UUID(request.post_id))
        await self.post_service.get_post(post_id)

        page = await self.comment_service.list_for_post(
            post_id=post_id,
            page=request.page,
            per_page=request.per_page,
            status=request.status,
            author_id=UserId(UUID(request.author_id)) if request.author_id else None,
        )

        comments = await build_comment_views(
            page.items, self.comment_service, self.user_service
        )
        return ListCommentsResponse(
            comments=comments, pagination=PaginationView.from_page(page)
        )


class ListRepliesUseCase:
    """Use case for listing the direct replies to a comment."""

    def __init__(self, comment_service: CommentService, user_service: UserService) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: ListRepliesRequest) -> ListCommentsResponse:
        """Execute list replies flow.

        Raises:
            CommentNotFoundError: If the parent comment does not exist
            ValidationError: If pagination parameters are out of range
        """
        page = await self.comment_service.list_replies(
            parent_id=CommentId(UUID(request.comment_id)),
            page=request.page,
            per_page=request.per_page,
        )
        comments = await build_comment_views(
            page.items, self.comment_service, self.user_service
        )
        return ListCommentsResponse(
            comments=comments, pagination=PaginationView.from_page(page)
        )
