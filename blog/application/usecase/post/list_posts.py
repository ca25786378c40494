"""List posts use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.pagination import PaginationView
from blog.domain.service import PostService
from blog.domain.value import UserId

from .get_post import PostView


class ListPostsRequest(BaseModel):
    """List posts request."""

    page: int = 1
    per_page: int | None = None
    author_id: str | None = None  # UUID string


class ListPostsResponse(BaseModel):
    """Paginated posts response."""

    posts: list[PostView]
    pagination: PaginationView


class ListPostsUseCase:
    """Use case for listing live posts, newest first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Raises:
            ValidationError: If pagination parameters are out of range
        """
        page = await self.post_service.list_posts(
            page=request.page,
            per_page=request.per_page,
            author_id=UserId(UUID(request.author_id)) if request.author_id else None,
        )
        return ListPostsResponse(
            posts=[PostView.from_post(post) for post in page.items],
            pagination=PaginationView.from_page(page),
        )
