"""Get post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.domain.model import Post
from blog.domain.service import PostService
from blog.domain.value import PostId


class PostView(BaseModel):
    """Post as presented to API clients."""

    id: str
    author_id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostView":
        return cls(
            id=str(post.id),
            author_id=str(post.author_id),
            title=post.title,
            content=post.content,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostView


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            PostNotFoundError: If the post does not exist or was deleted
        """
        post = await self.post_service.get_post(PostId(UUID(request.post_id)))
        return GetPostResponse(post=PostView.from_post(post))
