"""Create post use case."""

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import Identity

from .get_post import PostView


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str
    identity: Identity  # Authenticated author


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostView


class CreatePostUseCase:
    """Use case for publishing a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            Create post response with the new post

        Raises:
            ValidationError: If title or content are invalid
        """
        post = await self.post_service.create_post(
            author_id=request.identity.id,
            title=request.title,
            content=request.content,
        )
        return CreatePostResponse(post=PostView.from_post(post))
