"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import Identity, PostId

from .get_post import PostView


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str  # UUID string
    identity: Identity  # Authenticated actor
    title: str | None = None
    content: str | None = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: PostView


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            PostNotFoundError: If the post does not exist or was deleted
            NotAuthorizedError: If the actor is not the author
            ValidationError: If the new values are invalid
        """
        post = await self.post_service.update_post(
            post_id=PostId(UUID(request.post_id)),
            identity=request.identity,
            title=request.title,
            content=request.content,
        )
        return UpdatePostResponse(post=PostView.from_post(post))
