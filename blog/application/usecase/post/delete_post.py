"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import PostService
from blog.domain.value import Identity, PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    identity: Identity  # Authenticated actor


class DeletePostUseCase:
    """Use case for soft-deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            PostNotFoundError: If the post does not exist or was deleted
            NotAuthorizedError: If the actor is not the author
        """
        await self.post_service.delete_post(
            PostId(UUID(request.post_id)), request.identity
        )
