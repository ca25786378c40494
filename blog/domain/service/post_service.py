"""Post domain service."""

from uuid import uuid4

import logfire

from blog.domain.error import PostNotFoundError, ValidationError
from blog.domain.model.common import Page, utcnow
from blog.domain.model.post import Post
from blog.domain.repository import PostRepository
from blog.domain.value import Identity, PostId, UserId

from .base import Service, validate_pagination
from .ownership_service import OwnershipGuard

MAX_TITLE_LENGTH = 200
MAX_CONTENT_LENGTH = 50000


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, ownership_guard: OwnershipGuard
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            ownership_guard: Guard for author-only mutations
        """
        self.post_repository = post_repository
        self.ownership_guard = ownership_guard

    async def get_post(self, post_id: PostId) -> Post:
        """Get a live post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            PostNotFoundError: If the post does not exist or was deleted
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None or post.deleted_at is not None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise PostNotFoundError(str(post_id))
            return post

    async def list_posts(
        self,
        page: int = 1,
        per_page: int | None = None,
        author_id: UserId | None = None,
    ) -> Page[Post]:
        """List a page of live posts, newest first.

        Args:
            page: 1-based page number
            per_page: Page size
            author_id: Only include posts by this author

        Returns:
            Page of posts

        Raises:
            ValidationError: If page or per_page are out of range
        """
        per_page = validate_pagination(page, per_page)
        with logfire.span("post_service.list_posts", page=page, per_page=per_page):
            items, total = await self.post_repository.find_recent(
                author_id=author_id,
                limit=per_page,
                offset=(page - 1) * per_page,
            )
            return Page[Post](items=items, total=total, page=page, per_page=per_page)

    async def create_post(self, author_id: UserId, title: str, content: str) -> Post:
        """Create a post.

        Args:
            author_id: Author user ID
            title: Post title
            content: Post body

        Returns:
            Created post

        Raises:
            ValidationError: If title or content are invalid
        """
        with logfire.span("post_service.create_post", author_id=str(author_id)):
            self._validate(title, content)
            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                title=title,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), author_id=str(author_id))
            return saved

    async def update_post(
        self,
        post_id: PostId,
        identity: Identity | None,
        title: str | None = None,
        content: str | None = None,
    ) -> Post:
        """Update a post's title and/or content.

        Only the author may edit.

        Args:
            post_id: Post ID
            identity: Identity of the actor
            title: New title (None to keep)
            content: New content (None to keep)

        Returns:
            Updated post

        Raises:
            PostNotFoundError: If the post does not exist or was deleted
            NotAuthorizedError: If the actor is not the author
            ValidationError: If the new values are invalid
        """
        with logfire.span("post_service.update_post", post_id=str(post_id)):
            post = await self.get_post(post_id)
            self.ownership_guard.authorize_mutation(
                identity, post.author_id, "post", post_id
            )

            new_title = post.title if title is None else title
            new_content = post.content if content is None else content
            self._validate(new_title, new_content)

            updated = post.model_copy(
                update={
                    "title": new_title,
                    "content": new_content,
                    "updated_at": utcnow(),
                }
            )
            saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=str(post_id))
            return saved

    async def delete_post(self, post_id: PostId, identity: Identity | None) -> None:
        """Soft-delete a post.

        Args:
            post_id: Post ID
            identity: Identity of the actor

        Raises:
            PostNotFoundError: If the post does not exist or was deleted
            NotAuthorizedError: If the actor is not the author
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            post = await self.get_post(post_id)
            self.ownership_guard.authorize_mutation(
                identity, post.author_id, "post", post_id
            )
            deleted = await self.post_repository.soft_delete(post_id, utcnow())
            if deleted is None:
                raise PostNotFoundError(str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))

    @staticmethod
    def _validate(title: str, content: str) -> None:
        if not 1 <= len(title.strip()) <= MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Title must be between 1 and {MAX_TITLE_LENGTH} characters"
            )
        if not 1 <= len(content) <= MAX_CONTENT_LENGTH:
            raise ValidationError(
                f"Content must be between 1 and {MAX_CONTENT_LENGTH} characters"
            )
