"""Comment view models shared by the comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from blog.domain.model import Comment, User
from blog.domain.service import CommentService, UserService
from blog.domain.value import CommentId, UserId

TOMBSTONE_CONTENT = "[deleted]"


class CommentAuthor(BaseModel):
    """Public author summary embedded in a comment."""

    id: str
    username: str
    display_name: str | None = None
    avatar_url: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "CommentAuthor":
        return cls(
            id=str(user.id),
            username=user.username,
            display_name=user.display_name,
            avatar_url=user.avatar_url,
        )


class CommentView(BaseModel):
    """Comment as presented to API clients.

    Deleted comments are rendered as tombstones: content is replaced and
    the author is hidden, but the ID, parent and reply count stay so the
    thread remains navigable.
    """

    id: str
    post_id: str
    author: CommentAuthor | None
    parent_id: str | None
    content: str
    status: str
    depth: int
    is_deleted: bool
    created_at: datetime
    updated_at: datetime
    replies_count: int


def to_comment_view(
    comment: Comment,
    authors: dict[UserId, User],
    replies: dict[CommentId, int],
) -> CommentView:
    """Convert a comment to its view, masking tombstones."""
    author = None
    if not comment.is_deleted and comment.author_id is not None:
        user = authors.get(comment.author_id)
        if user is not None:
            author = CommentAuthor.from_user(user)

    return CommentView(
        id=str(comment.id),
        post_id=str(comment.post_id),
        author=author,
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        content=TOMBSTONE_CONTENT if comment.is_deleted else comment.content,
        status=comment.status.value,
        depth=comment.depth,
        is_deleted=comment.is_deleted,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        replies_count=replies.get(comment.id, 0),
    )


async def build_comment_views(
    comments: list[Comment],
    comment_service: CommentService,
    user_service: UserService,
) -> list[CommentView]:
    """Build views for a batch of comments.

    Authors and reply counts are fetched in one query each.
    """
    if not comments:
        return []

    author_ids = [c.author_id for c in comments if c.author_id and not c.is_deleted]
    authors = await user_service.get_many(author_ids)
    replies = await comment_service.count_replies([c.id for c in comments])

    return [to_comment_view(c, authors, replies) for c in comments]


async def build_comment_view(
    comment: Comment,
    comment_service: CommentService,
    user_service: UserService,
) -> CommentView:
    """Build the view for a single comment."""
    views = await build_comment_views([comment], comment_service, user_service)
    return views[0]
