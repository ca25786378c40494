"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta
from uuid import uuid4

from blog.domain.model import Comment, Post, User
from blog.domain.model.common import utcnow
from blog.domain.value import (
    CommentId,
    CommentStatus,
    Identity,
    PostId,
    UserId,
    UserRole,
)


def make_user(
    username: str = "alice",
    role: UserRole = UserRole.MEMBER,
    user_id: UserId | None = None,
) -> User:
    """Build a user with a unique ID."""
    return User(
        id=user_id or UserId(uuid4()),
        username=username,
        email=f"{username}@example.com",
        display_name=username.title(),
        role=role,
    )


def identity_for(user: User) -> Identity:
    """Identity as the authentication resolver would produce it for a user."""
    return Identity(id=user.id, email=user.email)


def make_post(author_id: UserId, title: str = "Hello world") -> Post:
    """Build a post owned by ``author_id``."""
    return Post(
        id=PostId(uuid4()),
        author_id=author_id,
        title=title,
        content="Post body",
    )


def make_comment(
    post_id: PostId,
    author_id: UserId | None = None,
    parent: Comment | None = None,
    status: CommentStatus = CommentStatus.APPROVED,
    content: str = "A comment",
    created_at: datetime | None = None,
    deleted: bool = False,
) -> Comment:
    """Build a stored comment directly, bypassing the service rules.

    Used to set up threads in states the service would only reach after
    moderation or deletion.
    """
    created = created_at or utcnow()
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id,
        parent_id=parent.id if parent else None,
        content=content,
        status=status,
        depth=parent.depth + 1 if parent else 0,
        created_at=created,
        updated_at=created,
        deleted_at=created + timedelta(seconds=1) if deleted else None,
    )
