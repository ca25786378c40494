"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from blog.domain.model import Comment, Follow, ModerationLog, Post, User
from blog.domain.value import (
    CommentId,
    CommentStatus,
    ModerationAction,
    ModerationLogId,
    PostId,
    UserId,
    UserRole,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        email=row["email"],
        display_name=row.get("display_name"),
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        role=UserRole(row.get("role") or UserRole.MEMBER.value),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    author_id = _optional_uuid(row.get("author_id"))
    parent_id = _optional_uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(author_id) if author_id else None,
        parent_id=CommentId(parent_id) if parent_id else None,
        content=row["content"],
        status=CommentStatus(row["status"]),
        depth=row["depth"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["status"] = comment.status.value
    return data


def row_to_moderation_log(row: Dict[str, Any]) -> ModerationLog:
    """Convert database row to ModerationLog domain model."""
    return ModerationLog(
        id=ModerationLogId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        moderator_id=UserId(_uuid(row["moderator_id"])),
        action=ModerationAction(row["action"]),
        reason=row.get("reason"),
        created_at=row["created_at"],
    )


def moderation_log_to_dict(entry: ModerationLog) -> Dict[str, Any]:
    """Convert ModerationLog domain model to database dict."""
    data = entry.model_dump()
    data["action"] = entry.action.value
    return data


def row_to_follow(row: Dict[str, Any]) -> Follow:
    """Convert database row to Follow domain model."""
    return Follow(
        follower_id=UserId(_uuid(row["follower_id"])),
        followee_id=UserId(_uuid(row["followee_id"])),
        created_at=row["created_at"],
    )


def follow_to_dict(follow: Follow) -> Dict[str, Any]:
    """Convert Follow domain model to database dict."""
    return follow.model_dump()
