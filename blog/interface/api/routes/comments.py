"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel, Field

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    GetModerationLogRequest,
    GetModerationLogResponse,
    GetModerationLogUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from blog.domain.value import CommentStatus
from blog.interface.api.dependencies import CurrentIdentity, OptionalIdentity

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    post_id: UUID
    parent_id: UUID | None = None  # Parent comment ID for replies
    content: str


class CreateReplyAPIRequest(BaseModel):
    """API request for replying to a comment."""

    content: str


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str


class ModerateCommentAPIRequest(BaseModel):
    """API request for moderating a comment."""

    action: str
    reason: str | None = Field(default=None, max_length=1000)


@router.post(
    "/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    identity: OptionalIdentity,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Authentication is optional; comments without a token are anonymous.
    New comments start in the pending state.

    Args:
        request: Comment creation data
        identity: Caller identity, if a bearer token was sent
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=str(request.post_id),
            parent_id=str(request.parent_id) if request.parent_id else None,
            content=request.content,
            identity=identity,
        )
    )


@router.post(
    "/comments/{comment_id}/replies",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    comment_id: UUID,
    request: CreateReplyAPIRequest,
    identity: OptionalIdentity,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Reply to a comment.

    The reply is attached to the parent's post. The parent must be
    approved and the thread must not already be at its nesting limit.
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            parent_id=str(comment_id),
            content=request.content,
            identity=identity,
        )
    )


@router.get("/comments/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: UUID,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get a comment by ID.

    Deleted comments are returned as tombstones.
    """
    return await get_comment_use_case.execute(
        GetCommentRequest(comment_id=str(comment_id))
    )


@router.patch("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    identity: CurrentIdentity,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> UpdateCommentResponse:
    """Update a comment's content.

    Only the comment author can edit.

    Args:
        comment_id: Comment UUID
        request: Update data (content)
        identity: Authenticated caller
        update_comment_use_case: Update comment use case from DI

    Returns:
        Updated comment
    """
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=str(comment_id),
            content=request.content,
            identity=identity,
        )
    )


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: UUID,
    identity: CurrentIdentity,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> Response:
    """Soft-delete a comment. Only the comment author can delete."""
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), identity=identity)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/comments/{comment_id}/moderate", response_model=ModerateCommentResponse
)
async def moderate_comment(
    comment_id: UUID,
    request: ModerateCommentAPIRequest,
    identity: CurrentIdentity,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
) -> ModerateCommentResponse:
    """Approve, reject or mark a pending comment as spam.

    Requires a moderator. Each successful action is recorded in the
    comment's moderation log.

    Args:
        comment_id: Comment UUID
        request: Action and optional reason
        identity: Authenticated caller
        moderate_comment_use_case: Moderate comment use case from DI

    Returns:
        The moderated comment
    """
    return await moderate_comment_use_case.execute(
        ModerateCommentRequest(
            comment_id=str(comment_id),
            action=request.action,
            reason=request.reason,
            identity=identity,
        )
    )


@router.get(
    "/comments/{comment_id}/moderation-log", response_model=GetModerationLogResponse
)
async def get_moderation_log(
    comment_id: UUID,
    identity: CurrentIdentity,
    get_moderation_log_use_case: FromDishka[GetModerationLogUseCase],
) -> GetModerationLogResponse:
    """Get the moderation audit trail of a comment. Requires a moderator."""
    return await get_moderation_log_use_case.execute(
        GetModerationLogRequest(comment_id=str(comment_id), identity=identity)
    )


@router.get("/comments/{comment_id}/replies", response_model=ListCommentsResponse)
async def list_replies(
    comment_id: UUID,
    list_replies_use_case: FromDishka[ListRepliesUseCase],
    page: int = Query(default=1),
    per_page: int | None = Query(default=None),
) -> ListCommentsResponse:
    """List the direct replies to a comment, oldest first."""
    return await list_replies_use_case.execute(
        ListRepliesRequest(comment_id=str(comment_id), page=page, per_page=per_page)
    )


@router.get("/posts/{post_id}/comments", response_model=ListCommentsResponse)
async def list_post_comments(
    post_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    page: int = Query(default=1),
    per_page: int | None = Query(default=None),
    comment_status: CommentStatus | None = Query(default=None, alias="status"),
    author_id: UUID | None = Query(default=None),
) -> ListCommentsResponse:
    """List the comments of a post, oldest first.

    Args:
        post_id: Post UUID
        list_comments_use_case: List comments use case from DI
        page: 1-based page number
        per_page: Page size (1-100, default 20)
        comment_status: Only include comments with this status
        author_id: Only include comments by this author

    Returns:
        Page of comments with pagination totals

    Example:
        GET /posts/3fa8.../comments?page=2&per_page=10&status=approved

        Response:
        {
            "comments": [...],
            "pagination": {"total": 25, "page": 2, "per_page": 10, "total_pages": 3}
        }
    """
    return await list_comments_use_case.execute(
        ListCommentsRequest(
            post_id=str(post_id),
            page=page,
            per_page=per_page,
            status=comment_status,
            author_id=str(author_id) if author_id else None,
        )
    )
