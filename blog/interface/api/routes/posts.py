"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status
from pydantic import BaseModel

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from blog.interface.api.dependencies import CurrentIdentity

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str
    content: str


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post."""

    title: str | None = None
    content: str | None = None


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    identity: CurrentIdentity,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a new post. Requires authentication."""
    return await create_post_use_case.execute(
        CreatePostRequest(
            title=request.title, content=request.content, identity=identity
        )
    )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1),
    per_page: int | None = Query(default=None),
    author_id: UUID | None = Query(default=None),
) -> ListPostsResponse:
    """List live posts, newest first.

    Example:
        GET /posts?page=1&per_page=10

        Response:
        {
            "posts": [...],
            "pagination": {"total": 12, "page": 1, "per_page": 10, "total_pages": 2}
        }
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(
            page=page,
            per_page=per_page,
            author_id=str(author_id) if author_id else None,
        )
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a post by ID."""
    return await get_post_use_case.execute(GetPostRequest(post_id=str(post_id)))


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    identity: CurrentIdentity,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> UpdatePostResponse:
    """Update a post's title and/or content.

    Only the post author can edit.

    Args:
        post_id: Post UUID
        request: Fields to change
        identity: Authenticated caller
        update_post_use_case: Update post use case from DI

    Returns:
        Updated post
    """
    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=str(post_id),
            identity=identity,
            title=request.title,
            content=request.content,
        )
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: UUID,
    identity: CurrentIdentity,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> Response:
    """Soft-delete a post. Only the post author can delete."""
    await delete_post_use_case.execute(
        DeletePostRequest(post_id=str(post_id), identity=identity)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
