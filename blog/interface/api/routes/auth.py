"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from blog.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from blog.interface.api.dependencies import CurrentIdentity

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    identity: CurrentIdentity,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> GetCurrentUserResponse:
    """Get the user identified by the bearer token.

    Returns:
        Token identity and the stored profile, if any
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(identity=identity)
    )
