"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from board.application.usecase.user import (
    GetMyProfileRequest,
    GetMyProfileResponse,
    GetMyProfileUseCase,
    UpdateDisplayNameRequest,
    UpdateDisplayNameResponse,
    UpdateDisplayNameUseCase,
)
from board.domain.service import JWTService
from board.interface.api.session import require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateNameAPIRequest(BaseModel):
    """API request for changing the display name."""

    name: str = Field(min_length=1, max_length=20)


@router.get("/me", response_model=GetMyProfileResponse)
async def get_my_profile(
    get_my_profile_use_case: FromDishka[GetMyProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetMyProfileResponse:
    """Get the signed-in user's account with their posts and comments.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token, "view your profile")
    return await get_my_profile_use_case.execute(GetMyProfileRequest(user_id=user_id))


@router.patch("/me/name", response_model=UpdateDisplayNameResponse)
async def update_my_name(
    request: UpdateNameAPIRequest,
    update_display_name_use_case: FromDishka[UpdateDisplayNameUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateDisplayNameResponse:
    """Change the signed-in user's display name.

    Requires authentication. Posts and comments already written keep the
    old author name.
    """
    user_id = require_user_id(jwt_service, auth_token, "change your name")
    return await update_display_name_use_case.execute(
        UpdateDisplayNameRequest(user_id=user_id, name=request.name)
    )
