"""Current user routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from tavern.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    UserDocument,
)
from tavern.domain.service import JWTService
from tavern.interface.api.auth import authenticate

router = APIRouter(prefix="/user", tags=["user"], route_class=DishkaRoute)


@router.get("", response_model=UserDocument)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserDocument:
    """Get the authenticated user's document, including pending invitations."""
    user_id = authenticate(jwt_service, auth_token)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=user_id)
    )
