"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from tavern.application.usecase.auth import RegisterUserRequest, RegisterUserUseCase
from tavern.application.usecase.user import UserDocument
from tavern.config import Settings
from tavern.interface.api.auth import AUTH_COOKIE, AUTH_HEADER

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registering a local account."""

    username: str
    email: str | None = None
    group_invite: str | None = None


@router.post(
    "/register", response_model=UserDocument, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    response: Response,
    register_user_use_case: FromDishka[RegisterUserUseCase],
    settings: FromDishka[Settings],
) -> UserDocument:
    """Register a user and start a session.

    The auth token is set as an httponly cookie and echoed in the
    ``X-Auth-Token`` header for non-browser clients.

    Example:
        POST /auth/register
        {"username": "alice", "email": "alice@example.com"}
    """
    result = await register_user_use_case.execute(
        RegisterUserRequest(
            username=request.username,
            email=request.email,
            group_invite=request.group_invite,
        )
    )

    is_production = settings.environment == "production"
    response.set_cookie(
        key=AUTH_COOKIE,
        value=result.token,
        httponly=True,
        secure=is_production,
        samesite="lax",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )
    response.headers[AUTH_HEADER] = result.token

    return result.user
