"""Group routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, status
from pydantic import BaseModel, Field

from tavern.application.usecase.group import (
    CreateGroupRequest,
    CreateGroupUseCase,
    GetGroupRequest,
    GetGroupUseCase,
    GroupResponse,
    InviteResult,
    InviteToGroupRequest,
    InviteToGroupUseCase,
    JoinGroupRequest,
    JoinGroupUseCase,
)
from tavern.domain.service import JWTService
from tavern.domain.value import GroupPrivacy, GroupType
from tavern.interface.api.auth import authenticate

router = APIRouter(prefix="/groups", tags=["groups"], route_class=DishkaRoute)


class CreateGroupAPIRequest(BaseModel):
    """API request for creating a group."""

    name: str
    type: GroupType
    privacy: GroupPrivacy = GroupPrivacy.PRIVATE


class InviteAPIRequest(BaseModel):
    """API request for inviting users to a group.

    Both fields accept any JSON so that wrongly typed values reach the
    invite use case and get its specific error messages.
    """

    uuids: Any = Field(default=None)
    emails: Any = Field(default=None)


@router.post("", response_model=GroupResponse, status_code=status.HTTP_201_CREATED)
async def create_group(
    request: CreateGroupAPIRequest,
    create_group_use_case: FromDishka[CreateGroupUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GroupResponse:
    """Create a guild or party led by the current user.

    Guilds cost balance; parties are free but require not being in one.
    """
    user_id = authenticate(jwt_service, auth_token)
    return await create_group_use_case.execute(
        CreateGroupRequest(
            founder_id=user_id,
            name=request.name,
            type=request.type,
            privacy=request.privacy,
        )
    )


@router.get("/{group_id}", response_model=GroupResponse)
async def get_group(
    group_id: str,
    get_group_use_case: FromDishka[GetGroupUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GroupResponse:
    """Get a group visible to the current user."""
    user_id = authenticate(jwt_service, auth_token)
    return await get_group_use_case.execute(
        GetGroupRequest(user_id=user_id, group_id=group_id)
    )


@router.post("/{group_id}/join", response_model=GroupResponse)
async def join_group(
    group_id: str,
    join_group_use_case: FromDishka[JoinGroupUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GroupResponse:
    """Join a group, accepting the pending invitation if there is one."""
    user_id = authenticate(jwt_service, auth_token)
    return await join_group_use_case.execute(
        JoinGroupRequest(user_id=user_id, group_id=group_id)
    )


@router.post("/{group_id}/invite", response_model=list[InviteResult])
async def invite_to_group(
    group_id: str,
    invite_to_group_use_case: FromDishka[InviteToGroupUseCase],
    jwt_service: FromDishka[JWTService],
    request: InviteAPIRequest | None = Body(default=None),
    auth_token: str | None = Cookie(default=None),
) -> list[InviteResult]:
    """Invite users to a group by user id and/or email address.

    Example:
        POST /groups/{group_id}/invite
        {"uuids": ["<user id>"], "emails": [{"email": "bob@example.com", "name": "Bob"}]}

        Response:
        ["bob@example.com", {"id": "<group id>", "name": "My Guild", "inviter": "<user id>"}]
    """
    user_id = authenticate(jwt_service, auth_token)
    request = request or InviteAPIRequest()
    return await invite_to_group_use_case.execute(
        InviteToGroupRequest(
            inviter_id=user_id,
            group_id=group_id,
            uuids=request.uuids,
            emails=request.emails,
        )
    )
