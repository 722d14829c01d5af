"""Get group use case."""

from datetime import datetime

from pydantic import BaseModel

from tavern.application.usecase.base import BaseUseCase, parse_group_id, parse_user_id
from tavern.domain.error import NotFoundError
from tavern.domain.model import Group
from tavern.domain.service import GroupService, UserService
from tavern.domain.value import GroupPrivacy, GroupType


class GroupResponse(BaseModel):
    """Group as exposed over the API."""

    id: str
    name: str
    type: GroupType
    privacy: GroupPrivacy
    leader: str
    member_count: int
    created_at: datetime

    @classmethod
    def from_group(cls, group: Group) -> "GroupResponse":
        return cls(
            id=str(group.id),
            name=group.name,
            type=group.type,
            privacy=group.privacy,
            leader=str(group.leader_id),
            member_count=group.member_count,
            created_at=group.created_at,
        )


class GetGroupRequest(BaseModel):
    """Get group request."""

    user_id: str
    group_id: str


class GetGroupUseCase(BaseUseCase):
    """Use case for reading a group visible to the caller."""

    def __init__(self, group_service: GroupService, user_service: UserService) -> None:
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: GetGroupRequest) -> GroupResponse:
        """Return the group if the caller may see it.

        Raises:
            NotFoundError: If the caller or the group cannot be found
        """
        viewer = await self.user_service.get_user_by_id(parse_user_id(request.user_id))
        if not viewer:
            raise NotFoundError("userNotFound")

        group = await self.group_service.get_visible_group(
            parse_group_id(request.group_id), viewer
        )
        return GroupResponse.from_group(group)
