"""Join group use case."""

from pydantic import BaseModel

from tavern.application.usecase.base import BaseUseCase, parse_group_id, parse_user_id
from tavern.application.usecase.group.get_group import GroupResponse
from tavern.domain.error import NotFoundError
from tavern.domain.service import GroupService, UserService


class JoinGroupRequest(BaseModel):
    """Join group request."""

    user_id: str
    group_id: str


class JoinGroupUseCase(BaseUseCase):
    """Use case for joining a group, usually by accepting an invitation."""

    def __init__(self, group_service: GroupService, user_service: UserService) -> None:
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: JoinGroupRequest) -> GroupResponse:
        """Join the group.

        Raises:
            NotFoundError: If the user or group doesn't exist
            NotAuthorizedError: If the membership rules forbid joining
        """
        user = await self.user_service.get_user_by_id(
            parse_user_id(request.user_id), for_update=True
        )
        if not user:
            raise NotFoundError("userNotFound")

        group = await self.group_service.get_group(parse_group_id(request.group_id))
        joined = await self.group_service.join_group(user, group)
        return GroupResponse.from_group(joined)
