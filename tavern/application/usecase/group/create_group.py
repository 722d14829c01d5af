"""Create group use case."""

import logfire
from pydantic import BaseModel, ValidationError

from tavern.application.usecase.base import BaseUseCase, parse_user_id
from tavern.application.usecase.group.get_group import GroupResponse
from tavern.config import Settings
from tavern.domain.error import BadRequestError, NotFoundError
from tavern.domain.service import GroupService, UserService
from tavern.domain.value import GroupName, GroupPrivacy, GroupType


class CreateGroupRequest(BaseModel):
    """Request to create a guild or party."""

    founder_id: str
    name: str
    type: GroupType
    privacy: GroupPrivacy = GroupPrivacy.PRIVATE


class CreateGroupUseCase(BaseUseCase):
    """Use case for founding a group."""

    def __init__(
        self,
        group_service: GroupService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        self.group_service = group_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: CreateGroupRequest) -> GroupResponse:
        """Create the group with the caller as leader and first member.

        Raises:
            BadRequestError: If the name is blank or too long
            NotAuthorizedError: If the founder can't afford a guild or is
                already in a party
        """
        try:
            name = GroupName(request.name)
        except ValidationError:
            raise BadRequestError("invalidReqParams")

        founder = await self.user_service.get_user_by_id(
            parse_user_id(request.founder_id), for_update=True
        )
        if not founder:
            raise NotFoundError("userNotFound")

        with logfire.span(
            "create_group", founder_id=request.founder_id, type=request.type.value
        ):
            group = await self.group_service.create_group(
                founder=founder,
                name=name.root,
                group_type=request.type,
                privacy=request.privacy,
                guild_cost=self.settings.groups.guild_cost,
            )
            return GroupResponse.from_group(group)
