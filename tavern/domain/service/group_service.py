"""Group domain service."""

from uuid import uuid4

import logfire

from tavern.domain.error import NotAuthorizedError, NotFoundError
from tavern.domain.model.group import Group
from tavern.domain.model.user import User
from tavern.domain.repository import GroupRepository, UserRepository
from tavern.domain.value import GroupId, GroupPrivacy, GroupType

from .base import Service
from .user_service import UserService


class GroupService(Service):
    """Domain service for creating, finding and joining groups."""

    def __init__(
        self,
        group_repository: GroupRepository,
        user_repository: UserRepository,
        user_service: UserService,
    ) -> None:
        """Initialize group service.

        Args:
            group_repository: Group repository
            user_repository: User repository
            user_service: User domain service (for charging guild founders)
        """
        self.group_repository = group_repository
        self.user_repository = user_repository
        self.user_service = user_service

    async def create_group(
        self,
        founder: User,
        name: str,
        group_type: GroupType,
        privacy: GroupPrivacy,
        guild_cost: int,
    ) -> Group:
        """Create a group led by ``founder``.

        Guilds cost ``guild_cost`` balance. Parties are free, always private,
        and cannot be founded by someone already in a party.

        Raises:
            NotAuthorizedError: If the founder cannot afford the guild or is
                already in a party
        """
        with logfire.span(
            "group_service.create_group",
            founder_id=str(founder.id),
            type=group_type.value,
        ):
            if group_type == GroupType.PARTY:
                if founder.in_party:
                    raise NotAuthorizedError("messageGroupAlreadyInParty")
                privacy = GroupPrivacy.PRIVATE
            else:
                founder = await self.user_service.charge(founder, guild_cost)

            group = Group(
                id=GroupId(uuid4()),
                name=name,
                type=group_type,
                privacy=privacy,
                leader_id=founder.id,
                member_count=1,
            )
            saved = await self.group_repository.save(group)
            await self.user_repository.save(self._with_membership(founder, saved))

            logfire.info(
                "Group created",
                group_id=str(saved.id),
                type=group_type.value,
                leader_id=str(founder.id),
            )
            return saved

    async def get_group(self, group_id: GroupId) -> Group:
        """Get a group by ID.

        Raises:
            NotFoundError: If the group does not exist
        """
        group = await self.group_repository.find_by_id(group_id)
        if not group:
            raise NotFoundError("groupNotFound")
        return group

    async def get_visible_group(self, group_id: GroupId, viewer: User) -> Group:
        """Get a group the viewer is allowed to see.

        Public groups are visible to everyone, private ones only to members.

        Raises:
            NotFoundError: If the group does not exist or is hidden from the viewer
        """
        group = await self.group_repository.find_by_id(group_id)
        if not group:
            raise NotFoundError("groupNotFound")
        if not group.is_public and not viewer.is_member_of(group.id, group.type):
            logfire.info(
                "Private group hidden from non-member",
                group_id=str(group_id),
                viewer_id=str(viewer.id),
            )
            raise NotFoundError("groupNotFound")
        return group

    async def join_group(self, user: User, group: Group) -> Group:
        """Add ``user`` to ``group``, consuming their invitation if any.

        Raises:
            NotAuthorizedError: If the user is already a member, is in another
                party, or needs an invitation they don't have
        """
        with logfire.span(
            "group_service.join_group",
            user_id=str(user.id),
            group_id=str(group.id),
        ):
            if user.is_member_of(group.id, group.type):
                raise NotAuthorizedError(
                    "userAlreadyInGroup"
                    if group.type == GroupType.GUILD
                    else "userAlreadyInAParty"
                )

            invited = user.invitations.has(group.id, group.type)
            if group.type == GroupType.PARTY:
                if not invited:
                    raise NotAuthorizedError("messageGroupRequiresInvite")
                if user.in_party:
                    raise NotAuthorizedError("userAlreadyInAParty")
            elif not group.is_public and not invited:
                raise NotAuthorizedError("messageGroupRequiresInvite")

            joined = self._with_membership(user, group).model_copy(
                update={"invitations": user.invitations.without(group.id, group.type)}
            )
            await self.user_repository.save(joined)
            await self.group_repository.increment_member_count(group.id)

            logfire.info(
                "User joined group",
                user_id=str(user.id),
                group_id=str(group.id),
                type=group.type.value,
            )
            return await self.get_group(group.id)

    @staticmethod
    def _with_membership(user: User, group: Group) -> User:
        if group.type == GroupType.GUILD:
            return user.model_copy(update={"guild_ids": [*user.guild_ids, group.id]})
        return user.model_copy(update={"party_id": group.id})
