"""Invitation domain service."""

import logfire

from tavern.domain.error import NotAuthorizedError
from tavern.domain.model.group import Group
from tavern.domain.model.invitation import Invitation
from tavern.domain.model.user import User
from tavern.domain.repository import UserRepository
from tavern.domain.value import GroupType, UserId

from .base import Service


class InvitationService(Service):
    """Domain service for inviting users to groups.

    Invitations are checked and built in memory first (``plan_invitation``)
    and written afterwards (``record``), so a request touching several
    users can reject before anything is persisted.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize invitation service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    def ensure_can_invite(self, user: User, group: Group) -> None:
        """Check the invitation rules for ``user`` and ``group``.

        Raises:
            NotAuthorizedError: If the user already has an invitation to the
                group or is already a member (guild) / in a party (party)
        """
        if group.type == GroupType.GUILD:
            if user.invitations.has(group.id, GroupType.GUILD):
                raise NotAuthorizedError("userAlreadyInvitedToGroup")
            if user.is_member_of(group.id, GroupType.GUILD):
                raise NotAuthorizedError("userAlreadyInGroup")
        else:
            if user.invitations.has(group.id, GroupType.PARTY):
                raise NotAuthorizedError("userAlreadyPendingInvitation")
            if user.in_party:
                raise NotAuthorizedError("userAlreadyInAParty")

    def plan_invitation(
        self, user: User, group: Group, inviter_id: UserId
    ) -> tuple[User, Invitation]:
        """Return ``user`` with a new invitation to ``group``, without saving.

        Planning twice for the same user (using the returned user) fails the
        second time, like inviting an already invited user.

        Raises:
            NotAuthorizedError: See ``ensure_can_invite``
        """
        self.ensure_can_invite(user, group)

        invitation = Invitation(id=group.id, name=group.name, inviter=inviter_id)
        invited = user.model_copy(
            update={"invitations": user.invitations.with_added(invitation, group.type)}
        )
        return invited, invitation

    async def record(self, invited_user: User) -> User:
        """Persist a user returned by ``plan_invitation``."""
        saved = await self.user_repository.save(invited_user)
        logfire.info("Invitations recorded", user_id=str(saved.id))
        return saved

    async def invite(self, user: User, group: Group, inviter_id: UserId) -> Invitation:
        """Invite a single user and persist immediately.

        Raises:
            NotAuthorizedError: See ``ensure_can_invite``
        """
        with logfire.span(
            "invitation_service.invite",
            user_id=str(user.id),
            group_id=str(group.id),
            inviter_id=str(inviter_id),
        ):
            invited, invitation = self.plan_invitation(user, group, inviter_id)
            await self.record(invited)
            return invitation
