"""Invite to group use case."""

from typing import Any, Union
from uuid import UUID

import logfire
from pydantic import BaseModel

from tavern.adapter.error import EmailDeliveryError
from tavern.application.usecase.base import BaseUseCase, parse_group_id, parse_user_id
from tavern.application.usecase.user.get_current_user import InvitationItem
from tavern.config import Settings
from tavern.domain.error import BadRequestError, NotFoundError
from tavern.domain.model import Group, Invitation, User
from tavern.domain.service import (
    GroupService,
    InvitationService,
    NotificationService,
    UserService,
)
from tavern.domain.value import UserId


class InviteToGroupRequest(BaseModel):
    """Request to invite users to a group.

    ``uuids`` and ``emails`` are taken as sent by the client; their shape
    is checked by the use case so that each problem gets its own message.
    """

    inviter_id: str
    group_id: str
    uuids: Any = None
    emails: Any = None


class EmailInvite(BaseModel):
    """A validated invite-by-email entry."""

    email: str
    name: str | None = None


# Invitation summary for invited users, or the address an invite email went to
InviteResult = Union[InvitationItem, str]


class InviteToGroupUseCase(BaseUseCase):
    """Use case for inviting users to a guild or party by id or email.

    Every check runs for every target before anything is written, so a
    request either records all of its invitations or none.

    Invitation emails are sent after the invitations are recorded but before
    the request commits, with the target rows still locked. Only addresses
    without an account are emailed and nothing is stored for them: the
    signed link carries the group and inviter, and registering with it
    creates the invitation. A commit that fails after sending therefore
    loses only the stored invitations, and the request reports the failure.
    """

    def __init__(
        self,
        user_service: UserService,
        group_service: GroupService,
        invitation_service: InvitationService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            user_service: User domain service
            group_service: Group domain service
            invitation_service: Invitation domain service
            notification_service: Sends invitation emails
            settings: Application settings
        """
        self.user_service = user_service
        self.group_service = group_service
        self.invitation_service = invitation_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(self, request: InviteToGroupRequest) -> list[InviteResult]:
        """Execute invite to group use case.

        Args:
            request: Invite request

        Returns:
            Results for email invites followed by results for uuid invites

        Raises:
            BadRequestError: If the request is malformed
            NotFoundError: If the group or an invited user doesn't exist
            NotAuthorizedError: If a target is already invited or a member
        """
        uuids, emails = self._validate_shape(request)

        with logfire.span(
            "invite_to_group",
            inviter_id=request.inviter_id,
            group_id=request.group_id,
            uuid_count=len(uuids),
            email_count=len(emails),
        ):
            inviter = await self.user_service.get_user_by_id(
                parse_user_id(request.inviter_id)
            )
            if not inviter:
                raise NotFoundError("userNotFound")

            group = await self.group_service.get_visible_group(
                parse_group_id(request.group_id), inviter
            )

            email_invites = self._validate_emails(emails)
            uuid_ids = self._parse_uuids(uuids)

            # Target rows are locked in ascending id order, emails resolved first
            email_users: list[User | None] = [
                await self.user_service.get_user_by_email(invite.email)
                for invite in email_invites
            ]
            locked = await self._lock_users(
                {u.id for u in email_users if u}
                | {user_id for user_id in uuid_ids if user_id}
            )
            uuid_targets = self._uuid_targets(uuids, uuid_ids, locked)

            # Plan every invitation in memory; later entries for the same user
            # see earlier ones and fail as "already invited".
            planned: dict[UserId, User] = {}
            email_plan: list[tuple[EmailInvite, Invitation | None]] = []
            for invite, found in zip(email_invites, email_users):
                existing = locked.get(found.id) if found else None
                invitation = (
                    self._plan(existing, group, inviter, planned) if existing else None
                )
                email_plan.append((invite, invitation))

            uuid_plan = [
                self._plan(target, group, inviter, planned) for target in uuid_targets
            ]

            for invited_user in planned.values():
                await self.invitation_service.record(invited_user)

            results: list[InviteResult] = []
            for invite, invitation in email_plan:
                if invitation:
                    results.append(InvitationItem.from_invitation(invitation))
                else:
                    await self._send_invite_email(invite, group, inviter)
                    results.append(invite.email)
            results.extend(InvitationItem.from_invitation(i) for i in uuid_plan)

            logfire.info(
                "Group invitations created",
                group_id=str(group.id),
                inviter_id=str(inviter.id),
                invited_users=len(planned),
                emailed=sum(1 for _, i in email_plan if i is None),
            )
            return results

    def _validate_shape(self, request: InviteToGroupRequest) -> tuple[list, list]:
        """Check presence and types of ``uuids``/``emails``.

        Raises:
            BadRequestError: On the first problem found
        """
        uuids, emails = request.uuids, request.emails

        if uuids is None and emails is None:
            raise BadRequestError("canOnlyInviteEmailUuid")
        if uuids is not None and not isinstance(uuids, list):
            raise BadRequestError("uuidsMustBeAnArray")
        if emails is not None and not isinstance(emails, list):
            raise BadRequestError("emailsMustBeAnArray")

        uuids = uuids or []
        emails = emails or []

        max_invites = self.settings.invitations.max_invites_per_request
        if len(uuids) + len(emails) > max_invites:
            raise BadRequestError("canOnlyInviteMaxInvites", maxInvites=max_invites)

        return uuids, emails

    @staticmethod
    def _validate_emails(emails: list) -> list[EmailInvite]:
        """Parse email entries.

        Raises:
            BadRequestError: If an entry has no usable email address
        """
        invites = []
        for entry in emails:
            address = entry.get("email") if isinstance(entry, dict) else None
            if not isinstance(address, str) or not address.strip():
                raise BadRequestError("inviteMissingEmail")
            name = entry.get("name")
            invites.append(
                EmailInvite(
                    email=address.strip(),
                    name=name if isinstance(name, str) else None,
                )
            )
        return invites

    @staticmethod
    def _parse_uuids(uuids: list) -> list[UserId | None]:
        """Parse ``uuids`` entries; None marks one that isn't a valid id."""
        parsed: list[UserId | None] = []
        for raw in uuids:
            try:
                parsed.append(UserId(UUID(raw)) if isinstance(raw, str) else None)
            except ValueError:
                parsed.append(None)
        return parsed

    async def _lock_users(self, user_ids: set[UserId]) -> dict[UserId, User]:
        """Load and lock ``user_ids`` for the rest of the request, in id order."""
        locked = {}
        for user_id in sorted(user_ids):
            user = await self.user_service.get_user_by_id(user_id, for_update=True)
            if user:
                locked[user_id] = user
        return locked

    @staticmethod
    def _uuid_targets(
        uuids: list, uuid_ids: list[UserId | None], locked: dict[UserId, User]
    ) -> list[User]:
        """Users named in ``uuids``, in request order.

        Raises:
            NotFoundError: For the first id that doesn't belong to a user
        """
        users = []
        for raw, user_id in zip(uuids, uuid_ids):
            user = locked.get(user_id) if user_id else None
            if not user:
                logfire.info("Invited user not found", user_id=str(raw))
                raise NotFoundError("userWithIDNotFound", userId=str(raw))
            users.append(user)
        return users

    def _plan(
        self, user: User, group: Group, inviter: User, planned: dict[UserId, User]
    ) -> Invitation:
        current = planned.get(user.id, user)
        invited, invitation = self.invitation_service.plan_invitation(
            current, group, inviter.id
        )
        planned[user.id] = invited
        return invitation

    async def _send_invite_email(
        self, invite: EmailInvite, group: Group, inviter: User
    ) -> None:
        try:
            await self.notification_service.send_group_invite(
                invite.email, invite.name, group, inviter
            )
        except EmailDeliveryError as e:
            # Invitation emails are best effort; the request still succeeds
            logfire.error(
                "Failed to send group invite email",
                group_id=str(group.id),
                error=str(e),
            )
