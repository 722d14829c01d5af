"""Notification domain service.

Builds the transactional emails sent to people invited by address who
don't have an account yet. Delivery itself goes through an EmailClient
implemented in the adapter layer.
"""

from abc import ABC, abstractmethod

import logfire

from tavern.config import Settings
from tavern.domain.model.group import Group
from tavern.domain.model.user import User
from tavern.domain.value import GroupType
from tavern.domain.value.common import ValueObject

from .base import Service
from .jwt_service import JWTService


class EmailRecipient(ValueObject):
    """Recipient of a transactional email."""

    email: str
    name: str | None = None


class TemplateVariable(ValueObject):
    """Named value substituted into an email template."""

    name: str
    content: str


class EmailMessage(ValueObject):
    """Template-based transactional email."""

    template: str
    to: list[EmailRecipient]
    variables: list[TemplateVariable]


class EmailClient(ABC):
    """Sends transactional emails."""

    @abstractmethod
    async def send(self, message: EmailMessage) -> None:
        """Deliver ``message``.

        Raises:
            EmailDeliveryError: If the provider rejects or cannot be reached
        """
        pass


class NotificationService(Service):
    """Domain service for invitation emails."""

    def __init__(
        self, email_client: EmailClient, jwt_service: JWTService, settings: Settings
    ) -> None:
        """Initialize notification service.

        Args:
            email_client: Email delivery client
            jwt_service: Signs the join link
            settings: Application settings (link lifetime and frontend URL)
        """
        self.email_client = email_client
        self.jwt_service = jwt_service
        self.settings = settings

    def build_group_invite_email(
        self, email: str, name: str | None, group: Group, inviter: User
    ) -> EmailMessage:
        """Build the invitation email for ``group``.

        Guild invitations use the ``invite-friend-guild`` template and name
        the guild; party invitations use ``invite-friend``.
        """
        token = self.jwt_service.create_group_invite_token(
            str(group.id),
            str(inviter.id),
            self.settings.invitations.email_link_expiry_days,
        )
        link = self.settings.api.group_invite_link(token)

        variables = [
            TemplateVariable(name="LINK", content=link),
            TemplateVariable(name="INVITER", content=inviter.username.root),
        ]
        if group.type == GroupType.GUILD:
            variables.append(TemplateVariable(name="GUILD_NAME", content=group.name))
            template = "invite-friend-guild"
        else:
            template = "invite-friend"

        return EmailMessage(
            template=template,
            to=[EmailRecipient(email=email, name=name)],
            variables=variables,
        )

    async def send_group_invite(
        self, email: str, name: str | None, group: Group, inviter: User
    ) -> None:
        """Email a group invitation to an address without an account.

        Raises:
            EmailDeliveryError: If delivery fails
        """
        with logfire.span(
            "notification_service.send_group_invite",
            group_id=str(group.id),
            inviter_id=str(inviter.id),
        ):
            message = self.build_group_invite_email(email, name, group, inviter)
            await self.email_client.send(message)
            logfire.info(
                "Group invite email sent",
                group_id=str(group.id),
                template=message.template,
            )
