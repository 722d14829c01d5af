"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from tavern.application.usecase.base import BaseUseCase, parse_user_id
from tavern.domain.error import NotFoundError
from tavern.domain.model import Invitation, User
from tavern.domain.service import UserService


class InvitationItem(BaseModel):
    """Invitation entry as exposed over the API."""

    id: str
    name: str
    inviter: str

    @classmethod
    def from_invitation(cls, invitation: Invitation) -> "InvitationItem":
        return cls(
            id=str(invitation.id),
            name=invitation.name,
            inviter=str(invitation.inviter),
        )


class InvitationsInfo(BaseModel):
    """A user's pending invitations by group type."""

    guilds: list[InvitationItem]
    parties: list[InvitationItem]


class UserDocument(BaseModel):
    """The authenticated user's own document."""

    id: str
    username: str
    email: str | None
    balance: int
    guilds: list[str]
    party_id: str | None
    invitations: InvitationsInfo
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserDocument":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email,
            balance=user.balance,
            guilds=[str(g) for g in user.guild_ids],
            party_id=str(user.party_id) if user.party_id else None,
            invitations=InvitationsInfo(
                guilds=[
                    InvitationItem.from_invitation(i) for i in user.invitations.guilds
                ],
                parties=[
                    InvitationItem.from_invitation(i)
                    for i in user.invitations.parties
                ],
            ),
            created_at=user.created_at,
        )


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for reading the authenticated user's document."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserDocument:
        """Return the user document.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_service.get_user_by_id(parse_user_id(request.user_id))
        if not user:
            raise NotFoundError("userNotFound")
        return UserDocument.from_user(user)
