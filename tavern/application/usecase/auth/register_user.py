"""Register user use case."""

import logfire
from pydantic import BaseModel, ValidationError

from tavern.application.usecase.base import (
    BaseUseCase,
    parse_group_id,
    parse_user_id,
)
from tavern.application.usecase.user.get_current_user import UserDocument
from tavern.config import Settings
from tavern.domain.error import BadRequestError, NotFoundError
from tavern.domain.service import (
    GroupService,
    InvitationService,
    JWTService,
    UserService,
)
from tavern.domain.value.types import Username
from tavern.util.jwt import JWTError


class RegisterUserRequest(BaseModel):
    """Request to register a new local account."""

    username: str
    email: str | None = None
    # Signed token from an invitation email link
    group_invite: str | None = None


class RegisterUserResponse(BaseModel):
    """Registered user plus the auth token to send back."""

    user: UserDocument
    token: str


class RegisterUserUseCase(BaseUseCase):
    """Use case for registering a user.

    When the request carries a group invite token (from an invitation
    email), the new user starts with an invitation to that group.
    """

    def __init__(
        self,
        user_service: UserService,
        group_service: GroupService,
        invitation_service: InvitationService,
        jwt_service: JWTService,
        settings: Settings,
    ) -> None:
        self.user_service = user_service
        self.group_service = group_service
        self.invitation_service = invitation_service
        self.jwt_service = jwt_service
        self.settings = settings

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Register the user and issue an auth token.

        Raises:
            BadRequestError: If the username is malformed or the invite link is invalid
            NotAuthorizedError: If the username or email is taken
        """
        try:
            username = Username(request.username)
        except ValidationError:
            raise BadRequestError("invalidReqParams")

        invite = None
        if request.group_invite:
            try:
                invite = self.jwt_service.verify_group_invite_token(
                    request.group_invite
                )
            except JWTError as e:
                logfire.warn("Rejected group invite link", error=str(e))
                raise BadRequestError("invalidGroupInvite")

        with logfire.span("register_user", username=username.root):
            user = await self.user_service.register_user(
                username=username,
                email=request.email,
                starting_balance=self.settings.groups.starting_balance,
            )

            if invite:
                try:
                    group = await self.group_service.get_group(
                        parse_group_id(invite.group_id)
                    )
                except NotFoundError:
                    logfire.warn(
                        "Group from invite link no longer exists",
                        group_id=invite.group_id,
                    )
                else:
                    await self.invitation_service.invite(
                        user, group, parse_user_id(invite.inviter_id)
                    )
                    user = await self.user_service.get_user_by_id(user.id)

            token = self.jwt_service.create_token(str(user.id), user.username.root)
            return RegisterUserResponse(user=UserDocument.from_user(user), token=token)
