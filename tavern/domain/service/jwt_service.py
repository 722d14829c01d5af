"""Signed tokens: auth cookies and email invitation links."""

import logfire

from tavern.config import AuthSettings
from tavern.util.jwt import (
    GroupInvitePayload,
    TokenPayload,
    create_group_invite_token,
    create_token,
    verify_group_invite_token,
    verify_token,
)

from .base import Service


class JWTService(Service):
    """Issues and checks the tokens the API hands out.

    Both kinds are signed with ``auth.jwt_secret``; an invite link token
    cannot be used as an auth token because its payload differs.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Create the auth token stored in the ``auth_token`` cookie."""
        token = create_token(user_id, username, self.auth_settings)
        logfire.info("Auth token issued", user_id=user_id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Decode an auth token.

        Raises:
            JWTError: If token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except Exception as e:
            logfire.warn("Auth token rejected", error=str(e))
            raise

    def create_group_invite_token(
        self, group_id: str, inviter_id: str, expiry_days: int
    ) -> str:
        return create_group_invite_token(
            group_id, inviter_id, self.auth_settings, expiry_days
        )

    def verify_group_invite_token(self, token: str) -> GroupInvitePayload:
        """Decode the token from an invitation email link.

        Raises:
            JWTError: If token is invalid or expired
        """
        try:
            return verify_group_invite_token(token, self.auth_settings)
        except Exception as e:
            logfire.warn("Group invite link rejected", error=str(e))
            raise
