"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from tavern.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT auth token payload."""

    user_id: str
    username: str
    exp: datetime


class GroupInvitePayload(BaseModel):
    """Payload of the signed link sent in invitation emails."""

    group_id: str
    inviter_id: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Create an auth token for the user.

    Args:
        user_id: User ID
        username: Username
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "user_id": user_id,
        "username": username,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an auth token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid token")


def create_group_invite_token(
    group_id: str, inviter_id: str, settings: AuthSettings, expiry_days: int
) -> str:
    """Sign the group/inviter pair carried by an email invitation link."""
    expiry = datetime.now(timezone.utc) + timedelta(days=expiry_days)
    payload = {
        "group_id": group_id,
        "inviter_id": inviter_id,
        "exp": expiry,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_group_invite_token(token: str, settings: AuthSettings) -> GroupInvitePayload:
    """Decode an email invitation link token.

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return GroupInvitePayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Invite link has expired")
    except (jwt.InvalidTokenError, ValueError):
        raise JWTError("Invalid invite link")
