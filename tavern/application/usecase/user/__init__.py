"""User use cases."""

from tavern.application.usecase.user.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    InvitationItem,
    UserDocument,
)

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "InvitationItem",
    "UserDocument",
]
