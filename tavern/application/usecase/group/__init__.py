"""Group use cases."""

from tavern.application.usecase.group.create_group import (
    CreateGroupRequest,
    CreateGroupUseCase,
)
from tavern.application.usecase.group.get_group import (
    GetGroupRequest,
    GetGroupUseCase,
    GroupResponse,
)
from tavern.application.usecase.group.invite_to_group import (
    InviteResult,
    InviteToGroupRequest,
    InviteToGroupUseCase,
)
from tavern.application.usecase.group.join_group import (
    JoinGroupRequest,
    JoinGroupUseCase,
)

__all__ = [
    "CreateGroupRequest",
    "CreateGroupUseCase",
    "GetGroupRequest",
    "GetGroupUseCase",
    "GroupResponse",
    "InviteResult",
    "InviteToGroupRequest",
    "InviteToGroupUseCase",
    "JoinGroupRequest",
    "JoinGroupUseCase",
]
