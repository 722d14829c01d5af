"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from tavern.domain.error import NotFoundError
from tavern.domain.value import GroupId, UserId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_user_id(value: str, message_key: str = "userNotFound") -> UserId:
    """Parse a user id from the wire; malformed ids are reported as not found."""
    try:
        return UserId(UUID(value))
    except (TypeError, ValueError):
        raise NotFoundError(message_key, userId=value)


def parse_group_id(value: str) -> GroupId:
    """Parse a group id from the wire; malformed ids are reported as not found."""
    try:
        return GroupId(UUID(value))
    except (TypeError, ValueError):
        raise NotFoundError("groupNotFound")
