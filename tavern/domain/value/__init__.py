"""Domain value objects for Tavern."""

from tavern.domain.value.identifiers import GroupId, UserId
from tavern.domain.value.types import GroupName, GroupPrivacy, GroupType, Username

__all__ = [
    # Identifiers
    "UserId",
    "GroupId",
    # Types
    "GroupType",
    "GroupPrivacy",
    "GroupName",
    "Username",
]
