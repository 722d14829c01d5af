"""Domain value objects for Tavern.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from tavern.domain.value.common import RootValueObject


class GroupType(str, Enum):
    """Kind of group.

    Guilds are large persistent communities a user can belong to many of.
    Parties are small teams; a user is in at most one party.
    """

    GUILD = "guild"
    PARTY = "party"


class GroupPrivacy(str, Enum):
    """Who can see and join a group without an invitation."""

    PUBLIC = "public"
    PRIVATE = "private"


class Username(RootValueObject[str]):
    """Login name, 1-40 characters of letters, digits, hyphens and underscores."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_-]{1,40}$", v):
            raise ValueError(
                "Username must be 1-40 characters of letters, digits, '-' or '_'"
            )
        return v


class GroupName(RootValueObject[str]):
    """Display name of a group."""

    @field_validator("root")
    @classmethod
    def validate_group_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        if not v.strip() or len(v) > 255:
            raise ValueError("Group name must be 1-255 characters")
        return v
