"""User aggregate root.

Users belong to any number of guilds and at most one party, hold a
balance spent on founding guilds, and collect pending invitations.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tavern.domain.model.common import DomainModel
from tavern.domain.model.invitation import Invitations
from tavern.domain.value import GroupId, GroupType, UserId
from tavern.domain.value.types import Username


class User(DomainModel):
    """User aggregate root.

    Membership lives on the user document: ``guild_ids`` lists joined guilds
    and ``party_id`` points at the one party the user is in.
    """

    id: UserId
    username: Username
    email: Optional[str] = None
    balance: int = Field(default=0, ge=0)
    guild_ids: list[GroupId] = Field(default_factory=list)
    party_id: Optional[GroupId] = None
    invitations: Invitations = Field(default_factory=Invitations)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def in_party(self) -> bool:
        return self.party_id is not None

    def is_member_of(self, group_id: GroupId, group_type: GroupType) -> bool:
        if group_type == GroupType.GUILD:
            return group_id in self.guild_ids
        return self.party_id == group_id
