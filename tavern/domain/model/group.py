"""Group entity.

A group is either a guild or a party. Members are tracked on the user
documents; the group keeps its leader and a member count.
"""

from datetime import datetime

from pydantic import Field

from tavern.domain.model.common import DomainModel
from tavern.domain.value import GroupId, GroupPrivacy, GroupType, UserId


class Group(DomainModel):
    """Guild or party."""

    id: GroupId
    name: str = Field(min_length=1, max_length=255)
    type: GroupType
    privacy: GroupPrivacy = GroupPrivacy.PRIVATE
    leader_id: UserId
    member_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_public(self) -> bool:
        return self.privacy == GroupPrivacy.PUBLIC
