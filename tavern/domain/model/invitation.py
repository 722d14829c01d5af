"""Invitation entries held on the invited user's document.

An invitation is a pending link between a user and a group, created by an
inviter and consumed when the user joins the group.
"""

from pydantic import Field

from tavern.domain.model.common import DomainModel
from tavern.domain.value import GroupId, GroupType, UserId


class Invitation(DomainModel):
    """A pending invitation to one group.

    Serialized as ``{id, name, inviter}``: the group id, the group name at
    the time of the invitation and the inviting user's id.
    """

    id: GroupId
    name: str
    inviter: UserId


class Invitations(DomainModel):
    """A user's pending invitations, partitioned by group type.

    Business rules:
    - At most one invitation per group
    - Guild and party invitations never mix
    """

    guilds: list[Invitation] = Field(default_factory=list)
    parties: list[Invitation] = Field(default_factory=list)

    def of_type(self, group_type: GroupType) -> list[Invitation]:
        return self.guilds if group_type == GroupType.GUILD else self.parties

    def find(self, group_id: GroupId, group_type: GroupType) -> Invitation | None:
        for invitation in self.of_type(group_type):
            if invitation.id == group_id:
                return invitation
        return None

    def has(self, group_id: GroupId, group_type: GroupType) -> bool:
        return self.find(group_id, group_type) is not None

    def with_added(self, invitation: Invitation, group_type: GroupType) -> "Invitations":
        """Return a copy with ``invitation`` appended to the matching list."""
        if group_type == GroupType.GUILD:
            return self.model_copy(update={"guilds": [*self.guilds, invitation]})
        return self.model_copy(update={"parties": [*self.parties, invitation]})

    def without(self, group_id: GroupId, group_type: GroupType) -> "Invitations":
        """Return a copy without any invitation to ``group_id``."""
        remaining = [i for i in self.of_type(group_type) if i.id != group_id]
        if group_type == GroupType.GUILD:
            return self.model_copy(update={"guilds": remaining})
        return self.model_copy(update={"parties": remaining})
