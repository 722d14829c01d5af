"""In-memory group repository for testing."""

from typing import Optional

from tavern.domain.model.group import Group
from tavern.domain.repository.group import GroupRepository
from tavern.domain.value import GroupId


class InMemoryGroupRepository(GroupRepository):
    """In-memory implementation of GroupRepository for testing."""

    def __init__(self) -> None:
        self._groups: dict[GroupId, Group] = {}

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID."""
        return self._groups.get(group_id)

    async def save(self, group: Group) -> Group:
        """Save or update a group."""
        self._groups[group.id] = group
        return group

    async def increment_member_count(self, group_id: GroupId) -> None:
        """Increment the member count by 1."""
        group = self._groups.get(group_id)
        if group:
            self._groups[group_id] = group.model_copy(
                update={"member_count": group.member_count + 1}
            )
