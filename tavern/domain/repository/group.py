"""Group repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tavern.domain.model.group import Group
from tavern.domain.value import GroupId


class GroupRepository(ABC):
    """Repository for Group entity."""

    @abstractmethod
    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID.

        Args:
            group_id: The group's unique identifier

        Returns:
            The group if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, group: Group) -> Group:
        """Save a group (create or update)."""
        pass

    @abstractmethod
    async def increment_member_count(self, group_id: GroupId) -> None:
        """Atomically increment the group's member count by 1."""
        pass
