"""In-memory user repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from tavern.domain.model.user import User
from tavern.domain.repository.user import UserRepository
from tavern.domain.value import GroupType, UserId
from tavern.domain.value.types import Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by ID (``for_update`` has no effect in memory)."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username (case-insensitive)."""
        for user in self._users.values():
            if user.username.root.lower() == username.root.lower():
                return user
        return None

    async def find_by_email(
        self, email: str, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        for user in self._users.values():
            if user.email and user.email.lower() == email.lower():
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            IntegrityError: If the user holds two invitations to one group
        """
        for group_type in (GroupType.GUILD, GroupType.PARTY):
            group_ids = [i.id for i in user.invitations.of_type(group_type)]
            if len(group_ids) != len(set(group_ids)):
                raise IntegrityError("Duplicate invitation", None, Exception())

        self._users[user.id] = user
        return user
