"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tavern.domain.model.user import User
from tavern.domain.value import UserId
from tavern.domain.value.types import Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Saving a user persists its memberships and invitations with it.
    """

    @abstractmethod
    async def find_by_id(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier
            for_update: Lock the user until the end of the transaction

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username (case-insensitive)."""
        pass

    @abstractmethod
    async def find_by_email(
        self, email: str, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by email address (case-insensitive)."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            IntegrityError: If the user already holds an invitation to the same group
        """
        pass
