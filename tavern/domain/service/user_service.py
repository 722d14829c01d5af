"""User domain service."""

from uuid import uuid4

import logfire

from tavern.domain.error import NotAuthorizedError
from tavern.domain.model.user import User
from tavern.domain.repository import UserRepository
from tavern.domain.value import UserId
from tavern.domain.value.types import Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_user_by_id(
        self, user_id: UserId, for_update: bool = False
    ) -> User | None:
        """Get user by ID.

        Args:
            user_id: User ID
            for_update: Lock the user row for the rest of the transaction

        Returns:
            User if found, None otherwise
        """
        return await self.user_repository.find_by_id(user_id, for_update=for_update)

    async def get_user_by_email(
        self, email: str, for_update: bool = False
    ) -> User | None:
        """Get user by email address."""
        return await self.user_repository.find_by_email(email, for_update=for_update)

    async def register_user(
        self, username: Username, email: str | None, starting_balance: int
    ) -> User:
        """Create a new user.

        Raises:
            NotAuthorizedError: If the username or email is already taken
        """
        with logfire.span("user_service.register_user", username=username.root):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username taken", username=username.root)
                raise NotAuthorizedError("usernameTaken")
            if email and await self.user_repository.find_by_email(email):
                logfire.warn("Email taken", username=username.root)
                raise NotAuthorizedError("emailTaken")

            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email.lower() if email else None,
                balance=starting_balance,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def charge(self, user: User, amount: int) -> User:
        """Deduct ``amount`` from the user's balance.

        Raises:
            NotAuthorizedError: If the balance is too low
        """
        if user.balance < amount:
            logfire.info(
                "Insufficient balance",
                user_id=str(user.id),
                balance=user.balance,
                required=amount,
            )
            raise NotAuthorizedError("messageInsufficientGems")

        charged = user.model_copy(update={"balance": user.balance - amount})
        return await self.user_repository.save(charged)
