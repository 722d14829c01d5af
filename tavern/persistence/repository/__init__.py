"""PostgreSQL repository implementations."""

from tavern.persistence.repository.group import PostgresGroupRepository
from tavern.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresGroupRepository",
    "PostgresUserRepository",
]
