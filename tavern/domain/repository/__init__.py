"""Repository interfaces for the Tavern domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from tavern.domain.repository.group import GroupRepository
from tavern.domain.repository.user import UserRepository

__all__ = [
    "GroupRepository",
    "UserRepository",
]
