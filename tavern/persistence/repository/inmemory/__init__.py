"""Dict-backed repositories used by the test container.

They keep the Postgres semantics the invite flow relies on: case-insensitive
username/email lookups and one invitation per user and group.
"""

from .group import InMemoryGroupRepository
from .user import InMemoryUserRepository

__all__ = ["InMemoryGroupRepository", "InMemoryUserRepository"]
