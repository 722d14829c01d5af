"""Domain model entities for Tavern."""

from tavern.domain.model.group import Group
from tavern.domain.model.invitation import Invitation, Invitations
from tavern.domain.model.user import User

__all__ = [
    "Group",
    "Invitation",
    "Invitations",
    "User",
]
