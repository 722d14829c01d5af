"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand.
A user is spread over three tables: ``users``, ``guild_memberships`` and
``invitations``.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from tavern.domain.model import Group, Invitation, Invitations, User
from tavern.domain.value import GroupId, GroupPrivacy, GroupType, UserId
from tavern.domain.value.types import Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(
    row: Dict[str, Any],
    membership_rows: Iterable[Dict[str, Any]] = (),
    invitation_rows: Iterable[Dict[str, Any]] = (),
) -> User:
    """Convert a users row plus its membership and invitation rows to a User.

    Membership and invitation rows are expected in ``position`` order.
    """
    guilds: list[Invitation] = []
    parties: list[Invitation] = []
    for inv in invitation_rows:
        invitation = Invitation(
            id=GroupId(_uuid(inv["group_id"])),
            name=inv["group_name"],
            inviter=UserId(_uuid(inv["inviter_id"])),
        )
        if inv["group_type"] == GroupType.GUILD.value:
            guilds.append(invitation)
        else:
            parties.append(invitation)

    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row.get("email"),
        balance=row["balance"],
        guild_ids=[GroupId(_uuid(m["group_id"])) for m in membership_rows],
        party_id=GroupId(_uuid(row["party_id"])) if row.get("party_id") else None,
        invitations=Invitations(guilds=guilds, parties=parties),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert a User to a ``users`` row (memberships and invitations excluded)."""
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email,
        "balance": user.balance,
        "party_id": user.party_id,
        "created_at": user.created_at,
    }


def user_to_membership_rows(user: User) -> list[Dict[str, Any]]:
    """Convert a User's guild memberships to ``guild_memberships`` rows."""
    return [
        {"user_id": user.id, "group_id": group_id, "position": position}
        for position, group_id in enumerate(user.guild_ids)
    ]


def user_to_invitation_rows(user: User) -> list[Dict[str, Any]]:
    """Convert a User's pending invitations to ``invitations`` rows."""
    rows = []
    for group_type in (GroupType.GUILD, GroupType.PARTY):
        for position, invitation in enumerate(user.invitations.of_type(group_type)):
            rows.append(
                {
                    "user_id": user.id,
                    "group_id": invitation.id,
                    "group_type": group_type.value,
                    "group_name": invitation.name,
                    "inviter_id": invitation.inviter,
                    "position": position,
                }
            )
    return rows


def row_to_group(row: Dict[str, Any]) -> Group:
    """Convert a ``groups`` row to a Group."""
    return Group(
        id=GroupId(_uuid(row["id"])),
        name=row["name"],
        type=GroupType(row["type"]),
        privacy=GroupPrivacy(row["privacy"]),
        leader_id=UserId(_uuid(row["leader_id"])),
        member_count=row["member_count"],
        created_at=row["created_at"],
    )


def group_to_dict(group: Group) -> Dict[str, Any]:
    """Convert a Group to a ``groups`` row."""
    return {
        "id": group.id,
        "name": group.name,
        "type": group.type.value,
        "privacy": group.privacy.value,
        "leader_id": group.leader_id,
        "member_count": group.member_count,
        "created_at": group.created_at,
    }
