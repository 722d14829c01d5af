"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest

from tavern.domain.model import Group, User
from tavern.domain.repository import GroupRepository, UserRepository
from tavern.domain.value import GroupId, GroupPrivacy, GroupType, UserId
from tavern.domain.value.types import Username

# Instrumentation in create_app expects logfire to be configured
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def test_settings_env(monkeypatch):
    """Run every test against test settings."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("AUTH__JWT_SECRET", "test-secret-key-long-enough-for-hs256")
    monkeypatch.delenv("EMAIL__API_KEY", raising=False)


async def create_user(
    user_repo: UserRepository,
    username: str,
    email: str | None = None,
    balance: int = 0,
    **fields,
) -> User:
    """Helper to save a user with sensible defaults."""
    user = User(
        id=UserId(uuid4()),
        username=Username(username),
        email=email,
        balance=balance,
        **fields,
    )
    return await user_repo.save(user)


async def create_group(
    group_repo: GroupRepository,
    user_repo: UserRepository,
    leader: User,
    group_type: GroupType,
    name: str = "Test Group",
    privacy: GroupPrivacy = GroupPrivacy.PRIVATE,
) -> tuple[Group, User]:
    """Helper to save a group with ``leader`` as its only member.

    Returns the group and the updated leader.
    """
    group = await group_repo.save(
        Group(
            id=GroupId(uuid4()),
            name=name,
            type=group_type,
            privacy=privacy,
            leader_id=leader.id,
            member_count=1,
        )
    )
    if group_type == GroupType.GUILD:
        leader = leader.model_copy(update={"guild_ids": [*leader.guild_ids, group.id]})
    else:
        leader = leader.model_copy(update={"party_id": group.id})
    return group, await user_repo.save(leader)
