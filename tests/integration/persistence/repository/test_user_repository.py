"""Integration tests for PostgresUserRepository.

These tests verify that memberships and invitations survive a round trip
through PostgreSQL. They need a migrated database at DATABASE__URL.
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tavern.domain.model import Group, Invitation
from tavern.domain.repository import GroupRepository, UserRepository
from tavern.domain.value import GroupId, GroupType
from tests.conftest import create_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"),
    reason="requires PostgreSQL (set DATABASE__URL)",
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


def _unique(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:8]}"


class TestUserRepositoryIntegration:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_invitations_round_trip(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        group_repo = await integration_env.get(GroupRepository)

        leader = await create_user(user_repo, _unique("leader"))
        guild = await group_repo.save(
            Group(
                id=GroupId(uuid4()),
                name="Knights",
                type=GroupType.GUILD,
                leader_id=leader.id,
                member_count=1,
            )
        )
        target = await create_user(user_repo, _unique("target"))
        invitation = Invitation(id=guild.id, name=guild.name, inviter=leader.id)
        await user_repo.save(
            target.model_copy(
                update={
                    "invitations": target.invitations.with_added(
                        invitation, GroupType.GUILD
                    )
                }
            )
        )

        stored = await user_repo.find_by_id(target.id, for_update=True)

        assert stored.invitations.guilds == [invitation]
        assert stored.invitations.parties == []

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        email = f"{_unique('mixed')}@example.com"
        user = await create_user(user_repo, _unique("mixed"), email=email)

        found = await user_repo.find_by_email(email.upper())

        assert found is not None
        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_duplicate_invitation_rejected(self, integration_env):
        """The (user_id, group_id) key backs the one-invitation rule."""
        user_repo = await integration_env.get(UserRepository)
        group_repo = await integration_env.get(GroupRepository)

        leader = await create_user(user_repo, _unique("leader"))
        guild = await group_repo.save(
            Group(
                id=GroupId(uuid4()),
                name="Knights",
                type=GroupType.GUILD,
                leader_id=leader.id,
            )
        )
        target = await create_user(user_repo, _unique("target"))
        invitation = Invitation(id=guild.id, name=guild.name, inviter=leader.id)
        invitations = target.invitations.with_added(
            invitation, GroupType.GUILD
        ).with_added(invitation, GroupType.GUILD)

        with pytest.raises(IntegrityError):
            await user_repo.save(target.model_copy(update={"invitations": invitations}))

        # Leave the request session usable for its closing commit
        session = await integration_env.get(AsyncSession)
        await session.rollback()
