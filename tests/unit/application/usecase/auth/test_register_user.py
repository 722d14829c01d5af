"""Unit tests for RegisterUserUseCase."""

from uuid import UUID, uuid4

import pytest

from tavern.application.usecase.auth import RegisterUserRequest, RegisterUserUseCase
from tavern.config import Settings
from tavern.domain.error import BadRequestError, NotAuthorizedError
from tavern.domain.repository import GroupRepository, UserRepository
from tavern.domain.service import JWTService
from tavern.domain.value import GroupType, UserId
from tavern.util.jwt import create_group_invite_token
from tests.conftest import create_group, create_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase."""

    @pytest.mark.asyncio
    async def test_register_issues_token(self, unit_env):
        use_case = await unit_env.get(RegisterUserUseCase)
        jwt_service = await unit_env.get(JWTService)

        response = await use_case.execute(
            RegisterUserRequest(username="alice", email="alice@example.com")
        )

        assert response.user.username == "alice"
        assert response.user.balance == 0
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == response.user.id

    @pytest.mark.asyncio
    async def test_register_uses_starting_balance(self, unit_env, monkeypatch):
        """Starting balance comes from settings, never from the client."""
        use_case = await unit_env.get(RegisterUserUseCase)
        settings = await unit_env.get(Settings)
        monkeypatch.setattr(settings.groups, "starting_balance", 5)

        response = await use_case.execute(RegisterUserRequest(username="alice"))

        assert response.user.balance == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["", "has space", "x" * 41])
    async def test_invalid_username(self, unit_env, username):
        use_case = await unit_env.get(RegisterUserUseCase)

        with pytest.raises(BadRequestError) as exc_info:
            await use_case.execute(RegisterUserRequest(username=username))
        assert exc_info.value.message_key == "invalidReqParams"

    @pytest.mark.asyncio
    async def test_username_taken(self, unit_env):
        use_case = await unit_env.get(RegisterUserUseCase)
        await use_case.execute(RegisterUserRequest(username="alice"))

        with pytest.raises(NotAuthorizedError) as exc_info:
            await use_case.execute(RegisterUserRequest(username="alice"))
        assert exc_info.value.message_key == "usernameTaken"

    @pytest.mark.asyncio
    async def test_register_with_group_invite(self, unit_env):
        """Registering from an invitation email starts with the invitation."""
        use_case = await unit_env.get(RegisterUserUseCase)
        settings = await unit_env.get(Settings)
        user_repo = await unit_env.get(UserRepository)
        group_repo = await unit_env.get(GroupRepository)
        leader = await create_user(user_repo, "leader")
        guild, leader = await create_group(
            group_repo, user_repo, leader, GroupType.GUILD, name="Knights"
        )
        token = create_group_invite_token(
            str(guild.id), str(leader.id), settings.auth, expiry_days=1
        )

        response = await use_case.execute(
            RegisterUserRequest(username="newbie", group_invite=token)
        )

        assert [i.id for i in response.user.invitations.guilds] == [str(guild.id)]
        assert response.user.invitations.guilds[0].inviter == str(leader.id)
        stored = await user_repo.find_by_id(UserId(UUID(response.user.id)))
        assert stored.invitations.has(guild.id, GroupType.GUILD)

    @pytest.mark.asyncio
    async def test_register_with_invite_to_deleted_group(self, unit_env):
        use_case = await unit_env.get(RegisterUserUseCase)
        settings = await unit_env.get(Settings)
        token = create_group_invite_token(
            str(uuid4()), str(uuid4()), settings.auth, expiry_days=1
        )

        response = await use_case.execute(
            RegisterUserRequest(username="newbie", group_invite=token)
        )

        assert response.user.invitations.guilds == []

    @pytest.mark.asyncio
    async def test_register_with_bad_invite(self, unit_env):
        use_case = await unit_env.get(RegisterUserUseCase)

        with pytest.raises(BadRequestError) as exc_info:
            await use_case.execute(
                RegisterUserRequest(username="newbie", group_invite="garbage")
            )
        assert exc_info.value.message_key == "invalidGroupInvite"
