"""End-to-end tests for POST /groups/{group_id}/invite."""

from uuid import uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tests.harness import create_app_fixture

# E2E fixture - full HTTP stack on in-memory persistence and mock email
app = create_app_fixture()


@pytest.fixture(autouse=True)
def starting_balance(monkeypatch):
    """Give every registered user enough balance for one guild."""
    monkeypatch.setenv("GROUPS__STARTING_BALANCE", "1")


def register(app: FastAPI, username: str, email: str | None = None):
    """Register a user; returns a client carrying their auth cookie and the user."""
    client = TestClient(app)
    response = client.post(
        "/auth/register", json={"username": username, "email": email}
    )
    assert response.status_code == 201, response.text
    return client, response.json()


def create_group(client: TestClient, group_type: str, name: str = "Test Guild"):
    response = client.post(
        "/groups", json={"name": name, "type": group_type, "privacy": "private"}
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def inviter(app):
    return register(app, "inviter", "inviter@example.com")


@pytest.fixture
def guild(inviter):
    client, _ = inviter
    return create_group(client, "guild")


def assert_error(response, code: int, error: str, message: str):
    assert response.status_code == code
    assert response.json() == {"code": code, "error": error, "message": message}


class TestUserIdInvites:
    """Invites by user id."""

    def test_invited_user_not_found(self, inviter, guild):
        client, _ = inviter
        fake_id = str(uuid4())

        response = client.post(f"/groups/{guild['id']}/invite", json={"uuids": [fake_id]})

        assert_error(response, 404, "NotFound", f'User with id "{fake_id}" not found.')

    def test_uuids_not_an_array(self, inviter, guild):
        client, _ = inviter

        response = client.post(
            f"/groups/{guild['id']}/invite", json={"uuids": {"id": "123"}}
        )

        assert_error(
            response, 400, "BadRequest", "User ID invites must be an array."
        )

    def test_empty_uuids(self, inviter, guild):
        client, _ = inviter

        response = client.post(f"/groups/{guild['id']}/invite", json={"uuids": []})

        assert response.status_code == 200
        assert response.json() == []

    def test_invite_by_uuid(self, app, inviter, guild):
        client, inviter_user = inviter
        invited_client, invited_user = register(app, "invited")

        response = client.post(
            f"/groups/{guild['id']}/invite", json={"uuids": [invited_user["id"]]}
        )

        assert response.status_code == 200
        expected = {"id": guild["id"], "name": "Test Guild", "inviter": inviter_user["id"]}
        assert response.json() == [expected]
        me = invited_client.get("/user").json()
        assert me["invitations"]["guilds"] == [expected]

    def test_invite_multiple_by_uuid(self, app, inviter, guild):
        client, inviter_user = inviter
        first_client, first = register(app, "first")
        second_client, second = register(app, "second")

        response = client.post(
            f"/groups/{guild['id']}/invite",
            json={"uuids": [first["id"], second["id"]]},
        )

        assert response.status_code == 200
        expected = {"id": guild["id"], "name": "Test Guild", "inviter": inviter_user["id"]}
        assert response.json() == [expected, expected]
        for invited_client in (first_client, second_client):
            me = invited_client.get("/user").json()
            assert me["invitations"]["guilds"] == [expected]


class TestEmailInvites:
    """Invites by email address."""

    def test_invite_missing_email(self, inviter, guild):
        client, _ = inviter

        response = client.post(
            f"/groups/{guild['id']}/invite", json={"emails": [{"name": "test"}]}
        )

        assert_error(response, 400, "BadRequest", "Missing email address in invite.")

    def test_emails_not_an_array(self, inviter, guild):
        client, _ = inviter

        response = client.post(f"/groups/{guild['id']}/invite", json={"emails": 123})

        assert_error(
            response, 400, "BadRequest", "Email address invites must be an array."
        )

    def test_empty_emails(self, inviter, guild):
        client, _ = inviter

        response = client.post(f"/groups/{guild['id']}/invite", json={"emails": []})

        assert response.status_code == 200
        assert response.json() == []

    def test_invite_by_email(self, inviter, guild):
        client, _ = inviter

        response = client.post(
            f"/groups/{guild['id']}/invite",
            json={"emails": [{"name": "test", "email": "test@example.com"}]},
        )

        assert response.status_code == 200
        assert response.json() == ["test@example.com"]

    def test_invite_multiple_by_email(self, inviter, guild):
        client, _ = inviter

        response = client.post(
            f"/groups/{guild['id']}/invite",
            json={
                "emails": [
                    {"name": "test", "email": "test@example.com"},
                    {"name": "test2", "email": "test2@example.com"},
                ]
            },
        )

        assert response.status_code == 200
        assert response.json() == ["test@example.com", "test2@example.com"]

    def test_invite_registered_email(self, app, inviter, guild):
        """An address that belongs to an account invites that account."""
        client, _ = inviter
        invited_client, _ = register(app, "invited", "invited@example.com")

        response = client.post(
            f"/groups/{guild['id']}/invite",
            json={"emails": [{"email": "invited@example.com"}]},
        )

        assert response.status_code == 200
        assert response.json()[0]["id"] == guild["id"]
        me = invited_client.get("/user").json()
        assert me["invitations"]["guilds"][0]["id"] == guild["id"]


class TestUserAndEmailInvites:
    """Invites mixing user ids and emails."""

    def test_no_uuids_or_emails(self, inviter, guild):
        client, _ = inviter

        response = client.post(f"/groups/{guild['id']}/invite")

        assert_error(
            response, 400, "BadRequest", "Can only invite using uuids or emails."
        )

    def test_invite_by_uuid_and_email(self, app, inviter, guild):
        client, _ = inviter
        invited_client, invited = register(app, "invited")

        response = client.post(
            f"/groups/{guild['id']}/invite",
            json={
                "uuids": [invited["id"]],
                "emails": [{"name": "test", "email": "test@example.com"}],
            },
        )

        assert response.status_code == 200
        results = response.json()
        assert results[0] == "test@example.com"
        assert results[1]["id"] == guild["id"]
        me = invited_client.get("/user").json()
        assert me["invitations"]["guilds"][0]["id"] == guild["id"]

    def test_too_many_invites(self, inviter, guild):
        client, _ = inviter

        response = client.post(
            f"/groups/{guild['id']}/invite",
            json={"uuids": [str(uuid4()) for _ in range(101)]},
        )

        assert_error(
            response, 400, "BadRequest", 'You can only invite "100" at a time'
        )


class TestGuildInvites:
    """Guild-specific invite rules."""

    def test_already_invited(self, app, inviter, guild):
        client, _ = inviter
        _, invited = register(app, "invited")
        client.post(f"/groups/{guild['id']}/invite", json={"uuids": [invited["id"]]})

        response = client.post(
            f"/groups/{guild['id']}/invite", json={"uuids": [invited["id"]]}
        )

        assert_error(
            response, 401, "NotAuthorized", "User already invited to this group."
        )

    def test_already_in_group(self, app, inviter, guild):
        client, _ = inviter
        invited_client, invited = register(app, "invited")
        client.post(f"/groups/{guild['id']}/invite", json={"uuids": [invited["id"]]})
        assert invited_client.post(f"/groups/{guild['id']}/join").status_code == 200

        response = client.post(
            f"/groups/{guild['id']}/invite", json={"uuids": [invited["id"]]}
        )

        assert_error(response, 401, "NotAuthorized", "User already in that group.")

    def test_failed_request_invites_nobody(self, app, inviter, guild):
        client, inviter_user = inviter
        invited_client, invited = register(app, "invited")

        response = client.post(
            f"/groups/{guild['id']}/invite",
            json={"uuids": [invited["id"], inviter_user["id"]]},
        )

        assert response.status_code == 401
        assert invited_client.get("/user").json()["invitations"]["guilds"] == []


class TestPartyInvites:
    """Party-specific invite rules."""

    @pytest.fixture
    def party(self, inviter):
        client, _ = inviter
        return create_group(client, "party", name="Test Party")

    def test_pending_invitation(self, app, inviter, party):
        client, _ = inviter
        _, invited = register(app, "invited")
        client.post(f"/groups/{party['id']}/invite", json={"uuids": [invited["id"]]})

        response = client.post(
            f"/groups/{party['id']}/invite", json={"uuids": [invited["id"]]}
        )

        assert_error(
            response, 401, "NotAuthorized", "User already pending invitation."
        )

    def test_already_in_party(self, app, inviter, party):
        client, _ = inviter
        invited_client, invited = register(app, "invited")
        client.post(f"/groups/{party['id']}/invite", json={"uuids": [invited["id"]]})
        assert invited_client.post(f"/groups/{party['id']}/join").status_code == 200

        response = client.post(
            f"/groups/{party['id']}/invite", json={"uuids": [invited["id"]]}
        )

        assert_error(response, 401, "NotAuthorized", "User already in a party.")

    def test_party_invitation_listed_on_user(self, app, inviter, party):
        client, inviter_user = inviter
        invited_client, invited = register(app, "invited")

        client.post(f"/groups/{party['id']}/invite", json={"uuids": [invited["id"]]})

        me = invited_client.get("/user").json()
        assert me["invitations"]["parties"] == [
            {"id": party["id"], "name": "Test Party", "inviter": inviter_user["id"]}
        ]
        assert me["invitations"]["guilds"] == []


class TestInviteAccess:
    """Authentication and group visibility."""

    def test_requires_auth_cookie(self, app, guild):
        response = TestClient(app).post(
            f"/groups/{guild['id']}/invite", json={"uuids": []}
        )

        assert_error(response, 401, "NotAuthorized", "Missing authentication token.")

    def test_invalid_auth_cookie(self, app, guild):
        client = TestClient(app, cookies={"auth_token": "garbage"})

        response = client.post(f"/groups/{guild['id']}/invite", json={"uuids": []})

        assert response.status_code == 401
        assert response.json()["error"] == "NotAuthorized"

    def test_private_group_of_someone_else(self, app, guild):
        outsider_client, _ = register(app, "outsider")

        response = outsider_client.post(
            f"/groups/{guild['id']}/invite", json={"uuids": []}
        )

        assert_error(
            response, 404, "NotFound", "Group not found or you don't have access."
        )

    def test_german_error_message(self, inviter, guild):
        client, _ = inviter

        response = client.post(
            f"/groups/{guild['id']}/invite",
            json={"uuids": "nope"},
            headers={"Accept-Language": "de"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Benutzer-ID-Einladungen müssen eine Liste sein."
        )
