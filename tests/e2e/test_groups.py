"""End-to-end tests for registration, groups and the current user."""

import pytest
from fastapi.testclient import TestClient

from tests.harness import create_app_fixture

# E2E fixture - full HTTP stack on in-memory persistence and mock email
app = create_app_fixture()


def register(app, username: str, email: str | None = None):
    client = TestClient(app)
    response = client.post(
        "/auth/register", json={"username": username, "email": email}
    )
    assert response.status_code == 201, response.text
    return client, response.json()


class TestHealth:
    def test_health(self, app):
        response = TestClient(app).get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["environment"] == "test"


class TestRegister:
    """Tests for POST /auth/register."""

    def test_register_sets_cookie_and_header(self, app):
        client = TestClient(app)

        response = client.post(
            "/auth/register", json={"username": "alice", "email": "alice@example.com"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "alice"
        assert data["balance"] == 0
        assert data["invitations"] == {"guilds": [], "parties": []}
        assert response.headers["X-Auth-Token"]
        assert "auth_token" in response.headers.get("set-cookie", "")

        me = client.get("/user")
        assert me.status_code == 200
        assert me.json()["id"] == data["id"]

    def test_register_ignores_client_balance(self, app):
        response = TestClient(app).post(
            "/auth/register", json={"username": "alice", "balance": 1000}
        )

        assert response.json()["balance"] == 0

    def test_username_taken(self, app):
        register(app, "alice")

        response = TestClient(app).post("/auth/register", json={"username": "alice"})

        assert response.status_code == 401
        assert response.json()["message"] == "Username already taken."

    def test_invalid_username(self, app):
        response = TestClient(app).post(
            "/auth/register", json={"username": "not valid!"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "BadRequest"

    def test_missing_username(self, app):
        response = TestClient(app).post("/auth/register", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request parameters."


class TestCreateGroup:
    """Tests for POST /groups."""

    def test_guild_needs_gems(self, app):
        client, _ = register(app, "poor")

        response = client.post("/groups", json={"name": "Guild", "type": "guild"})

        assert response.status_code == 401
        assert response.json()["message"] == "Not enough gems!"

    def test_guild_costs_balance(self, app, monkeypatch):
        monkeypatch.setenv("GROUPS__STARTING_BALANCE", "1")
        client, _ = register(app, "rich")

        response = client.post(
            "/groups", json={"name": "Guild", "type": "guild", "privacy": "public"}
        )

        assert response.status_code == 201
        group = response.json()
        assert group["privacy"] == "public"
        assert group["member_count"] == 1
        me = client.get("/user").json()
        assert me["balance"] == 0
        assert me["guilds"] == [group["id"]]

    def test_party_is_free(self, app):
        client, user = register(app, "leader")

        response = client.post("/groups", json={"name": "Party", "type": "party"})

        assert response.status_code == 201
        group = response.json()
        assert group["leader"] == user["id"]
        assert client.get("/user").json()["party_id"] == group["id"]

    def test_second_party_refused(self, app):
        client, _ = register(app, "leader")
        client.post("/groups", json={"name": "Party", "type": "party"})

        response = client.post("/groups", json={"name": "Another", "type": "party"})

        assert response.status_code == 401
        assert response.json()["message"] == "Already in a party, try refreshing."

    def test_unknown_group_type(self, app):
        client, _ = register(app, "leader")

        response = client.post("/groups", json={"name": "X", "type": "tavern"})

        assert response.status_code == 400


class TestGetAndJoinGroup:
    """Tests for GET /groups/{id} and POST /groups/{id}/join."""

    def test_public_guild_visible_and_joinable(self, app, monkeypatch):
        monkeypatch.setenv("GROUPS__STARTING_BALANCE", "1")
        leader, _ = register(app, "leader")
        group = leader.post(
            "/groups", json={"name": "Open", "type": "guild", "privacy": "public"}
        ).json()
        visitor, _ = register(app, "visitor")

        assert visitor.get(f"/groups/{group['id']}").status_code == 200
        joined = visitor.post(f"/groups/{group['id']}/join")

        assert joined.status_code == 200
        assert joined.json()["member_count"] == 2

    def test_private_party_hidden(self, app):
        leader, _ = register(app, "leader")
        party = leader.post("/groups", json={"name": "P", "type": "party"}).json()
        visitor, _ = register(app, "visitor")

        assert leader.get(f"/groups/{party['id']}").status_code == 200
        response = visitor.get(f"/groups/{party['id']}")
        assert response.status_code == 404
        assert response.json()["error"] == "NotFound"

    def test_join_party_without_invitation(self, app):
        leader, _ = register(app, "leader")
        party = leader.post("/groups", json={"name": "P", "type": "party"}).json()
        visitor, _ = register(app, "visitor")

        response = visitor.post(f"/groups/{party['id']}/join")

        assert response.status_code == 401
        assert response.json()["message"] == "Can't join a group you're not invited to."

    def test_join_clears_invitation(self, app):
        leader, _ = register(app, "leader")
        party = leader.post("/groups", json={"name": "P", "type": "party"}).json()
        invited, user = register(app, "invited")
        leader.post(f"/groups/{party['id']}/invite", json={"uuids": [user["id"]]})

        response = invited.post(f"/groups/{party['id']}/join")

        assert response.status_code == 200
        me = invited.get("/user").json()
        assert me["party_id"] == party["id"]
        assert me["invitations"]["parties"] == []

    @pytest.mark.parametrize("path", ["/user", "/groups/abc"])
    def test_requires_authentication(self, app, path):
        response = TestClient(app).get(path)

        assert response.status_code == 401
        assert response.json()["message"] == "Missing authentication token."
