"""Tests for user directory and mailbox routes."""

from tests.helpers import auth


def _send(client, token, to_username, body):
    response = client.post(
        "/api/v1/messages/",
        json={"to_username": to_username, "body": body},
        headers=auth(token),
    )
    assert response.status_code == 201, response.text
    return response.json()["message"]


class TestListUsers:
    def test_lists_all_users(self, client, tokens):
        response = client.get("/api/v1/users/", headers=auth(tokens["carol"]))

        assert response.status_code == 200
        users = response.json()["users"]
        assert [u["username"] for u in users] == ["alice", "bob", "carol"]
        assert users[0] == {
            "username": "alice",
            "first_name": "Alice",
            "last_name": "Anderson",
            "phone": "555-0100-11",
        }


class TestUserDetail:
    def test_own_profile(self, client, tokens):
        response = client.get("/api/v1/users/bob", headers=auth(tokens["bob"]))

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["username"] == "bob"
        assert user["join_at"] is not None
        assert "hashed_password" not in user

    def test_other_profile_denied(self, client, tokens):
        response = client.get("/api/v1/users/bob", headers=auth(tokens["alice"]))
        assert response.status_code == 401


class TestMailboxes:
    def test_messages_to(self, client, tokens):
        sent = _send(client, tokens["alice"], "bob", "hello bob")

        response = client.get("/api/v1/users/bob/to", headers=auth(tokens["bob"]))

        assert response.status_code == 200
        messages = response.json()["messages"]
        assert len(messages) == 1
        assert messages[0]["id"] == sent["id"]
        assert messages[0]["body"] == "hello bob"
        assert messages[0]["read_at"] is None
        assert messages[0]["from_user"]["username"] == "alice"

    def test_messages_from(self, client, tokens):
        _send(client, tokens["alice"], "bob", "one")
        _send(client, tokens["alice"], "carol", "two")

        response = client.get(
            "/api/v1/users/alice/from", headers=auth(tokens["alice"])
        )

        assert response.status_code == 200
        messages = response.json()["messages"]
        assert [m["to_user"]["username"] for m in messages] == ["bob", "carol"]

    def test_mailbox_of_other_user_denied(self, client, tokens):
        _send(client, tokens["alice"], "bob", "private")

        for path in ("/api/v1/users/bob/to", "/api/v1/users/bob/from"):
            response = client.get(path, headers=auth(tokens["carol"]))
            assert response.status_code == 401
