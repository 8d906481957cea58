"""End-to-end tests of the HTTP surface against an in-memory SQLite store."""

import asyncio
import time
from datetime import datetime, timedelta, timezone

import httpx
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from quirknotes.core.repositories.note_repository import NoteRepository
from quirknotes.core.services import auth_service as auth_service_module
from quirknotes.main import create_app
from quirknotes.security.password import hash_password
from quirknotes.security.jwt import create_access_token


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _register(client, username: str, password: str = "pw123") -> str:
    resp = client.post("/registerUser", json={"username": username, "password": password})
    assert resp.status_code == 201, resp.text
    return resp.json()["token"]


def _post_note(client, token: str, title: str = "A", content: str = "B") -> str:
    resp = client.post("/postNote", json={"title": title, "content": content}, headers=_bearer(token))
    assert resp.status_code == 200, resp.text
    return resp.json()["insertedId"]


class TestAuthEndpoints:
    def test_register_returns_201_and_token(self, client):
        resp = client.post("/registerUser", json={"username": "alice", "password": "pw123"})

        assert resp.status_code == 201
        body = resp.json()
        assert body["response"] == "User registered successfully."
        assert body["token"]

    @pytest.mark.parametrize(
        "payload",
        [{}, {"username": "alice"}, {"password": "pw"}, {"username": "", "password": "pw"}],
    )
    def test_register_missing_fields(self, client, payload):
        resp = client.post("/registerUser", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Username and password both needed to register."}

    def test_register_duplicate_username(self, client):
        _register(client, "alice", "pw123")
        resp = client.post("/registerUser", json={"username": "alice", "password": "other"})

        assert resp.status_code == 400
        assert resp.json() == {"error": "Username already exists."}

    def test_register_non_string_fields(self, client):
        resp = client.post("/registerUser", json={"username": 42, "password": ["x"]})
        assert resp.status_code == 400

    def test_register_then_login(self, client):
        _register(client, "alice", "pw123")
        resp = client.post("/loginUser", json={"username": "alice", "password": "pw123"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["response"] == "User logged in successfully."

        # the login token works for protected routes
        notes = client.get("/getAllNotes", headers=_bearer(body["token"]))
        assert notes.status_code == 200

    def test_login_missing_fields(self, client):
        resp = client.post("/loginUser", json={"username": "alice"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Username and password both needed to login."}

    @pytest.mark.parametrize("username,password", [("alice", "wrong"), ("ghost", "pw123")])
    def test_login_bad_credentials(self, client, username, password):
        _register(client, "alice", "pw123")
        resp = client.post("/loginUser", json={"username": username, "password": password})

        assert resp.status_code == 401
        assert resp.json() == {"error": "Authentication failed."}


class TestNoteEndpoints:
    def test_full_lifecycle(self, client):
        token = _register(client, "alice", "pw123")

        resp = client.post("/postNote", json={"title": "A", "content": "B"}, headers=_bearer(token))
        assert resp.status_code == 200
        assert resp.json()["response"] == "Note added successfully."
        note_id = resp.json()["insertedId"]
        assert ObjectId.is_valid(note_id)

        resp = client.get(f"/getNote/{note_id}", headers=_bearer(token))
        assert resp.status_code == 200
        note = resp.json()["response"]
        assert note["_id"] == note_id
        assert (note["title"], note["content"], note["username"]) == ("A", "B", "alice")

        resp = client.delete(f"/deleteNote/{note_id}", headers=_bearer(token))
        assert resp.status_code == 200
        assert resp.json() == {"response": f"Document with ID {note_id} properly deleted"}

        resp = client.get(f"/getNote/{note_id}", headers=_bearer(token))
        assert resp.status_code == 404
        assert resp.json() == {"error": "Unable to find note with given ID."}

    def test_post_note_missing_fields(self, client, auth_headers):
        resp = client.post("/postNote", json={"title": "only title"}, headers=auth_headers)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Title and content are both required."}

    @pytest.mark.parametrize(
        "headers",
        [{}, {"Authorization": "Bearer not-a-token"}, {"Authorization": "Token abc"}],
    )
    def test_protected_routes_require_valid_token(self, client, headers):
        note_id = str(ObjectId())
        requests = [
            ("post", "/postNote", {"title": "A", "content": "B"}),
            ("get", f"/getNote/{note_id}", None),
            ("get", "/getAllNotes", None),
            ("patch", f"/editNote/{note_id}", {"title": "x"}),
            ("delete", f"/deleteNote/{note_id}", None),
        ]
        for method, path, body in requests:
            kwargs = {"headers": headers}
            if body is not None:
                kwargs["json"] = body
            resp = client.request(method.upper(), path, **kwargs)
            assert resp.status_code == 401, (method, path)
            assert resp.json() == {"error": "Unauthorized."}

    def test_expired_token_is_rejected(self, client, test_settings, registered_user):
        token = create_access_token(
            registered_user["username"],
            expires_delta=timedelta(hours=1),
            issued_at=datetime.now(timezone.utc) - timedelta(hours=2),
            settings=test_settings,
        )
        resp = client.get("/getAllNotes", headers=_bearer(token))
        assert resp.status_code == 401

    def test_malformed_id_is_400_before_store_access(self, client, auth_headers, monkeypatch):
        async def fail(*args, **kwargs):
            raise AssertionError("store must not be queried")

        monkeypatch.setattr(NoteRepository, "get_by_id_and_owner", fail)
        monkeypatch.setattr(NoteRepository, "update_by_id_and_owner", fail)
        monkeypatch.setattr(NoteRepository, "delete_by_id_and_owner", fail)

        for resp in (
            client.get("/getNote/abc", headers=auth_headers),
            client.patch("/editNote/abc", json={"title": "x"}, headers=auth_headers),
            client.delete("/deleteNote/abc", headers=auth_headers),
        ):
            assert resp.status_code == 400
            assert resp.json() == {"error": "Invalid note ID."}

    def test_get_all_notes(self, client):
        alice = _register(client, "alice")
        bob = _register(client, "bob")

        assert client.get("/getAllNotes", headers=_bearer(alice)).json() == {"response": []}

        first = _post_note(client, alice, "one", "1")
        second = _post_note(client, alice, "two", "2")
        _post_note(client, bob, "bob's", "secret")

        resp = client.get("/getAllNotes", headers=_bearer(alice))
        assert resp.status_code == 200
        notes = resp.json()["response"]
        assert {n["_id"] for n in notes} == {first, second}
        assert all(n["username"] == "alice" for n in notes)

    def test_other_users_notes_are_not_found(self, client):
        alice = _register(client, "alice")
        bob = _register(client, "bob")
        note_id = _post_note(client, alice, "A", "B")

        assert client.get(f"/getNote/{note_id}", headers=_bearer(bob)).status_code == 404
        assert (
            client.patch(f"/editNote/{note_id}", json={"title": "x"}, headers=_bearer(bob)).status_code
            == 404
        )
        assert client.delete(f"/deleteNote/{note_id}", headers=_bearer(bob)).status_code == 404

        note = client.get(f"/getNote/{note_id}", headers=_bearer(alice)).json()["response"]
        assert (note["title"], note["content"]) == ("A", "B")

    def test_edit_partial_updates(self, client, auth_headers):
        token = auth_headers["Authorization"].split(" ")[1]
        note_id = _post_note(client, token, "A", "B")

        resp = client.patch(f"/editNote/{note_id}", json={"title": "A2"}, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json() == {"response": f"Document with ID {note_id} properly updated"}
        note = client.get(f"/getNote/{note_id}", headers=auth_headers).json()["response"]
        assert (note["title"], note["content"]) == ("A2", "B")

        client.patch(f"/editNote/{note_id}", json={"title": "", "content": "B2"}, headers=auth_headers)
        note = client.get(f"/getNote/{note_id}", headers=auth_headers).json()["response"]
        assert (note["title"], note["content"]) == ("A2", "B2")

    @pytest.mark.parametrize("payload", [{}, {"title": "", "content": ""}])
    def test_edit_without_fields(self, client, auth_headers, payload):
        token = auth_headers["Authorization"].split(" ")[1]
        note_id = _post_note(client, token)

        resp = client.patch(f"/editNote/{note_id}", json=payload, headers=auth_headers)
        assert resp.status_code == 400
        assert resp.json() == {"error": "At least title or content are required."}

    def test_edit_and_delete_missing_note(self, client, auth_headers):
        missing = str(ObjectId())
        expected = {"error": f"Note with ID {missing} belonging to the user not found"}

        resp = client.patch(f"/editNote/{missing}", json={"title": "x"}, headers=auth_headers)
        assert resp.status_code == 404
        assert resp.json() == expected

        resp = client.delete(f"/deleteNote/{missing}", headers=auth_headers)
        assert resp.status_code == 404
        assert resp.json() == expected


class TestHealthEndpoints:
    def test_liveness(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_database_health(self, client):
        resp = client.get("/health/database")
        assert resp.status_code == 200
        assert resp.json()["connected"] is True

    def test_status(self, client):
        body = client.get("/health/status").json()
        assert body["status"] == "healthy"
        assert body["checks"]["database"]["connected"] is True

    def test_status_reports_the_app_version(self, test_settings, test_database):
        settings = test_settings.model_copy(update={"app_version": "9.9.9-test"})
        app = create_app(settings=settings, database=test_database)
        with TestClient(app) as c:
            assert c.get("/health/status").json()["version"] == "9.9.9-test"

    async def test_liveness_answers_while_a_password_hashes(self, test_app, test_database, monkeypatch):
        def slow_hash(password, rounds=None):
            time.sleep(0.5)
            return hash_password(password, rounds=rounds)

        monkeypatch.setattr(auth_service_module, "hash_password", slow_hash)
        await test_database.connect()
        try:
            transport = httpx.ASGITransport(app=test_app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
                register = asyncio.create_task(
                    ac.post("/registerUser", json={"username": "alice", "password": "pw123"})
                )
                await asyncio.sleep(0.1)

                start = time.perf_counter()
                resp = await ac.get("/health")
                elapsed = time.perf_counter() - start

                assert resp.status_code == 200
                assert elapsed < 0.3
                assert (await register).status_code == 201
        finally:
            await test_database.close()
