"""Tests for the auth session store."""

import asyncio
import json

import pytest

from form_studio import auth
from form_studio.auth import AuthSession
from form_studio.errors import ApiError


@pytest.fixture
def store(tmp_path):
    return tmp_path / "auth" / "session.json"


class TestAuthSession:
    """Tests for AuthSession."""

    def test_login_persists(self, client, store):
        """Test login stores token and user on disk."""
        session = AuthSession(client, store_path=store)
        user = asyncio.run(session.login("admin@example.com", "secret"))
        assert user == {"email": "admin@example.com"}
        assert session.is_authenticated
        assert json.loads(store.read_text()) == {"token": "tok-123", "user": user}
        assert auth.get_current_session() is session

    def test_token_sent(self, client, portal, store):
        """Test requests after login carry the bearer token."""
        session = AuthSession(client, store_path=store)
        asyncio.run(session.login("admin@example.com", "secret"))
        asyncio.run(client.list_divisions())
        assert portal.requests[-1].headers["Authorization"] == "Bearer tok-123"

    def test_rehydrate(self, client, store):
        """Test a new session picks up the stored token."""
        asyncio.run(AuthSession(client, store_path=store).login("a@b.co", "secret"))
        restored = AuthSession(client, store_path=store)
        assert restored.token == "tok-123"
        assert restored.user == {"email": "a@b.co"}

    def test_unreadable_store_ignored(self, client, store):
        """Test a corrupt store starts signed out."""
        store.parent.mkdir(parents=True)
        store.write_text("{not json")
        assert not AuthSession(client, store_path=store).is_authenticated

    def test_bad_credentials(self, client, store):
        """Test a 401 raises and stores nothing."""
        session = AuthSession(client, store_path=store)
        with pytest.raises(ApiError) as excinfo:
            asyncio.run(session.login("admin@example.com", "wrong"))
        assert excinfo.value.message == "Invalid credentials"
        assert excinfo.value.status_code == 401
        assert not session.is_authenticated
        assert not store.exists()

    def test_register_and_me(self, client, store):
        """Test register signs in and /auth/me refreshes the user."""
        session = AuthSession(client, store_path=store)
        asyncio.run(session.register("Ada Lovelace", "ada@example.com", "pw"))
        assert session.token == "tok-new"
        user = asyncio.run(session.fetch_current_user())
        assert user["role"] == "admin"
        assert json.loads(store.read_text())["user"]["role"] == "admin"

    def test_logout(self, client, store):
        """Test logout clears memory and disk."""
        session = AuthSession(client, store_path=store)
        asyncio.run(session.login("admin@example.com", "secret"))
        session.logout()
        assert session.token is None
        assert not store.exists()
        session.logout()
