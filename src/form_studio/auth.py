"""
Process-wide auth session store.

Holds the bearer token and current user. Populated at login/register, cleared
at logout, and rehydrated at startup from a JSON file.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from form_studio.client import FormApiClient
from form_studio.config import get_config
from form_studio.errors import ApiError

logger = logging.getLogger(__name__)

_current_session: "AuthSession | None" = None


def get_current_session() -> "AuthSession | None":
    """Get the session created most recently in this process."""
    return _current_session


class AuthSession:
    """
    Token and user for the signed-in account.

    Usage:
        client = FormApiClient()
        auth = AuthSession(client)
        await auth.login("admin@example.com", "secret")
        divisions = await client.list_divisions()  # sends the bearer token
    """

    def __init__(self, client: FormApiClient, store_path: str | Path | None = None):
        global _current_session
        self.client = client
        self.store_path = Path(store_path or get_config().auth_store_path)
        self.token: str | None = None
        self.user: dict[str, Any] | None = None
        client.auth = self
        self.rehydrate()
        _current_session = self

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def rehydrate(self) -> None:
        """Restore token and user from durable storage, if present."""
        if not self.store_path.exists():
            return
        try:
            data = json.loads(self.store_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable auth store %s: %s", self.store_path, e)
            return
        if isinstance(data, dict):
            self.token = data.get("token")
            self.user = data.get("user")

    def _persist(self) -> None:
        self.store_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.store_path.with_suffix(".tmp")
        with open(temp_path, "w", encoding="utf-8") as f:
            json.dump({"token": self.token, "user": self.user}, f)
            f.flush()
            os.fsync(f.fileno())
        temp_path.replace(self.store_path)

    def _accept(self, data: Any) -> None:
        if not isinstance(data, dict) or not data.get("token"):
            raise ApiError("Authentication response did not include a token")
        self.token = data["token"]
        self.user = data.get("user")
        self._persist()

    async def login(self, email: str, password: str) -> dict[str, Any] | None:
        data = await self.client.post("/auth/login", json={"email": email, "password": password})
        self._accept(data)
        logger.info("Signed in as %s", email)
        return self.user

    async def register(self, full_name: str, email: str, password: str) -> dict[str, Any] | None:
        data = await self.client.post(
            "/auth/register",
            json={"fullName": full_name, "email": email, "password": password},
        )
        self._accept(data)
        logger.info("Registered %s", email)
        return self.user

    async def fetch_current_user(self) -> dict[str, Any] | None:
        """Refresh the stored user from ``/auth/me``."""
        self.user = await self.client.get("/auth/me")
        self._persist()
        return self.user

    def logout(self) -> None:
        self.token = None
        self.user = None
        try:
            self.store_path.unlink()
        except FileNotFoundError:
            pass
        logger.info("Signed out")
