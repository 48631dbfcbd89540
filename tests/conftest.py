"""Shared fixtures: an in-memory portal API behind httpx.MockTransport."""

import json
from datetime import datetime, timezone

import httpx
import pytest

from form_studio.client import FormApiClient

DIVISION_ID = "64b000000000000000000001"
SCREEN_ID = "64b000000000000000000002"


class FakePortal:
    """Minimal stand-in for the portal's REST API."""

    def __init__(self):
        self.divisions = [{"_id": DIVISION_ID, "name": "Sales", "code": "SLS"}]
        self.screens = [{"_id": SCREEN_ID, "title": "Daily Report", "key": "daily-report"}]
        self.definitions: dict[tuple[str, str], list[dict]] = {}
        self.submissions: list[dict] = []
        self.requests: list[httpx.Request] = []
        self.fail_paths: set[str] = set()

    def add_definition(self, schema: dict, ui_schema: dict | None = None) -> int:
        versions = self.definitions.setdefault((DIVISION_ID, SCREEN_ID), [])
        version = len(versions) + 1
        versions.append({"version": version, "schema": schema, "uiSchema": ui_schema or {}})
        return version

    def active(self, division_id: str, screen_id: str) -> dict | None:
        versions = self.definitions.get((division_id, screen_id))
        return versions[-1] if versions else None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")

        if path in self.fail_paths:
            return httpx.Response(500, json={"message": "Server exploded"})

        parts = path.strip("/").split("/")
        body = json.loads(request.content) if request.content else None

        if path == "/meta/divisions":
            return httpx.Response(200, json=self.divisions)
        if path == "/meta/screens":
            return httpx.Response(200, json=self.screens)
        if path == "/meta/form-definitions" and request.method == "POST":
            versions = self.definitions.setdefault((body["divisionId"], body["screenId"]), [])
            version = len(versions) + 1
            versions.append({"version": version, "schema": body["schema"], "uiSchema": body["uiSchema"]})
            return httpx.Response(201, json={"version": version})
        if parts[:2] == ["meta", "form-definitions"] and len(parts) == 4:
            return httpx.Response(200, json=self.active(parts[2], parts[3]))
        if parts[0] == "forms" and parts[-1] == "schema":
            return httpx.Response(200, json=self.active(parts[1], parts[2]))
        if parts[0] == "forms" and parts[-1] == "submissions":
            return httpx.Response(200, json=list(reversed(self.submissions)))
        if parts[0] == "forms" and parts[-1] == "submit":
            active = self.active(parts[1], parts[2])
            self.submissions.append({
                "_id": f"sub{len(self.submissions) + 1}",
                "data": body,
                "formVersion": active["version"] if active else None,
                "createdAt": datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc).isoformat(),
            })
            return httpx.Response(201, json={"ok": True})
        if path == "/auth/login":
            if body.get("password") != "secret":
                return httpx.Response(401, json={"message": "Invalid credentials"})
            return httpx.Response(200, json={"token": "tok-123", "user": {"email": body["email"]}})
        if path == "/auth/register":
            return httpx.Response(200, json={"token": "tok-new", "user": {"fullName": body["fullName"]}})
        if path == "/auth/me":
            return httpx.Response(200, json={"email": "admin@example.com", "role": "admin"})

        return httpx.Response(404, json={"message": f"No route {path}"})


@pytest.fixture
def portal() -> FakePortal:
    return FakePortal()


@pytest.fixture
def client(portal: FakePortal) -> FormApiClient:
    return FormApiClient(
        base_url="http://portal.test/api",
        transport=httpx.MockTransport(portal.handler),
    )
