"""
Async client for the portal's REST API.

Every call is a single request: it resolves to one value or raises
``ApiError``. Nothing is retried or cancelled.
"""

import logging
from typing import TYPE_CHECKING, Any

import httpx

from form_studio.config import get_config
from form_studio.errors import ApiError
from form_studio.models.definition import (
    Division,
    FormDefinition,
    SaveResult,
    Screen,
    Submission,
)
from form_studio.models.schema import FormDocument

if TYPE_CHECKING:
    from form_studio.auth import AuthSession

logger = logging.getLogger(__name__)


class FormApiClient:
    """
    Client for form definitions, submissions and metadata.

    Usage:
        client = FormApiClient("https://portal.example.com/api")
        definition = await client.get_active_definition(division_id, screen_id)
        if definition is not None:
            form = DynamicForm(definition.document)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        auth: "AuthSession | None" = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root. Defaults to ``FORM_STUDIO_API_URL``.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (used by tests).
            auth: Session providing the bearer token.
        """
        config = get_config()
        self.base_url = (base_url or config.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.transport = transport
        self.auth = auth

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self.auth.token if self.auth is not None else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(self, method: str, path: str, json: Any = None) -> Any:
        """Send one request and return the decoded JSON body (None if empty)."""
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, json=json, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ApiError(f"Network error: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.error("%s %s returned %d: %s", method, url, response.status_code, message)
            raise ApiError(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON response from {path}", status_code=response.status_code) from e

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    # Metadata

    async def list_divisions(self) -> list[Division]:
        data = await self.get("/meta/divisions")
        return [Division.model_validate(item) for item in data or []]

    async def list_screens(self) -> list[Screen]:
        data = await self.get("/meta/screens")
        return [Screen.model_validate(item) for item in data or []]

    # Form definitions

    async def get_active_definition(self, division_id: str, screen_id: str) -> FormDefinition | None:
        """Active definition for the schema studio, or None if none exists yet."""
        data = await self.get(f"/meta/form-definitions/{division_id}/{screen_id}")
        return _definition(data, division_id, screen_id)

    async def save_definition(self, division_id: str, screen_id: str, document: FormDocument) -> SaveResult:
        """Save a new version; the service makes it the active one."""
        body = {"divisionId": division_id, "screenId": screen_id, **document.to_wire()}
        data = await self.post("/meta/form-definitions", json=body)
        try:
            return SaveResult.model_validate(data)
        except ValueError as e:
            raise ApiError(f"Unexpected save response: {data!r}") from e

    # End-user forms

    async def get_form(self, division_id: str, screen_id: str) -> FormDefinition | None:
        """Active definition as served to end users, or None."""
        data = await self.get(f"/forms/{division_id}/{screen_id}/schema")
        return _definition(data, division_id, screen_id)

    async def list_submissions(self, division_id: str, screen_id: str) -> list[Submission]:
        data = await self.get(f"/forms/{division_id}/{screen_id}/submissions")
        if not isinstance(data, list):
            return []
        return [Submission.model_validate(item) for item in data]

    async def submit(self, division_id: str, screen_id: str, values: dict[str, Any]) -> Any:
        return await self.post(f"/forms/{division_id}/{screen_id}/submit", json=values)


def _definition(data: Any, division_id: str, screen_id: str) -> FormDefinition | None:
    if not data:
        return None
    return FormDefinition.model_validate({"divisionId": division_id, "screenId": screen_id, **data})


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"Request failed with status {response.status_code}"
