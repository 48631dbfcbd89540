"""
Division screen: the end-user page for filling out one form.

Resolves the division and screen route keys, loads the active form definition
and recent submissions, and submits values.
"""

import logging
import re
from typing import Any, Iterable

from form_studio.client import FormApiClient
from form_studio.errors import ApiError, RouteResolutionError
from form_studio.interpreter.form import DynamicForm
from form_studio.models.definition import Division, FormDefinition, Notice, Screen, Submission
from form_studio.models.validation_result import ValidationResult
from form_studio.submissions import SubmissionCard, summarize_submissions

logger = logging.getLogger(__name__)

_OBJECT_ID = re.compile(r"^[0-9a-fA-F]{24}$")


def _norm(value: Any) -> str:
    return str(value or "").strip().lower()


def resolve_division(divisions: Iterable[Division], param: str) -> Division:
    """Find a division by id, code or name."""
    divisions = list(divisions)
    if _OBJECT_ID.match(param):
        for division in divisions:
            if division.id == param:
                return division
    needle = _norm(param)
    for division in divisions:
        if _norm(division.code) == needle or _norm(division.name) == needle:
            return division
    raise RouteResolutionError("Division not found")


def resolve_screen(screens: Iterable[Screen], param: str) -> Screen:
    """Find a screen by id, key or title."""
    screens = list(screens)
    if _OBJECT_ID.match(param):
        for screen in screens:
            if screen.id == param:
                return screen
    needle = _norm(param)
    for screen in screens:
        if _norm(screen.key) == needle or _norm(screen.title) == needle:
            return screen
    raise RouteResolutionError("Screen not found")


class DivisionScreen:
    """
    Controller for one division's form screen.

    Usage:
        page = DivisionScreen(FormApiClient(), "sales", "daily-report")
        await page.open()
        page.form.set_value("amount", "120")
        await page.submit()
    """

    def __init__(self, client: FormApiClient, division_param: str, screen_param: str):
        self.client = client
        self.division_param = division_param
        self.screen_param = screen_param
        self.division: Division | None = None
        self.screen: Screen | None = None
        self.definition: FormDefinition | None = None
        self.form: DynamicForm | None = None
        self.submissions: list[Submission] = []
        self.error: str | None = None
        self.notices: list[Notice] = []
        self.saving = False

    def notify(self, level: str, message: str) -> None:
        self.notices.append(Notice(level=level, message=message))
        log = logger.error if level == "error" else logger.info
        log(message)

    @property
    def title(self) -> str:
        if self.definition is not None and self.definition.form_schema.title:
            return self.definition.form_schema.title
        if self.screen is not None and self.screen.title:
            return self.screen.title
        return "Form"

    async def resolve(self) -> bool:
        """Resolve route keys to a division and screen. Sets ``error`` on failure."""
        self.error = None
        try:
            divisions = await self.client.list_divisions()
            screens = await self.client.list_screens()
            self.division = resolve_division(divisions, self.division_param)
            self.screen = resolve_screen(screens, self.screen_param)
        except (ApiError, RouteResolutionError) as e:
            self.error = str(e) or "Failed to resolve route"
            logger.warning("Cannot open %s/%s: %s", self.division_param, self.screen_param, self.error)
            return False
        return True

    async def load_data(self) -> None:
        """Load the active definition and recent submissions."""
        if self.division is None or self.screen is None:
            return
        try:
            definition = await self.client.get_form(self.division.id, self.screen.id)
            submissions = await self.client.list_submissions(self.division.id, self.screen.id)
        except ApiError as e:
            self.notify("error", e.message or "Failed to load")
            return

        self.definition = definition
        self.submissions = submissions
        if definition is None:
            self.form = None
        else:
            self.form = DynamicForm(definition.document, on_submit=self._send)

    async def open(self) -> bool:
        if not await self.resolve():
            return False
        await self.load_data()
        return True

    async def _send(self, values: dict[str, Any]) -> None:
        await self.client.submit(self.division.id, self.screen.id, values)

    async def submit(self) -> ValidationResult | None:
        """
        Submit the form's current values.

        Returns the validation result, or None if the request failed; in that
        case the values stay in the form for a retry.
        """
        if self.form is None:
            raise RuntimeError("No active form to submit")

        self.saving = True
        try:
            result = await self.form.submit()
        except ApiError as e:
            self.notify("error", e.message or "Failed")
            return None
        finally:
            self.saving = False

        if result.is_valid:
            self.notify("success", "Saved")
            await self.load_data()
        return result

    def recent_submissions(self) -> list[SubmissionCard]:
        schema = self.definition.form_schema if self.definition is not None else None
        return summarize_submissions(self.submissions, schema)
