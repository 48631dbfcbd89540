"""
Schema Studio: the form authoring screen.

Combines a builder session, the raw JSON escape hatch and a live preview, and
loads and saves form definition versions through the REST client. Failed
requests become notices; the fields being edited are never lost.
"""

import logging
from typing import Any

from form_studio.builder.document import format_form_document, parse_form_document
from form_studio.builder.session import BuilderSession
from form_studio.client import FormApiClient
from form_studio.errors import ApiError, SchemaParseError
from form_studio.interpreter.form import DynamicForm, SubmitCallback
from form_studio.models.definition import Division, Notice, Screen
from form_studio.models.field_descriptor import FieldKind

logger = logging.getLogger(__name__)


class SchemaStudio:
    """
    Controller for authoring one screen's form.

    Usage:
        studio = SchemaStudio(FormApiClient())
        studio.select(division_id, screen_id)
        await studio.load_active()
        studio.add_field(FieldKind.EMAIL)
        await studio.save_version()
    """

    def __init__(self, client: FormApiClient, title: str | None = None):
        self.client = client
        self.session = BuilderSession(title=title)
        self.division_id: str | None = None
        self.screen_id: str | None = None
        self.active_version: int | None = None
        self.loading = False
        self.notices: list[Notice] = []
        self.schema_text = ""
        self.ui_schema_text = ""
        self.sync()

    # Notices

    def notify(self, level: str, message: str) -> None:
        self.notices.append(Notice(level=level, message=message))
        log = logger.error if level == "error" else logger.info
        log(message)

    @property
    def last_notice(self) -> Notice | None:
        return self.notices[-1] if self.notices else None

    # Builder edits; each one regenerates the JSON buffers

    def sync(self) -> None:
        """Regenerate the JSON text buffers from the builder fields."""
        self.schema_text, self.ui_schema_text = format_form_document(self.session.to_document())

    def set_title(self, title: str) -> None:
        self.session.title = title
        self.sync()

    def add_field(self, kind: FieldKind | str = FieldKind.STRING, label: str | None = None):
        descriptor = self.session.add(kind, label)
        self.sync()
        return descriptor

    def update_field(self, index: int, patch: dict[str, Any]) -> None:
        notice = self.session.update(index, patch)
        if notice:
            self.notify("info", notice)
        self.sync()

    def auto_key(self, index: int) -> str:
        key = self.session.auto_key(index)
        self.sync()
        return key

    def delete_field(self, index: int) -> None:
        self.session.delete(index)
        self.sync()

    def move_field_up(self, index: int) -> None:
        self.session.move_up(index)
        self.sync()

    def move_field_down(self, index: int) -> None:
        self.session.move_down(index)
        self.sync()

    def edit_json(self, schema_text: str | None = None, ui_schema_text: str | None = None) -> None:
        """Edit the raw JSON buffers directly (advanced users)."""
        if schema_text is not None:
            self.schema_text = schema_text
        if ui_schema_text is not None:
            self.ui_schema_text = ui_schema_text

    def preview(self, on_submit: SubmitCallback | None = None) -> DynamicForm | None:
        """A live form for the current buffers, or None while they do not parse."""
        try:
            document = parse_form_document(self.schema_text, self.ui_schema_text)
        except SchemaParseError as e:
            logger.debug("Preview unavailable: %s", e)
            return None
        if on_submit is None:
            on_submit = self._preview_submit
        return DynamicForm(document, on_submit=on_submit)

    def _preview_submit(self, values: dict[str, Any]) -> None:
        self.notify("success", "Preview submit OK (not saved)")

    # Division / screen selection

    async def load_options(self) -> tuple[list[Division], list[Screen]]:
        try:
            return await self.client.list_divisions(), await self.client.list_screens()
        except ApiError as e:
            self.notify("error", e.message or "Failed to load divisions and screens")
            return [], []

    def select(self, division_id: str | None, screen_id: str | None) -> None:
        self.division_id = division_id
        self.screen_id = screen_id

    def _has_selection(self) -> bool:
        if not self.division_id or not self.screen_id:
            self.notify("error", "Select division & screen")
            return False
        return True

    # Collaborator calls

    async def load_active(self) -> bool:
        """Load the active definition into the builder. Returns True if loaded."""
        if not self._has_selection():
            return False

        self.loading = True
        try:
            definition = await self.client.get_active_definition(self.division_id, self.screen_id)
        except ApiError as e:
            self.notify("error", e.message or "Failed to load schema")
            return False
        finally:
            self.loading = False

        if definition is None:
            self.active_version = None
            self.notify("info", "No active form definition for this screen")
            return False

        document = definition.document
        self.session.load(document)
        # Buffers show the stored JSON until the next builder edit.
        self.schema_text, self.ui_schema_text = format_form_document(document)
        self.active_version = definition.version
        self.notify("success", f"Loaded active schema (v{definition.version})")
        return True

    async def save_version(self) -> int | None:
        """Save the JSON buffers as a new active version. Returns the version."""
        if not self._has_selection():
            return None

        try:
            document = parse_form_document(self.schema_text, self.ui_schema_text)
        except SchemaParseError as e:
            self.notify("error", str(e))
            return None

        self.loading = True
        try:
            result = await self.client.save_definition(self.division_id, self.screen_id, document)
        except ApiError as e:
            self.notify("error", e.message or "Failed to save definition")
            return None
        finally:
            self.loading = False

        self.active_version = result.version
        self.notify("success", f"Saved new version v{result.version} (now active)")
        return result.version
