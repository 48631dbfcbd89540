"""
Models for the records exchanged with the REST collaborator.

Form definitions are versioned and immutable once saved: saving always creates
a new version which becomes the active one for its division and screen.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from form_studio.models.schema import (
    FormDocument,
    FormSchema,
    UIHintMap,
    load_form_schema,
    load_ui_hints,
)


class FormDefinition(BaseModel):
    """A persisted, versioned schema + UI schema pair."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    division_id: str | None = Field(default=None, alias="divisionId")
    screen_id: str | None = Field(default=None, alias="screenId")
    version: int | None = Field(default=None, description="Version number, append-only")
    form_schema: FormSchema = Field(default_factory=FormSchema, alias="schema")
    ui_schema: UIHintMap = Field(default_factory=dict, alias="uiSchema")

    @field_validator("form_schema", mode="before")
    @classmethod
    def _load_schema(cls, value: Any) -> FormSchema:
        return load_form_schema(value)

    @field_validator("ui_schema", mode="before")
    @classmethod
    def _load_hints(cls, value: Any) -> UIHintMap:
        return load_ui_hints(value)

    @property
    def document(self) -> FormDocument:
        return FormDocument(form_schema=self.form_schema, ui_schema=self.ui_schema)


class SaveResult(BaseModel):
    """Response to saving a new form definition version."""

    version: int


class Submission(BaseModel):
    """One stored end-user submission."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    data: dict[str, Any] = Field(default_factory=dict)
    form_version: int | None = Field(default=None, alias="formVersion")
    created_at: datetime = Field(..., alias="createdAt")
    submitted_by: Any | None = Field(default=None, alias="submittedBy")


class Division(BaseModel):
    """Organisational unit a form belongs to."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str = ""
    code: str = ""


class Screen(BaseModel):
    """A form slot within the portal."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str = ""
    key: str = ""


class Notice(BaseModel):
    """A top-level notification shown to the user."""

    level: Literal["info", "success", "warning", "error"]
    message: str
