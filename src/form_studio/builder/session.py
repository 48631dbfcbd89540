"""
Builder edit session.

An ordered list of field descriptors plus the form title. The list has no
identity beyond array position; every edit goes through the methods here so
field keys stay unique.
"""

import logging
from typing import Any

from form_studio.builder.keys import slugify, unique_key
from form_studio.builder.transformer import from_schema, to_schema
from form_studio.config import get_config
from form_studio.models.field_descriptor import FieldDescriptor, FieldKind
from form_studio.models.schema import FormDocument

logger = logging.getLogger(__name__)


class BuilderSession:
    """
    Editable field list for the visual form builder.

    Usage:
        session = BuilderSession(title="Sales Entry")
        session.add(FieldKind.EMAIL)
        session.update(0, {"label": "Work email", "required": True})
        document = session.to_document()
    """

    def __init__(self, title: str | None = None, fields: list[FieldDescriptor] | None = None):
        self.title = title or get_config().default_form_title
        self.fields: list[FieldDescriptor] = list(fields or [])

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.fields]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.fields):
            raise IndexError(f"No field at position {index}")

    def _names_except(self, index: int) -> list[str]:
        return [f.name for i, f in enumerate(self.fields) if i != index and f.name]

    def add(self, kind: FieldKind | str = FieldKind.STRING, label: str | None = None) -> FieldDescriptor:
        """Quick add: append a field with a label and a unique auto key."""
        kind = FieldKind(kind)
        label = label or kind.label
        descriptor = FieldDescriptor(
            name=unique_key(label, self.names),
            label=label,
            type=kind,
        )
        self.fields.append(descriptor)
        return descriptor

    def update(self, index: int, patch: dict[str, Any]) -> str | None:
        """
        Apply a partial edit to one field.

        A patched key is slugified; if it collides with another field's key it
        is suffixed to stay unique. Changing the type away from ``select``
        drops the dropdown options.

        Returns:
            An informational notice when the key had to be adjusted.
        """
        self._check_index(index)
        data = self.fields[index].model_dump()
        data.update(patch)

        if "name" in patch and data["name"]:
            data["name"] = slugify(data["name"])
        if "type" in patch and FieldKind(data["type"]) is not FieldKind.SELECT:
            data["options"] = None

        notice = None
        taken = self._names_except(index)
        if data["name"] and data["name"] in taken:
            data["name"] = unique_key(data["name"], taken)
            notice = f'Field key adjusted to "{data["name"]}" to keep it unique.'
            logger.info(notice)

        self.fields[index] = FieldDescriptor.model_validate(data)
        return notice

    def auto_key(self, index: int) -> str:
        """Regenerate a field's key from its label."""
        self._check_index(index)
        descriptor = self.fields[index]
        key = unique_key(descriptor.label or "field", self._names_except(index))
        self.fields[index] = descriptor.model_copy(update={"name": key})
        return key

    def delete(self, index: int) -> FieldDescriptor:
        self._check_index(index)
        return self.fields.pop(index)

    def move_up(self, index: int) -> None:
        self._check_index(index)
        if index == 0:
            return
        self.fields[index - 1], self.fields[index] = self.fields[index], self.fields[index - 1]

    def move_down(self, index: int) -> None:
        self._check_index(index)
        if index == len(self.fields) - 1:
            return
        self.fields[index + 1], self.fields[index] = self.fields[index], self.fields[index + 1]

    def to_document(self) -> FormDocument:
        return to_schema(self.fields, self.title)

    def load(self, document: FormDocument) -> None:
        """Replace the session contents with fields parsed from a document."""
        self.fields = from_schema(document)
        self.title = document.form_schema.title or get_config().default_form_title
