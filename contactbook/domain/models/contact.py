"""Data models for contacts and the contact form draft."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

# Editable fields, in the order the form shows them and validation checks them
CONTACT_FIELDS = ("first_name", "last_name", "email", "phone_number")


class ContactRecord(BaseModel):
    """A persisted contact as returned by the store."""

    id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "ContactRecord":
        """Build a record from a store row.

        The store does not enforce the field rules, so null or missing
        fields come back as empty strings and non-string values as text.
        """
        data = dict(row)
        data["id"] = str(data["id"])
        for name in CONTACT_FIELDS:
            value = data.get(name)
            data[name] = "" if value is None else str(value)
        return cls.model_validate(data)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class ContactDraft(BaseModel):
    """In-progress contact field values bound to the form.

    ``id`` is set while editing an existing contact and ``None`` when the
    form is creating a new one.
    """

    id: str | None = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""

    @classmethod
    def from_record(cls, record: ContactRecord) -> "ContactDraft":
        return cls(
            id=record.id,
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            phone_number=record.phone_number,
        )

    @property
    def is_editing(self) -> bool:
        return self.id is not None

    def fields(self) -> dict[str, str]:
        """Field values without the id, shaped for an insert or update."""
        return {name: getattr(self, name) for name in CONTACT_FIELDS}
