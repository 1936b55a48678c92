"""Contact request and response schemas."""

from pydantic import BaseModel

from contactbook.domain.models.contact import ContactRecord


class ContactResponse(BaseModel):
    """Contact response model."""

    id: str
    first_name: str
    last_name: str
    email: str
    phone_number: str
    created_at: str | None

    @classmethod
    def from_record(cls, record: ContactRecord) -> "ContactResponse":
        return cls(
            id=record.id,
            first_name=record.first_name,
            last_name=record.last_name,
            email=record.email,
            phone_number=record.phone_number,
            created_at=record.created_at.isoformat() if record.created_at else None,
        )


class ContactsListResponse(BaseModel):
    """Contacts list response."""

    contacts: list[ContactResponse]
    total: int


class CreateContactRequest(BaseModel):
    """Create contact request. Field rules are applied by the service layer."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone_number: str = ""


class UpdateContactRequest(BaseModel):
    """Partial update request; omitted fields are left unchanged."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None


class MutationResponse(BaseModel):
    """Rows returned by the store for a create or update."""

    data: list[dict]
