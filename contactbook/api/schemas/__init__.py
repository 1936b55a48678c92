"""API schemas package."""

from contactbook.api.schemas.contact import (
    ContactResponse,
    ContactsListResponse,
    CreateContactRequest,
    MutationResponse,
    UpdateContactRequest,
)

__all__ = [
    "ContactResponse",
    "ContactsListResponse",
    "CreateContactRequest",
    "MutationResponse",
    "UpdateContactRequest",
]
