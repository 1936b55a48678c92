"""Contacts API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from contactbook.api.deps import get_contact_service
from contactbook.api.schemas.contact import (
    ContactResponse,
    ContactsListResponse,
    CreateContactRequest,
    MutationResponse,
    UpdateContactRequest,
)
from contactbook.core.errors import RemoteError, ValidationError
from contactbook.core.validation import validate_fields
from contactbook.domain.services.contact_service import ContactService

router = APIRouter()


def _remote_error(e: RemoteError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


def _validation_error(e: ValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail=e.message)


@router.get("", response_model=ContactsListResponse)
async def list_contacts(
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactsListResponse:
    """List all contacts, newest first."""
    try:
        contacts = await service.list_contacts()
    except RemoteError as e:
        raise _remote_error(e)

    return ContactsListResponse(
        contacts=[ContactResponse.from_record(contact) for contact in contacts],
        total=len(contacts),
    )


@router.post("", response_model=MutationResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(
    request: CreateContactRequest,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> MutationResponse:
    """Create a contact after checking every field rule."""
    fields = request.model_dump()
    try:
        validate_fields(fields)
    except ValidationError as e:
        raise _validation_error(e)

    try:
        data = await service.create_contact(fields)
    except RemoteError as e:
        raise _remote_error(e)
    return MutationResponse(data=data)


@router.patch("/{contact_id}", response_model=MutationResponse)
async def update_contact(
    contact_id: str,
    request: UpdateContactRequest,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> MutationResponse:
    """Update the provided fields of a contact.

    An id that matches no contact returns an empty ``data`` list.
    """
    fields = request.model_dump(exclude_none=True)
    if not fields:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No fields to update",
        )
    try:
        validate_fields(fields)
    except ValidationError as e:
        raise _validation_error(e)

    try:
        data = await service.update_contact(contact_id, fields)
    except RemoteError as e:
        raise _remote_error(e)
    return MutationResponse(data=data)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    contact_id: str,
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> None:
    """Delete a contact. Deleting an unknown id succeeds."""
    try:
        await service.delete_contact(contact_id)
    except RemoteError as e:
        raise _remote_error(e)
