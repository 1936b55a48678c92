"""FastAPI dependencies for the contact store and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from contactbook.domain.services.contact_form import ContactFormController
from contactbook.domain.services.contact_service import ContactService
from contactbook.infrastructure.store.base import ContactStoreProtocol
from contactbook.settings import Settings, settings


def get_settings(request: Request) -> Settings:
    """Get the settings the application was composed with."""
    return getattr(request.app.state, "config", None) or settings


def get_store(request: Request) -> ContactStoreProtocol:
    """Get the contact store the application was composed with.

    Raises:
        HTTPException: If no store has been attached yet
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Contact store is not configured",
        )
    return store


def get_contact_service(
    store: Annotated[ContactStoreProtocol, Depends(get_store)],
) -> ContactService:
    """Get a contact service over the application's store."""
    return ContactService(store)


def get_form_controller(
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> ContactFormController:
    """Get a fresh form controller for one page request."""
    return ContactFormController(service)
