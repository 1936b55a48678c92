"""Server-rendered contact page."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.responses import HTMLResponse, RedirectResponse

from contactbook.api.deps import get_contact_service, get_form_controller, get_settings
from contactbook.api.rendering import PageLayout, get_layout, render_connection_check, render_contact_page
from contactbook.core.errors import RemoteError
from contactbook.domain.models.contact import ContactDraft
from contactbook.domain.services.contact_form import ContactFormController
from contactbook.domain.services.contact_service import ContactService
from contactbook.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _page(controller: ContactFormController, layout: PageLayout, status_code: int = 200) -> HTMLResponse:
    return HTMLResponse(
        render_contact_page(controller.contacts, controller.draft, controller.error, layout),
        status_code=status_code,
    )


def _back_to_page(layout: PageLayout) -> RedirectResponse:
    return RedirectResponse(url=f"/?layout={layout.name}", status_code=status.HTTP_303_SEE_OTHER)


def resolve_page_layout(
    config: Annotated[Settings, Depends(get_settings)],
    layout: str | None = Query(None),
) -> PageLayout:
    """Pick the layout named in the query, else the configured default."""
    return get_layout(layout, config.page_layout)


@router.get("/", response_class=HTMLResponse)
async def contact_page(
    controller: Annotated[ContactFormController, Depends(get_form_controller)],
    page_layout: Annotated[PageLayout, Depends(resolve_page_layout)],
    edit: str | None = Query(None),
) -> HTMLResponse:
    """Show the contact list with an empty form, or the form for ``edit``."""
    await controller.load()
    if edit:
        controller.edit_by_id(edit)
    return _page(controller, page_layout)


@router.post("/", response_class=HTMLResponse)
async def submit_contact(
    controller: Annotated[ContactFormController, Depends(get_form_controller)],
    page_layout: Annotated[PageLayout, Depends(resolve_page_layout)],
    first_name: Annotated[str, Form()] = "",
    last_name: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    phone_number: Annotated[str, Form()] = "",
    id: Annotated[str, Form()] = "",
):
    """Create or update a contact from the form, then return to the list."""
    # The current list decides whether a draft id is an update
    await controller.load()
    controller.draft = ContactDraft(
        id=id or None,
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone_number=phone_number,
    )

    if not controller.validate():
        return _page(controller, page_layout, status_code=422)
    if not await controller.submit():
        return _page(controller, page_layout, status_code=status.HTTP_502_BAD_GATEWAY)
    return _back_to_page(page_layout)


@router.post("/contacts/{contact_id}/delete", response_class=HTMLResponse)
async def delete_contact(
    contact_id: str,
    controller: Annotated[ContactFormController, Depends(get_form_controller)],
    page_layout: Annotated[PageLayout, Depends(resolve_page_layout)],
):
    """Delete a contact, then return to the list."""
    if not await controller.delete(contact_id):
        await controller.load()
        return _page(controller, page_layout, status_code=status.HTTP_502_BAD_GATEWAY)
    return _back_to_page(page_layout)


@router.get("/connection-check", response_class=HTMLResponse)
async def connection_check(
    service: Annotated[ContactService, Depends(get_contact_service)],
) -> HTMLResponse:
    """List contact names to confirm the store is reachable."""
    try:
        contacts = await service.list_contacts()
    except RemoteError as e:
        logger.error(f"Error fetching contacts: {e.message}")
        return HTMLResponse(render_connection_check([], error=e.message), status_code=status.HTTP_502_BAD_GATEWAY)
    return HTMLResponse(render_connection_check(contacts))
