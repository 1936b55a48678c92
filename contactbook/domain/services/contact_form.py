"""Contact form controller.

Holds the state behind the contact page: the current list, the draft
bound to the form and a single error message slot. Every mutation is
followed by a full reload of the list; nothing is merged locally.
"""

import logging

from contactbook.core.errors import RemoteError, ValidationError
from contactbook.core.validation import validate_draft
from contactbook.domain.models.contact import CONTACT_FIELDS, ContactDraft, ContactRecord
from contactbook.domain.services.contact_service import ContactService

logger = logging.getLogger(__name__)


class ContactFormController:
    """Drives list, create, edit and delete for the contact page."""

    def __init__(self, service: ContactService) -> None:
        self.service = service
        self.contacts: list[ContactRecord] = []
        self.draft = ContactDraft()
        self.error = ""

    @property
    def mode(self) -> str:
        """``"edit"`` while a contact is loaded into the draft, else ``"create"``."""
        return "edit" if self.draft.is_editing else "create"

    async def load(self) -> None:
        """Re-fetch the full contact list.

        On failure the previous list is kept and the error slot is set.
        """
        try:
            self.contacts = await self.service.list_contacts()
        except RemoteError as e:
            logger.error(f"Error fetching contacts: {e.message}")
            self.error = e.message

    def set_field(self, name: str, value: str) -> None:
        """Update one field of the draft."""
        if name not in CONTACT_FIELDS:
            raise KeyError(name)
        setattr(self.draft, name, value)

    def validate(self) -> bool:
        """Run the field rules on the draft, setting or clearing the error slot."""
        try:
            validate_draft(self.draft)
        except ValidationError as e:
            self.error = e.message
            return False
        self.error = ""
        return True

    async def submit(self) -> bool:
        """Validate the draft and save it.

        Updates when the draft's id belongs to a listed contact, creates
        otherwise. On success the draft resets and the list is reloaded.

        Returns:
            True if the contact was saved
        """
        if not self.validate():
            return False

        listed_ids = {contact.id for contact in self.contacts}
        try:
            if self.draft.id is not None and self.draft.id in listed_ids:
                await self.service.update_contact(self.draft.id, self.draft.fields())
            else:
                await self.service.create_contact(self.draft.fields())
        except RemoteError as e:
            logger.error(f"Error saving contact: {e.message}")
            self.error = e.message
            return False

        self.reset()
        await self.load()
        return True

    def edit(self, contact: ContactRecord) -> None:
        """Copy a contact into the draft, entering edit mode."""
        self.draft = ContactDraft.from_record(contact)

    def edit_by_id(self, contact_id: str) -> bool:
        """Enter edit mode for a listed contact; returns False if it is not listed."""
        for contact in self.contacts:
            if contact.id == contact_id:
                self.edit(contact)
                return True
        return False

    async def delete(self, contact_id: str) -> bool:
        """Delete a contact and reload the list. No confirmation step.

        Returns:
            True if the delete call succeeded
        """
        try:
            await self.service.delete_contact(contact_id)
        except RemoteError as e:
            logger.error(f"Error deleting contact: {e.message}")
            self.error = e.message
            return False
        await self.load()
        return True

    def reset(self) -> None:
        """Clear the draft back to create mode."""
        self.draft = ContactDraft()
