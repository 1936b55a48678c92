"""Contact service: the data access layer over the contact store."""

import logging
from typing import Any, Mapping

from contactbook.core.errors import RemoteError
from contactbook.domain.models.contact import CONTACT_FIELDS, ContactRecord
from contactbook.infrastructure.store.base import ContactStoreProtocol, QueryResult

logger = logging.getLogger(__name__)


class ContactService:
    """Service for listing, creating, updating and deleting contacts.

    Every operation is a single pass-through query. Failures reported by
    the store are raised as ``RemoteError`` with the store's message; there
    are no retries.
    """

    def __init__(self, store: ContactStoreProtocol) -> None:
        """Initialize contact service.

        Args:
            store: Query client for the contacts collection
        """
        self.store = store

    async def list_contacts(self) -> list[ContactRecord]:
        """List all contacts, newest first.

        Returns:
            Contacts ordered by created_at descending

        Raises:
            RemoteError: If the store reports a failure
        """
        result = _unwrap(await self.store.select_all(order_by="created_at", descending=True))
        return [ContactRecord.from_row(row) for row in result.data]

    async def create_contact(self, fields: Mapping[str, str]) -> list[dict[str, Any]]:
        """Insert one contact.

        Args:
            fields: first_name, last_name, email and phone_number

        Returns:
            The insert result rows

        Raises:
            RemoteError: If the store rejects the insert
        """
        record = {name: fields[name] for name in CONTACT_FIELDS}
        result = _unwrap(await self.store.insert([record]))
        logger.info("Contact created", extra={"contact_ids": [row.get("id") for row in result.data]})
        return result.data

    async def update_contact(self, contact_id: str, fields: Mapping[str, str]) -> list[dict[str, Any]]:
        """Apply a partial update to one contact.

        A contact_id that matches nothing is not an error: the result is
        simply empty.

        Args:
            contact_id: Contact ID
            fields: Subset of the editable fields to replace

        Returns:
            The updated rows

        Raises:
            RemoteError: If the store reports a failure
        """
        updates = {name: fields[name] for name in CONTACT_FIELDS if name in fields}
        result = _unwrap(await self.store.update(updates, id=contact_id))
        if not result.data:
            logger.warning(f"Update matched no contact with id {contact_id}")
        return result.data

    async def delete_contact(self, contact_id: str) -> list[dict[str, Any]]:
        """Delete one contact. A contact_id that matches nothing is not an error.

        Raises:
            RemoteError: If the store reports a failure
        """
        result = _unwrap(await self.store.delete(id=contact_id))
        if not result.data:
            logger.warning(f"Delete matched no contact with id {contact_id}")
        return result.data


def _unwrap(result: QueryResult) -> QueryResult:
    """Raise the store's error, if any, as a RemoteError."""
    if result.error is not None:
        raise RemoteError(result.error.message)
    return result
