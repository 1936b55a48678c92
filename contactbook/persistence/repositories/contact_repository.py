"""Contact repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from contactbook.persistence.models.contact import Contact
from contactbook.persistence.repositories.base import BaseRepository

# Columns a caller may write; id and created_at are assigned on insert
WRITABLE_COLUMNS = frozenset(("first_name", "last_name", "email", "phone_number"))


class ContactRepository(BaseRepository[Contact]):
    """Repository for Contact entities."""

    def __init__(self, session: AsyncSession):
        """Initialize contact repository."""
        super().__init__(Contact, session)

    async def list_ordered(
        self, order_by: str = "created_at", descending: bool = True
    ) -> list[Contact]:
        """List every contact sorted on one column.

        Args:
            order_by: Contact column name
            descending: Sort direction

        Returns:
            List of contacts
        """
        column = getattr(Contact, order_by)
        stmt = select(Contact).order_by(column.desc() if descending else column.asc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_many(self, records: list[dict]) -> list[Contact]:
        """Insert several contacts in one transaction.

        Args:
            records: Field values per contact

        Returns:
            The created contacts
        """
        instances = [
            Contact(**{k: v for k, v in record.items() if k in WRITABLE_COLUMNS})
            for record in records
        ]
        self.session.add_all(instances)
        await self.session.commit()
        for instance in instances:
            await self.session.refresh(instance)
        return instances

    async def update_contact(self, id: str, **fields) -> Contact | None:
        """Replace the given fields of a contact.

        Args:
            id: Contact ID
            **fields: Columns to replace

        Returns:
            Updated contact or None if not found
        """
        data = {k: v for k, v in fields.items() if k in WRITABLE_COLUMNS}
        return await self.update(id, **data)
