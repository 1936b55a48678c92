"""Contact store backed by a SQL database through SQLAlchemy."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from contactbook.infrastructure.store.base import (
    ContactStoreProtocol,
    QueryError,
    QueryResult,
)
from contactbook.persistence.repositories.contact_repository import ContactRepository

logger = logging.getLogger(__name__)


class SqlContactStore(ContactStoreProtocol):
    """Contact store running each query in its own database session."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        engine: AsyncEngine | None = None,
    ) -> None:
        """Initialize the SQL store.

        Args:
            session_factory: Factory producing sessions for each query
            engine: Engine to dispose on close, when the store owns it
        """
        self.session_factory = session_factory
        self.engine = engine

    async def select_all(
        self, order_by: str = "created_at", descending: bool = True
    ) -> QueryResult:
        try:
            async with self.session_factory() as session:
                contacts = await ContactRepository(session).list_ordered(order_by, descending)
                return QueryResult(data=[c.to_dict() for c in contacts])
        except SQLAlchemyError as e:
            return _error_result("select", e)

    async def insert(self, records: list[dict[str, Any]]) -> QueryResult:
        try:
            async with self.session_factory() as session:
                contacts = await ContactRepository(session).create_many(records)
                return QueryResult(data=[c.to_dict() for c in contacts])
        except SQLAlchemyError as e:
            return _error_result("insert", e)

    async def update(self, fields: dict[str, Any], id: str) -> QueryResult:
        try:
            async with self.session_factory() as session:
                contact = await ContactRepository(session).update_contact(id, **fields)
                return QueryResult(data=[contact.to_dict()] if contact else [])
        except SQLAlchemyError as e:
            return _error_result("update", e)

    async def delete(self, id: str) -> QueryResult:
        try:
            async with self.session_factory() as session:
                contact = await ContactRepository(session).delete(id)
                return QueryResult(data=[contact.to_dict()] if contact else [])
        except SQLAlchemyError as e:
            return _error_result("delete", e)

    async def aclose(self) -> None:
        if self.engine is not None:
            await self.engine.dispose()


def _error_result(operation: str, error: Exception) -> QueryResult:
    logger.warning(f"[SQL STORE] {operation} failed: {error}")
    return QueryResult(error=QueryError(message=str(error), code=type(error).__name__))
