"""Base contact store interfaces.

A contact store is a thin query client over the remote contacts
collection. Like hosted database clients, it reports backend failures in
the result rather than raising, leaving the decision to the caller.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class QueryError:
    """Error reported by the store for a single query."""

    message: str
    code: str | None = None


@dataclass
class QueryResult:
    """Outcome of a store query: rows on success, an error otherwise."""

    data: list[dict[str, Any]] = field(default_factory=list)
    error: QueryError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ContactStoreProtocol(ABC):
    """Protocol for contact store implementations."""

    @abstractmethod
    async def select_all(
        self, order_by: str = "created_at", descending: bool = True
    ) -> QueryResult:
        """Select every contact row.

        Args:
            order_by: Column to sort on
            descending: Sort direction

        Returns:
            QueryResult with all rows
        """
        pass

    @abstractmethod
    async def insert(self, records: list[dict[str, Any]]) -> QueryResult:
        """Insert new rows; the store assigns ``id`` and ``created_at``.

        Args:
            records: Field values for each new row

        Returns:
            QueryResult with the inserted rows
        """
        pass

    @abstractmethod
    async def update(self, fields: dict[str, Any], id: str) -> QueryResult:
        """Update the row whose id matches.

        Args:
            fields: Columns to replace
            id: Row id

        Returns:
            QueryResult with the updated rows, empty when nothing matched
        """
        pass

    @abstractmethod
    async def delete(self, id: str) -> QueryResult:
        """Delete the row whose id matches.

        Args:
            id: Row id

        Returns:
            QueryResult with the deleted rows, empty when nothing matched
        """
        pass

    async def aclose(self) -> None:
        """Release any connections held by the store."""
        return None
