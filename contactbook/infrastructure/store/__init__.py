"""Contact store infrastructure."""

from contactbook.infrastructure.store.base import (
    ContactStoreProtocol,
    QueryError,
    QueryResult,
)
from contactbook.infrastructure.store.factory import StoreConfigurationError, create_store
from contactbook.infrastructure.store.postgrest_store import PostgrestContactStore
from contactbook.infrastructure.store.sql_store import SqlContactStore

__all__ = [
    "ContactStoreProtocol",
    "QueryError",
    "QueryResult",
    "PostgrestContactStore",
    "SqlContactStore",
    "StoreConfigurationError",
    "create_store",
]
