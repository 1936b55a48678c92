"""Pytest configuration and fixtures."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
import pytest

from contactbook.infrastructure.store.base import ContactStoreProtocol, QueryError, QueryResult
from contactbook.infrastructure.store.sql_store import SqlContactStore
from contactbook.persistence.database import create_engine, create_session_factory, init_models


class FakeContactStore(ContactStoreProtocol):
    """In-memory store that records calls and can be told to fail."""

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.calls: list[str] = []
        self.fail_with: str | None = None
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _failure(self) -> QueryResult | None:
        if self.fail_with is not None:
            return QueryResult(error=QueryError(message=self.fail_with))
        return None

    async def select_all(self, order_by: str = "created_at", descending: bool = True) -> QueryResult:
        self.calls.append("select")
        failure = self._failure()
        if failure:
            return failure
        rows = sorted(self.rows.values(), key=lambda r: r[order_by], reverse=descending)
        return QueryResult(data=[dict(r) for r in rows])

    async def insert(self, records: list[dict[str, Any]]) -> QueryResult:
        self.calls.append("insert")
        failure = self._failure()
        if failure:
            return failure
        inserted = []
        for record in records:
            self._clock += timedelta(seconds=1)
            row = {**record, "id": str(uuid.uuid4()), "created_at": self._clock.isoformat()}
            self.rows[row["id"]] = row
            inserted.append(dict(row))
        return QueryResult(data=inserted)

    async def update(self, fields: dict[str, Any], id: str) -> QueryResult:
        self.calls.append("update")
        failure = self._failure()
        if failure:
            return failure
        if id not in self.rows:
            return QueryResult(data=[])
        self.rows[id].update(fields)
        return QueryResult(data=[dict(self.rows[id])])

    async def delete(self, id: str) -> QueryResult:
        self.calls.append("delete")
        failure = self._failure()
        if failure:
            return failure
        row = self.rows.pop(id, None)
        return QueryResult(data=[row] if row else [])


@pytest.fixture
def fake_store():
    """Create an in-memory fake store."""
    return FakeContactStore()


@pytest.fixture
async def sql_store():
    """Create a SQL store on an in-memory SQLite database."""
    engine = create_engine("sqlite+aiosqlite:///:memory:")
    await init_models(engine)
    store = SqlContactStore(create_session_factory(engine), engine=engine)

    yield store

    await store.aclose()


@pytest.fixture
def valid_fields():
    """Field values that pass every rule."""
    return {
        "first_name": "Jo",
        "last_name": "Lee",
        "email": "a@b.co",
        "phone_number": "1234567890",
    }


async def _client_for(store):
    from contactbook.main import create_app

    app = create_app(store=store)
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
async def client(sql_store):
    """Create a test client for an app backed by the SQL store."""
    async with await _client_for(sql_store) as test_client:
        yield test_client


@pytest.fixture
async def fake_client(fake_store):
    """Create a test client for an app backed by the fake store."""
    async with await _client_for(fake_store) as test_client:
        yield test_client
