"""Tests for the contact data access layer."""

from datetime import datetime, timedelta

import pytest

from contactbook.core.errors import RemoteError
from contactbook.domain.services.contact_service import ContactService
from contactbook.persistence.repositories.contact_repository import ContactRepository


@pytest.mark.asyncio
async def test_list_returns_newest_first(fake_store, valid_fields):
    """Contacts come back ordered by created_at descending."""
    service = ContactService(fake_store)
    await service.create_contact({**valid_fields, "first_name": "First"})
    await service.create_contact({**valid_fields, "first_name": "Second"})
    await service.create_contact({**valid_fields, "first_name": "Third"})

    contacts = await service.list_contacts()

    assert [c.first_name for c in contacts] == ["Third", "Second", "First"]


@pytest.mark.asyncio
async def test_create_sends_only_contact_fields(fake_store, valid_fields):
    """The insert carries the four editable fields; the store assigns the rest."""
    service = ContactService(fake_store)

    data = await service.create_contact({**valid_fields, "id": "ignored", "extra": "x"})

    assert len(data) == 1
    row = data[0]
    assert row["id"] != "ignored"
    assert "extra" not in row
    assert row["created_at"]


@pytest.mark.asyncio
async def test_update_is_partial(fake_store, valid_fields):
    """Fields not passed to update keep their values."""
    service = ContactService(fake_store)
    [row] = await service.create_contact(valid_fields)

    await service.update_contact(row["id"], {"email": "new@example.org"})

    [contact] = await service.list_contacts()
    assert contact.email == "new@example.org"
    assert contact.first_name == "Jo"
    assert contact.id == row["id"]


@pytest.mark.asyncio
async def test_update_twice_matches_update_once(fake_store, valid_fields):
    """Repeating the same update leaves the same final record."""
    service = ContactService(fake_store)
    [row] = await service.create_contact(valid_fields)
    changes = {"first_name": "Jane", "phone_number": "0987654321"}

    await service.update_contact(row["id"], changes)
    once = (await service.list_contacts())[0]
    await service.update_contact(row["id"], changes)
    twice = (await service.list_contacts())[0]

    assert once == twice


@pytest.mark.asyncio
async def test_update_unknown_id_is_not_an_error(fake_store):
    service = ContactService(fake_store)

    assert await service.update_contact("missing", {"first_name": "X"}) == []


@pytest.mark.asyncio
async def test_delete_removes_contact(fake_store, valid_fields):
    """A deleted id no longer appears in the list."""
    service = ContactService(fake_store)
    [row] = await service.create_contact(valid_fields)
    await service.create_contact({**valid_fields, "first_name": "Other"})

    await service.delete_contact(row["id"])

    contacts = await service.list_contacts()
    assert row["id"] not in {c.id for c in contacts}
    assert len(contacts) == 1


@pytest.mark.asyncio
async def test_delete_unknown_id_is_not_an_error(fake_store):
    service = ContactService(fake_store)

    assert await service.delete_contact("missing") == []


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["list", "create", "update", "delete"])
async def test_store_errors_raise_remote_error(fake_store, valid_fields, operation):
    """Every operation turns a store error into RemoteError with its message."""
    service = ContactService(fake_store)
    fake_store.fail_with = "duplicate key value violates unique constraint"

    calls = {
        "list": lambda: service.list_contacts(),
        "create": lambda: service.create_contact(valid_fields),
        "update": lambda: service.update_contact("some-id", {"first_name": "X"}),
        "delete": lambda: service.delete_contact("some-id"),
    }
    with pytest.raises(RemoteError) as exc_info:
        await calls[operation]()

    assert exc_info.value.message == "duplicate key value violates unique constraint"


@pytest.mark.asyncio
async def test_sql_store_round_trip(sql_store, valid_fields):
    """Create, update and delete against the SQL store."""
    service = ContactService(sql_store)

    [row] = await service.create_contact(valid_fields)
    assert row["id"]

    await service.update_contact(row["id"], {"last_name": "Park"})
    [contact] = await service.list_contacts()
    assert contact.last_name == "Park"
    assert contact.created_at is not None

    await service.delete_contact(row["id"])
    assert await service.list_contacts() == []


@pytest.mark.asyncio
async def test_sql_store_orders_by_created_at(sql_store, valid_fields):
    """The SQL store sorts by created_at descending."""
    base = datetime(2024, 5, 1, 12, 0, 0)
    async with sql_store.session_factory() as session:
        repo = ContactRepository(session)
        await repo.create(**{**valid_fields, "first_name": "Old"}, created_at=base)
        await repo.create(**{**valid_fields, "first_name": "New"}, created_at=base + timedelta(days=1))
        await repo.create(**{**valid_fields, "first_name": "Middle"}, created_at=base + timedelta(hours=1))

    contacts = await ContactService(sql_store).list_contacts()

    assert [c.first_name for c in contacts] == ["New", "Middle", "Old"]


@pytest.mark.asyncio
async def test_sql_store_unknown_id(sql_store):
    service = ContactService(sql_store)

    assert await service.update_contact("missing", {"first_name": "X"}) == []
    assert await service.delete_contact("missing") == []


@pytest.mark.asyncio
async def test_list_tolerates_null_and_missing_fields(fake_store):
    fake_store.rows["c1"] = {
        "id": "c1",
        "first_name": "Jo",
        "last_name": None,
        "email": "a@b.co",
        "created_at": "2024-01-01T00:00:00+00:00",
    }

    [contact] = await ContactService(fake_store).list_contacts()

    assert contact.last_name == ""
    assert contact.phone_number == ""
