"""Tests for the hosted PostgREST contact store."""

import json

import httpx
import pytest

from contactbook.infrastructure.store.postgrest_store import PostgrestContactStore

BASE_URL = "https://project.supabase.co"


def _store(handler) -> PostgrestContactStore:
    client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return PostgrestContactStore(base_url=BASE_URL, api_key="anon-key", client=client)


@pytest.mark.asyncio
async def test_select_all_orders_by_created_at_desc():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json=[{"id": 1, "first_name": "Jo"}])

    result = await _store(handler).select_all()

    request = seen["request"]
    assert request.method == "GET"
    assert request.url.path == "/rest/v1/contacts"
    assert request.url.params["select"] == "*"
    assert request.url.params["order"] == "created_at.desc"
    assert request.headers["apikey"] == "anon-key"
    assert request.headers["Authorization"] == "Bearer anon-key"
    assert result.ok
    assert result.data == [{"id": 1, "first_name": "Jo"}]


@pytest.mark.asyncio
async def test_insert_posts_records():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        body = json.loads(request.content)
        return httpx.Response(201, json=[{**body[0], "id": "new-id"}])

    record = {"first_name": "Jo", "last_name": "Lee", "email": "a@b.co", "phone_number": "1234567890"}
    result = await _store(handler).insert([record])

    request = seen["request"]
    assert request.method == "POST"
    assert json.loads(request.content) == [record]
    assert request.headers["Prefer"] == "return=representation"
    assert result.data[0]["id"] == "new-id"


@pytest.mark.asyncio
async def test_update_and_delete_filter_on_id():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[])

    store = _store(handler)
    update_result = await store.update({"email": "x@y.io"}, id="abc")
    delete_result = await store.delete(id="abc")

    assert [r.method for r in requests] == ["PATCH", "DELETE"]
    assert all(r.url.params["id"] == "eq.abc" for r in requests)
    assert json.loads(requests[0].content) == {"email": "x@y.io"}
    assert update_result.ok and update_result.data == []
    assert delete_result.ok and delete_result.data == []


@pytest.mark.asyncio
async def test_empty_response_body_gives_no_rows():
    result = await _store(lambda request: httpx.Response(204)).delete(id="abc")

    assert result.ok
    assert result.data == []


@pytest.mark.asyncio
async def test_error_body_message_is_reported():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            409,
            json={"code": "23505", "message": "duplicate key value violates unique constraint"},
        )

    result = await _store(handler).insert([{"first_name": "Jo"}])

    assert not result.ok
    assert result.error.message == "duplicate key value violates unique constraint"
    assert result.error.code == "23505"


@pytest.mark.asyncio
async def test_error_without_json_uses_reason_phrase():
    result = await _store(lambda request: httpx.Response(503, text="upstream down")).select_all()

    assert result.error.message == "Service Unavailable"


@pytest.mark.asyncio
async def test_transport_failure_is_reported_not_raised():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = await _store(handler).select_all()

    assert result.error is not None
    assert "connection refused" in result.error.message


@pytest.mark.asyncio
async def test_aclose_leaves_injected_client_open():
    client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[])))
    store = PostgrestContactStore(base_url=BASE_URL, api_key="k", client=client)

    await store.aclose()

    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_non_json_success_body_is_reported_not_raised():
    result = await _store(lambda request: httpx.Response(200, text="<html>proxy</html>")).select_all()

    assert result.error is not None
    assert result.data == []
