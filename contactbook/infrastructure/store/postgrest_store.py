"""Hosted contact store reached over a PostgREST-compatible HTTP API.

This is the REST surface Supabase exposes for a table:

    GET    /rest/v1/contacts?select=*&order=created_at.desc
    POST   /rest/v1/contacts
    PATCH  /rest/v1/contacts?id=eq.<id>
    DELETE /rest/v1/contacts?id=eq.<id>
"""

import logging
from typing import Any

import httpx

from contactbook.infrastructure.store.base import (
    ContactStoreProtocol,
    QueryError,
    QueryResult,
)

logger = logging.getLogger(__name__)

REST_PATH = "/rest/v1"


class PostgrestContactStore(ContactStoreProtocol):
    """Contact store backed by a hosted PostgREST endpoint."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        table: str = "contacts",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the hosted store client.

        Args:
            base_url: Project URL, e.g. ``https://xyz.supabase.co``
            api_key: Project API key, sent as ``apikey`` and bearer token
            table: Name of the contacts table
            client: Preconfigured HTTP client (tests pass one with a mock transport)
        """
        self.table = table
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url.rstrip("/"))
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }

    @property
    def _path(self) -> str:
        return f"{REST_PATH}/{self.table}"

    async def _request(
        self,
        method: str,
        params: dict[str, str] | None = None,
        json: Any = None,
    ) -> QueryResult:
        """Send one query and translate the response into a QueryResult."""
        try:
            response = await self._client.request(
                method,
                self._path,
                params=params,
                json=json,
                headers=self._headers,
            )
        except httpx.HTTPError as e:
            logger.warning(f"[POSTGREST] {method} {self._path} failed: {e}")
            return QueryResult(error=QueryError(message=str(e) or type(e).__name__))

        if response.is_error:
            error = _error_from_response(response)
            logger.warning(
                f"[POSTGREST] {method} {self._path} returned HTTP {response.status_code}: {error.message}"
            )
            return QueryResult(error=error)

        if not response.content:
            return QueryResult(data=[])
        try:
            body = response.json()
        except ValueError:
            logger.warning(f"[POSTGREST] {method} {self._path} returned a non-JSON body")
            return QueryResult(error=QueryError(message="Unexpected non-JSON response from store"))
        if isinstance(body, dict):
            body = [body]
        return QueryResult(data=body)

    async def select_all(
        self, order_by: str = "created_at", descending: bool = True
    ) -> QueryResult:
        direction = "desc" if descending else "asc"
        return await self._request(
            "GET", params={"select": "*", "order": f"{order_by}.{direction}"}
        )

    async def insert(self, records: list[dict[str, Any]]) -> QueryResult:
        return await self._request("POST", json=records)

    async def update(self, fields: dict[str, Any], id: str) -> QueryResult:
        return await self._request("PATCH", params={"id": f"eq.{id}"}, json=fields)

    async def delete(self, id: str) -> QueryResult:
        return await self._request("DELETE", params={"id": f"eq.{id}"})

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def _error_from_response(response: httpx.Response) -> QueryError:
    """Extract the ``{message, code}`` error body PostgREST sends."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return QueryError(message=body["message"], code=body.get("code"))
    return QueryError(message=response.reason_phrase or f"HTTP {response.status_code}")
