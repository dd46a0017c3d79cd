"""Async Supabase client factory and the query helpers every service uses.

All remote calls go through :func:`translate_errors`, which turns PostgREST,
auth and transport exceptions into :mod:`hostelhub.errors` types while
chaining the original exception.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient, AuthError, acreate_client

from hostelhub.config import Settings
from hostelhub.errors import (
    AuthenticationError,
    ConstraintError,
    NotFoundError,
    RemoteStoreError,
    RemoteUnavailableError,
)

logger = logging.getLogger(__name__)

# PostgREST: "JSON object requested, multiple (or no) rows returned"
NO_ROWS_CODE = "PGRST116"

# PostgREST request errors caused by the payload rather than the server
_PAYLOAD_CODES = {"PGRST102", "PGRST204"}

# Row-level security rejected the write
_POLICY_CODE = "42501"


async def create_supabase_client(settings: Settings) -> AsyncClient:
    """Create the process-wide async Supabase client."""
    logger.info("Connecting to Supabase project at %s", settings.supabase_url)
    return await acreate_client(settings.supabase_url, settings.supabase_anon_key)


def _from_api_error(exc: APIError) -> RemoteStoreError:
    code = exc.code or ""
    message = exc.message or str(exc)
    kwargs = {"code": exc.code, "details": exc.details, "hint": exc.hint}

    if code == NO_ROWS_CODE:
        return NotFoundError(message, **kwargs)
    # Class 22 (data exception) and class 23 (integrity constraint violation)
    if code.startswith(("22", "23")) or code in _PAYLOAD_CODES or code == _POLICY_CODE:
        return ConstraintError(message, **kwargs)
    return RemoteStoreError(message, **kwargs)


@asynccontextmanager
async def translate_errors() -> AsyncIterator[None]:
    """Re-raise remote failures as :class:`~hostelhub.errors.RemoteStoreError` subclasses."""
    try:
        yield
    except APIError as exc:
        raise _from_api_error(exc) from exc
    except AuthError as exc:
        message = getattr(exc, "message", None) or str(exc)
        raise AuthenticationError(message, code=getattr(exc, "code", None)) from exc
    except httpx.HTTPError as exc:
        raise RemoteUnavailableError(str(exc) or type(exc).__name__) from exc


async def execute(query: Any) -> Any:
    """Run a PostgREST query builder and return the response payload."""
    async with translate_errors():
        response = await query.execute()
    return response.data


async def insert_row(client: AsyncClient, table: str, payload: dict[str, Any]) -> dict[str, Any]:
    """Insert one row and return it with its server-assigned columns."""
    rows = await execute(client.table(table).insert(payload))
    logger.info("Inserted %s row %s", table, rows[0].get("id"))
    return rows[0]


async def update_row(client: AsyncClient, table: str, row_id: str, payload: dict[str, Any]) -> dict[str, Any]:
    """Apply a partial update to one row and return the full updated row.

    An empty payload writes nothing and returns the stored row.

    Raises:
        NotFoundError: If no row has ``row_id``.
    """
    if not payload:
        return await execute(client.table(table).select("*").eq("id", row_id).single())

    rows = await execute(client.table(table).update(payload).eq("id", row_id))
    if not rows:
        raise NotFoundError(f"No {table} row with id {row_id}", code=NO_ROWS_CODE)
    logger.info("Updated %s row %s: %s", table, row_id, sorted(payload))
    return rows[0]


async def delete_row(client: AsyncClient, table: str, row_id: str) -> None:
    """Delete one row.

    Raises:
        NotFoundError: If no row has ``row_id``.
        ConstraintError: If another row still references it.
    """
    rows = await execute(client.table(table).delete().eq("id", row_id))
    if not rows:
        raise NotFoundError(f"No {table} row with id {row_id}", code=NO_ROWS_CODE)
    logger.info("Deleted %s row %s", table, row_id)
