"""Base repository with shared Supabase client, id coercion and error translation."""

import re
import uuid
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase._async.client import AsyncClient

from catalog.errors import ERROR_STORE, DuplicateError, InvalidIdError, StoreError
from catalog.logging import get_logger

logger = get_logger(__name__)

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"

_DUPLICATE_KEY = re.compile(r"Key \((?P<field>[\w\s,]+)\)=")


def parse_id(value: Any) -> str:
    """
    Coerce an external id token into a canonical UUID string.

    Raises:
        InvalidIdError: if the token is not a UUID
    """
    if isinstance(value, uuid.UUID):
        return str(value)
    if not isinstance(value, str):
        raise InvalidIdError(value)
    try:
        return str(uuid.UUID(value))
    except ValueError as e:
        raise InvalidIdError(value) from e


def _duplicate_field(error: APIError) -> str | None:
    match = _DUPLICATE_KEY.search(error.details or "")
    return match.group("field") if match else None


class BaseRepository:
    """Base class for all repositories.

    Each subclass owns exactly one table. The client is shared and long-lived;
    repositories never change its state.
    """

    table_name: str = ""

    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    @property
    def table(self):
        return self.client.table(self.table_name)

    async def _execute(self, query, operation: str):
        """Run a PostgREST query, translating client failures into StoreError."""
        try:
            return await query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                field = _duplicate_field(e)
                logger.info("Duplicate %s on %s (%s)", operation, self.table_name, field or "unknown key")
                raise DuplicateError(field) from e
            logger.error("Store %s on %s failed: code=%s", operation, self.table_name, e.code)
            raise StoreError(ERROR_STORE, code=e.code) from e
        except httpx.HTTPError as e:
            logger.error(
                "Store %s on %s failed: %s", operation, self.table_name, type(e).__name__,
                exc_info=True,
            )
            raise StoreError(ERROR_STORE) from e
