"""User Repository - users created by GitHub login.

``create`` is an upsert keyed by ``github_id``: a repeat login refreshes the
stored access token instead of inserting a second row.
"""
from typing import Any, Mapping

from catalog.errors import DuplicateError, StoreError
from catalog.logging import get_logger, sanitize_id_for_logging
from catalog.models import User, UserIn, created_now
from catalog.validation import validate_record

from .base import BaseRepository, parse_id

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """User database operations."""

    table_name = "users"

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user by internal ID."""
        uid = parse_id(user_id)
        result = await self._execute(self.table.select("*").eq("id", uid), "select")
        return User(**result.data[0]) if result.data else None

    async def get_by_github_id(self, github_id: str | int) -> User | None:
        """Get user by GitHub ID."""
        result = await self._execute(
            self.table.select("*").eq("github_id", str(github_id)), "select"
        )
        return User(**result.data[0]) if result.data else None

    async def get_all(self) -> list[User]:
        result = await self._execute(self.table.select("*"), "select")
        return [User(**u) for u in result.data]

    async def create(self, record: UserIn | Mapping[str, Any]) -> User:
        """Insert a new user or refresh the access token of an existing one."""
        user = validate_record(UserIn, record)

        existing = await self.get_by_github_id(user.github_id)
        if existing:
            return await self._refresh_token(existing, user.access_token)

        try:
            row = {**user.model_dump(mode="json"), "created_at": created_now()}
            result = await self._execute(self.table.insert(row), "insert")
        except DuplicateError as e:
            # Lost a race with a concurrent first login for the same github_id
            if e.field not in (None, "github_id"):
                raise
            existing = await self.get_by_github_id(user.github_id)
            if existing is None:
                raise
            logger.info("Concurrent insert for user %s, retrying as update", sanitize_id_for_logging(existing.id))
            return await self._refresh_token(existing, user.access_token)

        if not result.data:
            raise StoreError("Insert returned no row")

        created = User(**result.data[0])
        logger.info("User created: %s", sanitize_id_for_logging(created.id))
        return created

    async def _refresh_token(self, existing: User, access_token: str | None) -> User:
        """Set only the access token on an existing row and return the row as stored."""
        result = await self._execute(
            self.table.update({"access_token": access_token}).eq("github_id", existing.github_id),
            "update",
        )
        logger.info("Access token refreshed for user %s", sanitize_id_for_logging(existing.id))
        if result.data:
            return User(**result.data[0])
        return existing.model_copy(update={"access_token": access_token})
