"""Review Repository - product reviews keyed by lower-cased product name."""
from typing import Any, Mapping

from catalog.errors import StoreError
from catalog.logging import get_logger, sanitize_id_for_logging
from catalog.models import Review, ReviewFilter, ReviewIn, created_now
from catalog.normalization import normalize_review, normalize_review_criteria
from catalog.validation import validate_record

from .base import BaseRepository, parse_id

logger = get_logger(__name__)


class ReviewRepository(BaseRepository):
    """Review database operations."""

    table_name = "reviews"

    async def create(self, record: ReviewIn | Mapping[str, Any]) -> Review:
        """Validate, normalize and insert a review."""
        review = normalize_review(validate_record(ReviewIn, record))
        row = {**review.model_dump(mode="json"), "created_at": created_now()}
        result = await self._execute(self.table.insert(row), "insert")
        if not result.data:
            raise StoreError("Insert returned no row")

        created = Review(**result.data[0])
        logger.info("Review created: %s", sanitize_id_for_logging(created.id))
        return created

    async def get_by_id(self, review_id: str) -> Review | None:
        rid = parse_id(review_id)
        result = await self._execute(self.table.select("*").eq("id", rid), "select")
        return Review(**result.data[0]) if result.data else None

    async def get_all(self) -> list[Review]:
        result = await self._execute(self.table.select("*"), "select")
        return [Review(**r) for r in result.data]

    async def get_by_filter(self, criteria: ReviewFilter | Mapping[str, Any]) -> list[Review]:
        """
        Get reviews matching every criterion exactly.

        The product-name criterion is normalized the same way it was on write,
        so lookups by name are case-insensitive.

        Raises:
            ValidationError: if a criterion is not filterable or its value has the wrong type
        """
        checked = validate_record(ReviewFilter, criteria).model_dump(exclude_unset=True)

        query = self.table.select("*")
        for column, value in normalize_review_criteria(checked).items():
            query = query.eq(column, value)

        result = await self._execute(query, "select")
        return [Review(**r) for r in result.data]

    async def get_by_product_name(self, name: str) -> list[Review]:
        """Get reviews for a product by name, in any letter case."""
        return await self.get_by_filter({"name": name})
