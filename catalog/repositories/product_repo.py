"""Product Repository - Product catalog CRUD."""
from typing import Any, Mapping

from catalog.errors import ERROR_NO_FIELDS, StoreError, ValidationError
from catalog.logging import get_logger, sanitize_id_for_logging
from catalog.models import Product, ProductIn, ProductUpdate
from catalog.validation import validate_record

from .base import BaseRepository, parse_id

logger = get_logger(__name__)


class ProductRepository(BaseRepository):
    """Product database operations."""

    table_name = "products"

    async def create(self, record: ProductIn | Mapping[str, Any]) -> Product:
        """Validate and insert a product. Returns the stored row with its id."""
        product = validate_record(ProductIn, record)
        result = await self._execute(
            self.table.insert(product.model_dump(mode="json")), "insert"
        )
        if not result.data:
            raise StoreError("Insert returned no row")

        created = Product(**result.data[0])
        logger.info("Product created: %s", sanitize_id_for_logging(created.id))
        return created

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID."""
        pid = parse_id(product_id)
        result = await self._execute(self.table.select("*").eq("id", pid), "select")
        return Product(**result.data[0]) if result.data else None

    async def get_all(self) -> list[Product]:
        """Get every product."""
        result = await self._execute(self.table.select("*"), "select")
        return [Product(**p) for p in result.data]

    async def update(
        self, product_id: str, fields: ProductUpdate | Mapping[str, Any]
    ) -> Product | None:
        """Apply a partial update. Returns the post-update row, or None if no row matched."""
        pid = parse_id(product_id)
        changes = validate_record(ProductUpdate, fields).model_dump(mode="json", exclude_unset=True)
        if not changes:
            raise ValidationError([ERROR_NO_FIELDS])

        result = await self._execute(self.table.update(changes).eq("id", pid), "update")
        if not result.data:
            logger.info("Product update matched nothing: %s", sanitize_id_for_logging(pid))
            return None
        return Product(**result.data[0])

    async def delete(self, product_id: str) -> int:
        """Delete product by ID. Returns the number of rows removed (0 or 1)."""
        pid = parse_id(product_id)
        result = await self._execute(self.table.delete().eq("id", pid), "delete")
        deleted = len(result.data or [])
        logger.info("Product delete %s removed %d row(s)", sanitize_id_for_logging(pid), deleted)
        return deleted
