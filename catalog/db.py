"""
Supabase Database Service

Owns the one long-lived async Supabase client and the repositories built on it.

Usage:
    # At FastAPI startup (lifespan):
    db = await Database.create()
    app.state.db = db

    product = await db.products.get_by_id(product_id)

    # At shutdown:
    await db.close()
"""

import os

from supabase._async.client import AsyncClient
from supabase._async.client import create_client as acreate_client

from catalog.logging import get_logger
from catalog.repositories import ProductRepository, ReviewRepository, UserRepository

logger = get_logger(__name__)


class Database:
    """
    Container for the Supabase client and one repository per entity.

    Build it with the async factory ``Database.create()``; pass an existing
    client to the constructor only in tests or embedding code.
    """

    def __init__(self, client: AsyncClient):
        self.client = client
        self.products = ProductRepository(client)
        self.reviews = ReviewRepository(client)
        self.users = UserRepository(client)

    @classmethod
    async def create(cls, url: str | None = None, key: str | None = None) -> "Database":
        """Async factory: create the Supabase client from arguments or environment."""
        url = url or os.environ.get("SUPABASE_URL")
        key = key or os.environ.get("SUPABASE_SERVICE_ROLE_KEY")
        if not url or not key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        logger.info("Initializing async Supabase client...")
        client = await acreate_client(url, key)
        logger.info("Async Supabase client initialized successfully")
        return cls(client)

    async def close(self) -> None:
        """Release the client's HTTP session."""
        try:
            await self.client.postgrest.aclose()
        except Exception as e:
            logger.warning("Error closing Supabase client: %s", e)
        logger.info("Supabase client closed")
