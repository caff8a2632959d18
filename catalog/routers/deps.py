"""Shared dependencies for routers."""

from fastapi import Request

from catalog.db import Database


def get_database(request: Request) -> Database:
    """Database created in the app lifespan."""
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database not initialized. It is created in the app lifespan.")
    return db
