"""
Catalog Service - Main FastAPI Application

Single entry point for the product, review and user API.
Run with: uvicorn api.index:app
"""
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog.auth import WebSessionStore
from catalog.db import Database
from catalog.errors import (
    ERROR_INVALID_ID,
    ERROR_STORE,
    ERROR_VALIDATION,
    DuplicateError,
    InvalidIdError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from catalog.logging import get_logger
from catalog.routers import auth_router, products_router, reviews_router, users_router

logger = get_logger(__name__)


def _cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the application.

    Args:
        database: Pre-built Database. When omitted, one is created from the
            environment at startup and closed at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler"""
        owns_db = database is None
        app.state.db = database or await Database.create()
        app.state.sessions = WebSessionStore()
        yield
        if owns_db:
            await app.state.db.close()

    app = FastAPI(
        title="Catalog API",
        description="Products, reviews and users",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ==================== ERROR MAPPING ====================

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=400, content={"error": ERROR_VALIDATION, "details": exc.details}
        )

    @app.exception_handler(InvalidIdError)
    async def invalid_id_handler(request: Request, exc: InvalidIdError):
        return JSONResponse(status_code=400, content={"error": ERROR_INVALID_ID})

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(DuplicateError)
    async def duplicate_handler(request: Request, exc: DuplicateError):
        return JSONResponse(status_code=409, content={"error": exc.message})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        # Route template, not the raw URL: ids in the path are caller-controlled
        route = getattr(request.scope.get("route"), "path", "unmatched")
        logger.error("Store error on %s %s", request.method, route)
        return JSONResponse(status_code=500, content={"error": ERROR_STORE})

    app.include_router(auth_router)
    app.include_router(products_router)
    app.include_router(reviews_router)
    app.include_router(users_router)

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok", "service": "catalog"}

    return app


app = create_app()
