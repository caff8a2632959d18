"""
Products API Router

Reads are public; writes need a GitHub session.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from catalog.auth import require_session
from catalog.db import Database
from catalog.errors import ERROR_PRODUCT_NOT_FOUND, NotFoundError
from catalog.models import Product

from .deps import get_database

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=list[Product])
async def get_products(db: Database = Depends(get_database)):
    """Get all products"""
    return await db.products.get_all()


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, db: Database = Depends(get_database)):
    """Get product by ID"""
    product = await db.products.get_by_id(product_id)
    if not product:
        raise NotFoundError(ERROR_PRODUCT_NOT_FOUND)
    return product


@router.post("", response_model=Product, status_code=201)
async def create_product(
    payload: Any = Body(...),
    db: Database = Depends(get_database),
    session: dict = Depends(require_session),
):
    """Create a product"""
    return await db.products.create(payload)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    payload: Any = Body(...),
    db: Database = Depends(get_database),
    session: dict = Depends(require_session),
):
    """Update some or all fields of a product"""
    product = await db.products.update(product_id, payload)
    if not product:
        raise NotFoundError(ERROR_PRODUCT_NOT_FOUND)
    return product


@router.delete("/{product_id}", status_code=204)
async def delete_product(
    product_id: str,
    db: Database = Depends(get_database),
    session: dict = Depends(require_session),
):
    """Delete a product"""
    deleted = await db.products.delete(product_id)
    if not deleted:
        raise NotFoundError(ERROR_PRODUCT_NOT_FOUND)
    return Response(status_code=204)
