"""Reviews API Router"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from catalog.auth import require_session
from catalog.db import Database
from catalog.errors import ERROR_REVIEW_NOT_FOUND, NotFoundError
from catalog.models import Review

from .deps import get_database

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.get("", response_model=list[Review])
async def get_reviews(
    product: Optional[str] = Query(None, description="Product name, any letter case"),
    db: Database = Depends(get_database),
):
    """Get reviews, optionally only those for one product"""
    if product:
        return await db.reviews.get_by_product_name(product)
    return await db.reviews.get_all()


@router.get("/{review_id}", response_model=Review)
async def get_review(review_id: str, db: Database = Depends(get_database)):
    review = await db.reviews.get_by_id(review_id)
    if not review:
        raise NotFoundError(ERROR_REVIEW_NOT_FOUND)
    return review


@router.post("", response_model=Review, status_code=201)
async def create_review(
    payload: Any = Body(...),
    db: Database = Depends(get_database),
    session: dict = Depends(require_session),
):
    """Submit a review for a product"""
    return await db.reviews.create(payload)
