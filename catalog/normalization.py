"""Canonicalization applied to keys before they are written or used as filters."""
from typing import Any

from catalog.models import ReviewIn


def normalize_product_name(name: str) -> str:
    """Reviews reference products by lower-cased name."""
    return name.lower()


def normalize_review(review: ReviewIn) -> ReviewIn:
    """Write side: returns a copy with the product-name key folded."""
    return review.model_copy(update={"name": normalize_product_name(review.name)})


def normalize_review_criteria(criteria: dict[str, Any]) -> dict[str, Any]:
    """Read side: folds the product-name key of a filter, leaving the rest alone."""
    normalized = dict(criteria)
    if isinstance(normalized.get("name"), str):
        normalized["name"] = normalize_product_name(normalized["name"])
    return normalized
