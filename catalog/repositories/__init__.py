"""
Repository Pattern for Database Operations

One repository per table, each the only path to its rows:
- ProductRepository: Product CRUD
- ReviewRepository: Reviews, lookup by product name
- UserRepository: GitHub users, upsert by github_id
"""
from .base import BaseRepository, parse_id
from .product_repo import ProductRepository
from .review_repo import ReviewRepository
from .user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "parse_id",
    "ProductRepository",
    "ReviewRepository",
    "UserRepository",
]
