"""
FastAPI Routers Package

All routers are included in api/index.py.
"""

from catalog.routers.auth import router as auth_router
from catalog.routers.products import router as products_router
from catalog.routers.reviews import router as reviews_router
from catalog.routers.users import router as users_router

__all__ = [
    "auth_router",
    "products_router",
    "reviews_router",
    "users_router",
]
