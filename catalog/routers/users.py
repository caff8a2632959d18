"""Users API Router"""

from fastapi import APIRouter, Depends

from catalog.auth import require_session
from catalog.db import Database
from catalog.errors import ERROR_USER_NOT_FOUND, NotFoundError
from catalog.models import User

from .deps import get_database

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me", response_model=User)
async def get_me(
    session: dict = Depends(require_session),
    db: Database = Depends(get_database),
):
    """Get the logged-in user"""
    user = await db.users.get_by_id(session["user_id"])
    if not user:
        raise NotFoundError(ERROR_USER_NOT_FOUND)
    return user


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: str, db: Database = Depends(get_database)):
    user = await db.users.get_by_id(user_id)
    if not user:
        raise NotFoundError(ERROR_USER_NOT_FOUND)
    return user
