"""
Auth API Router

GitHub login (access token -> session token) and logout.
"""

import httpx
from fastapi import APIRouter, Depends, Header, HTTPException, Response
from pydantic import BaseModel, Field

from catalog.auth import (
    WebSessionStore,
    bearer_token,
    fetch_github_profile,
    get_session_store,
    login_github_user,
)
from catalog.db import Database
from catalog.errors import ERROR_UNAUTHORIZED
from catalog.logging import get_logger
from catalog.models import User

from .deps import get_database

logger = get_logger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


class GitHubLoginRequest(BaseModel):
    access_token: str = Field(min_length=1)


class SessionResponse(BaseModel):
    session_token: str
    user: User


@router.post("/github", response_model=SessionResponse)
async def github_login(
    data: GitHubLoginRequest,
    db: Database = Depends(get_database),
    sessions: WebSessionStore = Depends(get_session_store),
):
    """
    Log in with a GitHub OAuth access token.

    The token is checked against the GitHub API; the user row is created on
    first login and its stored token refreshed on later ones.
    """
    try:
        profile = await fetch_github_profile(data.access_token)
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 401:
            raise HTTPException(status_code=401, detail="Invalid GitHub access token")
        logger.warning("GitHub profile request failed: %s", e.response.status_code)
        raise HTTPException(status_code=502, detail="GitHub is unavailable")
    except httpx.HTTPError as e:
        logger.warning("GitHub profile request failed: %s", type(e).__name__)
        raise HTTPException(status_code=502, detail="GitHub is unavailable")

    user, token = await login_github_user(db, sessions, profile, data.access_token)
    return SessionResponse(session_token=token, user=user)


@router.post("/logout", status_code=204)
async def logout(
    authorization: str = Header(None, alias="Authorization"),
    sessions: WebSessionStore = Depends(get_session_store),
):
    """End the current session"""
    token = bearer_token(authorization)
    if not token or not sessions.revoke(token):
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)
    return Response(status_code=204)
