"""FastAPI dependencies for session authentication."""

from fastapi import Depends, Header, HTTPException, Request

from catalog.errors import ERROR_UNAUTHORIZED

from .session import WebSessionStore


def get_session_store(request: Request) -> WebSessionStore:
    return request.app.state.sessions


def bearer_token(authorization: str | None) -> str | None:
    """Token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


async def require_session(
    authorization: str = Header(None, alias="Authorization"),
    sessions: WebSessionStore = Depends(get_session_store),
) -> dict:
    """
    Require ``Authorization: Bearer <session_token>`` for a live session.

    Returns:
        Session data (user_id, github_id, username)
    """
    token = bearer_token(authorization)
    session = sessions.verify(token) if token else None
    if not session:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)
    return session
