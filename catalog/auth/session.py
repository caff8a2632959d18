"""Web session store (in-memory)."""
import os
import secrets
from datetime import UTC, datetime, timedelta

DEFAULT_SESSION_TTL_DAYS = 7


def _ttl_from_env() -> timedelta:
    return timedelta(days=int(os.environ.get("SESSION_TTL_DAYS", DEFAULT_SESSION_TTL_DAYS)))


class WebSessionStore:
    """Bearer-token sessions opened after a GitHub login."""

    def __init__(self, ttl: timedelta | None = None) -> None:
        self.ttl = ttl or _ttl_from_env()
        self._sessions: dict[str, dict] = {}

    def create(self, user_id: str, github_id: str, username: str) -> str:
        """Create a new web session and return the token."""
        token = secrets.token_urlsafe(32)
        now = datetime.now(UTC)
        self._sessions[token] = {
            "user_id": str(user_id),
            "github_id": github_id,
            "username": username,
            "created_at": now.isoformat(),
            "expires_at": (now + self.ttl).isoformat(),
        }
        return token

    def verify(self, token: str) -> dict | None:
        """Return session data for a live token, dropping it if expired."""
        session = self._sessions.get(token)
        if not session:
            return None

        expires_at = datetime.fromisoformat(session["expires_at"])
        if datetime.now(UTC) > expires_at:
            del self._sessions[token]
            return None

        return session

    def revoke(self, token: str) -> bool:
        return self._sessions.pop(token, None) is not None
