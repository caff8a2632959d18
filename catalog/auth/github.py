"""GitHub login: turn an OAuth access token into a stored user and a web session.

The OAuth redirect and code exchange happen in the client; this module only
receives the resulting access token and asks GitHub who it belongs to.
"""
import os
from typing import Any, Mapping

import httpx

from catalog.db import Database
from catalog.logging import get_logger, sanitize_id_for_logging
from catalog.models import User

from .session import WebSessionStore

logger = get_logger(__name__)

GITHUB_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com")


async def fetch_github_profile(
    access_token: str, transport: httpx.AsyncBaseTransport | None = None
) -> dict:
    """
    Fetch the authenticated user's profile from the GitHub API.

    Falls back to the primary verified address from /user/emails when the
    profile email is private.

    Raises:
        httpx.HTTPStatusError: GitHub rejected the token (401) or failed
        httpx.HTTPError: GitHub could not be reached
    """
    headers = {
        "Authorization": f"Bearer {access_token}",
        "Accept": "application/vnd.github+json",
    }
    async with httpx.AsyncClient(
        base_url=GITHUB_API_URL, headers=headers, timeout=5.0, transport=transport
    ) as client:
        response = await client.get("/user")
        response.raise_for_status()
        profile = response.json()

        if not profile.get("email"):
            # Needs the user:email scope; without it the email stays empty
            emails = await client.get("/user/emails")
            if emails.status_code == 200:
                profile["email"] = next(
                    (e["email"] for e in emails.json() if e.get("primary") and e.get("verified")),
                    None,
                )

    return profile


def profile_to_user_record(profile: Mapping[str, Any], access_token: str | None) -> dict:
    """Map GitHub's /user payload onto the user schema fields."""
    return {
        "github_id": profile.get("id"),
        "username": profile.get("login"),
        "email": profile.get("email"),
        "avatar_url": profile.get("avatar_url"),
        "access_token": access_token,
    }


async def login_github_user(
    db: Database,
    sessions: WebSessionStore,
    profile: Mapping[str, Any],
    access_token: str | None,
) -> tuple[User, str]:
    """
    Upsert the GitHub user and open a session for them.

    Returns:
        (user, session_token)

    Raises:
        ValidationError: if the profile lacks required fields (e.g. a private email)
        StoreError: if the store is unavailable
    """
    user = await db.users.create(profile_to_user_record(profile, access_token))
    token = sessions.create(user.id, user.github_id, user.username)
    logger.info("GitHub login for user %s", sanitize_id_for_logging(user.id))
    return user, token
