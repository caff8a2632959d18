"""Authentication package."""
from .dependencies import bearer_token, get_session_store, require_session
from .github import fetch_github_profile, login_github_user, profile_to_user_record
from .session import WebSessionStore

__all__ = [
    "WebSessionStore",
    "bearer_token",
    "get_session_store",
    "require_session",
    "fetch_github_profile",
    "login_github_user",
    "profile_to_user_record",
]
