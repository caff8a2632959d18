"""Tests for GitHub login and web sessions"""
from datetime import timedelta

import httpx
import pytest

from catalog.auth import (
    WebSessionStore,
    fetch_github_profile,
    login_github_user,
    profile_to_user_record,
)
from catalog.errors import ValidationError


def test_session_roundtrip():
    """Test a created session verifies"""
    sessions = WebSessionStore()
    token = sessions.create("user-1", "583231", "octocat")

    session = sessions.verify(token)

    assert session["user_id"] == "user-1"
    assert session["username"] == "octocat"


def test_unknown_token():
    """Test an unknown token is rejected"""
    assert WebSessionStore().verify("nope") is None


def test_expired_session_dropped():
    """Test expired sessions are removed on access"""
    sessions = WebSessionStore(ttl=timedelta(seconds=-1))
    token = sessions.create("user-1", "583231", "octocat")

    assert sessions.verify(token) is None
    assert sessions.verify(token) is None


def test_revoke():
    """Test revoking a session"""
    sessions = WebSessionStore()
    token = sessions.create("user-1", "583231", "octocat")

    assert sessions.revoke(token) is True
    assert sessions.verify(token) is None
    assert sessions.revoke(token) is False


def test_profile_mapping(github_profile):
    """Test GitHub payload fields map onto the user schema"""
    record = profile_to_user_record(github_profile, "gho_token")

    assert record == {
        "github_id": 583231,
        "username": "octocat",
        "email": "octocat@github.com",
        "avatar_url": "https://avatars.githubusercontent.com/u/583231",
        "access_token": "gho_token",
    }


@pytest.mark.asyncio
async def test_login_creates_user_and_session(database, fake_client, github_profile):
    """Test login upserts the user and opens a session"""
    sessions = WebSessionStore()

    user, token = await login_github_user(database, sessions, github_profile, "gho_token")
    again, second_token = await login_github_user(database, sessions, github_profile, "gho_newer")

    assert len(fake_client.tables["users"]) == 1
    assert again.id == user.id
    assert sessions.verify(token)["user_id"] == user.id
    assert sessions.verify(second_token)["github_id"] == "583231"


@pytest.mark.asyncio
async def test_login_private_email(database, github_profile):
    """Test a profile without a public email is reported, not stored"""
    sessions = WebSessionStore()

    with pytest.raises(ValidationError) as exc_info:
        await login_github_user(database, sessions, {**github_profile, "email": None}, "gho_token")

    assert exc_info.value.details == ["email must be a string"]


def github_transport(routes, seen=None):
    """MockTransport answering GitHub API paths from a dict of (status, json)"""
    def handler(request):
        if seen is not None:
            seen.append(request)
        status, body = routes.get(request.url.path, (404, {"message": "Not Found"}))
        return httpx.Response(status, json=body)
    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_fetch_profile(github_profile):
    """Test the token is sent as a bearer header and the profile returned as-is"""
    seen = []
    transport = github_transport({"/user": (200, github_profile)}, seen)

    profile = await fetch_github_profile("gho_first", transport=transport)

    assert profile == github_profile
    assert [r.url.path for r in seen] == ["/user"]
    assert seen[0].headers["Authorization"] == "Bearer gho_first"


@pytest.mark.asyncio
async def test_fetch_profile_private_email(github_profile):
    """Test a private profile email falls back to the primary verified address"""
    emails = [
        {"email": "old@example.com", "primary": False, "verified": True},
        {"email": "unverified@example.com", "primary": True, "verified": False},
        {"email": "main@example.com", "primary": True, "verified": True},
    ]
    transport = github_transport({
        "/user": (200, {**github_profile, "email": None}),
        "/user/emails": (200, emails),
    })

    profile = await fetch_github_profile("gho_first", transport=transport)

    assert profile["email"] == "main@example.com"


@pytest.mark.asyncio
async def test_fetch_profile_emails_forbidden(github_profile):
    """Test a token without the email scope leaves the email empty"""
    transport = github_transport({
        "/user": (200, {**github_profile, "email": None}),
        "/user/emails": (403, {"message": "Resource not accessible"}),
    })

    profile = await fetch_github_profile("gho_first", transport=transport)

    assert profile["email"] is None


@pytest.mark.asyncio
async def test_fetch_profile_bad_token():
    """Test GitHub rejecting the token raises a status error"""
    transport = github_transport({"/user": (401, {"message": "Bad credentials"})})

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await fetch_github_profile("gho_revoked", transport=transport)

    assert exc_info.value.response.status_code == 401
