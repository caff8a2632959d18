"""Pytest configuration and fixtures"""
import copy
import os
import uuid
from unittest.mock import AsyncMock, Mock

import pytest
from postgrest.exceptions import APIError

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")


# ==================== IN-MEMORY POSTGREST DOUBLE ====================


class FakeResponse:
    def __init__(self, data):
        self.data = data
        self.count = len(data)


class FakeQuery:
    """Chainable stand-in for a PostgREST request builder."""

    def __init__(self, client, table_name):
        self._client = client
        self._table_name = table_name
        self._op = "select"
        self._payload = None
        self._filters = []

    def select(self, *columns, **kwargs):
        self._op = "select"
        return self

    def insert(self, payload):
        self._op = "insert"
        self._payload = payload
        return self

    def update(self, payload):
        self._op = "update"
        self._payload = payload
        return self

    def delete(self):
        self._op = "delete"
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self._filters)

    async def execute(self):
        self._client.calls.append((self._table_name, self._op))
        if self._client.fail_with is not None:
            raise self._client.fail_with

        rows = self._client.tables.setdefault(self._table_name, [])

        if self._op == "insert":
            row = {"id": str(uuid.uuid4()), **copy.deepcopy(self._payload)}
            self._client.check_unique(self._table_name, row)
            rows.append(row)
            return FakeResponse([dict(row)])

        matched = [row for row in rows if self._matches(row)]

        if self._op == "update":
            for row in matched:
                row.update(copy.deepcopy(self._payload))
        elif self._op == "delete":
            for row in matched:
                rows.remove(row)

        return FakeResponse([dict(row) for row in matched])


class FakeSupabaseClient:
    """Minimal async Supabase client keeping rows in dicts."""

    UNIQUE = {"users": ("github_id", "email")}

    def __init__(self):
        self.tables = {}
        self.calls = []
        self.fail_with = None
        self.postgrest = Mock(aclose=AsyncMock())

    def table(self, name):
        return FakeQuery(self, name)

    def check_unique(self, table_name, row):
        for column in self.UNIQUE.get(table_name, ()):
            for existing in self.tables.get(table_name, []):
                if existing.get(column) == row.get(column):
                    raise APIError({
                        "code": "23505",
                        "message": f'duplicate key value violates unique constraint "{table_name}_{column}_key"',
                        "details": f"Key ({column})=({row.get(column)}) already exists.",
                        "hint": None,
                    })


@pytest.fixture
def fake_client():
    """In-memory Supabase client"""
    return FakeSupabaseClient()


@pytest.fixture
def database(fake_client):
    """Database wired to the in-memory client"""
    from catalog.db import Database

    return Database(fake_client)


@pytest.fixture
def mock_supabase_client():
    """Mock Supabase client for asserting on the exact query chain"""
    client = Mock()

    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.insert.return_value = table_mock
    table_mock.update.return_value = table_mock
    table_mock.delete.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock

    return client


# ==================== SAMPLE DATA ====================


@pytest.fixture
def sample_product():
    """Sample product payload"""
    return {
        "name": "Widget",
        "description": "A small widget",
        "price": 19.99,
        "stock": 10,
    }


@pytest.fixture
def sample_review():
    """Sample review payload"""
    return {
        "name": "Widget",
        "email": "reader@example.com",
        "rating": 5,
        "comment": "Works as advertised",
    }


@pytest.fixture
def sample_user():
    """Sample user payload as produced by a GitHub login"""
    return {
        "github_id": "583231",
        "username": "octocat",
        "email": "octocat@github.com",
        "avatar_url": "https://avatars.githubusercontent.com/u/583231",
        "access_token": "gho_first",
    }


@pytest.fixture
def github_profile():
    """GitHub /user payload"""
    return {
        "id": 583231,
        "login": "octocat",
        "email": "octocat@github.com",
        "avatar_url": "https://avatars.githubusercontent.com/u/583231",
    }
