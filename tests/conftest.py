# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory stand-in for the Supabase client surface the
#   gateway uses (tables, rpc, functions, auth) so no network is touched
# =============================================================================

import json
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

from types import SimpleNamespace
from typing import Any

import pytest
from fastapi.testclient import TestClient

from lib.supabase_client import SupabaseClient


# =============================================================================
# Fake Supabase
# =============================================================================

class FakeAPIError(Exception):
    """Mimics postgrest.exceptions.APIError: the body is exposed via json()."""

    def __init__(self, payload: dict[str, Any]):
        super().__init__(payload.get("message", "error"))
        self.payload = payload

    def json(self) -> dict[str, Any]:
        return self.payload


class FakeAuthError(Exception):
    pass


NO_ROWS_ERROR = {
    "code": "PGRST116",
    "message": "JSON object requested, multiple (or no) rows returned",
    "details": "The result contains 0 rows",
    "hint": None,
}


class FakeQuery:
    """Chainable query builder over one in-memory table."""

    def __init__(self, backend: "FakeBackend", table: str):
        self.backend = backend
        self.table = table
        self.action = "select"
        self.payload: Any = None
        self.filters: list[tuple[str, Any]] = []
        self.want_single = False
        self.row_limit: int | None = None

    def select(self, *columns):
        self.action = "select"
        return self

    def delete(self):
        self.action = "delete"
        return self

    def upsert(self, row):
        self.action = "upsert"
        self.payload = row
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def single(self):
        self.want_single = True
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def _matches(self, row) -> bool:
        return all(row.get(col) == val for col, val in self.filters)

    def execute(self):
        self.backend.calls.append(("table", self.table, self.action, list(self.filters)))
        self.backend.raise_if_failing(self.table)
        rows = self.backend.tables.setdefault(self.table, [])

        if self.action == "delete":
            removed = [row for row in rows if self._matches(row)]
            rows[:] = [row for row in rows if not self._matches(row)]
            return SimpleNamespace(data=removed)

        if self.action == "upsert":
            for row in rows:
                if row.get("id") == self.payload.get("id"):
                    row.update(self.payload)
                    return SimpleNamespace(data=[dict(row)])
            rows.append(dict(self.payload))
            return SimpleNamespace(data=[dict(self.payload)])

        found = [dict(row) for row in rows if self._matches(row)]
        if self.row_limit is not None:
            found = found[:self.row_limit]
        if self.want_single:
            if len(found) != 1:
                raise FakeAPIError(NO_ROWS_ERROR)
            return SimpleNamespace(data=found[0])
        return SimpleNamespace(data=found)


class FakeRpc:
    def __init__(self, backend: "FakeBackend", name: str, params: dict[str, Any]):
        self.backend = backend
        self.name = name
        self.params = params

    def execute(self):
        self.backend.calls.append(("rpc", self.name, self.params))
        self.backend.raise_if_failing(self.name)
        return SimpleNamespace(data=None)


class FakeFunctions:
    def __init__(self, backend: "FakeBackend", token: str | None):
        self.backend = backend
        self.token = token

    def invoke(self, function_name, invoke_options=None):
        invoke_options = invoke_options or {}
        body = invoke_options.get("body")
        self.backend.calls.append(("function", function_name, body, self.token))
        self.backend.raise_if_failing(function_name)
        # Raw body bytes, as the real client returns without responseType
        result = self.backend.function_results.get(function_name)
        return b"" if result is None else json.dumps(result).encode()


class FakeAuth:
    def __init__(self, backend: "FakeBackend"):
        self.backend = backend

    def get_user(self, jwt=None):
        if jwt not in self.backend.users:
            raise FakeAuthError("invalid JWT: unable to parse or verify signature")
        return SimpleNamespace(user=self.backend.users[jwt])


class FakeClient:
    """The subset of supabase.Client used by the gateway."""

    def __init__(self, backend: "FakeBackend", token: str | None = None):
        self.backend = backend
        self.token = token
        self.functions = FakeFunctions(backend, token)
        self.auth = FakeAuth(backend)

    def table(self, name):
        return FakeQuery(self.backend, name)

    def rpc(self, name, params=None):
        return FakeRpc(self.backend, name, params or {})


class FakeBackend:
    """Shared state behind every FakeClient created during a test."""

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.users: dict[str, Any] = {}
        self.function_results: dict[str, Any] = {}
        self.failures: dict[str, Exception] = {}
        self.calls: list[tuple] = []
        self.clients: list[FakeClient] = []

    def add_user(self, token: str, user_id: str, email: str | None = None):
        self.users[token] = SimpleNamespace(
            id=user_id,
            email=email,
            user_metadata={"source": "test"},
        )

    def fail(self, name: str, error: Exception):
        self.failures[name] = error

    def raise_if_failing(self, name: str):
        if name in self.failures:
            raise self.failures[name]

    def create_client(self, url, key, options=None):
        token = None
        if options is not None:
            auth_header = options.headers.get("Authorization", "")
            token = auth_header.removeprefix("Bearer ") or None
        client = FakeClient(self, token)
        self.clients.append(client)
        return client

    @property
    def user_clients(self) -> list[FakeClient]:
        return [c for c in self.clients if c.token is not None]


# =============================================================================
# Fixtures
# =============================================================================

USER_TOKEN = "valid-token-1"
USER_ID = "11111111-1111-1111-1111-111111111111"
OTHER_TOKEN = "valid-token-2"
OTHER_USER_ID = "22222222-2222-2222-2222-222222222222"


@pytest.fixture
def backend(monkeypatch):
    """In-memory Supabase with two known users."""
    fake = FakeBackend()
    fake.add_user(USER_TOKEN, USER_ID, email="ada@example.com")
    fake.add_user(OTHER_TOKEN, OTHER_USER_ID, email="grace@example.com")

    monkeypatch.setattr("lib.supabase_client.create_client", fake.create_client)
    monkeypatch.setattr(SupabaseClient, "_instance", None)
    yield fake


@pytest.fixture
def client(backend):
    """TestClient for the gateway app backed by the fake Supabase."""
    from app.main import app

    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {USER_TOKEN}"}


@pytest.fixture
def other_auth_headers():
    return {"Authorization": f"Bearer {OTHER_TOKEN}"}


@pytest.fixture
def edge_functions(backend, monkeypatch):
    """
    Serve user-scoped clients as real supabase.Client instances whose Edge
    Function calls are answered by an httpx.MockTransport.

    Set `edge_functions.replies[name]` to the httpx.Response a function
    returns; sent requests are collected in `edge_functions.requests`.
    Token introspection still goes through the in-memory backend.
    """
    import httpx
    from supabase import create_client as supabase_create_client

    replies: dict[str, httpx.Response] = {}
    requests: list[httpx.Request] = []

    def handle(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return replies[request.url.path.rsplit("/", 1)[-1]]

    def create(url, key, options=None):
        if options is None:
            return backend.create_client(url, key)
        real = supabase_create_client(url, key, options=options)
        real.functions._client = httpx.Client(transport=httpx.MockTransport(handle))
        return real

    monkeypatch.setattr("lib.supabase_client.create_client", create)
    return SimpleNamespace(replies=replies, requests=requests)
