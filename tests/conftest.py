"""Shared fixtures: an in-memory stand-in for the Supabase client."""

import uuid
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from supabase import AuthApiError

from quizquest.main import app
from quizquest.services.supabase import anon_client, service_client


class FakeResult:
    def __init__(self, data, count=None):
        self.data = data
        self.count = count


class FakeQuery:
    """Chainable query mirroring the subset of the postgrest builder the app uses."""

    def __init__(self, store, table_name):
        self.store = store
        self.table_name = table_name
        self.rows = store.tables.setdefault(table_name, [])
        self.action = "select"
        self.payload = None
        self.filters = []
        self.order_by = []
        self.limit_n = None
        self.count_mode = None
        self.columns = None

    def select(self, *columns, count=None):
        self.count_mode = count
        names = [c.strip() for c in ",".join(columns).split(",") if c.strip()]
        if names and "*" not in names:
            self.columns = names
        return self

    def insert(self, payload):
        self.action = "insert"
        self.payload = payload
        return self

    def update(self, payload):
        self.action = "update"
        self.payload = payload
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def in_(self, column, values):
        values = list(values)
        self.filters.append(lambda row: row.get(column) in values)
        return self

    def order(self, column, desc=False):
        self.order_by.append((column, desc))
        return self

    def limit(self, n):
        self.limit_n = n
        return self

    def execute(self):
        self.store.calls.append((self.table_name, self.action))
        if self.table_name in self.store.failures:
            raise self.store.failures[self.table_name]

        if self.action == "insert":
            payloads = self.payload if isinstance(self.payload, list) else [self.payload]
            inserted = [self.store.add_row(self.table_name, p) for p in payloads]
            return FakeResult([dict(r) for r in inserted])

        matched = [r for r in self.rows if all(f(r) for f in self.filters)]

        if self.action == "update":
            for row in matched:
                row.update(self.payload)
            return FakeResult([dict(r) for r in matched])

        if self.action == "delete":
            for row in matched:
                self.rows.remove(row)
            return FakeResult([dict(r) for r in matched])

        for column, desc in reversed(self.order_by):
            matched.sort(key=lambda r: r.get(column), reverse=desc)
        count = len(matched) if self.count_mode else None
        if self.limit_n is not None:
            matched = matched[: self.limit_n]
        if self.columns is not None:
            return FakeResult([{c: r.get(c) for c in self.columns} for r in matched], count)
        return FakeResult([dict(r) for r in matched], count)


class FakeAuth:
    def __init__(self, store):
        self.store = store
        self.admin = SimpleNamespace(sign_out=self.sign_out)
        self.signed_out = []

    def sign_up(self, credentials):
        if credentials["email"] in self.store.accounts:
            raise AuthApiError("User already registered", 422, "user_already_exists")
        user = self.store.create_account(credentials["email"], credentials["password"])
        return SimpleNamespace(user=user, session=self.store.session_for(user))

    def sign_in_with_password(self, credentials):
        account = self.store.accounts.get(credentials["email"])
        if account is None or account["password"] != credentials["password"]:
            raise AuthApiError("Invalid login credentials", 400, "invalid_credentials")
        user = account["user"]
        return SimpleNamespace(user=user, session=self.store.session_for(user))

    def get_user(self, token):
        user = self.store.tokens.get(token)
        if user is None:
            raise AuthApiError("invalid JWT", 401, "bad_jwt")
        return SimpleNamespace(user=user)

    def sign_out(self, token, scope="global"):
        self.signed_out.append(token)


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.accounts = {}
        self.tokens = {}
        self.calls = []
        self.failures = {}
        self.auth = FakeAuth(self)
        self.postgrest = SimpleNamespace(auth=lambda token: None)
        self._clock = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def table(self, name):
        return FakeQuery(self, name)

    from_ = table

    def add_row(self, table_name, row):
        self._clock += timedelta(seconds=1)
        stored = {"id": str(uuid.uuid4()), "created_at": self._clock.isoformat(), **row}
        self.tables.setdefault(table_name, []).append(stored)
        return stored

    def rows(self, table_name):
        return self.tables.get(table_name, [])

    def create_account(self, email, password):
        user = SimpleNamespace(id=str(uuid.uuid4()), email=email)
        self.accounts[email] = {"password": password, "user": user}
        return user

    def session_for(self, user):
        token = f"token-{user.id}"
        self.tokens[token] = user
        return SimpleNamespace(access_token=token, refresh_token=f"refresh-{user.id}")

    def add_user(self, role, full_name="Test User", email=None, bio=None):
        """Register an account with profile and role rows; returns (user_id, auth headers)."""
        email = email or f"{uuid.uuid4().hex[:8]}@example.com"
        user = self.create_account(email, "secret123")
        session = self.session_for(user)
        self.add_row("profiles", {"user_id": user.id, "full_name": full_name, "email": email, "bio": bio})
        if role is not None:
            self.add_row("user_roles", {"user_id": user.id, "role": role})
        return user.id, {"Authorization": f"Bearer {session.access_token}"}


@pytest.fixture
def store():
    return FakeSupabase()


@pytest.fixture
def client(store):
    """Test client whose Supabase clients are replaced by the in-memory store."""
    app.dependency_overrides[anon_client] = lambda: store
    app.dependency_overrides[service_client] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def teacher(store):
    return store.add_user("teacher", full_name="Ada Teacher", email="ada@example.com", bio="Math")


@pytest.fixture
def student(store):
    return store.add_user("student", full_name="Sam Student", email="sam@example.com")
