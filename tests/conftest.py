"""
Shared test fixtures.

This module provides:
- An in-memory fake of the MySQL driver (connection + cursor) that
  understands the handful of statements the service issues and raises
  real PyMySQL errors
- Store configuration and connected gateway fixtures
- Flask test clients for the API and the dashboard
"""

import re
from datetime import datetime
from unittest.mock import MagicMock

import pymysql
import pytest
import requests

from clients.api_client import ApiClient
from config import AppConfig, StoreConfig
from db.connection import StoreGateway
from main import create_api_app, create_frontend_app

# =============================================================================
# Fake MySQL driver
# =============================================================================

_LITERAL_ROW = re.compile(r"\('([^']*)',\s*'([^']*)'\)")


class FakeMySQL:
    """Process-wide fake database shared by every connection it hands out."""

    def __init__(self):
        self.tables: dict[str, list[dict]] = {}
        self.statements: list[str] = []
        self.connections: list["FakeConnection"] = []
        self.connect_kwargs: dict = {}
        self.reachable = True
        self.fail_on: str | None = None
        self._next_id = 1

    def connect(self, **kwargs) -> "FakeConnection":
        self.connect_kwargs = kwargs
        if not self.reachable:
            raise pymysql.err.OperationalError(
                2003, f"Can't connect to MySQL server on '{kwargs.get('host')}' ([Errno 111] Connection refused)"
            )
        conn = FakeConnection(self)
        self.connections.append(conn)
        return conn

    def insert_user(self, name: str, email: str) -> dict:
        row = {"id": self._next_id, "name": name, "email": email,
               "created_at": datetime(2024, 1, 15, 9, 30, 0)}
        self._next_id += 1
        self.tables["users"].append(row)
        return row

    @property
    def seed_inserts(self) -> int:
        return sum(1 for s in self.statements if s.upper().startswith("INSERT INTO USERS") and "John Doe" in s)

    def run(self, sql: str, params=None) -> tuple[list[dict], int]:
        text = " ".join(sql.split()).rstrip(";").strip()
        upper = text.upper()
        self.statements.append(text)

        if self.fail_on and self.fail_on.upper() in upper:
            raise pymysql.err.ProgrammingError(1064, "You have an error in your SQL syntax")
        if upper.startswith("CREATE TABLE IF NOT EXISTS USERS"):
            self.tables.setdefault("users", [])
            return [], 0
        if "users" not in self.tables:
            raise pymysql.err.ProgrammingError(1146, "Table 'microservices_db.users' doesn't exist")

        rows = self.tables["users"]
        if upper.startswith("SELECT COUNT(*)"):
            return [{"count": len(rows)}], 1
        if upper.startswith("INSERT INTO USERS"):
            values = [params] if params else _LITERAL_ROW.findall(text)
            for name, email in values:
                self.insert_user(name, email)
            return [], len(values)
        if upper.startswith("SELECT * FROM USERS"):
            return [dict(r) for r in rows], len(rows)
        raise pymysql.err.ProgrammingError(1064, f"Unsupported statement: {text}")


class FakeCursor:
    def __init__(self, db: FakeMySQL):
        self._db = db
        self._rows: list[dict] = []
        self.rowcount = -1

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self._rows, self.rowcount = self._db.run(sql, params)
        return self.rowcount

    def fetchall(self):
        return list(self._rows)

    def fetchone(self):
        return self._rows[0] if self._rows else None


class FakeConnection:
    def __init__(self, db: FakeMySQL):
        self._db = db
        self.closed = False
        self.commits = 0
        self.rollbacks = 0

    def cursor(self):
        if self.closed:
            raise pymysql.err.InterfaceError(0, "")
        return FakeCursor(self._db)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        if self.closed:
            raise pymysql.err.Error("Already closed")
        self.closed = True


# =============================================================================
# Store fixtures
# =============================================================================


@pytest.fixture
def fake_db() -> FakeMySQL:
    return FakeMySQL()


@pytest.fixture
def store_config() -> StoreConfig:
    return StoreConfig()


@pytest.fixture
def app_config(store_config) -> AppConfig:
    return AppConfig(store=store_config, service_name="Test API", api_url="http://api")


@pytest.fixture
def gateway(fake_db, store_config) -> StoreGateway:
    result = StoreGateway.connect(store_config, fake_db.connect)
    assert result.ok
    return result.value


# =============================================================================
# HTTP fixtures
# =============================================================================


@pytest.fixture
def api_app(app_config, fake_db):
    app = create_api_app(app_config, connector=fake_db.connect)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def api_http(api_app):
    return api_app.test_client()


def make_response(status: int, body: bytes, url: str = "http://api/users") -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.url = url
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def mock_session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def dashboard_client():
    client = MagicMock(spec=ApiClient)
    client.base_url = "http://api"
    return client


@pytest.fixture
def frontend_http(app_config, dashboard_client):
    app = create_frontend_app(app_config, client=dashboard_client)
    app.config.update(TESTING=True)
    return app.test_client()
