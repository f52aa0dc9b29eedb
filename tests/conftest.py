"""Shared fixtures: temporary SQLite store, deterministic runtime, API client.

Every test gets a fresh database file under ``tmp_path`` with all
migrations applied.  The clock and id factory are counters so that
timestamps and ids are predictable.
"""

import os

# Must be set before ``saloon_api`` reads its settings.
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ADMIN_PRINCIPALS", "auditor")

import pytest
from httpx import ASGITransport, AsyncClient

from saloon_api.app.api.dependencies import get_audit_service, get_saloon_service
from saloon_api.app.core.db import SaloonStore, init_db
from saloon_api.app.core.security import create_access_token
from saloon_api.app.main import app
from saloon_api.app.schemas.saloon import SaloonPayload
from saloon_api.app.services.audit_service import AuditService
from saloon_api.app.services.saloon_service import SaloonService


class FakeClock:
    """Returns 1000, 1001, 1002, ... on successive calls."""

    def __init__(self, start: int = 1000) -> None:
        self.now = start - 1

    def __call__(self) -> int:
        self.now += 1
        return self.now


class FakeIds:
    """Returns id-1, id-2, ... and counts how many were handed out."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return f"id-{self.calls}"


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "saloons.db")
    init_db(path)
    return path


@pytest.fixture
def store(db_path):
    return SaloonStore(db_path)


@pytest.fixture
def audit(db_path):
    return AuditService(db_path)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ids():
    return FakeIds()


@pytest.fixture
def service(store, clock, ids, audit):
    return SaloonService(store, clock=clock, id_factory=ids, audit=audit)


@pytest.fixture
def payload():
    return SaloonPayload(
        saloon_name="Fade Masters",
        saloon_location="12 Market Street",
        attachment_url="https://example.com/fade.jpg",
    )


@pytest.fixture
async def client(service, audit):
    """API client with the service dependencies pointed at the test DB."""
    app.dependency_overrides[get_saloon_service] = lambda: service
    app.dependency_overrides[get_audit_service] = lambda: audit
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth():
    """Build the Authorization header for a principal."""

    def _auth(principal: str) -> dict:
        return {"Authorization": f"Bearer {create_access_token({'sub': principal})}"}

    return _auth
