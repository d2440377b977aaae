"""Pytest configuration and fixtures for hotel search.

Uses app.main:app for HTTP tests and in-memory fakes of the connection
factory / query executor for unit tests. DB-dependent tests are marked
requires_db and skip when DATABASE_URL is not configured.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from app.application.dtos.search import DetailRows
from app.core.config import get_settings
from app.domain.exceptions import DataAccessException
from app.infrastructure.persistence.database import get_connection_factory
from app.main import app

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC)


def room_row(room_id: int = 7, **overrides: Any) -> dict[str, Any]:
    """A well-formed room row as returned by the room queries."""
    row: dict[str, Any] = {
        "RoomID": room_id,
        "RoomNumber": "12A",
        "Price": 150.00,
        "BedType": "Queen",
        "ViewType": "Sea",
        "Status": "Available",
        "RoomTypeID": 3,
        "TypeName": "Deluxe",
        "AccessibilityFeatures": "Wheelchair",
        "Description": "Spacious",
    }
    row.update(overrides)
    return row


def amenity_row(amenity_id: int = 1, name: str = "WiFi", **overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "AmenityID": amenity_id,
        "Name": name,
        "Description": f"{name} included",
    }
    row.update(overrides)
    return row


class SpyExecutor:
    """IRoomSearchExecutor fake that records every call and returns canned rows."""

    def __init__(
        self,
        rows: list[dict[str, Any]] | None = None,
        detail: DetailRows | None = None,
    ) -> None:
        self.rows = rows or []
        self.detail = detail or DetailRows()
        self.calls: list[Any] = []

    async def fetch_rows(self, criteria: Any) -> list[dict[str, Any]]:
        self.calls.append(criteria)
        return list(self.rows)

    async def fetch_detail_rows(self, criteria: Any) -> DetailRows:
        self.calls.append(criteria)
        return self.detail


class FakeResult:
    """Stands in for a SQLAlchemy Result: result.mappings().all()."""

    def __init__(self, rows: list[dict[str, Any]]) -> None:
        self._rows = rows

    def mappings(self) -> "FakeResult":
        return self

    def all(self) -> list[dict[str, Any]]:
        return list(self._rows)


class FakeConnection:
    """Async connection fake: serves results in order, or raises a configured error."""

    def __init__(
        self,
        results: list[list[dict[str, Any]]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.results = list(results or [])
        self.error = error
        self.executed: list[tuple[str, dict[str, Any]]] = []

    async def execute(self, statement: Any, params: dict[str, Any] | None = None) -> FakeResult:
        self.executed.append((str(statement), dict(params or {})))
        if self.error is not None:
            raise self.error
        rows = self.results.pop(0) if self.results else []
        return FakeResult(rows)


class FakeConnectionFactory:
    """ConnectionFactory fake counting acquisitions and releases."""

    def __init__(
        self,
        connection: FakeConnection | None = None,
        acquire_error: Exception | None = None,
    ) -> None:
        self.connection = connection or FakeConnection()
        self.acquire_error = acquire_error
        self.acquired = 0
        self.released = 0

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[FakeConnection]:
        if self.acquire_error is not None:
            raise DataAccessException("connect", str(self.acquire_error))
        self.acquired += 1
        try:
            yield self.connection
        finally:
            self.released += 1


@pytest.fixture
def fixed_clock():
    """Clock pinned to FIXED_NOW for future-date rules."""
    return lambda: FIXED_NOW


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI). Clears dependency overrides after."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_connection():
    """Live connection for integration tests. Skips when DATABASE_URL is not set.

    Use @pytest.mark.requires_db on tests that need it; run without a database
    via: pytest -m 'not requires_db'.
    """
    get_settings.cache_clear()
    if not get_settings().database_url:
        pytest.skip("Database not configured: set DATABASE_URL (postgresql+asyncpg://...)")
    factory = get_connection_factory()
    async with factory.connect() as conn:
        yield conn
