"""Room search repository integration tests. Require a database with the hotel schema."""

from decimal import Decimal

import pytest

from app.application.dtos.criteria import CustomCriteria, PriceRangeCriteria, RoomDetailsCriteria
from app.application.services.room_result_mapper import map_room_row
from app.infrastructure.persistence.database import get_connection_factory
from app.infrastructure.persistence.repositories import RoomSearchRepository


@pytest.mark.requires_db
async def test_price_range_rows_map_cleanly(db_connection) -> None:
    """Every row of a wide price search satisfies the row contract."""
    repo = RoomSearchRepository(get_connection_factory())
    rows = await repo.fetch_rows(PriceRangeCriteria(Decimal("0"), Decimal("1000000")))
    rooms = [map_room_row(r) for r in rows]
    assert all(Decimal("0") <= room.price <= Decimal("1000000") for room in rooms)


@pytest.mark.requires_db
async def test_custom_search_without_filters_returns_every_room(db_connection) -> None:
    repo = RoomSearchRepository(get_connection_factory())
    rows = await repo.fetch_rows(CustomCriteria())
    wide = await repo.fetch_rows(PriceRangeCriteria(Decimal("0"), Decimal("1000000000")))
    assert len(rows) == len(wide)


@pytest.mark.requires_db
async def test_room_details_for_unknown_room_is_empty(db_connection) -> None:
    repo = RoomSearchRepository(get_connection_factory())
    detail = await repo.fetch_detail_rows(RoomDetailsCriteria(2_000_000_000))
    assert detail.primary == [] and detail.secondary == []
