"""RoomSearchRepository unit tests with a fake connection factory (no database)."""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from app.application.dtos.criteria import (
    AvailabilityCriteria,
    CustomCriteria,
    PriceRangeCriteria,
    RoomDetailsCriteria,
    RoomTypeCriteria,
)
from app.domain.enums import SearchMode
from app.domain.exceptions import DataAccessException
from app.infrastructure.persistence.queries import (
    QUERY_CATALOG,
    SEARCH_BY_AVAILABILITY,
    SEARCH_CUSTOM_COMBINATION,
)
from app.infrastructure.persistence.repositories import (
    RoomSearchRepository,
    bind_parameters,
)
from tests.conftest import (
    FakeConnection,
    FakeConnectionFactory,
    amenity_row,
    room_row,
)


def test_bind_parameters_uses_query_parameter_names() -> None:
    params = bind_parameters(
        SEARCH_BY_AVAILABILITY,
        AvailabilityCriteria(date(2024, 5, 15), date(2024, 5, 18)).as_field_map(),
    )
    assert params == {
        "CheckInDate": date(2024, 5, 15),
        "CheckOutDate": date(2024, 5, 18),
    }


def test_bind_parameters_absent_custom_fields_are_null() -> None:
    """Every declared parameter is bound; absent fields and blank names become None."""
    params = bind_parameters(
        SEARCH_CUSTOM_COMBINATION,
        CustomCriteria(min_price=Decimal("50"), room_type_name="  ").as_field_map(),
    )
    assert params == {
        "minPrice": Decimal("50"),
        "maxPrice": None,
        "roomTypeName": None,
        "amenityName": None,
        "viewType": None,
    }


async def test_fetch_rows_runs_named_query_and_releases_connection() -> None:
    conn = FakeConnection(results=[[room_row(1), room_row(2)]])
    factory = FakeConnectionFactory(conn)
    repo = RoomSearchRepository(factory)

    rows = await repo.fetch_rows(PriceRangeCriteria(Decimal("100"), Decimal("200")))

    assert [r["RoomID"] for r in rows] == [1, 2]
    assert factory.acquired == factory.released == 1
    assert len(conn.executed) == 1
    sql, params = conn.executed[0]
    assert ":MinPrice" in sql
    assert params == {"MinPrice": Decimal("100"), "MaxPrice": Decimal("200")}


async def test_fetch_rows_execute_failure_is_data_access_error() -> None:
    conn = FakeConnection(error=OperationalError("SELECT", {}, Exception("timeout")))
    factory = FakeConnectionFactory(conn)
    repo = RoomSearchRepository(factory)

    with pytest.raises(DataAccessException) as exc_info:
        await repo.fetch_rows(RoomTypeCriteria("Deluxe"))

    assert exc_info.value.details["query"] == "spSearchByRoomType"
    assert factory.released == 1


async def test_fetch_rows_acquisition_failure_leaks_nothing() -> None:
    factory = FakeConnectionFactory(acquire_error=OSError("connection refused"))
    repo = RoomSearchRepository(factory)

    with pytest.raises(DataAccessException) as exc_info:
        await repo.fetch_rows(RoomTypeCriteria("Deluxe"))

    assert exc_info.value.details["query"] == "connect"
    assert factory.acquired == factory.released == 0


async def test_fetch_rows_unknown_mode_raises_value_error() -> None:
    repo = RoomSearchRepository(FakeConnectionFactory(), catalog={})
    with pytest.raises(ValueError):
        await repo.fetch_rows(RoomTypeCriteria("Deluxe"))


async def test_fetch_detail_rows_reads_room_then_amenities_on_one_connection() -> None:
    conn = FakeConnection(results=[[room_row(7)], [amenity_row(1), amenity_row(2, "Pool")]])
    factory = FakeConnectionFactory(conn)
    repo = RoomSearchRepository(factory)

    detail = await repo.fetch_detail_rows(RoomDetailsCriteria(7))

    assert [r["RoomID"] for r in detail.primary] == [7]
    assert [r["AmenityID"] for r in detail.secondary] == [1, 2]
    assert factory.acquired == factory.released == 1
    assert [params for _, params in conn.executed] == [{"RoomID": 7}, {"RoomID": 7}]


async def test_fetch_detail_rows_skips_amenities_for_missing_room() -> None:
    conn = FakeConnection(results=[[]])
    factory = FakeConnectionFactory(conn)
    repo = RoomSearchRepository(factory)

    detail = await repo.fetch_detail_rows(RoomDetailsCriteria(404))

    assert detail.primary == [] and detail.secondary == []
    assert len(conn.executed) == 1
    assert factory.released == 1


def test_catalog_covers_every_row_returning_mode() -> None:
    """Room details use the detail query pair; every other mode has a named query."""
    assert set(QUERY_CATALOG) == set(SearchMode) - {SearchMode.ROOM_DETAILS}
    assert len({q.name for q in QUERY_CATALOG.values()}) == len(QUERY_CATALOG)


async def test_custom_search_without_filters_binds_every_parameter_as_null() -> None:
    conn = FakeConnection(results=[[room_row()]])
    repo = RoomSearchRepository(FakeConnectionFactory(conn))

    await repo.fetch_rows(CustomCriteria())

    _, params = conn.executed[0]
    assert params == {
        "minPrice": None,
        "maxPrice": None,
        "roomTypeName": None,
        "amenityName": None,
        "viewType": None,
    }
