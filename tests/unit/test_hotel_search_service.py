"""HotelSearchService unit tests with a spy executor (no database)."""

from datetime import date
from decimal import Decimal

import pytest

from app.application.dtos.criteria import (
    AmenityCriteria,
    AvailabilityCriteria,
    CustomCriteria,
    MinRatingCriteria,
    PriceRangeCriteria,
    RoomAmenitiesCriteria,
    RoomDetailsCriteria,
    RoomTypeCriteria,
    RoomTypeIdCriteria,
    ViewTypeCriteria,
)
from app.application.dtos.search import DetailRows
from app.application.services.criteria_validator import CriteriaValidator
from app.application.use_cases.search import HotelSearchService
from app.domain.exceptions import MappingException, SearchValidationException
from tests.conftest import SpyExecutor, amenity_row, room_row


def _service(executor: SpyExecutor, fixed_clock) -> HotelSearchService:
    return HotelSearchService(executor, CriteriaValidator(clock=fixed_clock))


async def test_rejected_criteria_issue_no_query(fixed_clock) -> None:
    """Validation failure raises before the executor is touched."""
    executor = SpyExecutor(rows=[room_row()])
    svc = _service(executor, fixed_clock)

    with pytest.raises(SearchValidationException) as exc_info:
        await svc.search_by_price_range(PriceRangeCriteria(Decimal("100"), Decimal("50")))

    assert executor.calls == []
    assert exc_info.value.violations[0]["field"] == "max_price"


async def test_availability_no_matches_is_empty_list(fixed_clock) -> None:
    executor = SpyExecutor(rows=[])
    svc = _service(executor, fixed_clock)

    rooms = await svc.search_by_availability(
        AvailabilityCriteria(date(2024, 5, 15), date(2024, 5, 18))
    )

    assert rooms == []
    assert len(executor.calls) == 1


async def test_room_type_search_maps_rows(fixed_clock) -> None:
    executor = SpyExecutor(rows=[room_row(7), room_row(9, RoomNumber="14B")])
    svc = _service(executor, fixed_clock)

    rooms = await svc.search_by_room_type(RoomTypeCriteria("Deluxe"))

    assert [r.room_id for r in rooms] == [7, 9]
    assert rooms[1].room_number == "14B"
    assert executor.calls == [RoomTypeCriteria("Deluxe")]


async def test_min_rating_keeps_store_order(fixed_clock) -> None:
    executor = SpyExecutor(rows=[room_row(12), room_row(3), room_row(8)])
    svc = _service(executor, fixed_clock)

    rooms = await svc.search_by_min_rating(MinRatingCriteria(4.0))

    assert [r.room_id for r in rooms] == [12, 3, 8]


async def test_custom_search_with_no_filters_is_accepted(fixed_clock) -> None:
    executor = SpyExecutor(rows=[room_row()])
    svc = _service(executor, fixed_clock)

    rooms = await svc.search_custom(CustomCriteria())

    assert len(rooms) == 1
    assert executor.calls == [CustomCriteria()]


async def test_single_malformed_row_aborts_search(fixed_clock) -> None:
    executor = SpyExecutor(rows=[room_row(1), room_row(2, Status=None)])
    svc = _service(executor, fixed_clock)

    with pytest.raises(MappingException):
        await svc.search_by_view_type(ViewTypeCriteria("Sea"))


@pytest.mark.parametrize(
    ("method", "criteria"),
    [
        ("search_by_amenity", AmenityCriteria("WiFi")),
        ("search_by_room_type_id", RoomTypeIdCriteria(2)),
        ("search_by_view_type", ViewTypeCriteria("City")),
    ],
)
async def test_simple_searches_delegate_to_executor(fixed_clock, method, criteria) -> None:
    executor = SpyExecutor(rows=[room_row()])
    svc = _service(executor, fixed_clock)

    rooms = await getattr(svc, method)(criteria)

    assert executor.calls == [criteria]
    assert rooms[0].room_id == 7


async def test_room_details_returns_room_with_amenities(fixed_clock) -> None:
    executor = SpyExecutor(
        detail=DetailRows(
            primary=[room_row(7)],
            secondary=[amenity_row(1, "WiFi"), amenity_row(2, "Pool")],
        )
    )
    svc = _service(executor, fixed_clock)

    details = await svc.get_room_details(RoomDetailsCriteria(7))

    assert details is not None
    assert details.room.room_id == 7
    assert [a.amenity_id for a in details.amenities] == [1, 2]


async def test_room_details_unknown_room_is_none(fixed_clock) -> None:
    svc = _service(SpyExecutor(detail=DetailRows()), fixed_clock)
    assert await svc.get_room_details(RoomDetailsCriteria(404)) is None


async def test_room_details_more_than_one_room_row_is_mapping_error(fixed_clock) -> None:
    executor = SpyExecutor(detail=DetailRows(primary=[room_row(7), room_row(7)]))
    svc = _service(executor, fixed_clock)

    with pytest.raises(MappingException) as exc_info:
        await svc.get_room_details(RoomDetailsCriteria(7))
    assert "got 2" in exc_info.value.details["reason"]


async def test_room_details_invalid_id_issues_no_query(fixed_clock) -> None:
    executor = SpyExecutor()
    svc = _service(executor, fixed_clock)

    with pytest.raises(SearchValidationException):
        await svc.get_room_details(RoomDetailsCriteria(0))
    assert executor.calls == []


async def test_room_amenities_maps_amenity_rows(fixed_clock) -> None:
    executor = SpyExecutor(rows=[amenity_row(5, "Spa")])
    svc = _service(executor, fixed_clock)

    amenities = await svc.get_room_amenities(RoomAmenitiesCriteria(7))

    assert [a.name for a in amenities] == ["Spa"]


def test_default_validator_is_created() -> None:
    svc = HotelSearchService(SpyExecutor())
    assert isinstance(svc.validator, CriteriaValidator)
