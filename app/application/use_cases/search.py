"""Hotel room search use case. Validates criteria, delegates to IRoomSearchExecutor, maps rows.

One coroutine per search mode. Each validates first (no query on rejection),
runs the mode's named query, and maps every row; a single malformed row
aborts the operation. Zero matches are an empty list (or None for room
details), never an error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.search import AmenityResult, RoomResult, RoomWithAmenities
from app.application.services.criteria_validator import CriteriaValidator
from app.application.services.room_result_mapper import (
    map_amenity_row,
    map_room_detail,
    map_room_row,
)
from app.domain.exceptions import MappingException

if TYPE_CHECKING:
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
        SearchCriteria,
        ViewTypeCriteria,
    )
    from app.application.interfaces.repositories import IRoomSearchExecutor

logger = logging.getLogger(__name__)


class HotelSearchService:
    """Room search across the fixed search modes (read-only)."""

    def __init__(
        self,
        executor: "IRoomSearchExecutor",
        validator: CriteriaValidator | None = None,
    ) -> None:
        self.executor = executor
        self.validator = validator or CriteriaValidator()

    async def _search_rooms(self, criteria: "SearchCriteria") -> list[RoomResult]:
        self.validator.ensure_valid(criteria)
        rows = await self.executor.fetch_rows(criteria)
        rooms = [map_room_row(row) for row in rows]
        logger.debug("%s search matched %d room(s)", criteria.mode.value, len(rooms))
        return rooms

    async def search_by_availability(
        self, criteria: "AvailabilityCriteria"
    ) -> list[RoomResult]:
        """Rooms with no overlapping, non-cancelled reservation in the window."""
        return await self._search_rooms(criteria)

    async def search_by_price_range(
        self, criteria: "PriceRangeCriteria"
    ) -> list[RoomResult]:
        """Rooms priced within [min_price, max_price]."""
        return await self._search_rooms(criteria)

    async def search_by_room_type(self, criteria: "RoomTypeCriteria") -> list[RoomResult]:
        return await self._search_rooms(criteria)

    async def search_by_view_type(self, criteria: "ViewTypeCriteria") -> list[RoomResult]:
        return await self._search_rooms(criteria)

    async def search_by_amenity(self, criteria: "AmenityCriteria") -> list[RoomResult]:
        return await self._search_rooms(criteria)

    async def search_by_room_type_id(
        self, criteria: "RoomTypeIdCriteria"
    ) -> list[RoomResult]:
        return await self._search_rooms(criteria)

    async def search_by_min_rating(
        self, criteria: "MinRatingCriteria"
    ) -> list[RoomResult]:
        """Rooms whose average guest rating is at least min_rating, in store order."""
        return await self._search_rooms(criteria)

    async def search_custom(self, criteria: "CustomCriteria") -> list[RoomResult]:
        """Any combination of optional filters; absent filters are unconstrained."""
        return await self._search_rooms(criteria)

    async def get_room_details(
        self, criteria: "RoomDetailsCriteria"
    ) -> RoomWithAmenities | None:
        """Room, room type and amenities for one room id. None when the room does not exist."""
        self.validator.ensure_valid(criteria)
        detail = await self.executor.fetch_detail_rows(criteria)
        if not detail.primary:
            return None
        if len(detail.primary) > 1:
            raise MappingException(
                "RoomID", f"expected at most one room row, got {len(detail.primary)}"
            )
        return map_room_detail(detail.primary[0], detail.secondary)

    async def get_room_amenities(
        self, criteria: "RoomAmenitiesCriteria"
    ) -> list[AmenityResult]:
        """Amenities of one room (empty list when none or unknown room)."""
        self.validator.ensure_valid(criteria)
        rows = await self.executor.fetch_rows(criteria)
        return [map_amenity_row(row) for row in rows]
