"""Application DTOs (no ORM dependency)."""

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
from app.application.dtos.search import (
    AmenityResult,
    DetailRows,
    RoomResult,
    RoomTypeInfo,
    RoomWithAmenities,
)

__all__ = [
    "AmenityCriteria",
    "AmenityResult",
    "AvailabilityCriteria",
    "CustomCriteria",
    "DetailRows",
    "MinRatingCriteria",
    "PriceRangeCriteria",
    "RoomAmenitiesCriteria",
    "RoomDetailsCriteria",
    "RoomResult",
    "RoomTypeCriteria",
    "RoomTypeIdCriteria",
    "RoomTypeInfo",
    "RoomWithAmenities",
    "SearchCriteria",
    "ViewTypeCriteria",
]
