"""Application services: criteria validation and result mapping."""

from app.application.services.criteria_validator import (
    CriteriaValidator,
    FieldViolation,
    ValidationOutcome,
)
from app.application.services.room_result_mapper import (
    map_amenity_row,
    map_room_detail,
    map_room_row,
)

__all__ = [
    "CriteriaValidator",
    "FieldViolation",
    "ValidationOutcome",
    "map_amenity_row",
    "map_room_detail",
    "map_room_row",
]
