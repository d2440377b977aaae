"""Maps raw query rows to room search DTOs.

Rows are plain mappings of column name to value (materialised by the
repository before the connection is released). Every column read here is
mandatory: a missing column, a NULL, or a value of the wrong type raises
MappingException naming the column.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from app.application.dtos.search import (
    AmenityResult,
    RoomResult,
    RoomTypeInfo,
    RoomWithAmenities,
)
from app.domain.exceptions import MappingException


def _column(row: Mapping[str, Any], name: str) -> Any:
    if name not in row:
        raise MappingException(name, "missing")
    value = row[name]
    if value is None:
        raise MappingException(name, "is NULL")
    return value


def _int(row: Mapping[str, Any], name: str) -> int:
    value = _column(row, name)
    # bool is an int subclass; a flag column in an id slot is a contract breach
    if isinstance(value, bool) or not isinstance(value, int):
        raise MappingException(name, f"expected int, got {type(value).__name__}")
    return value


def _str(row: Mapping[str, Any], name: str) -> str:
    value = _column(row, name)
    if not isinstance(value, str):
        raise MappingException(name, f"expected str, got {type(value).__name__}")
    return value


def _decimal(row: Mapping[str, Any], name: str) -> Decimal:
    value = _column(row, name)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MappingException(name, f"expected decimal, got {type(value).__name__}")
    return Decimal(str(value))


def map_room_row(row: Mapping[str, Any]) -> RoomResult:
    """Build a RoomResult (with its RoomTypeInfo) from one room row."""
    room_id = _int(row, "RoomID")
    if room_id <= 0:
        raise MappingException("RoomID", "must be positive")
    price = _decimal(row, "Price")
    if price < 0:
        raise MappingException("Price", "must not be negative")
    return RoomResult(
        room_id=room_id,
        room_number=_str(row, "RoomNumber"),
        price=price,
        bed_type=_str(row, "BedType"),
        view_type=_str(row, "ViewType"),
        status=_str(row, "Status"),
        room_type=RoomTypeInfo(
            room_type_id=_int(row, "RoomTypeID"),
            type_name=_str(row, "TypeName"),
            accessibility_features=_str(row, "AccessibilityFeatures"),
            description=_str(row, "Description"),
        ),
    )


def map_amenity_row(row: Mapping[str, Any]) -> AmenityResult:
    """Build an AmenityResult from one amenity row."""
    return AmenityResult(
        amenity_id=_int(row, "AmenityID"),
        name=_str(row, "Name"),
        description=_str(row, "Description"),
    )


def map_room_detail(
    primary_row: Mapping[str, Any],
    secondary_rows: Iterable[Mapping[str, Any]],
) -> RoomWithAmenities:
    """Fuse the room row and its amenity rows. amenities is () when there are none."""
    return RoomWithAmenities(
        room=map_room_row(primary_row),
        amenities=tuple(map_amenity_row(r) for r in secondary_rows),
    )
