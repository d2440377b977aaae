"""Search criteria DTOs: one frozen dataclass per search mode.

Each criteria type carries its mode as a class-level tag and exposes its
fields through as_field_map(), which validation rules and query parameter
binding read. Required fields are typed Optional because presence is a
validation concern (CriteriaValidator), not a construction error.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, ClassVar, Union

from app.domain.enums import SearchMode


@dataclass(frozen=True)
class AvailabilityCriteria:
    """Rooms free between check-in and check-out (cancelled reservations ignored)."""

    mode: ClassVar[SearchMode] = SearchMode.AVAILABILITY

    check_in_date: date | datetime | None
    check_out_date: date | datetime | None

    def as_field_map(self) -> dict[str, Any]:
        return {
            "check_in_date": self.check_in_date,
            "check_out_date": self.check_out_date,
        }


@dataclass(frozen=True)
class PriceRangeCriteria:
    """Rooms priced within [min_price, max_price]."""

    mode: ClassVar[SearchMode] = SearchMode.PRICE_RANGE

    min_price: Decimal | None
    max_price: Decimal | None

    def as_field_map(self) -> dict[str, Any]:
        return {"min_price": self.min_price, "max_price": self.max_price}


@dataclass(frozen=True)
class RoomTypeCriteria:
    """Rooms of the named room type."""

    mode: ClassVar[SearchMode] = SearchMode.ROOM_TYPE

    room_type_name: str | None

    def as_field_map(self) -> dict[str, Any]:
        return {"room_type_name": self.room_type_name}


@dataclass(frozen=True)
class ViewTypeCriteria:
    """Rooms with the given view (e.g. sea, city)."""

    mode: ClassVar[SearchMode] = SearchMode.VIEW_TYPE

    view_type: str | None

    def as_field_map(self) -> dict[str, Any]:
        return {"view_type": self.view_type}


@dataclass(frozen=True)
class AmenityCriteria:
    """Rooms equipped with the named amenity."""

    mode: ClassVar[SearchMode] = SearchMode.AMENITY

    amenity_name: str | None

    def as_field_map(self) -> dict[str, Any]:
        return {"amenity_name": self.amenity_name}


@dataclass(frozen=True)
class RoomTypeIdCriteria:
    """Rooms belonging to a room type id."""

    mode: ClassVar[SearchMode] = SearchMode.ROOM_TYPE_ID

    room_type_id: int | None

    def as_field_map(self) -> dict[str, Any]:
        return {"room_type_id": self.room_type_id}


@dataclass(frozen=True)
class RoomDetailsCriteria:
    """One room with its room type and amenities."""

    mode: ClassVar[SearchMode] = SearchMode.ROOM_DETAILS

    room_id: int | None

    def as_field_map(self) -> dict[str, Any]:
        return {"room_id": self.room_id}


@dataclass(frozen=True)
class RoomAmenitiesCriteria:
    """Amenities of one room (amenity rows only)."""

    mode: ClassVar[SearchMode] = SearchMode.ROOM_AMENITIES

    room_id: int | None

    def as_field_map(self) -> dict[str, Any]:
        return {"room_id": self.room_id}


@dataclass(frozen=True)
class MinRatingCriteria:
    """Rooms whose average guest rating is at least min_rating."""

    mode: ClassVar[SearchMode] = SearchMode.MIN_RATING

    min_rating: float | None

    def as_field_map(self) -> dict[str, Any]:
        return {"min_rating": self.min_rating}


@dataclass(frozen=True)
class CustomCriteria:
    """Any combination of filters; every field is optional.

    An absent field leaves that dimension unconstrained. An absent price
    bound means unbounded on that side.
    """

    mode: ClassVar[SearchMode] = SearchMode.CUSTOM

    min_price: Decimal | None = None
    max_price: Decimal | None = None
    room_type_name: str | None = None
    amenity_name: str | None = None
    view_type: str | None = None

    def as_field_map(self) -> dict[str, Any]:
        return {
            "min_price": self.min_price,
            "max_price": self.max_price,
            "room_type_name": self.room_type_name,
            "amenity_name": self.amenity_name,
            "view_type": self.view_type,
        }


SearchCriteria = Union[
    AvailabilityCriteria,
    PriceRangeCriteria,
    RoomTypeCriteria,
    ViewTypeCriteria,
    AmenityCriteria,
    RoomTypeIdCriteria,
    RoomDetailsCriteria,
    RoomAmenitiesCriteria,
    MinRatingCriteria,
    CustomCriteria,
]
