"""Named, parameterized room search queries (one per search mode).

Statements are SQLAlchemy text() constructs with bound parameters only;
criteria values never reach the SQL string. Result columns carry fixed
quoted aliases (RoomID, RoomNumber, ...) that the row mapper relies on.

Nullable custom-search parameters are CAST so drivers that need a parameter
type (asyncpg) can resolve it even when the value is NULL; a NULL parameter
disables its filter.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from sqlalchemy import TextClause, text

from app.domain.enums import SearchMode

_ROOM_COLUMNS = """
    r.room_id AS "RoomID",
    r.room_number AS "RoomNumber",
    r.price AS "Price",
    r.bed_type AS "BedType",
    r.view_type AS "ViewType",
    r.status AS "Status",
    rt.room_type_id AS "RoomTypeID",
    rt.type_name AS "TypeName",
    rt.accessibility_features AS "AccessibilityFeatures",
    rt.description AS "Description"
"""

_ROOM_FROM = """
FROM rooms r
JOIN room_types rt ON rt.room_type_id = r.room_type_id
"""


def _room_query(where: str, order_by: str = "r.room_id") -> TextClause:
    return text(f"SELECT {_ROOM_COLUMNS} {_ROOM_FROM} WHERE {where} ORDER BY {order_by}")


@dataclass(frozen=True)
class NamedQuery:
    """A fixed-name statement and the criteria field behind each bind parameter.

    parameters maps bind-parameter name -> criteria field name (as_field_map key).
    nullable lists bind parameters whose blank string values are sent as NULL.
    """

    name: str
    statement: TextClause
    parameters: Mapping[str, str] = field(default_factory=dict)
    nullable: frozenset[str] = frozenset()


@dataclass(frozen=True)
class DetailQuery:
    """Room-detail query pair: primary (room row) then secondary (amenity rows)."""

    name: str
    primary: NamedQuery
    secondary: NamedQuery


SEARCH_BY_AVAILABILITY = NamedQuery(
    name="spSearchByAvailability",
    statement=_room_query(
        """NOT EXISTS (
            SELECT 1 FROM reservations res
            WHERE res.room_id = r.room_id
              AND res.status <> 'Cancelled'
              AND res.check_in_date < :CheckOutDate
              AND res.check_out_date > :CheckInDate
        )"""
    ),
    parameters={"CheckInDate": "check_in_date", "CheckOutDate": "check_out_date"},
)

SEARCH_BY_PRICE_RANGE = NamedQuery(
    name="spSearchByPriceRange",
    statement=_room_query(
        "r.price >= :MinPrice AND r.price <= :MaxPrice", order_by="r.price, r.room_id"
    ),
    parameters={"MinPrice": "min_price", "MaxPrice": "max_price"},
)

SEARCH_BY_ROOM_TYPE = NamedQuery(
    name="spSearchByRoomType",
    statement=_room_query("rt.type_name = :RoomTypeName"),
    parameters={"RoomTypeName": "room_type_name"},
)

SEARCH_BY_VIEW_TYPE = NamedQuery(
    name="spSearchByViewType",
    statement=_room_query("r.view_type = :ViewType"),
    parameters={"ViewType": "view_type"},
)

SEARCH_BY_AMENITIES = NamedQuery(
    name="spSearchByAmenities",
    statement=_room_query(
        """EXISTS (
            SELECT 1 FROM room_amenities ra
            JOIN amenities a ON a.amenity_id = ra.amenity_id
            WHERE ra.room_id = r.room_id AND a.name = :AmenityName
        )"""
    ),
    parameters={"AmenityName": "amenity_name"},
)

SEARCH_ROOMS_BY_ROOM_TYPE_ID = NamedQuery(
    name="spSearchRoomsByRoomTypeID",
    statement=_room_query("r.room_type_id = :RoomTypeID"),
    parameters={"RoomTypeID": "room_type_id"},
)

GET_ROOM_AMENITIES_BY_ROOM_ID = NamedQuery(
    name="spGetRoomAmenitiesByRoomID",
    statement=text(
        """
        SELECT a.amenity_id AS "AmenityID", a.name AS "Name", a.description AS "Description"
        FROM room_amenities ra
        JOIN amenities a ON a.amenity_id = ra.amenity_id
        WHERE ra.room_id = :RoomID
        ORDER BY a.amenity_id
        """
    ),
    parameters={"RoomID": "room_id"},
)

GET_ROOM_DETAILS_WITH_AMENITIES_BY_ROOM_ID = DetailQuery(
    name="spGetRoomDetailsWithAmenitiesByRoomID",
    primary=NamedQuery(
        name="spGetRoomDetailsWithAmenitiesByRoomID.room",
        statement=_room_query("r.room_id = :RoomID"),
        parameters={"RoomID": "room_id"},
    ),
    secondary=NamedQuery(
        name="spGetRoomDetailsWithAmenitiesByRoomID.amenities",
        statement=GET_ROOM_AMENITIES_BY_ROOM_ID.statement,
        parameters={"RoomID": "room_id"},
    ),
)

SEARCH_BY_MIN_RATING = NamedQuery(
    name="spSearchByMinRating",
    statement=_room_query(
        """r.room_id IN (
            SELECT res.room_id FROM feedbacks f
            JOIN reservations res ON res.reservation_id = f.reservation_id
            GROUP BY res.room_id
            HAVING AVG(f.rating) >= :MinRating
        )"""
    ),
    parameters={"MinRating": "min_rating"},
)

SEARCH_CUSTOM_COMBINATION = NamedQuery(
    name="spSearchCustomCombination",
    statement=_room_query(
        """(CAST(:minPrice AS NUMERIC) IS NULL OR r.price >= CAST(:minPrice AS NUMERIC))
        AND (CAST(:maxPrice AS NUMERIC) IS NULL OR r.price <= CAST(:maxPrice AS NUMERIC))
        AND (CAST(:roomTypeName AS VARCHAR) IS NULL OR rt.type_name = CAST(:roomTypeName AS VARCHAR))
        AND (CAST(:viewType AS VARCHAR) IS NULL OR r.view_type = CAST(:viewType AS VARCHAR))
        AND (CAST(:amenityName AS VARCHAR) IS NULL OR EXISTS (
            SELECT 1 FROM room_amenities ra
            JOIN amenities a ON a.amenity_id = ra.amenity_id
            WHERE ra.room_id = r.room_id AND a.name = CAST(:amenityName AS VARCHAR)
        ))"""
    ),
    parameters={
        "minPrice": "min_price",
        "maxPrice": "max_price",
        "roomTypeName": "room_type_name",
        "amenityName": "amenity_name",
        "viewType": "view_type",
    },
    nullable=frozenset({"roomTypeName", "amenityName", "viewType"}),
)


QUERY_CATALOG: Mapping[SearchMode, NamedQuery] = MappingProxyType(
    {
        SearchMode.AVAILABILITY: SEARCH_BY_AVAILABILITY,
        SearchMode.PRICE_RANGE: SEARCH_BY_PRICE_RANGE,
        SearchMode.ROOM_TYPE: SEARCH_BY_ROOM_TYPE,
        SearchMode.VIEW_TYPE: SEARCH_BY_VIEW_TYPE,
        SearchMode.AMENITY: SEARCH_BY_AMENITIES,
        SearchMode.ROOM_TYPE_ID: SEARCH_ROOMS_BY_ROOM_TYPE_ID,
        SearchMode.ROOM_AMENITIES: GET_ROOM_AMENITIES_BY_ROOM_ID,
        SearchMode.MIN_RATING: SEARCH_BY_MIN_RATING,
        SearchMode.CUSTOM: SEARCH_CUSTOM_COMBINATION,
    }
)
