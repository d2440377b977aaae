"""Hotel search API: one GET route per search mode.

Query parameters are passed through to the criteria unchanged; the
validation layer is the single place that rejects input (400 with every
violation). Zero matches answer 404 "No Record Found".
"""

from datetime import date
from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.api.v1.dependencies import get_hotel_search_service
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
from app.application.dtos.search import AmenityResult, RoomResult, RoomWithAmenities
from app.application.use_cases.search import HotelSearchService
from app.schemas.search import (
    AmenityResponse,
    APIResponse,
    RoomDetailsResponse,
    RoomResponse,
    RoomTypeResponse,
)

router = APIRouter()

NO_RECORD_FOUND = "No Record Found"

SearchService = Annotated[HotelSearchService, Depends(get_hotel_search_service)]


def _room_response(room: RoomResult) -> RoomResponse:
    return RoomResponse(
        room_id=room.room_id,
        room_number=room.room_number,
        price=room.price,
        bed_type=room.bed_type,
        view_type=room.view_type,
        status=room.status,
        room_type=RoomTypeResponse(
            room_type_id=room.room_type.room_type_id,
            type_name=room.room_type.type_name,
            accessibility_features=room.room_type.accessibility_features,
            description=room.room_type.description,
        ),
    )


def _amenity_response(amenity: AmenityResult) -> AmenityResponse:
    return AmenityResponse(
        amenity_id=amenity.amenity_id,
        name=amenity.name,
        description=amenity.description,
    )


def _not_found() -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content=APIResponse[None](
            success=False, status_code=404, message=NO_RECORD_FOUND
        ).model_dump(),
    )


def _rooms_envelope(
    rooms: list[RoomResult], message: str
) -> APIResponse[list[RoomResponse]] | JSONResponse:
    if not rooms:
        return _not_found()
    return APIResponse[list[RoomResponse]](
        message=message, data=[_room_response(r) for r in rooms]
    )


@router.get("/availability", response_model=APIResponse[list[RoomResponse]])
async def search_by_availability(
    search_svc: SearchService,
    check_in_date: date | None = Query(None, description="e.g. 2024-05-15"),
    check_out_date: date | None = Query(None, description="e.g. 2024-05-18"),
):
    """Rooms free for the whole stay (no overlapping, non-cancelled reservation)."""
    rooms = await search_svc.search_by_availability(
        AvailabilityCriteria(check_in_date=check_in_date, check_out_date=check_out_date)
    )
    return _rooms_envelope(rooms, "Fetch Available Room Successful")


@router.get("/price-range", response_model=APIResponse[list[RoomResponse]])
async def search_by_price_range(
    search_svc: SearchService,
    min_price: Decimal | None = Query(None),
    max_price: Decimal | None = Query(None),
):
    """Rooms within a budget."""
    rooms = await search_svc.search_by_price_range(
        PriceRangeCriteria(min_price=min_price, max_price=max_price)
    )
    return _rooms_envelope(rooms, "Fetch rooms by price range Successful")


@router.get("/room-type", response_model=APIResponse[list[RoomResponse]])
async def search_by_room_type(
    search_svc: SearchService,
    room_type_name: str | None = Query(None),
):
    rooms = await search_svc.search_by_room_type(
        RoomTypeCriteria(room_type_name=room_type_name)
    )
    return _rooms_envelope(rooms, "Fetch rooms by room type Successful")


@router.get("/view-type", response_model=APIResponse[list[RoomResponse]])
async def search_by_view_type(
    search_svc: SearchService,
    view_type: str | None = Query(None, description="e.g. Sea, City"),
):
    rooms = await search_svc.search_by_view_type(ViewTypeCriteria(view_type=view_type))
    return _rooms_envelope(rooms, "Fetch rooms by view type Successful")


@router.get("/amenities", response_model=APIResponse[list[RoomResponse]])
async def search_by_amenities(
    search_svc: SearchService,
    amenity_name: str | None = Query(None),
):
    rooms = await search_svc.search_by_amenity(AmenityCriteria(amenity_name=amenity_name))
    return _rooms_envelope(rooms, "Fetch rooms by amenities Successful")


@router.get("/rooms-by-type", response_model=APIResponse[list[RoomResponse]])
async def search_rooms_by_room_type_id(
    search_svc: SearchService,
    room_type_id: int | None = Query(None),
):
    rooms = await search_svc.search_by_room_type_id(
        RoomTypeIdCriteria(room_type_id=room_type_id)
    )
    return _rooms_envelope(rooms, "Fetch rooms by room type ID Successful")


@router.get("/room-details", response_model=APIResponse[RoomDetailsResponse])
async def get_room_details_with_amenities(
    search_svc: SearchService,
    room_id: int | None = Query(None),
):
    """Room, room type and amenities for one room."""
    details: RoomWithAmenities | None = await search_svc.get_room_details(
        RoomDetailsCriteria(room_id=room_id)
    )
    if details is None:
        return _not_found()
    return APIResponse[RoomDetailsResponse](
        message="Fetch room details with amenities for RoomID Successful",
        data=RoomDetailsResponse(
            room=_room_response(details.room),
            amenities=[_amenity_response(a) for a in details.amenities],
        ),
    )


@router.get("/room-amenities", response_model=APIResponse[list[AmenityResponse]])
async def get_room_amenities(
    search_svc: SearchService,
    room_id: int | None = Query(None),
):
    amenities = await search_svc.get_room_amenities(RoomAmenitiesCriteria(room_id=room_id))
    if not amenities:
        return _not_found()
    return APIResponse[list[AmenityResponse]](
        message="Fetch Amenities for RoomID Successful",
        data=[_amenity_response(a) for a in amenities],
    )


@router.get("/by-rating", response_model=APIResponse[list[RoomResponse]])
async def search_by_min_rating(
    search_svc: SearchService,
    min_rating: float | None = Query(None, description="Average guest rating, 0 < x <= 5"),
):
    rooms = await search_svc.search_by_min_rating(MinRatingCriteria(min_rating=min_rating))
    return _rooms_envelope(rooms, "Fetch rooms by minimum rating Successful")


@router.get("/custom-search", response_model=APIResponse[list[RoomResponse]])
async def search_custom_combination(
    search_svc: SearchService,
    min_price: Decimal | None = Query(None),
    max_price: Decimal | None = Query(None),
    room_type_name: str | None = Query(None),
    amenity_name: str | None = Query(None),
    view_type: str | None = Query(None),
):
    """Any combination of optional filters; omitted filters are unconstrained."""
    rooms = await search_svc.search_custom(
        CustomCriteria(
            min_price=min_price,
            max_price=max_price,
            room_type_name=room_type_name,
            amenity_name=amenity_name,
            view_type=view_type,
        )
    )
    return _rooms_envelope(rooms, "Fetch Room By Custom Search Successful")
