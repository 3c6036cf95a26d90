"""
Booking endpoints.

CRUD routes over the booking collection.  ``GET`` accepts
``?upcoming=true`` to restrict the list to open bookings dated today
or later.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response, status

from vehicle_service_api.app.api.deps import get_store
from vehicle_service_api.app.core.exceptions import ServiceError
from vehicle_service_api.app.core.store import InMemoryStore
from vehicle_service_api.app.schemas.booking import BookingCreate, BookingRead
from vehicle_service_api.app.services.booking_service import BookingService


router = APIRouter()


@router.get("", response_model=List[BookingRead])
async def list_bookings(
    upcoming: Optional[str] = Query(None, description="Pass 'true' to list upcoming bookings only"),
    store: InMemoryStore = Depends(get_store),
) -> List[BookingRead]:
    """Return all bookings, or only upcoming ones with ``?upcoming=true``."""
    return await BookingService.list_bookings(store, upcoming=upcoming == "true")


@router.post("", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking: Optional[BookingCreate] = None,
    store: InMemoryStore = Depends(get_store),
) -> BookingRead:
    """Create a booking.

    All fields are required, and ``vehicleId`` must belong to an
    existing vehicle.  Both failures return HTTP 400.
    """
    try:
        return await BookingService.create_booking(store, booking or BookingCreate())
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.patch("/{booking_id}", response_model=BookingRead)
async def update_booking(
    booking_id: str,
    updates: Any = Body(None),
    store: InMemoryStore = Depends(get_store),
) -> BookingRead:
    """Partially update a booking; unspecified fields keep their values."""
    try:
        return await BookingService.update_booking(store, booking_id, updates)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_booking(booking_id: str, store: InMemoryStore = Depends(get_store)) -> Response:
    try:
        await BookingService.delete_booking(store, booking_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
