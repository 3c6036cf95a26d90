"""
Vehicle endpoints.

CRUD routes over the vehicle collection.  Deleting a vehicle also
deletes its bookings.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from vehicle_service_api.app.api.deps import get_store
from vehicle_service_api.app.core.exceptions import ServiceError
from vehicle_service_api.app.core.store import InMemoryStore
from vehicle_service_api.app.schemas.vehicle import VehicleCreate, VehicleRead
from vehicle_service_api.app.services.vehicle_service import VehicleService


router = APIRouter()


@router.get("", response_model=List[VehicleRead])
async def list_vehicles(store: InMemoryStore = Depends(get_store)) -> List[VehicleRead]:
    """Return all vehicles in the order they were registered."""
    return await VehicleService.list_vehicles(store)


@router.post("", response_model=VehicleRead, status_code=status.HTTP_201_CREATED)
async def create_vehicle(
    vehicle: Optional[VehicleCreate] = None,
    store: InMemoryStore = Depends(get_store),
) -> VehicleRead:
    """Register a vehicle.

    ``regNumber``, ``model`` and ``owner`` are required and must be
    non‑empty; otherwise HTTP 400 is returned.
    """
    try:
        return await VehicleService.create_vehicle(store, vehicle or VehicleCreate())
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.patch("/{vehicle_id}", response_model=VehicleRead)
async def update_vehicle(
    vehicle_id: str,
    updates: Any = Body(None),
    store: InMemoryStore = Depends(get_store),
) -> VehicleRead:
    """Partially update a vehicle.

    Only keys present in the body are changed.  Returns 404 if the
    vehicle does not exist.
    """
    try:
        return await VehicleService.update_vehicle(store, vehicle_id, updates)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e


@router.delete("/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vehicle(vehicle_id: str, store: InMemoryStore = Depends(get_store)) -> Response:
    """Delete a vehicle and all bookings that reference it."""
    try:
        await VehicleService.delete_vehicle(store, vehicle_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
