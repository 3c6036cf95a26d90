"""
Business logic for vehicles.

Deleting a vehicle cascades to its bookings.  Path identifiers arrive
as raw strings; anything that is not an integer simply matches no
vehicle.
"""

import logging
from typing import Any, List, Optional

from ..core.exceptions import NotFoundError, ValidationError
from ..core.store import InMemoryStore, VehicleRecord
from ..schemas.vehicle import VehicleCreate, VehicleRead, VehicleUpdate


logger = logging.getLogger(__name__)


def parse_id(raw: str) -> Optional[int]:
    """Convert a path segment to an id, or ``None`` if it is not numeric."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


class VehicleService:
    """Service for registering, editing and removing vehicles."""

    @classmethod
    def _get_or_raise(cls, store: InMemoryStore, vehicle_id: str) -> VehicleRecord:
        vehicle = store.find_vehicle(parse_id(vehicle_id))
        if vehicle is None:
            raise NotFoundError("Vehicle not found")
        return vehicle

    @classmethod
    async def list_vehicles(cls, store: InMemoryStore) -> List[VehicleRead]:
        """Return every vehicle in insertion order."""
        with store.lock:
            return [VehicleRead.model_validate(v) for v in store.vehicles]

    @classmethod
    async def create_vehicle(cls, store: InMemoryStore, data: VehicleCreate) -> VehicleRead:
        """Register a vehicle and return it with its new id.

        ``reg_number``, ``model`` and ``owner`` must all be non‑empty,
        otherwise ``ValidationError`` is raised and nothing is stored.
        """
        if not data.reg_number or not data.model or not data.owner:
            logger.debug("Rejected vehicle without required fields: %s", data.model_dump())
            raise ValidationError("All fields are required")
        vehicle = store.add_vehicle(data.reg_number, data.model, data.owner)
        logger.info("Created vehicle %s (%s)", vehicle.id, vehicle.reg_number)
        return VehicleRead.model_validate(vehicle)

    @classmethod
    async def update_vehicle(cls, store: InMemoryStore, vehicle_id: str, payload: Any) -> VehicleRead:
        """Apply the supplied fields to an existing vehicle.

        The vehicle is looked up before ``payload`` is validated, so an
        unknown id is reported as not found whatever the body holds.
        """
        with store.lock:
            vehicle = cls._get_or_raise(store, vehicle_id)
            updates = VehicleUpdate.from_payload(payload)
            for name, value in updates.provided_fields().items():
                setattr(vehicle, name, value)
            return VehicleRead.model_validate(vehicle)

    @classmethod
    async def delete_vehicle(cls, store: InMemoryStore, vehicle_id: str) -> None:
        """Delete a vehicle together with all of its bookings."""
        with store.lock:
            vehicle = cls._get_or_raise(store, vehicle_id)
            removed = store.remove_vehicle(vehicle.id)
        logger.info("Deleted vehicle %s and %d booking(s)", vehicle.id, removed)
