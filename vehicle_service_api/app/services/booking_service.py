"""
Business logic for service bookings.

A booking must reference an existing vehicle when it is created.  Later
updates may change ``vehicle_id`` freely; the reference is not checked
again.  The upcoming view is derived on every call from the current
contents of the store.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional

from ..core.exceptions import NotFoundError, ValidationError
from ..core.store import BookingRecord, InMemoryStore
from ..schemas.booking import BookingCreate, BookingRead, BookingUpdate
from .vehicle_service import parse_id


logger = logging.getLogger(__name__)

UPCOMING_STATUSES = frozenset({"Scheduled", "Pending"})


def today_iso() -> str:
    """Current UTC date as ``YYYY-MM-DD``."""
    return datetime.now(timezone.utc).date().isoformat()


def upcoming_bookings(bookings: Iterable[BookingRecord], today: Optional[str] = None) -> List[BookingRecord]:
    """Return bookings dated ``today`` or later that are still open.

    ISO dates sort lexicographically, so plain string comparison is
    enough.  ``today`` defaults to the current UTC date.
    """
    today = today or today_iso()
    return [b for b in bookings if b.service_date >= today and b.status in UPCOMING_STATUSES]


class BookingService:
    """Service for managing vehicle service bookings."""

    @classmethod
    def _get_or_raise(cls, store: InMemoryStore, booking_id: str) -> BookingRecord:
        booking = store.find_booking(parse_id(booking_id))
        if booking is None:
            raise NotFoundError("Booking not found")
        return booking

    @classmethod
    async def list_bookings(cls, store: InMemoryStore, upcoming: bool = False) -> List[BookingRead]:
        """Return all bookings, or only upcoming ones when ``upcoming`` is set."""
        with store.lock:
            bookings = upcoming_bookings(store.bookings) if upcoming else store.bookings
            return [BookingRead.model_validate(b) for b in bookings]

    @classmethod
    async def create_booking(cls, store: InMemoryStore, data: BookingCreate) -> BookingRead:
        """Create a booking for an existing vehicle.

        Raises ``ValidationError`` when a field is missing or empty
        (a ``vehicle_id`` of zero counts as missing) and when
        ``vehicle_id`` does not match any vehicle.
        """
        if not data.vehicle_id or not data.service_date or not data.description or not data.status:
            logger.debug("Rejected booking without required fields: %s", data.model_dump())
            raise ValidationError("All fields are required")
        with store.lock:
            if store.find_vehicle(data.vehicle_id) is None:
                logger.warning("Rejected booking for unknown vehicle %s", data.vehicle_id)
                raise ValidationError("Invalid vehicleId")
            booking = store.add_booking(data.vehicle_id, data.service_date, data.description, data.status)
        logger.info("Created booking %s for vehicle %s on %s", booking.id, booking.vehicle_id, booking.service_date)
        return BookingRead.model_validate(booking)

    @classmethod
    async def update_booking(cls, store: InMemoryStore, booking_id: str, payload: Any) -> BookingRead:
        """Apply the supplied fields to an existing booking.

        ``payload`` is validated only once the booking is known to exist.
        """
        with store.lock:
            booking = cls._get_or_raise(store, booking_id)
            updates = BookingUpdate.from_payload(payload)
            for name, value in updates.provided_fields().items():
                setattr(booking, name, value)
            return BookingRead.model_validate(booking)

    @classmethod
    async def delete_booking(cls, store: InMemoryStore, booking_id: str) -> None:
        with store.lock:
            booking = cls._get_or_raise(store, booking_id)
            store.remove_booking(booking.id)
        logger.info("Deleted booking %s", booking.id)
