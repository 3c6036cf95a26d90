"""
Service layer for the dashboard summary.

Counts are computed on demand from the store, so they always reflect
the latest creations and deletions.
"""

from ..core.store import InMemoryStore
from ..schemas.summary import SummaryRead
from .booking_service import upcoming_bookings


class SummaryService:
    """Aggregated counts across vehicles and bookings."""

    @classmethod
    async def overview(cls, store: InMemoryStore) -> SummaryRead:
        with store.lock:
            return SummaryRead(
                total_vehicles=len(store.vehicles),
                total_bookings=len(store.bookings),
                upcoming_services=len(upcoming_bookings(store.bookings)),
            )
