"""
Pydantic models for service bookings.

``service_date`` is kept as an ISO ``YYYY-MM-DD`` string; the upcoming
filter compares it lexicographically with today's date.  ``status`` is
free text.  Only ``Scheduled`` and ``Pending`` have a meaning, and only
for the upcoming filter.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel, PartialUpdate, RequestModel


class BookingCreate(RequestModel):
    """Schema for creating a booking.

    ``vehicle_id`` accepts integers and numeric strings.  Zero counts
    as missing.
    """

    vehicle_id: Optional[int] = Field(None, examples=[1])
    service_date: Optional[str] = Field(None, examples=["2025-09-01"])
    description: Optional[str] = Field(None, examples=["Oil change"])
    status: Optional[str] = Field(None, examples=["Scheduled"])


class BookingUpdate(PartialUpdate):
    """Schema for updating a booking.

    A changed ``vehicle_id`` is stored as given; it is not checked
    against the vehicle collection.
    """

    vehicle_id: Optional[int] = None
    service_date: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class BookingRead(CamelModel):
    id: int
    vehicle_id: int
    service_date: str
    description: str
    status: str
