"""Pydantic model for the dashboard summary."""

from .base import CamelModel


class SummaryRead(CamelModel):
    total_vehicles: int
    total_bookings: int
    upcoming_services: int
