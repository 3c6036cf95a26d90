"""
Top‑level API router.

Aggregates the domain routers under their collection prefixes.  The
whole router is mounted at ``/api`` by ``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import bookings, summary, vehicles

router = APIRouter()

router.include_router(summary.router, prefix="/summary", tags=["summary"])
router.include_router(vehicles.router, prefix="/vehicles", tags=["vehicles"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
