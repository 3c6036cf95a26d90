"""
Endpoint subpackage.

Each module defines an APIRouter for one domain (vehicles, bookings,
summary).  The routers are aggregated in ``api/router.py``.
"""
