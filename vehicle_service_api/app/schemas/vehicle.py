"""
Pydantic models for vehicles.

Creation fields are optional at the schema level: presence and
non‑emptiness are checked by ``VehicleService`` so that a missing
field produces the API's own 400 response rather than a schema error.
"""

from typing import Optional

from pydantic import Field

from .base import CamelModel, PartialUpdate, RequestModel


class VehicleCreate(RequestModel):
    """Schema for registering a vehicle."""

    reg_number: Optional[str] = Field(None, examples=["AP01AB1234"])
    model: Optional[str] = Field(None, examples=["Swift"])
    owner: Optional[str] = Field(None, examples=["Reddy"])


class VehicleUpdate(PartialUpdate):
    """Schema for updating a vehicle.

    All fields are optional; only provided fields will be updated.
    """

    reg_number: Optional[str] = None
    model: Optional[str] = None
    owner: Optional[str] = None


class VehicleRead(CamelModel):
    id: int
    reg_number: str
    model: str
    owner: str
