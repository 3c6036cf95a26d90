"""
Process‑local storage for vehicles and bookings.

``InMemoryStore`` owns both collections and their id counters.  One
instance is created per application and reached through
``app.state.store``; there is no module‑level state.  Ids are taken
from monotonic counters and never reused, even after deletion.

All reads and writes of the collections must happen while holding
``store.lock`` so that each service operation is atomic when the
server runs handlers on several threads.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class VehicleRecord:
    id: int
    reg_number: str
    model: str
    owner: str


@dataclass
class BookingRecord:
    id: int
    vehicle_id: int
    service_date: str
    description: str
    status: str


@dataclass
class InMemoryStore:
    """The two tables plus their counters, guarded by a single lock."""

    vehicles: List[VehicleRecord] = field(default_factory=list)
    bookings: List[BookingRecord] = field(default_factory=list)
    next_vehicle_id: int = 1
    next_booking_id: int = 1
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    @classmethod
    def create(cls, seed_demo_data: bool = True) -> "InMemoryStore":
        """Return a new store, optionally holding the demo vehicle."""
        store = cls()
        if seed_demo_data:
            store.add_vehicle("AP01AB1234", "Swift", "Reddy")
        return store

    def add_vehicle(self, reg_number: str, model: str, owner: str) -> VehicleRecord:
        with self.lock:
            vehicle = VehicleRecord(self.next_vehicle_id, reg_number, model, owner)
            self.next_vehicle_id += 1
            self.vehicles.append(vehicle)
            return vehicle

    def add_booking(self, vehicle_id: int, service_date: str, description: str, status: str) -> BookingRecord:
        with self.lock:
            booking = BookingRecord(self.next_booking_id, vehicle_id, service_date, description, status)
            self.next_booking_id += 1
            self.bookings.append(booking)
            return booking

    def find_vehicle(self, vehicle_id: Optional[int]) -> Optional[VehicleRecord]:
        with self.lock:
            return next((v for v in self.vehicles if v.id == vehicle_id), None)

    def find_booking(self, booking_id: Optional[int]) -> Optional[BookingRecord]:
        with self.lock:
            return next((b for b in self.bookings if b.id == booking_id), None)

    def remove_vehicle(self, vehicle_id: int) -> int:
        """Remove a vehicle and every booking that references it.

        Returns the number of bookings removed by the cascade.
        """
        with self.lock:
            self.vehicles = [v for v in self.vehicles if v.id != vehicle_id]
            remaining = [b for b in self.bookings if b.vehicle_id != vehicle_id]
            removed = len(self.bookings) - len(remaining)
            self.bookings = remaining
            return removed

    def remove_booking(self, booking_id: int) -> None:
        with self.lock:
            self.bookings = [b for b in self.bookings if b.id != booking_id]
