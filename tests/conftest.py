"""
Pytest configuration and shared fixtures.

Every test gets its own application, and so its own store seeded with
vehicle 1 (AP01AB1234).
"""

from datetime import datetime, timedelta, timezone
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from vehicle_service_api.app.core.config import Settings
from vehicle_service_api.app.main import create_app


def iso_day(offset: int = 0) -> str:
    """UTC date ``offset`` days from today as ``YYYY-MM-DD``."""
    return (datetime.now(timezone.utc).date() + timedelta(days=offset)).isoformat()


@pytest.fixture
def app():
    return create_app(Settings(seed_demo_data=True))


@pytest.fixture
def store(app):
    return app.state.store


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_booking(client):
    """Create a booking through the API and return its JSON body."""
    def _make(vehicle_id=1, service_date=None, description="Oil change", status="Scheduled"):
        payload = {
            "vehicleId": vehicle_id,
            "serviceDate": service_date or iso_day(7),
            "description": description,
            "status": status,
        }
        response = client.post("/api/bookings", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make
