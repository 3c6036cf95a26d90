"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from vehicle_service_api.app.core.store import InMemoryStore


def get_store(request: Request) -> InMemoryStore:
    """Return the store owned by the running application."""
    return request.app.state.store
