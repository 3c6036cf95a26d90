"""Summary endpoint: counts of vehicles, bookings and upcoming services."""

from fastapi import APIRouter, Depends

from vehicle_service_api.app.api.deps import get_store
from vehicle_service_api.app.core.store import InMemoryStore
from vehicle_service_api.app.schemas.summary import SummaryRead
from vehicle_service_api.app.services.summary_service import SummaryService


router = APIRouter()


@router.get("", response_model=SummaryRead)
async def get_summary(store: InMemoryStore = Depends(get_store)) -> SummaryRead:
    return await SummaryService.overview(store)
