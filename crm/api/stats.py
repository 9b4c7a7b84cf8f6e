"""Dashboard stats endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from crm.api.dependencies import get_stats_service
from crm.schemas.stats import StatsResponse
from crm.services.stats_service import StatsService

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
def get_stats(service: Annotated[StatsService, Depends(get_stats_service)]):
    """Get dashboard counters."""
    return service.get_stats()
