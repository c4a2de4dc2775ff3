from fastapi import APIRouter, Depends, HTTPException, status
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.donor_service import DonorService
from src.client.schemas import DonorStatsResponse
from src.app.api.mappers import to_stats_response
from src.shared.exceptions import StoreFailure
from src.shared.logging import get_logger

router = APIRouter(prefix="/stats", tags=["stats"])
logger = get_logger(__name__)


@router.get("", response_model=DonorStatsResponse)
@inject
async def get_stats(
    service: DonorService = Depends(Provide[Container.donor_service]),
) -> DonorStatsResponse:
    """Total donor count and the count for each of the eight blood types."""
    try:
        stats = await service.get_stats()
    except StoreFailure as e:
        logger.error(f"Failed to compute donor statistics: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return to_stats_response(stats)
