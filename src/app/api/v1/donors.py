from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError
from dependency_injector.wiring import Provide, inject

from src.app.containers import Container
from src.app.core.services.donor_service import DonorService
from src.client.schemas import (
    CreateDonorRequest,
    UpdateDonorRequest,
    DonorResponse,
    DeleteDonorResponse,
)
from src.app.api.errors import format_validation_errors
from src.app.api.mappers import to_donor_response, to_delete_response
from src.shared.exceptions import EntityNotFound, StoreFailure
from src.shared.logging import get_logger

router = APIRouter(prefix="/donors", tags=["donors"])
logger = get_logger(__name__)


async def _list(service: DonorService, blood_type: str | None) -> list[DonorResponse]:
    try:
        donors = await service.list_donors(blood_type or None)
    except StoreFailure as e:
        logger.error(f"Failed to list donors: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return [to_donor_response(donor) for donor in donors]


@router.get("", response_model=list[DonorResponse])
@inject
async def list_donors(
    blood_type: str | None = Query(default=None, alias="bloodType"),
    service: DonorService = Depends(Provide[Container.donor_service]),
) -> list[DonorResponse]:
    """
    List donors.

    Without a filter all donors are returned newest first; with bloodType
    only donors of exactly that type are returned.
    """
    return await _list(service, blood_type)


@router.get("/bloodtype/{blood_type}", response_model=list[DonorResponse])
@inject
async def list_donors_by_blood_type(
    blood_type: str,
    service: DonorService = Depends(Provide[Container.donor_service]),
) -> list[DonorResponse]:
    """List donors of one blood type. Unknown types yield an empty list."""
    return await _list(service, blood_type)


@router.post("", response_model=DonorResponse, status_code=status.HTTP_201_CREATED)
@inject
async def create_donor(
    request: CreateDonorRequest,
    service: DonorService = Depends(Provide[Container.donor_service]),
) -> DonorResponse:
    """Register a new donor."""
    try:
        donor = await service.create_donor(request)
        return to_donor_response(donor)
    except ValidationError as e:
        detail = format_validation_errors(e.errors())
        logger.error(f"Failed to create donor due to validation error: {detail}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    except StoreFailure as e:
        logger.error(f"Failed to create donor: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{donor_id}", response_model=DonorResponse)
@inject
async def update_donor(
    donor_id: str,
    request: UpdateDonorRequest,
    service: DonorService = Depends(Provide[Container.donor_service]),
) -> DonorResponse:
    """
    Update a donor with a full or partial record.

    Raises:
        HTTPException 404: If the donor does not exist
        HTTPException 400: If the resulting record is invalid or cannot be stored
    """
    try:
        donor = await service.update_donor(donor_id, request)
        return to_donor_response(donor)
    except EntityNotFound as e:
        logger.error(f"Donor not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        detail = format_validation_errors(e.errors())
        logger.error(f"Failed to update donor due to validation error: {detail}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
    except StoreFailure as e:
        logger.error(f"Failed to update donor: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{donor_id}", response_model=DeleteDonorResponse)
@inject
async def delete_donor(
    donor_id: str,
    service: DonorService = Depends(Provide[Container.donor_service]),
) -> DeleteDonorResponse:
    """Delete a donor, returning its prior contents."""
    try:
        donor = await service.delete_donor(donor_id)
        return to_delete_response(donor)
    except EntityNotFound as e:
        logger.error(f"Donor not found: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StoreFailure as e:
        logger.error(f"Failed to delete donor: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
