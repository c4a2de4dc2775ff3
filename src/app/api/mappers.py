"""Mappers for converting between domain models and API schemas."""
from src.app.core.domain.models import Donor, DonorStats
from src.client.schemas import (
    DeleteDonorResponse,
    DonorResponse,
    DonorStatsResponse,
)

DONOR_DELETED_MESSAGE = "Donor deleted successfully"


def to_donor_response(donor: Donor) -> DonorResponse:
    """
    Convert a Donor domain model to DonorResponse API schema.

    Args:
        donor: Domain model

    Returns:
        API response schema
    """
    return DonorResponse(
        id=donor.id,
        name=donor.name,
        blood_type=donor.blood_type,
        contact_type=donor.contact_type,
        contact=donor.contact,
        created_at=donor.created_at,
        updated_at=donor.updated_at,
    )


def to_delete_response(donor: Donor) -> DeleteDonorResponse:
    """Wrap the prior contents of a deleted donor with a confirmation message."""
    return DeleteDonorResponse(
        message=DONOR_DELETED_MESSAGE,
        donor=to_donor_response(donor),
    )


def to_stats_response(stats: DonorStats) -> DonorStatsResponse:
    """Convert DonorStats to the API schema, keeping blood types in enumeration order."""
    return DonorStatsResponse(
        total=stats.total,
        blood_types=dict(stats.blood_types),
    )
