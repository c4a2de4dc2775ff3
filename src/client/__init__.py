"""Client package: the donor wire schemas and an async HTTP client for the API."""
from src.client.schemas import (
    BloodType,
    ContactType,
    CreateDonorRequest,
    UpdateDonorRequest,
    DonorResponse,
    DeleteDonorResponse,
    DonorStatsResponse,
)
from src.client.donor_client import DonorClient

__all__ = [
    "BloodType",
    "ContactType",
    "CreateDonorRequest",
    "UpdateDonorRequest",
    "DonorResponse",
    "DeleteDonorResponse",
    "DonorStatsResponse",
    "DonorClient",
]
