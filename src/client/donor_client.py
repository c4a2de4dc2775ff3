"""Donor Registry HTTP Client for consuming the Donor Registry API."""
from uuid import UUID
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    BloodType,
    CreateDonorRequest,
    UpdateDonorRequest,
    DonorResponse,
    DeleteDonorResponse,
    DonorStatsResponse,
)


class DonorClient:
    """HTTP client for interacting with the Donor Registry API."""

    def __init__(
        self,
        base_url: str,
        client: Optional[AsyncClient] = None,
        api_prefix: str = "/api",
        timeout: float = 10.0,
    ):
        """
        Initialize the donor client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
            api_prefix: Path prefix the API routes are mounted under
            timeout: Seconds to wait for each request when the client creates its own AsyncClient
        """
        self.base_url = base_url.rstrip("/")
        self.api_prefix = api_prefix.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url, timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    def _url(self, path: str) -> str:
        return f"{self.api_prefix}{path}"

    async def list_donors(self, blood_type: BloodType | None = None) -> list[DonorResponse]:
        """
        List all donors newest first, or only donors of one blood type.

        Args:
            blood_type: Optional blood type filter

        Returns:
            List of donor responses

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        params = {"bloodType": blood_type.value} if blood_type else None
        response: Response = await self.client.get(self._url("/donors"), params=params)
        response.raise_for_status()
        return [DonorResponse.model_validate(donor) for donor in response.json()]

    async def list_donors_by_blood_type(self, blood_type: BloodType | str) -> list[DonorResponse]:
        """
        List donors of one blood type through the path-style route.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        value = blood_type.value if isinstance(blood_type, BloodType) else blood_type
        response: Response = await self.client.get(self._url(f"/donors/bloodtype/{value}"))
        response.raise_for_status()
        return [DonorResponse.model_validate(donor) for donor in response.json()]

    async def create_donor(self, request: CreateDonorRequest) -> DonorResponse:
        """
        Register a new donor.

        Args:
            request: Donor creation request

        Returns:
            Created donor response

        Raises:
            httpx.HTTPStatusError: If the request fails (400 on validation errors)
        """
        response: Response = await self.client.post(
            self._url("/donors"),
            json=request.model_dump(mode="json", by_alias=True),
        )
        response.raise_for_status()
        return DonorResponse.model_validate(response.json())

    async def update_donor(self, donor_id: UUID, request: UpdateDonorRequest) -> DonorResponse:
        """
        Update a donor with the fields set on the request.

        Args:
            donor_id: UUID of the donor
            request: Full or partial donor data

        Returns:
            Updated donor response

        Raises:
            httpx.HTTPStatusError: If the request fails (404 if not found, 400 if invalid)
        """
        response: Response = await self.client.put(
            self._url(f"/donors/{donor_id}"),
            json=request.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        response.raise_for_status()
        return DonorResponse.model_validate(response.json())

    async def delete_donor(self, donor_id: UUID) -> DeleteDonorResponse:
        """
        Delete a donor.

        Args:
            donor_id: UUID of the donor

        Returns:
            Confirmation message and the deleted donor

        Raises:
            httpx.HTTPStatusError: If the request fails (404 if not found)
        """
        response: Response = await self.client.delete(self._url(f"/donors/{donor_id}"))
        response.raise_for_status()
        return DeleteDonorResponse.model_validate(response.json())

    async def get_stats(self) -> DonorStatsResponse:
        """
        Get the total donor count and the count per blood type.

        Raises:
            httpx.HTTPStatusError: If the request fails
        """
        response: Response = await self.client.get(self._url("/stats"))
        response.raise_for_status()
        return DonorStatsResponse.model_validate(response.json())
