"""Donor service: registration, listing, update, removal and statistics."""
import logging
from uuid import UUID

from src.app.core.domain.models import Donor, DonorStats, utc_now
from src.app.infrastructure.donor_repository import DonorRepository
from src.client.schemas import BloodType, CreateDonorRequest, UpdateDonorRequest
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.exceptions import EntityNotFound

logger = logging.getLogger(__name__)


def parse_donor_id(raw_id: UUID | str) -> UUID:
    """
    Parse a donor identifier taken from a URL.

    A malformed identifier cannot name any donor, so it is reported as not found.
    """
    if isinstance(raw_id, UUID):
        return raw_id
    try:
        return UUID(raw_id)
    except (TypeError, ValueError) as e:
        raise EntityNotFound("Donor", raw_id) from e


class DonorService:
    """Service for handling Donor business logic."""

    def __init__(self, repository: DonorRepository, unit_of_work: UnitOfWork):
        self.repository = repository
        self.unit_of_work = unit_of_work

    async def list_donors(self, blood_type: BloodType | str | None = None) -> list[Donor]:
        """List all donors newest first, or only those of one blood type."""
        if blood_type is None:
            return await self.repository.get_all()
        return await self.repository.get_by_blood_type(blood_type)

    async def create_donor(self, request: CreateDonorRequest) -> Donor:
        """Register a new donor with a fresh identifier and timestamps."""
        now = utc_now()
        donor = Donor(
            name=request.name,
            blood_type=request.blood_type,
            contact_type=request.contact_type,
            contact=request.contact,
            created_at=now,
            updated_at=now,
        )

        async with self.unit_of_work:
            self.unit_of_work.add(donor)

        logger.info("Registered donor %s (%s)", donor.id, donor.blood_type.value)
        return donor

    async def get_donor(self, donor_id: UUID | str) -> Donor:
        """Get a donor by ID."""
        parsed_id = parse_donor_id(donor_id)
        donor = await self.repository.get_by_id(parsed_id)
        if not donor:
            raise EntityNotFound("Donor", parsed_id)
        return donor

    async def update_donor(self, donor_id: UUID | str, request: UpdateDonorRequest) -> Donor:
        """
        Overwrite the fields present in the request.

        Args:
            donor_id: ID of the donor to update
            request: Full or partial donor data

        Returns:
            The donor as stored after the update

        Raises:
            EntityNotFound: If no donor has this ID
            pydantic.ValidationError: If the merged record is invalid
        """
        donor = await self.get_donor(donor_id)
        updated = donor.updated(request.changes())

        async with self.unit_of_work:
            await self.unit_of_work.update(updated)

        logger.info("Updated donor %s", updated.id)
        return updated

    async def delete_donor(self, donor_id: UUID | str) -> Donor:
        """Delete a donor and return its prior contents."""
        donor = await self.get_donor(donor_id)

        async with self.unit_of_work:
            await self.unit_of_work.delete(donor)

        logger.info("Deleted donor %s", donor.id)
        return donor

    async def get_stats(self) -> DonorStats:
        """
        Count donors in total and per blood type.

        Each count is an independent query, so under concurrent writes the
        total and the per-type sum may briefly disagree.
        """
        total = await self.repository.count_all()
        per_type = {}
        for blood_type in BloodType:
            per_type[blood_type] = await self.repository.count_by_blood_type(blood_type)
        return DonorStats(total=total, blood_types=per_type)
