from uuid import UUID
from typing import Optional
from sqlalchemy import select, func

from src.app.core.domain.models import Donor
from src.client.schemas import BloodType
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database

from src.app.infrastructure.entities.donor_entity import DonorEntity
from src.app.infrastructure.mappers.donor_mapper import DonorMapper


class DonorRepository(BaseRepository[DonorEntity, Donor]):
    """Repository for Donor read operations. Writes go through the UnitOfWork."""

    def __init__(self, db: Database, mapper: DonorMapper):
        super().__init__(db, mapper)

    async def get_by_id(self, donor_id: UUID) -> Optional[Donor]:
        """Get a donor by ID."""
        return await self.find_one(
            select(DonorEntity).where(DonorEntity.id == donor_id)
        )

    async def get_all(self) -> list[Donor]:
        """Get every donor, newest first."""
        return await self.find_all(
            select(DonorEntity).order_by(DonorEntity.created_at.desc(), DonorEntity.id)
        )

    async def get_by_blood_type(self, blood_type: BloodType | str) -> list[Donor]:
        """
        Get donors whose blood type equals the given value exactly, newest first.

        A value outside the BloodType enumeration matches nothing.
        """
        value = blood_type.value if isinstance(blood_type, BloodType) else blood_type
        return await self.find_all(
            select(DonorEntity)
            .where(DonorEntity.blood_type == value)
            .order_by(DonorEntity.created_at.desc(), DonorEntity.id)
        )

    async def count_all(self) -> int:
        """Count every donor."""
        return await self.count(select(func.count()).select_from(DonorEntity))

    async def count_by_blood_type(self, blood_type: BloodType) -> int:
        """Count donors of a single blood type."""
        return await self.count(
            select(func.count())
            .select_from(DonorEntity)
            .where(DonorEntity.blood_type == blood_type.value)
        )
