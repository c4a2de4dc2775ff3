from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Donor
from src.app.infrastructure.entities.donor_entity import DonorEntity
from src.client.schemas import BloodType, ContactType


class DonorMapper(BaseEntityMapper[Donor, DonorEntity]):
    """Mapper for converting between Donor domain model and DonorEntity."""

    @staticmethod
    def to_entity(model_instance: Donor) -> DonorEntity:
        """Convert a Donor (domain model) to DonorEntity (database entity)."""
        return DonorEntity(
            id=model_instance.id,
            name=model_instance.name,
            blood_type=model_instance.blood_type.value,
            contact_type=model_instance.contact_type.value,
            contact=model_instance.contact,
            created_at=model_instance.created_at,
            updated_at=model_instance.updated_at,
        )

    @staticmethod
    def to_model(entity: DonorEntity) -> Donor:
        """Convert a DonorEntity (database entity) to Donor (domain model)."""
        return Donor(
            id=entity.id,
            name=entity.name,
            blood_type=BloodType(entity.blood_type),
            contact_type=ContactType(entity.contact_type),
            contact=entity.contact,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
