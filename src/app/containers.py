"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.database.entity_mapper import EntityMapper

from src.app.infrastructure.mappers.donor_mapper import DonorMapper
from src.app.infrastructure.donor_repository import DonorRepository

from src.app.core.services.donor_service import DonorService

from src.app.core.domain.models import Donor

API_MODULES = [
    "src.app.api.v1.donors",
    "src.app.api.v1.stats",
]


def create_entity_mapper(donor_mapper: DonorMapper) -> EntityMapper:
    """Factory function to create EntityMapper with proper mappings."""
    return EntityMapper(
        entity_mappings={
            Donor: donor_mapper.to_entity,
        }
    )


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(modules=API_MODULES)

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETONS - Stateless Mappers (reusable across all requests)
    # =========================================================================
    donor_mapper = providers.Singleton(DonorMapper)

    entity_mapper = providers.Singleton(
        create_entity_mapper,
        donor_mapper=donor_mapper,
    )

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories (per-request, share database singleton)
    # =========================================================================
    donor_repository = providers.Factory(
        DonorRepository,
        db=database,
        mapper=donor_mapper,
    )

    # =========================================================================
    # FACTORY - Unit of Work (per-request)
    # =========================================================================
    unit_of_work = providers.Factory(
        UnitOfWork,
        db=database,
        entity_mapper=entity_mapper,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    donor_service = providers.Factory(
        DonorService,
        repository=donor_repository,
        unit_of_work=unit_of_work,
    )
