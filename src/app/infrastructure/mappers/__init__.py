"""Infrastructure mappers for converting between domain models and database entities."""
from src.app.infrastructure.mappers.donor_mapper import DonorMapper

__all__ = [
    "DonorMapper",
]
