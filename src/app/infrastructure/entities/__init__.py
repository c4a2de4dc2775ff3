"""Database entities for the infrastructure layer."""
from src.app.infrastructure.entities.donor_entity import DonorEntity

__all__ = [
    "DonorEntity",
]
