"""Domain models used in business logic."""
import uuid
from datetime import datetime, UTC
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.client.schemas import BloodType, ContactType


def utc_now() -> datetime:
    return datetime.now(UTC)


class Donor(BaseModel):
    """Domain model for a blood donor used in business logic."""
    id: UUID = Field(default_factory=uuid.uuid4, description="Unique donor ID")
    name: str = Field(..., min_length=1, description="Name cannot be blank")
    blood_type: BloodType = Field(..., description="One of the eight blood types")
    contact_type: ContactType = Field(..., description="phone or email")
    contact: str = Field(..., min_length=1, description="Contact cannot be blank")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=utc_now, description="Last modification timestamp")

    model_config = {"from_attributes": True, "validate_assignment": True}

    @field_validator("name", "contact")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Trim text fields and reject whitespace-only values."""
        if not v.strip():
            raise ValueError("Field cannot be blank or only whitespace")
        return v.strip()

    def updated(self, changes: dict[str, Any]) -> "Donor":
        """
        Return a copy with the given fields overwritten and updated_at refreshed.

        The identifier and creation timestamp are never overwritten.

        Args:
            changes: Field values keyed by attribute name

        Returns:
            A new, re-validated Donor
        """
        data = self.model_dump()
        data.update({k: v for k, v in changes.items() if k not in ("id", "created_at", "updated_at")})
        data["updated_at"] = utc_now()
        return Donor.model_validate(data)


class DonorStats(BaseModel):
    """Donor counts: the total and one entry per blood type."""
    total: int = Field(..., ge=0)
    blood_types: dict[BloodType, int]
