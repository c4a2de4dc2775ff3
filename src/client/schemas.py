"""API schemas for donor requests and responses, shared by the service and the console."""
from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BloodType(str, Enum):
    """The eight ABO/Rh blood types a donor can be registered with."""
    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class ContactType(str, Enum):
    """How a donor can be reached."""
    PHONE = "phone"
    EMAIL = "email"


class _CamelModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _strip_not_blank(v: str) -> str:
    if not v or not v.strip():
        raise ValueError("Field cannot be blank or only whitespace")
    return v.strip()


class CreateDonorRequest(_CamelModel):
    """Request schema for registering a new donor."""
    name: str = Field(..., min_length=1, description="Donor name cannot be blank")
    blood_type: BloodType = Field(..., description="One of the eight blood types")
    contact_type: ContactType = Field(..., description="phone or email")
    contact: str = Field(..., min_length=1, description="Phone number or email address")

    @field_validator("name", "contact")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure text fields are not just whitespace."""
        return _strip_not_blank(v)


class UpdateDonorRequest(_CamelModel):
    """
    Request schema for a full or partial donor update.

    Omitted fields keep their stored value. Sending null for a field is
    rejected because every donor field is required.
    """
    name: str | None = None
    blood_type: BloodType | None = None
    contact_type: ContactType | None = None
    contact: str | None = None

    @field_validator("name", "blood_type", "contact_type", "contact")
    @classmethod
    def validate_not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        if isinstance(v, str) and not isinstance(v, Enum):
            return _strip_not_blank(v)
        return v

    def changes(self) -> dict:
        """Fields explicitly sent by the caller, keyed by python name."""
        return self.model_dump(exclude_unset=True)


class DonorResponse(_CamelModel):
    """Response schema for donor data returned by the API."""
    id: UUID
    name: str
    blood_type: BloodType
    contact_type: ContactType
    contact: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class DeleteDonorResponse(BaseModel):
    """Response schema for a deleted donor, carrying its prior contents."""
    message: str
    donor: DonorResponse


class DonorStatsResponse(_CamelModel):
    """Total donor count and the count per blood type (all eight types present)."""
    total: int = Field(..., ge=0)
    blood_types: dict[BloodType, int]
