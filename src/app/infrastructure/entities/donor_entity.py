from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import CheckConstraint, String, Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from src.client.schemas import BloodType, ContactType
from src.shared.database.database import Base


def _one_of(column: str, values: list[str]) -> str:
    quoted = ", ".join(f"'{value}'" for value in values)
    return f"{column} IN ({quoted})"


class DonorEntity(Base):
    """SQLAlchemy model for Donor table."""
    __tablename__ = "donors"
    __table_args__ = (
        CheckConstraint(_one_of("blood_type", BloodType.values()), name="ck_donors_blood_type"),
        CheckConstraint(_one_of("contact_type", [c.value for c in ContactType]), name="ck_donors_contact_type"),
    )

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(Text)
    blood_type: Mapped[str] = mapped_column(String(3), index=True)
    contact_type: Mapped[str] = mapped_column(String(5))
    contact: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
