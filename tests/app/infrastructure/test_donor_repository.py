from datetime import datetime, UTC, timedelta
from uuid import uuid4

import pytest
import pytest_asyncio

from src.app.core.domain.models import Donor
from src.app.infrastructure.donor_repository import DonorRepository
from src.app.infrastructure.mappers.donor_mapper import DonorMapper
from src.client.schemas import BloodType, ContactType


@pytest_asyncio.fixture
async def donor_repository(clean_database):
    """Create a donor repository."""
    return DonorRepository(clean_database, DonorMapper())


def make_donor(name: str, blood_type: BloodType, minutes_ago: int = 0) -> Donor:
    created = datetime.now(UTC) - timedelta(minutes=minutes_ago)
    return Donor(
        name=name,
        blood_type=blood_type,
        contact_type=ContactType.PHONE,
        contact="1234567890",
        created_at=created,
        updated_at=created,
    )


@pytest_asyncio.fixture
async def stored_donors(unit_of_work):
    """Three donors of two blood types, created a few minutes apart."""
    donors = [
        make_donor("Oldest", BloodType.A_POSITIVE, minutes_ago=30),
        make_donor("Middle", BloodType.O_NEGATIVE, minutes_ago=20),
        make_donor("Newest", BloodType.A_POSITIVE, minutes_ago=10),
    ]
    async with unit_of_work:
        for donor in donors:
            unit_of_work.add(donor)
    return donors


@pytest.mark.asyncio
async def test_get_by_id(donor_repository, stored_donors):
    """Test retrieving a donor by ID."""
    # Act
    donor = await donor_repository.get_by_id(stored_donors[1].id)

    # Assert
    assert donor is not None
    assert donor.name == "Middle"
    assert donor.blood_type == BloodType.O_NEGATIVE
    assert donor.contact_type == ContactType.PHONE


@pytest.mark.asyncio
async def test_get_by_id_not_found(donor_repository):
    """Test retrieving a non-existent donor by ID returns None."""
    assert await donor_repository.get_by_id(uuid4()) is None


@pytest.mark.asyncio
async def test_get_all_newest_first(donor_repository, stored_donors):
    donors = await donor_repository.get_all()

    assert [d.name for d in donors] == ["Newest", "Middle", "Oldest"]


@pytest.mark.asyncio
async def test_get_by_blood_type_exact_match(donor_repository, stored_donors):
    donors = await donor_repository.get_by_blood_type(BloodType.A_POSITIVE)

    assert [d.name for d in donors] == ["Newest", "Oldest"]
    assert all(d.blood_type == BloodType.A_POSITIVE for d in donors)


@pytest.mark.asyncio
async def test_get_by_blood_type_no_partial_match(donor_repository, stored_donors):
    assert await donor_repository.get_by_blood_type("A") == []
    assert await donor_repository.get_by_blood_type(BloodType.AB_POSITIVE) == []


@pytest.mark.asyncio
async def test_counts(donor_repository, stored_donors):
    assert await donor_repository.count_all() == 3
    assert await donor_repository.count_by_blood_type(BloodType.A_POSITIVE) == 2
    assert await donor_repository.count_by_blood_type(BloodType.O_NEGATIVE) == 1
    assert await donor_repository.count_by_blood_type(BloodType.B_NEGATIVE) == 0


@pytest.mark.asyncio
async def test_counts_on_empty_table(donor_repository):
    assert await donor_repository.count_all() == 0
