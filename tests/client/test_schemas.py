from typing import cast

import pytest
from pydantic import ValidationError

from src.client.schemas import (
    BloodType,
    ContactType,
    CreateDonorRequest,
    UpdateDonorRequest,
    DonorStatsResponse,
)


def test_blood_type_values_in_enumeration_order():
    assert BloodType.values() == ["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]


def test_create_request_accepts_camel_case_payload():
    request = CreateDonorRequest.model_validate({
        "name": "Jane Doe",
        "bloodType": "O-",
        "contactType": "phone",
        "contact": "9876543210",
    })

    assert request.blood_type == BloodType.O_NEGATIVE
    assert request.contact_type == ContactType.PHONE


def test_create_request_serializes_camel_case():
    request = CreateDonorRequest(
        name="Jane Doe", blood_type=BloodType.A_POSITIVE, contact_type=ContactType.EMAIL, contact="jane@gmail.com"
    )

    payload = request.model_dump(mode="json", by_alias=True)

    assert payload == {
        "name": "Jane Doe",
        "bloodType": "A+",
        "contactType": "email",
        "contact": "jane@gmail.com",
    }


def test_create_request_trims_whitespace():
    request = CreateDonorRequest(
        name="  Jane Doe  ", blood_type="B+", contact_type="phone", contact=" 1234567890 "
    )

    assert request.name == "Jane Doe"
    assert request.contact == "1234567890"


def test_create_request_rejects_unknown_blood_type():
    with pytest.raises(ValidationError) as exc_info:
        CreateDonorRequest.model_validate(
            {"name": "Jane", "bloodType": "X+", "contactType": "phone", "contact": "1234567890"}
        )

    errors = cast(ValidationError, exc_info.value).errors()
    assert any(error["loc"] == ("bloodType",) for error in errors)


def test_create_request_rejects_unknown_contact_type():
    with pytest.raises(ValidationError) as exc_info:
        CreateDonorRequest.model_validate(
            {"name": "Jane", "bloodType": "A+", "contactType": "fax", "contact": "1234567890"}
        )

    errors = cast(ValidationError, exc_info.value).errors()
    assert any(error["loc"] == ("contactType",) for error in errors)


@pytest.mark.parametrize("missing", ["name", "bloodType", "contactType", "contact"])
def test_create_request_requires_every_field(missing):
    payload = {"name": "Jane", "bloodType": "A+", "contactType": "phone", "contact": "1234567890"}
    del payload[missing]

    with pytest.raises(ValidationError) as exc_info:
        CreateDonorRequest.model_validate(payload)

    errors = cast(ValidationError, exc_info.value).errors()
    assert any(error["loc"] == (missing,) for error in errors)


def test_create_request_rejects_whitespace_only_name():
    with pytest.raises(ValidationError):
        CreateDonorRequest(name="   ", blood_type="A+", contact_type="phone", contact="1234567890")


def test_update_request_changes_only_include_sent_fields():
    request = UpdateDonorRequest.model_validate({"bloodType": "AB-"})

    assert request.changes() == {"blood_type": BloodType.AB_NEGATIVE}


def test_update_request_ignores_identifier_in_body():
    request = UpdateDonorRequest.model_validate({"id": "not-a-uuid", "name": "New Name"})

    assert request.changes() == {"name": "New Name"}


def test_update_request_rejects_null_for_required_field():
    with pytest.raises(ValidationError) as exc_info:
        UpdateDonorRequest.model_validate({"name": None})

    errors = cast(ValidationError, exc_info.value).errors()
    assert any(error["loc"] == ("name",) for error in errors)


def test_stats_response_parses_wire_format():
    stats = DonorStatsResponse.model_validate({
        "total": 3,
        "bloodTypes": {"A+": 2, "O-": 1},
    })

    assert stats.total == 3
    assert stats.blood_types[BloodType.A_POSITIVE] == 2
    assert stats.blood_types[BloodType.O_NEGATIVE] == 1
