"""Presentation-level checks run by the console before any network call."""
import re

from src.client.schemas import BloodType, ContactType

NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
PHONE_PATTERN = re.compile(r"^[0-9]{10}$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+@gmail\.com$")

NAME_FIELD = "name"
BLOOD_TYPE_FIELD = "blood_type"
CONTACT_TYPE_FIELD = "contact_type"
CONTACT_FIELD = "contact"


class FormValidationError(ValueError):
    """A form field failed validation; `field` names the input to focus."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


def validate_name(name: str) -> bool:
    return bool(NAME_PATTERN.fullmatch(name))


def validate_phone(phone: str) -> bool:
    return bool(PHONE_PATTERN.fullmatch(phone))


def validate_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email))


def parse_blood_type(value: str) -> BloodType:
    try:
        return BloodType(value.strip().upper())
    except ValueError as e:
        raise FormValidationError(
            BLOOD_TYPE_FIELD, f"Blood type must be one of {', '.join(BloodType.values())}!"
        ) from e


def parse_contact_type(value: str) -> ContactType:
    try:
        return ContactType(value.strip().lower())
    except ValueError as e:
        raise FormValidationError(CONTACT_TYPE_FIELD, "Contact type must be phone or email!") from e


def validate_contact(contact_type: ContactType, contact: str) -> None:
    """
    Check the contact value against the rule for its type.

    Raises:
        FormValidationError: If the value does not match
    """
    if contact_type == ContactType.PHONE and not validate_phone(contact):
        raise FormValidationError(
            CONTACT_FIELD, "Phone number must be exactly 10 digits with only numbers!"
        )
    if contact_type == ContactType.EMAIL and not validate_email(contact):
        raise FormValidationError(CONTACT_FIELD, "Email must end with @gmail.com!")
