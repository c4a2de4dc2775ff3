"""Console UI state: the last fetched donors and statistics, the filter and the shared form."""
from dataclasses import dataclass, field
from uuid import UUID

from src.client.schemas import (
    BloodType,
    ContactType,
    CreateDonorRequest,
    DonorResponse,
    DonorStatsResponse,
    UpdateDonorRequest,
)
from src.console.validation import (
    NAME_FIELD,
    FormValidationError,
    parse_blood_type,
    parse_contact_type,
    validate_contact,
    validate_name,
)

ADD_TITLE = "Add New Donor"
ADD_LABEL = "Add Donor"
EDIT_TITLE = "Edit Donor"
EDIT_LABEL = "Update Donor"

CONTACT_HINTS = {
    ContactType.PHONE: ("Enter 10-digit phone number", "Only numbers allowed (e.g., 1234567890)"),
    ContactType.EMAIL: ("Enter email ending with @gmail.com", "Must end with @gmail.com"),
}
DEFAULT_CONTACT_HINT = ("Enter phone or email", "")


@dataclass
class DonorForm:
    """The single form used both to add a donor and to edit one."""
    name: str = ""
    blood_type: str = ""
    contact_type: str = ""
    contact: str = ""
    editing_id: UUID | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def title(self) -> str:
        return EDIT_TITLE if self.is_editing else ADD_TITLE

    @property
    def submit_label(self) -> str:
        return EDIT_LABEL if self.is_editing else ADD_LABEL

    @property
    def contact_hint(self) -> tuple[str, str]:
        """(placeholder, hint) for the contact input given the selected contact type."""
        try:
            return CONTACT_HINTS[ContactType(self.contact_type)]
        except ValueError:
            return DEFAULT_CONTACT_HINT

    def change_contact_type(self, contact_type: str) -> None:
        """Select a contact type; the contact value is cleared as its format changes."""
        self.contact_type = contact_type
        self.contact = ""

    def load(self, donor: DonorResponse) -> None:
        """Populate the form from a donor and switch it into update mode for that donor."""
        self.name = donor.name
        self.blood_type = donor.blood_type.value
        self.change_contact_type(donor.contact_type.value)
        self.contact = donor.contact
        self.editing_id = donor.id

    def reset(self) -> None:
        self.name = ""
        self.blood_type = ""
        self.contact_type = ""
        self.contact = ""
        self.editing_id = None

    def validated(self) -> tuple[str, BloodType, ContactType, str]:
        """
        Run the console checks in field order.

        Returns:
            Trimmed name, blood type, contact type and trimmed contact

        Raises:
            FormValidationError: On the first field that fails
        """
        name = self.name.strip()
        contact = self.contact.strip()
        if not validate_name(name):
            raise FormValidationError(NAME_FIELD, "Name should only contain letters and spaces!")
        blood_type = parse_blood_type(self.blood_type)
        contact_type = parse_contact_type(self.contact_type)
        validate_contact(contact_type, contact)
        return name, blood_type, contact_type, contact

    def to_create_request(self) -> CreateDonorRequest:
        name, blood_type, contact_type, contact = self.validated()
        return CreateDonorRequest(
            name=name, blood_type=blood_type, contact_type=contact_type, contact=contact
        )

    def to_update_request(self) -> UpdateDonorRequest:
        name, blood_type, contact_type, contact = self.validated()
        return UpdateDonorRequest(
            name=name, blood_type=blood_type, contact_type=contact_type, contact=contact
        )


@dataclass
class ConsoleState:
    """Everything the console renders from; replaced wholesale on every load."""
    donors: list[DonorResponse] = field(default_factory=list)
    stats: DonorStatsResponse | None = None
    blood_type_filter: BloodType | None = None
    form: DonorForm = field(default_factory=DonorForm)
    loaded: bool = False

    def find(self, donor_id: UUID) -> DonorResponse | None:
        return next((donor for donor in self.donors if donor.id == donor_id), None)

    def resolve_id(self, token: str) -> UUID | None:
        """
        Resolve a full identifier or a unique identifier prefix among the displayed donors.

        Returns:
            The matching donor ID, or None when nothing or more than one donor matches
        """
        token = token.strip().lower()
        if not token:
            return None
        matches = [donor.id for donor in self.donors if str(donor.id).startswith(token)]
        return matches[0] if len(matches) == 1 else None
