"""Fakes and factories for console tests."""
from datetime import datetime, UTC
from uuid import uuid4

import pytest

from src.client.schemas import BloodType, ContactType, DonorResponse, DonorStatsResponse
from src.console.interaction import ConsoleIO


class RecordingIO(ConsoleIO):
    """ConsoleIO that records everything and answers from a script."""

    def __init__(self, confirm_answer: bool = True, answers: list[str] | None = None):
        self.confirm_answer = confirm_answer
        self.answers = list(answers or [])
        self.shown: list[str] = []
        self.alerts: list[str] = []
        self.confirmations: list[str] = []
        self.focused: list[str] = []
        self.scrolled = 0

    def show(self, text: str) -> None:
        self.shown.append(text)

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        return self.confirm_answer

    def ask(self, label: str, default: str = "") -> str:
        if not self.answers:
            raise EOFError
        answer = self.answers.pop(0)
        return answer if answer else default

    def focus(self, field: str) -> None:
        self.focused.append(field)

    def scroll_to_form(self) -> None:
        self.scrolled += 1


def donor_response(name: str = "Jane Doe", blood_type: BloodType = BloodType.O_NEGATIVE,
                   contact_type: ContactType = ContactType.PHONE, contact: str = "9876543210") -> DonorResponse:
    now = datetime.now(UTC)
    return DonorResponse(
        id=uuid4(),
        name=name,
        blood_type=blood_type,
        contact_type=contact_type,
        contact=contact,
        created_at=now,
        updated_at=now,
    )


def stats_response(**counts: int) -> DonorStatsResponse:
    blood_types = {bt: 0 for bt in BloodType}
    for value, count in counts.items():
        blood_types[BloodType(value)] = count
    return DonorStatsResponse(total=sum(blood_types.values()), blood_types=blood_types)


@pytest.fixture
def recording_io():
    return RecordingIO()


@pytest.fixture
def make_donor():
    """Factory for DonorResponse objects as returned by the API."""
    return donor_response


@pytest.fixture
def make_stats():
    """Factory for DonorStatsResponse objects, e.g. make_stats(**{"O-": 2})."""
    return stats_response
