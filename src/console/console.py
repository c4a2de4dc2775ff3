"""The donor console: loads, filters, edits and deletes donors through the API."""
import logging
from uuid import UUID

from httpx import HTTPError
from pydantic import ValidationError

from src.client.donor_client import DonorClient
from src.client.schemas import BloodType
from src.console.interaction import ConsoleIO
from src.console.state import ConsoleState
from src.console.validation import FormValidationError
from src.console.view import render_donors, render_filter, render_form, render_stats

logger = logging.getLogger(__name__)

LOAD_FAILED = "❌ Error connecting to server. Make sure the backend is running!"
ADD_FAILED = "❌ Error adding donor!"
UPDATE_FAILED = "❌ Error updating donor!"
DELETE_FAILED = "❌ Error deleting donor!"
ADDED = "✅ Donor added successfully!"
UPDATED = "✅ Donor updated successfully!"
DELETED = "✅ Donor deleted successfully!"

# Failures of a single API call: transport, non-2xx status, or an unexpected payload
API_ERRORS = (HTTPError, ValidationError)


class DonorConsole:
    """
    Console controller over a DonorClient.

    All UI state lives in the ConsoleState passed in. After any successful
    mutation the list and statistics are reloaded from the API instead of
    being patched locally.
    """

    def __init__(self, client: DonorClient, io: ConsoleIO, state: ConsoleState | None = None):
        self.client = client
        self.io = io
        self.state = state or ConsoleState()
        # Form field that failed validation on the last submit, if any
        self.invalid_field: str | None = None

    async def load(self) -> bool:
        """
        Fetch donors for the current filter, render the table, then refresh statistics.

        Returns:
            True if the donor list was fetched
        """
        try:
            donors = await self.client.list_donors(self.state.blood_type_filter)
        except API_ERRORS as e:
            logger.error(f"Error loading donors: {e}")
            self.io.alert(LOAD_FAILED)
            if not self.state.loaded:
                self.state.donors = []
                self.state.loaded = True
                self.io.show(render_donors(self.state))
            return False

        self.state.donors = donors
        self.state.loaded = True
        self.io.show(f"{render_filter(self.state)}\n{render_donors(self.state)}")
        await self.load_stats()
        return True

    async def load_stats(self) -> None:
        """Refresh the statistics cards. A failure leaves the previous cards in place."""
        try:
            self.state.stats = await self.client.get_stats()
        except API_ERRORS as e:
            logger.error(f"Error loading stats: {e}")
            return
        self.io.show(render_stats(self.state.stats))

    async def set_filter(self, blood_type: BloodType | None) -> bool:
        self.state.blood_type_filter = blood_type
        return await self.load()

    def change_contact_type(self, contact_type: str) -> None:
        self.state.form.change_contact_type(contact_type)

    async def submit(self) -> bool:
        """
        Validate the form and send it as an add or an update.

        A validation failure alerts, focuses the offending field and makes no
        network call; the form keeps its contents so the user can fix them.

        Returns:
            True if the API accepted the donor
        """
        form = self.state.form
        self.invalid_field = None
        try:
            if form.is_editing:
                request = form.to_update_request()
            else:
                request = form.to_create_request()
        except FormValidationError as e:
            self.io.alert(f"❌ {e.message}")
            self.invalid_field = e.field
            self.io.focus(e.field)
            return False

        editing_id = form.editing_id
        try:
            if editing_id is not None:
                await self.client.update_donor(editing_id, request)
            else:
                await self.client.create_donor(request)
        except API_ERRORS as e:
            logger.error(f"Error {'updating' if editing_id else 'adding'} donor: {e}")
            self.io.alert(UPDATE_FAILED if editing_id else ADD_FAILED)
            form.reset()
            return False

        form.reset()
        self.io.alert(UPDATED if editing_id else ADDED)
        await self.load()
        return True

    def edit(self, donor_id: UUID) -> bool:
        """Load the donor with this ID into the form in update mode and bring the form into view."""
        donor = self.state.find(donor_id)
        if donor is None:
            self.io.alert(f"❌ Donor {donor_id} is not in the current list")
            return False
        self.state.form.load(donor)
        self.io.scroll_to_form()
        self.io.show(render_form(self.state.form))
        return True

    def cancel(self) -> None:
        """Leave update mode and clear the form."""
        self.state.form.reset()

    async def delete(self, donor_id: UUID) -> bool:
        """
        Delete a donor after the user confirms, naming the donor in the question.

        Returns:
            True if the donor was deleted
        """
        donor = self.state.find(donor_id)
        if donor is None:
            self.io.alert(f"❌ Donor {donor_id} is not in the current list")
            return False
        if not self.io.confirm(f"Are you sure you want to delete {donor.name} ({donor.blood_type.value})?"):
            return False

        try:
            await self.client.delete_donor(donor.id)
        except API_ERRORS as e:
            logger.error(f"Error deleting donor: {e}")
            self.io.alert(DELETE_FAILED)
            return False

        if self.state.form.editing_id == donor.id:
            self.state.form.reset()
        self.io.alert(DELETED)
        await self.load()
        return True
