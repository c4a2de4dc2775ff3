"""Text rendering of the donor table, the statistics cards and the form."""
from src.client.schemas import BloodType, DonorStatsResponse
from src.console.state import ConsoleState, DonorForm

NO_DONORS = "No donors added yet"
ID_WIDTH = 8
NAME_WIDTH = 30


def _fit(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 3] + "..."


def render_donors(state: ConsoleState) -> str:
    """
    Render the donor table from the in-memory list.

    Rows show the identifier prefix accepted by the edit and delete commands.
    """
    if not state.donors:
        return NO_DONORS

    header = f"{'ID':<{ID_WIDTH}} | {'Name':<{NAME_WIDTH}} | {'Blood':<5} | Contact"
    lines = [header, "-" * len(header)]
    for donor in state.donors:
        lines.append(
            f"{str(donor.id)[:ID_WIDTH]:<{ID_WIDTH}} | "
            f"{_fit(donor.name, NAME_WIDTH):<{NAME_WIDTH}} | "
            f"{donor.blood_type.value:<5} | "
            f"{donor.contact}"
        )
    return "\n".join(lines)


def render_stats(stats: DonorStatsResponse | None) -> str:
    """Render a "Total Donors" card plus one card per blood type with donors."""
    total = stats.total if stats else 0
    cards = [f"[{total}] Total Donors"]
    if stats:
        for blood_type in BloodType:
            count = stats.blood_types.get(blood_type, 0)
            if count > 0:
                cards.append(f"[{count}] {blood_type.value}")
    return "  ".join(cards)


def render_filter(state: ConsoleState) -> str:
    label = state.blood_type_filter.value if state.blood_type_filter else "All blood types"
    return f"Showing: {label}"


def render_form(form: DonorForm) -> str:
    placeholder, hint = form.contact_hint
    lines = [
        f"== {form.title} ==",
        f"  Name:         {form.name}",
        f"  Blood type:   {form.blood_type}",
        f"  Contact type: {form.contact_type}",
        f"  Contact:      {form.contact or placeholder}",
    ]
    if hint:
        lines.append(f"                ({hint})")
    return "\n".join(lines)


def render(state: ConsoleState) -> str:
    """Render the whole console screen: statistics, filter and table."""
    return "\n\n".join([render_stats(state.stats), render_filter(state), render_donors(state)])
