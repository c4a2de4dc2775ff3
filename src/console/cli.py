"""Interactive terminal console for a Donor Registry API instance."""

import argparse
import logging
import asyncio
import sys

from src.console.config import get_console_settings
from src.shared.logging import configure_logging
from src.client import BloodType, DonorClient
from src.console.console import DonorConsole
from src.console.interaction import ConsoleIO, TerminalIO
from src.console.validation import BLOOD_TYPE_FIELD, CONTACT_FIELD, CONTACT_TYPE_FIELD, NAME_FIELD
from src.console.view import render, render_form

HELP = """
Commands:
  list                  Reload donors and statistics
  filter <type|all>     Show only one blood type (A+, A-, B+, B-, AB+, AB-, O+, O-) or all
  add                   Register a new donor
  edit <id>             Edit a donor (any unique prefix of the ID shown in the table)
  delete <id>           Delete a donor
  cancel                Clear the form and leave edit mode
  stats                 Reload statistics
  show                  Redraw the screen
  help                  Show this help
  quit                  Exit
"""


def ask_name(console: DonorConsole, io: ConsoleIO) -> None:
    form = console.state.form
    form.name = io.ask("Name", form.name)


def ask_blood_type(console: DonorConsole, io: ConsoleIO) -> None:
    form = console.state.form
    form.blood_type = io.ask(f"Blood type ({', '.join(BloodType.values())})", form.blood_type)


def ask_contact_type(console: DonorConsole, io: ConsoleIO) -> None:
    form = console.state.form
    contact_type = io.ask("Contact type (phone/email)", form.contact_type)
    if contact_type != form.contact_type:
        console.change_contact_type(contact_type)


def ask_contact(console: DonorConsole, io: ConsoleIO) -> None:
    form = console.state.form
    placeholder, hint = form.contact_hint
    label = f"Contact - {placeholder}" + (f" ({hint})" if hint else "")
    form.contact = io.ask(label, form.contact)


FIELD_PROMPTS = {
    NAME_FIELD: ask_name,
    BLOOD_TYPE_FIELD: ask_blood_type,
    CONTACT_TYPE_FIELD: ask_contact_type,
    CONTACT_FIELD: ask_contact,
}


def fill_form(console: DonorConsole, io: ConsoleIO) -> None:
    """Prompt for every form field, offering the current values as defaults."""
    io.show(render_form(console.state.form))
    for prompt in FIELD_PROMPTS.values():
        prompt(console, io)


async def submit_form(console: DonorConsole, io: ConsoleIO) -> bool:
    """
    Submit the form, re-prompting the offending field after each validation failure.

    Entered values are kept between attempts. End of input abandons the form.

    Returns:
        True if the API accepted the donor
    """
    while True:
        if await console.submit():
            return True
        if console.invalid_field is None:
            return False
        try:
            FIELD_PROMPTS[console.invalid_field](console, io)
        except EOFError:
            console.cancel()
            return False


def parse_filter(argument: str) -> BloodType | None:
    if argument.strip().lower() in ("", "all"):
        return None
    return BloodType(argument.strip().upper())


async def handle_command(console: DonorConsole, io: ConsoleIO, line: str) -> bool:
    """
    Run one console command.

    Returns:
        False when the user asked to quit
    """
    command, _, argument = line.strip().partition(" ")
    command = command.lower()

    if command in ("quit", "exit", "q"):
        return False
    if command == "help":
        io.show(HELP)
    elif command == "list":
        await console.load()
    elif command == "stats":
        await console.load_stats()
    elif command == "show":
        io.show(render(console.state))
    elif command == "filter":
        try:
            blood_type = parse_filter(argument)
        except ValueError:
            io.alert(f"❌ Unknown blood type: {argument.strip()}")
            return True
        await console.set_filter(blood_type)
    elif command == "add":
        console.cancel()
        fill_form(console, io)
        await submit_form(console, io)
    elif command in ("edit", "delete"):
        donor_id = console.state.resolve_id(argument)
        if donor_id is None:
            io.alert(f"❌ No single donor matches '{argument.strip()}'")
            return True
        if command == "delete":
            await console.delete(donor_id)
        elif console.edit(donor_id):
            fill_form(console, io)
            await submit_form(console, io)
    elif command == "cancel":
        console.cancel()
    elif command:
        io.show(f"Unknown command '{command}'. Type 'help' for the list of commands.")
    return True


async def run_console(args: argparse.Namespace, io: ConsoleIO | None = None) -> int:
    """
    Run the interactive console until the user quits.

    Args:
        args: Parsed command-line arguments
        io: Front end to use; defaults to the terminal

    Returns:
        Exit code
    """
    io = io or TerminalIO()
    settings = get_console_settings()
    url = args.url or settings.api_url

    io.show(f"🩸 Blood Donor Console - {url}")
    async with DonorClient(base_url=url, api_prefix=settings.api_prefix, timeout=args.timeout) as client:
        console = DonorConsole(client, io)
        await console.load()
        io.show(HELP)
        while True:
            try:
                line = io.ask(">")
            except EOFError:
                break
            if not await handle_command(console, io, line):
                break
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    settings = get_console_settings()
    parser = argparse.ArgumentParser(
        description="Manage blood donors through a Donor Registry API instance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run against a local API
  python -m src.console --url http://localhost:8000

  # Use CONSOLE__API_URL from the environment or .env
  python -m src.console
        """,
    )

    parser.add_argument(
        "--url",
        default=None,
        help=f"Base URL of the Donor Registry API (default: {settings.api_url})",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=settings.timeout,
        help=f"Seconds to wait for each API call (default: {settings.timeout})",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log failed API calls to the terminal",
    )

    return parser


def main() -> int:
    """Main entry point for the console."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(level=logging.INFO if args.debug else logging.CRITICAL)
    return asyncio.run(run_console(args))


if __name__ == "__main__":
    sys.exit(main())
