"""
Donor console: a terminal front end for the Donor Registry API.

It can be used in two ways:

1. Programmatically (as the tests do):
   ```python
   from src.console import DonorConsole, ConsoleState
   console = DonorConsole(donor_client, io)
   await console.load()
   ```

2. Via command line:
   ```bash
   python -m src.console --url http://localhost:8000
   ```
"""

from src.console.console import DonorConsole
from src.console.interaction import ConsoleIO, TerminalIO
from src.console.state import ConsoleState, DonorForm
from src.console.validation import FormValidationError

__all__ = [
    "DonorConsole",
    "ConsoleIO",
    "TerminalIO",
    "ConsoleState",
    "DonorForm",
    "FormValidationError",
]
