"""User interaction seam for the console: alerts, confirmations, focus and output."""
import abc


class ConsoleIO(abc.ABC):
    """What the console needs from its front end."""

    @abc.abstractmethod
    def show(self, text: str) -> None:
        """Display rendered output."""

    @abc.abstractmethod
    def alert(self, message: str) -> None:
        """Display a blocking message the user must acknowledge."""

    @abc.abstractmethod
    def confirm(self, message: str) -> bool:
        """Ask a yes/no question."""

    @abc.abstractmethod
    def ask(self, label: str, default: str = "") -> str:
        """Read one form value."""

    def focus(self, field: str) -> None:
        """Move input focus to a form field."""

    def scroll_to_form(self) -> None:
        """Bring the form into view."""


class TerminalIO(ConsoleIO):
    """ConsoleIO over stdin/stdout."""

    def __init__(self, input_fn=input, output_fn=print):
        self._input = input_fn
        self._output = output_fn

    def show(self, text: str) -> None:
        self._output(text)

    def alert(self, message: str) -> None:
        self._output(f"\n{message}")

    def confirm(self, message: str) -> bool:
        answer = self._input(f"{message} [y/N] ")
        return answer.strip().lower() in ("y", "yes")

    def ask(self, label: str, default: str = "") -> str:
        suffix = f" [{default}]" if default else ""
        value = self._input(f"{label}{suffix}: ")
        return value if value.strip() else default

    def focus(self, field: str) -> None:
        self._output(f"-> Re-enter {field.replace('_', ' ')}")

    def scroll_to_form(self) -> None:
        self._output("")
