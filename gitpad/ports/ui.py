"""User interface port.

Everything gitpad shows the user goes through this port: install prompts,
error notices, progress messages and the manual "done editing" gate.
"""

from typing import Protocol


class UserInterface(Protocol):
    """Protocol for user interaction."""

    def confirm(self, message: str, title: str) -> bool:
        """Ask a yes/no question and block for the answer.

        Returns:
            True if the user answered yes.
        """
        ...

    def show_error(self, message: str, title: str) -> None:
        """Show a blocking error notice."""
        ...

    def info(self, message: str) -> None:
        """Print an informational message to the console."""
        ...

    def report_error(self, message: str) -> None:
        """Print a diagnostic to the error stream."""
        ...

    def wait_for_confirmation(self, message: str) -> None:
        """Print message and block until the user signals completion.

        Raises:
            KeyboardInterrupt: If the user interrupts instead.
        """
        ...
