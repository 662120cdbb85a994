"""Console user interface using click.

Implements the UserInterface port for terminals. Informational output goes
to stdout, diagnostics to stderr.
"""

import click


class ConsoleUserInterface:
    """UserInterface that talks to the terminal."""

    def confirm(self, message: str, title: str) -> bool:
        """Ask a yes/no question on the terminal.

        Returns:
            True if the user answered yes. Defaults to no.
        """
        click.secho(title, bold=True)
        return click.confirm(message, default=False)

    def show_error(self, message: str, title: str) -> None:
        """Print an error notice to stderr."""
        click.secho(f"{title}: {message}", fg="red", err=True)

    def info(self, message: str) -> None:
        """Print an informational message."""
        click.echo(message)

    def report_error(self, message: str) -> None:
        """Print a diagnostic to stderr."""
        click.echo(message, err=True)

    def wait_for_confirmation(self, message: str) -> None:
        """Print message and block until a line is entered.

        Raises:
            EOFError: If the user presses CTRL+C or stdin is closed before a
                line is entered.
        """
        try:
            click.prompt(message, default="", show_default=False, prompt_suffix="\n")
        except click.Abort as e:
            raise EOFError("Confirmation aborted") from e
