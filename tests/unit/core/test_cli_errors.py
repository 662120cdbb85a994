"""Unit tests for CLI error formatting and the error handling decorator."""

import click
import pytest
from click.testing import CliRunner

from gitpad.core.errors import GitpadCliError
from gitpad.domain.exceptions import PrivilegeCheckError
from gitpad.entrypoints.cli import handle_cli_errors


class TestGitpadCliError:
    """Tests for GitpadCliError exception class."""

    def test_error_without_hint(self) -> None:
        """Should format message correctly without hint."""
        error = GitpadCliError("Test error message")

        assert error.message == "Test error message"
        assert error.hint is None
        assert error.format_message() == "Test error message"

    def test_error_with_hint(self) -> None:
        """Should format message correctly with hint."""
        error = GitpadCliError("Test error message", hint="Try this instead")

        assert error.format_message() == "Test error message\nHint: Try this instead"

    def test_is_click_exception(self) -> None:
        """Should be a ClickException subclass."""
        assert isinstance(GitpadCliError("Test"), click.ClickException)


def _command_raising(error: BaseException) -> click.Command:
    """Build a command that raises error inside handle_cli_errors."""

    @click.command()
    @click.option("--verbose", is_flag=True)
    @click.pass_context
    @handle_cli_errors("test")
    def command(ctx: click.Context, verbose: bool) -> None:
        ctx.ensure_object(dict)
        ctx.obj["verbose"] = verbose
        raise error

    return command


class TestHandleCliErrors:
    """Tests for the handle_cli_errors decorator."""

    def test_domain_error_becomes_cli_error_with_hint(self) -> None:
        """Should show the domain message and hint, exit code 1."""
        error = PrivilegeCheckError("OpenProcessToken failed", hint="access denied")

        result = CliRunner().invoke(_command_raising(error), [])

        assert result.exit_code == 1
        assert "OpenProcessToken failed" in result.output
        assert "Hint: access denied" in result.output

    def test_os_error_is_reported_as_io_error(self) -> None:
        """Should wrap OSError with a permissions hint."""
        result = CliRunner().invoke(_command_raising(PermissionError("denied")), [])

        assert result.exit_code == 1
        assert "I/O error during test: denied" in result.output

    def test_unexpected_error_suggests_verbose(self) -> None:
        """Should point at --verbose for unexpected errors."""
        result = CliRunner().invoke(_command_raising(TypeError("boom")), [])

        assert result.exit_code == 1
        assert "Unexpected error in test: boom" in result.output
        assert "--verbose" in result.output

    @pytest.mark.parametrize("code", [0, -1, 7])
    def test_exit_codes_pass_through(self, code: int) -> None:
        """Should not touch ctx.exit codes."""
        result = CliRunner().invoke(_command_raising(click.exceptions.Exit(code)), [])

        assert result.exit_code == code
        assert "Error" not in result.output
