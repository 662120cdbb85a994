"""GitPad CLI entrypoint.

Command-line interface for gitpad. Started with a file, it edits that file in
the default text editor; started without one, it installs itself as the
user's EDITOR.
"""

from __future__ import annotations

import functools
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from gitpad.core.errors import GitpadCliError
from gitpad.domain.exceptions import GitpadDomainError
from gitpad.version import __version__

if TYPE_CHECKING:
    from gitpad.domain.config import GitpadConfig
    from gitpad.ports.config import ConfigProvider

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    Exit codes produced with ctx.exit() pass through untouched. Domain and
    I/O errors that escape a use case are turned into GitpadCliError, with a
    traceback in verbose mode.

    Args:
        command_name: Name of the command for error messages.

    Returns:
        Decorated function with error handling.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (click.exceptions.Exit, click.Abort, GitpadCliError):
                raise
            except GitpadDomainError as e:
                raise GitpadCliError(e.message, hint=e.hint) from e
            except OSError as e:
                raise GitpadCliError(
                    f"I/O error during {command_name}: {e}",
                    hint="Check file permissions and disk space",
                ) from e
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise GitpadCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr: warnings by default, everything when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def _load_config(provider: ConfigProvider | None = None) -> GitpadConfig:
    """Load the user configuration.

    Args:
        provider: Where to load from (default: TomlConfigProvider).

    Returns:
        GitpadConfig with file settings merged over defaults.
    """
    if provider is None:
        from gitpad.adapters.config.toml_config_provider import TomlConfigProvider

        provider = TomlConfigProvider()
    return provider.load()


@click.command()
@click.version_option(version=__version__, prog_name="gitpad")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging on stderr.",
)
@click.argument("path", type=click.Path(path_type=Path), required=False, default=None)
@click.pass_context
@handle_cli_errors("gitpad")
def cli(ctx: click.Context, verbose: bool, path: Path | None) -> None:
    """GitPad - edit commit messages in your default text editor.

    With PATH, open PATH in the default editor and write it back with POSIX
    line endings once editing is done. Without PATH, install gitpad as your
    EDITOR.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)

    from gitpad.adapters.factory import UseCaseFactory
    from gitpad.shared.config_io import get_global_config_path

    factory = UseCaseFactory(_load_config())

    if path is None:
        exit_code = factory.create_install_usecase(
            config_path=get_global_config_path()
        ).run()
    else:
        exit_code = factory.create_edit_usecase().run(path)

    ctx.exit(exit_code)


def main() -> int:
    """Main entrypoint for the CLI."""
    try:
        cli(obj={})
        return 0
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
