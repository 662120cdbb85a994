"""Editor adapters for launching the interactive editor.

Provides two implementations of the EditorLauncher port:

- ShellEditorLauncher opens the file with whatever the desktop associates
  with it (ShellExecuteEx on Windows, open on macOS, xdg-open elsewhere).
- CommandEditorLauncher runs an explicit editor with the file as argument
  and is used as the fallback.
"""

import logging
import os
import shlex
import shutil
import subprocess
import sys
from pathlib import Path

from gitpad.domain.exceptions import ProcessLaunchError
from gitpad.ports.editor import LaunchResult, NotWaitable, Waitable

logger = logging.getLogger(__name__)

# Opener commands per platform for non-Windows desktops
OPENER_COMMANDS = {
    "darwin": ["open", "-t"],
    "linux": ["xdg-open"],
}


def default_fallback_editor() -> str:
    """Get the known system text editor used when the default handler fails.

    Returns:
        notepad.exe from the Windows system directory, or vi elsewhere.
    """
    if sys.platform == "win32":
        system_root = os.environ.get("SystemRoot", r"C:\Windows")
        return str(Path(system_root) / "System32" / "notepad.exe")
    return "vi"


def split_command(command: str) -> list[str]:
    """Split an editor command line into program and arguments.

    Windows paths keep their backslashes; surrounding quotes are removed.

    Args:
        command: Command line such as '"C:/Program Files/ed.exe" -n'.

    Returns:
        Argument list, empty if command is blank.
    """
    if sys.platform == "win32":
        return [part.strip('"') for part in shlex.split(command, posix=False)]
    return shlex.split(command)


class CommandEditorLauncher:
    """Launches an explicit editor command on the file.

    The editor is started as a child process, so its exit can always be
    waited on.
    """

    def __init__(self, command: str | list[str] | None = None) -> None:
        """Initialize the launcher.

        Args:
            command: Editor command line or argument list.
                Defaults to default_fallback_editor().

        Raises:
            ProcessLaunchError: If the command is blank.
        """
        if isinstance(command, list):
            self._command = list(command)
        else:
            self._command = split_command(command or default_fallback_editor())
        if not self._command:
            raise ProcessLaunchError("Editor command is empty")

    @property
    def name(self) -> str:
        """Editor program name, e.g. "notepad.exe" or "vi"."""
        return Path(self._command[0]).name

    def launch(self, file_path: Path) -> LaunchResult:
        """Start the editor with file_path as its last argument.

        Args:
            file_path: File to open.

        Returns:
            Waitable wrapping the child process.

        Raises:
            ProcessLaunchError: If the editor is missing or cannot be started.
        """
        program = self._command[0]
        if not shutil.which(program):
            raise ProcessLaunchError(
                f"Editor '{program}' not found",
                hint="Set edit.fallback_editor in the gitpad config.toml",
            )

        cmd = [*self._command, str(file_path)]
        logger.debug("Starting %s", cmd)
        try:
            process = subprocess.Popen(cmd)
        except OSError as e:
            raise ProcessLaunchError(f"Could not start {self.name}: {e}") from e
        return Waitable(handle=process)


class ShellEditorLauncher:
    """Opens the file with the platform's default handler for text files.

    On Windows the process started by the shell is returned when the shell
    hands one back. Editors that pass the file to an instance that is already
    running produce no process, and neither do the macOS and freedesktop
    openers, which return as soon as the file has been handed over.
    """

    def __init__(self, platform: str | None = None) -> None:
        """Initialize the launcher.

        Args:
            platform: sys.platform value to launch for (default: current).
        """
        self._platform = platform or sys.platform

    @property
    def name(self) -> str:
        """Describe the handler being used."""
        return "default text editor"

    def launch(self, file_path: Path) -> LaunchResult:
        """Open file_path with the associated application.

        Args:
            file_path: File to open.

        Returns:
            Waitable if the shell returned a process, NotWaitable otherwise.

        Raises:
            ProcessLaunchError: If no handler could be started.
        """
        if self._platform == "win32":
            return self._launch_windows(file_path)
        return self._launch_opener(file_path)

    def _launch_windows(self, file_path: Path) -> LaunchResult:
        """Launch through ShellExecuteEx."""
        from gitpad.adapters.editor.win32 import shell_execute

        handle = shell_execute(file_path)
        if handle is None:
            logger.debug("ShellExecuteEx returned no process handle")
            return NotWaitable()
        return Waitable(handle=handle)

    def _launch_opener(self, file_path: Path) -> LaunchResult:
        """Hand the file to the desktop opener and wait for the handoff."""
        opener = OPENER_COMMANDS.get(self._platform, OPENER_COMMANDS["linux"])
        cmd = [*opener, str(file_path)]
        logger.debug("Running opener %s", cmd)
        try:
            subprocess.run(cmd, check=True, capture_output=True)
        except FileNotFoundError as e:
            raise ProcessLaunchError(f"Opener '{opener[0]}' not found") from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", errors="replace").strip() if e.stderr else ""
            raise ProcessLaunchError(
                f"{opener[0]} failed with exit code {e.returncode}",
                hint=stderr or None,
            ) from e
        return NotWaitable()
