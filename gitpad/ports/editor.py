"""Editor port interface for launching the interactive editor.

Launching an editor either yields a handle whose exit can be waited on or,
when the editor hands the file to an already running instance, nothing to
wait on at all. The two outcomes are modelled as a small sum type so callers
have to handle both.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


class ProcessHandle(Protocol):
    """A launched editor process whose exit can be observed."""

    def wait(self) -> int:
        """Block until the process exits.

        Returns:
            The process exit status.
        """
        ...


@dataclass(frozen=True)
class Waitable:
    """Launch produced a process handle that can be waited on."""

    handle: ProcessHandle


@dataclass(frozen=True)
class NotWaitable:
    """Launch succeeded but produced no process to wait on."""

    pass


LaunchResult = Waitable | NotWaitable


class EditorLauncher(Protocol):
    """Protocol for starting an editor on a file without blocking."""

    @property
    def name(self) -> str:
        """Human readable editor name for console messages."""
        ...

    def launch(self, file_path: Path) -> LaunchResult:
        """Start the editor on file_path.

        Args:
            file_path: File to open.

        Returns:
            Waitable with a process handle, or NotWaitable.

        Raises:
            ProcessLaunchError: If the editor could not be started.
        """
        ...
