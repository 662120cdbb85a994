"""File System port interface.

Defines abstract interface for file system operations.
Enables testing with in-memory or failing file systems.
"""

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Protocol for file system operations."""

    def read(self, path: Path) -> bytes:
        """Read file contents.

        Args:
            path: Path to file.

        Returns:
            File contents as bytes.

        Raises:
            FileNotFoundError: If file doesn't exist.
        """
        ...

    def write(self, path: Path, content: bytes) -> None:
        """Replace file contents, truncating any previous content.

        Args:
            path: Path to file.
            content: Content to write.

        Raises:
            OSError: If write fails.
        """
        ...

    def create_transient(self, directory: Path | None, prefix: str, suffix: str) -> Path:
        """Create a new, empty, uniquely named file.

        Args:
            directory: Directory to create it in, None for the system temp dir.
            prefix: File name prefix.
            suffix: File name suffix.

        Returns:
            Path of the created file.

        Raises:
            OSError: If the file cannot be created.
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def delete(self, path: Path) -> None:
        """Delete a file.

        Args:
            path: File to delete.

        Raises:
            OSError: If the file exists but cannot be removed.
        """
        ...

    def mkdir(self, path: Path, parents: bool = True) -> None:
        """Create directory if it does not exist.

        Args:
            path: Directory path to create.
            parents: Create parent directories if needed.
        """
        ...

    def copy(self, source: Path, destination: Path) -> None:
        """Copy a file, overwriting the destination.

        Args:
            source: File to copy.
            destination: Target file path.

        Raises:
            OSError: If the copy fails.
        """
        ...
