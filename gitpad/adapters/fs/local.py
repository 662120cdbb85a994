"""Local file system adapter.

Implements the FileSystem port using pathlib, tempfile and shutil.
This is the default adapter for file system operations.
"""

import os
import shutil
import tempfile
from pathlib import Path


class LocalFileSystem:
    """Local file system implementation.

    This adapter implements the FileSystem port protocol for standard
    local file system operations.
    """

    def read(self, path: Path) -> bytes:
        """Read file contents.

        Args:
            path: Path to file.

        Returns:
            File contents as bytes.

        Raises:
            FileNotFoundError: If file doesn't exist.
        """
        return path.read_bytes()

    def write(self, path: Path, content: bytes) -> None:
        """Truncate and rewrite a file.

        Args:
            path: Path to file.
            content: Content to write.

        Raises:
            OSError: If write fails.
        """
        path.write_bytes(content)

    def create_transient(self, directory: Path | None, prefix: str, suffix: str) -> Path:
        """Create a uniquely named empty file.

        Args:
            directory: Directory to create it in, None for the system temp dir.
            prefix: File name prefix.
            suffix: File name suffix.

        Returns:
            Path of the created file.
        """
        fd, name = tempfile.mkstemp(suffix=suffix, prefix=prefix, dir=directory)
        # No handle may stay open while the editor owns the file
        os.close(fd)
        return Path(name)

    def exists(self, path: Path) -> bool:
        """Check if path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        return path.exists()

    def delete(self, path: Path) -> None:
        """Delete a file. Missing files are ignored.

        Args:
            path: File to delete.
        """
        path.unlink(missing_ok=True)

    def mkdir(self, path: Path, parents: bool = True) -> None:
        """Create directory if it does not already exist.

        Args:
            path: Directory path to create.
            parents: Create parent directories if needed.
        """
        path.mkdir(parents=parents, exist_ok=True)

    def copy(self, source: Path, destination: Path) -> None:
        """Copy a file with its permission bits, overwriting the destination.

        Args:
            source: File to copy.
            destination: Target file path.

        Raises:
            OSError: If the copy fails.
        """
        shutil.copy2(source, destination)
