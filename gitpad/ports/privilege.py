"""Privilege checker port.

Installing from an elevated process would register the editor for the wrong
security context, so the installer asks this port first.
"""

from typing import Protocol


class PrivilegeChecker(Protocol):
    """Protocol for querying whether the current process is elevated."""

    def is_elevated(self) -> bool:
        """Check the elevation state of the current process.

        Returns:
            True if the process runs with full administrative elevation.

        Raises:
            PrivilegeCheckError: If the platform query fails.
        """
        ...
