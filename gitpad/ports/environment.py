"""Environment variable store port.

Defines a key-value interface over the place environment variables are
persisted, so the installer never touches global process state directly.
"""

from enum import Enum
from typing import Protocol


class EnvScope(str, Enum):
    """Lifetime of an environment variable.

    - PROCESS: current process and its children only
    - USER: persisted for the invoking user across sessions
    """

    PROCESS = "process"
    USER = "user"


class EnvironmentStore(Protocol):
    """Protocol for reading and writing environment variables."""

    def get(self, key: str, scope: EnvScope = EnvScope.USER) -> str | None:
        """Read a variable.

        Args:
            key: Variable name.
            scope: Where to read it from.

        Returns:
            The value, or None if unset.
        """
        ...

    def set(self, key: str, value: str, scope: EnvScope = EnvScope.USER) -> None:
        """Write a variable.

        Args:
            key: Variable name.
            value: Value to store.
            scope: Where to persist it.

        Raises:
            OSError: If the backing store cannot be written.
        """
        ...
