"""Configuration provider port.

Defines the interface for loading application configuration.
"""

from pathlib import Path
from typing import Protocol

from gitpad.domain.config import GitpadConfig


class ConfigProvider(Protocol):
    """Protocol for loading and providing configuration."""

    def load(self, path: Path | None = None) -> GitpadConfig:
        """Load configuration.

        Args:
            path: Explicit config.toml path, None for the default location.

        Returns:
            GitpadConfig instance with loaded or default values

        Note:
            Implementations should gracefully fall back to defaults
            if config file is missing or invalid.
        """
        ...
