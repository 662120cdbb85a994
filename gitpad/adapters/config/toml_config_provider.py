"""TOML-based configuration provider.

Loads configuration from the user's gitpad config.toml.

Config loading priority (highest to lowest):
1. Explicit path (or $GITPAD_CONFIG)
2. User config: ~/.config/gitpad/config.toml or %APPDATA%/gitpad/config.toml
3. Built-in defaults
"""

import logging
from pathlib import Path

from gitpad.domain.config import GitpadConfig
from gitpad.domain.exceptions import ConfigurationError
from gitpad.shared.config_io import get_global_config_path, load_config_data

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from a TOML file.

    A missing file means defaults. An unreadable or invalid file is reported
    with a warning and also falls back to defaults, so a broken config never
    blocks a commit.
    """

    def load(self, path: Path | None = None) -> GitpadConfig:
        """Load configuration with default fallback.

        Args:
            path: Explicit config.toml path, None for the default location.

        Returns:
            GitpadConfig instance with file values or defaults
        """
        config_path = path or get_global_config_path()
        config = GitpadConfig.default()

        if not config_path.exists():
            logger.debug("No config at %s, using defaults", config_path)
            return config

        try:
            data = load_config_data(config_path)
            config = GitpadConfig.from_partial(config, data)
            logger.debug("Loaded config from %s", config_path)
        except (OSError, ValueError) as e:
            logger.warning(
                "Failed to parse config at %s: %s. Using default configuration.",
                config_path,
                e,
            )
        except ConfigurationError as e:
            logger.warning(
                "Invalid config at %s: %s. Using default configuration.",
                config_path,
                e.message,
            )

        return config
