"""Configuration I/O utilities for reading and writing TOML config files.

This module handles config file locations and serialization of GitpadConfig
to/from TOML format.
"""

import os
import platform
import tomllib  # Built-in Python 3.11+
from pathlib import Path
from typing import Any

import tomli_w

from gitpad.domain.config import GitpadConfig

CONFIG_ENV_VAR = "GITPAD_CONFIG"


def get_global_config_path() -> Path:
    """Get the path to the user config file.

    The location is platform-dependent:
    - $GITPAD_CONFIG if set
    - Linux/macOS: $XDG_CONFIG_HOME/gitpad/config.toml or ~/.config/gitpad/config.toml
    - Windows: %APPDATA%/gitpad/config.toml

    Returns:
        Path to the config file (may not exist)
    """
    override = os.environ.get(CONFIG_ENV_VAR, "")
    if override:
        return Path(override)

    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "gitpad" / "config.toml"
        # Fallback to home directory
        return Path.home() / ".config" / "gitpad" / "config.toml"
    else:
        # Unix-like: respect XDG_CONFIG_HOME
        xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg_config:
            return Path(xdg_config) / "gitpad" / "config.toml"
        return Path.home() / ".config" / "gitpad" / "config.toml"


def get_app_data_dir() -> Path:
    """Get the per-user application data root the installer copies into.

    - Windows: %APPDATA%
    - Linux/macOS: $XDG_DATA_HOME or ~/.local/share

    Returns:
        Application data root (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"

    xdg_data = os.environ.get("XDG_DATA_HOME", "")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config.toml file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e


def load_config(path: Path) -> GitpadConfig:
    """Load configuration from a TOML file on top of the defaults.

    Args:
        path: Path to config.toml file

    Returns:
        Parsed GitpadConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    data = load_config_data(path)
    return GitpadConfig.from_partial(GitpadConfig.default(), data)


def save_config(config: GitpadConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: GitpadConfig to save
        path: Destination path for config.toml
    """
    data: dict[str, Any] = {
        "edit": {
            "line_ending": config.edit.line_ending,
            "emit_bom": config.edit.emit_bom,
            "fallback_editor": config.edit.fallback_editor,
            "transient_dir": config.edit.transient_dir,
        },
        "install": {
            "env_var": config.install.env_var,
            "app_dir_name": config.install.app_dir_name,
        },
    }

    # Ensure parent directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("wb") as f:
        tomli_w.dump(data, f)


def create_default_config_file(path: Path) -> None:
    """Create a config.toml holding the default settings.

    Args:
        path: Destination path for config.toml
    """
    save_config(GitpadConfig.default(), path)
