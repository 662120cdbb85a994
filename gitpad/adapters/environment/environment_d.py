"""Environment store backed by a systemd user environment.d file.

User-scope variables are written as KEY=VALUE lines to
~/.config/environment.d/60-gitpad.conf, which the user session manager
loads at login. Lines belonging to other keys are preserved.
"""

import logging
import os
from pathlib import Path

from gitpad.ports.environment import EnvScope

logger = logging.getLogger(__name__)

CONF_NAME = "60-gitpad.conf"
HEADER = "# Managed by gitpad"


def get_environment_d_path() -> Path:
    """Get the environment.d file gitpad writes to.

    Returns:
        $XDG_CONFIG_HOME/environment.d/60-gitpad.conf or the ~/.config equivalent
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
    config_home = Path(xdg_config) if xdg_config else Path.home() / ".config"
    return config_home / "environment.d" / CONF_NAME


def _parse_line(line: str) -> tuple[str, str] | None:
    """Parse one KEY=VALUE line, ignoring comments and blanks."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#") or "=" not in stripped:
        return None
    key, value = stripped.split("=", 1)
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return key.strip(), value


class EnvironmentDStore:
    """EnvironmentStore for Linux and other POSIX desktops.

    PROCESS scope maps to os.environ, USER scope to the environment.d file.
    """

    def __init__(self, path: Path | None = None) -> None:
        """Initialize the store.

        Args:
            path: File to read and write (default: get_environment_d_path()).
        """
        self.path = path or get_environment_d_path()

    def get(self, key: str, scope: EnvScope = EnvScope.USER) -> str | None:
        """Read a variable.

        Args:
            key: Variable name.
            scope: Where to read it from.

        Returns:
            The value, or None if unset.
        """
        if scope is EnvScope.PROCESS:
            return os.environ.get(key)

        if not self.path.exists():
            return None
        for line in self.path.read_text(encoding="utf-8").splitlines():
            parsed = _parse_line(line)
            if parsed and parsed[0] == key:
                return parsed[1]
        return None

    def set(self, key: str, value: str, scope: EnvScope = EnvScope.USER) -> None:
        """Write a variable, replacing any previous value for key.

        Args:
            key: Variable name.
            value: Value to store.
            scope: Where to persist it.

        Raises:
            OSError: If the file cannot be written.
        """
        if scope is EnvScope.PROCESS:
            os.environ[key] = value
            return

        lines = [HEADER]
        if self.path.exists():
            for line in self.path.read_text(encoding="utf-8").splitlines():
                parsed = _parse_line(line)
                if line.strip() == HEADER or (parsed and parsed[0] == key):
                    continue
                lines.append(line)
        lines.append(f"{key}={value}")

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.debug(f"Wrote {key} to {self.path}")
