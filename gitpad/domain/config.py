"""Config domain models for gitpad.

Configuration is stored in an optional per-user config.toml and tunes how the
transient file is written and where the installer registers the program.
"""

from dataclasses import dataclass, field
from typing import Any

from gitpad.domain.line_endings import LineEndingType


@dataclass(frozen=True)
class EditConfig:
    """Configuration for the edit pipeline.

    Attributes:
        line_ending: Line ending used for the editor-facing file
                     ("native", "windows", "posix" or "macos9")
        emit_bom: Write a UTF-8 byte order mark on the editor-facing file.
                  The file handed back to git never gets one.
        fallback_editor: Editor used when the default handler cannot be
                         launched. Empty means notepad on Windows, vi elsewhere.
        transient_dir: Directory for the editor-facing file. Empty means the
                       system temp directory.

    Raises:
        ValueError: If a value has the wrong type.
        ConfigurationError: If line_ending is not a known convention.
    """

    line_ending: str = "native"
    emit_bom: bool = True
    fallback_editor: str = ""
    transient_dir: str = ""

    def __post_init__(self) -> None:
        """Validate edit config after initialization."""
        for name in ("line_ending", "fallback_editor", "transient_dir"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        if not isinstance(self.emit_bom, bool):
            raise ValueError(f"emit_bom must be true or false, got {self.emit_bom!r}")
        LineEndingType.parse(self.line_ending)

    @property
    def line_ending_type(self) -> LineEndingType:
        """Resolved line ending for the editor-facing file."""
        return LineEndingType.parse(self.line_ending)


@dataclass(frozen=True)
class InstallConfig:
    """Configuration for the installer.

    Attributes:
        env_var: Environment variable registered with the installed path.
        app_dir_name: Directory created under the application data root.

    Raises:
        ValueError: If either value is empty or not a string.
    """

    env_var: str = "EDITOR"
    app_dir_name: str = "GitPad"

    def __post_init__(self) -> None:
        """Validate install config after initialization."""
        for name in ("env_var", "app_dir_name"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        if not self.env_var:
            raise ValueError("env_var cannot be empty")
        if not self.app_dir_name:
            raise ValueError("app_dir_name cannot be empty")


@dataclass(frozen=True)
class GitpadConfig:
    """Complete gitpad configuration.

    Attributes:
        edit: Edit pipeline configuration
        install: Installer configuration
    """

    edit: EditConfig = field(default_factory=EditConfig)
    install: InstallConfig = field(default_factory=InstallConfig)

    @staticmethod
    def default() -> "GitpadConfig":
        """Create a config with all default values."""
        return GitpadConfig(edit=EditConfig(), install=InstallConfig())

    @staticmethod
    def from_partial(base: "GitpadConfig", data: dict[str, Any]) -> "GitpadConfig":
        """Overlay raw TOML data on top of an existing config.

        Unknown sections are ignored. Values inside a known section replace
        the base values key by key.

        Args:
            base: Config providing values for anything data leaves out.
            data: Parsed TOML mapping.

        Returns:
            New validated GitpadConfig.

        Raises:
            ValueError: If a section has unknown keys or invalid values.
            ConfigurationError: If the line ending is not recognised.
        """
        try:
            edit_data = {**base.edit.__dict__, **_section(data, "edit")}
            install_data = {**base.install.__dict__, **_section(data, "install")}
            return GitpadConfig(
                edit=EditConfig(**edit_data),
                install=InstallConfig(**install_data),
            )
        except TypeError as e:
            raise ValueError(f"Invalid config keys: {e}") from e


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a TOML table, rejecting scalar values where a table belongs."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table, got {section!r}")
    return section
