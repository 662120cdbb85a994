"""Domain entities for the edit pipeline and installer."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class EditSession:
    """State of one edit of a commit message.

    Attributes:
        source_path: File passed in by git (e.g. .git/COMMIT_EDITMSG).
        transient_path: Native line ending copy handed to the editor.
        original_content: Text read from source_path.
        edited_content: Text read back from transient_path, None until the
            editor has finished.
    """

    source_path: Path
    transient_path: Path | None = None
    original_content: str = ""
    edited_content: str | None = None


@dataclass(frozen=True)
class InstallTarget:
    """Where the installer places the program.

    Attributes:
        directory: Per-user application data directory for gitpad.
        executable: Destination path of the copied program.
    """

    directory: Path
    executable: Path

    @classmethod
    def under(cls, app_data: Path, app_dir_name: str, program_name: str) -> "InstallTarget":
        """Build a target inside an application data root.

        Args:
            app_data: Root such as %APPDATA% or ~/.local/share.
            app_dir_name: Directory created under app_data.
            program_name: File name of the copied program.
        """
        directory = app_data / app_dir_name
        return cls(directory=directory, executable=directory / program_name)

    @property
    def editor_value(self) -> str:
        """Executable path with forward slashes, as git expects in EDITOR."""
        return str(self.executable).replace("\\", "/")
