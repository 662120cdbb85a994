"""Install use case: register gitpad as the user's commit editor.

Runs when gitpad is started without a file argument. Copies the running
program into the per-user application data directory and points EDITOR at
the copy. Re-running simply overwrites the previous install.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from gitpad.core.use_case_errors import FAILURE_EXIT_CODE
from gitpad.domain.config import InstallConfig
from gitpad.domain.entities import InstallTarget
from gitpad.domain.exceptions import PrivilegeError, UserDeclined
from gitpad.ports.environment import EnvironmentStore, EnvScope
from gitpad.ports.fs import FileSystem
from gitpad.ports.privilege import PrivilegeChecker
from gitpad.ports.ui import UserInterface
from gitpad.shared.config_io import create_default_config_file

logger = logging.getLogger(__name__)

INSTALL_TITLE = "Installing GitPad"
INSTALL_QUESTION = "Do you want to use your default text editor as your commit editor?"
ELEVATED_TITLE = "App is Elevated"
ELEVATED_MESSAGE = "Run this application as a normal user (not as Elevated Administrator)"


def running_program() -> Path:
    """Return the path of the program currently running.

    A frozen build is its own executable. Otherwise this is the console
    script that started the interpreter; on Windows the launcher may be
    reported without its .exe suffix.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve()

    program = Path(sys.argv[0]).resolve()
    if not program.exists() and program.with_suffix(".exe").exists():
        return program.with_suffix(".exe")
    return program


@dataclass
class InstallResult:
    """Result of an install attempt.

    Attributes:
        exit_code: 0 on success, -1 if install was refused or declined.
        target: Where the program was installed, None if nothing changed.
        config_created: True if a default config.toml was written.
        error: Reason install did not happen, None on success.
    """

    exit_code: int
    target: InstallTarget | None = None
    config_created: bool = False
    error: str | None = None

    @property
    def success(self) -> bool:
        """True if the program was installed."""
        return self.exit_code == 0


class InstallUseCase:
    """Performs the one-time self install."""

    def __init__(
        self,
        fs: FileSystem,
        privilege_checker: PrivilegeChecker,
        env_store: EnvironmentStore,
        ui: UserInterface,
        program: Path,
        app_data: Path,
        config: InstallConfig | None = None,
        config_path: Path | None = None,
    ) -> None:
        """Initialize the install use case.

        Args:
            fs: File system adapter.
            privilege_checker: Reports whether this process is elevated.
            env_store: Where the EDITOR setting is persisted.
            ui: Dialog/console adapter for the prompts.
            program: Path of the running program to copy.
            app_data: Per-user application data root.
            config: Install settings (default: InstallConfig()).
            config_path: Where to write a default config.toml if none exists,
                None to skip.
        """
        self._fs = fs
        self._privilege_checker = privilege_checker
        self._env_store = env_store
        self._ui = ui
        self._program = program
        self._config = config or InstallConfig()
        self._config_path = config_path
        self._target = InstallTarget.under(app_data, self._config.app_dir_name, program.name)

    @property
    def target(self) -> InstallTarget:
        """Where the program will be installed."""
        return self._target

    def run(self) -> int:
        """Install and return the process exit code."""
        return self.execute().exit_code

    def execute(self) -> InstallResult:
        """Execute the install.

        Returns:
            InstallResult; refusals are reported through it.

        Raises:
            OSError: If creating the directory or copying the program fails.
                No rollback is attempted.
            PrivilegeCheckError: If the elevation state could not be read.
        """
        try:
            self._check_allowed()
        except (PrivilegeError, UserDeclined) as e:
            logger.info(f"Install not performed: {e.message}")
            return InstallResult(exit_code=FAILURE_EXIT_CODE, error=e.message)

        target = self._target
        self._fs.mkdir(target.directory)
        self._fs.copy(self._program, target.executable)
        logger.debug(f"Copied {self._program} to {target.executable}")

        self._env_store.set(self._config.env_var, target.editor_value, EnvScope.USER)
        logger.info(f"Set {self._config.env_var}={target.editor_value}")

        config_created = self._create_default_config()

        self._ui.info(f"GitPad installed to {target.executable}")
        return InstallResult(exit_code=0, target=target, config_created=config_created)

    def _check_allowed(self) -> None:
        """Refuse elevated processes, then ask for consent.

        Raises:
            PrivilegeError: If the process is elevated.
            UserDeclined: If the user says no.
        """
        if self._privilege_checker.is_elevated():
            self._ui.show_error(ELEVATED_MESSAGE, ELEVATED_TITLE)
            raise PrivilegeError(ELEVATED_MESSAGE)

        if not self._ui.confirm(INSTALL_QUESTION, INSTALL_TITLE):
            raise UserDeclined("Install declined")

    def _create_default_config(self) -> bool:
        """Write a default config.toml unless one already exists."""
        if self._config_path is None or self._fs.exists(self._config_path):
            return False
        create_default_config_file(self._config_path)
        logger.debug(f"Created default config at {self._config_path}")
        return True
