"""Factory for use case and adapter instantiation.

This module centralizes the creation of the use cases and picks the adapters
for the current platform, keeping the CLI layer free from direct adapter
imports. Windows-only adapters are imported lazily.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitpad.core.edit_usecase import EditUseCase
    from gitpad.core.install_usecase import InstallUseCase
    from gitpad.domain.config import GitpadConfig
    from gitpad.ports.environment import EnvironmentStore
    from gitpad.ports.privilege import PrivilegeChecker
    from gitpad.ports.ui import UserInterface


class UseCaseFactory:
    """Factory for creating the edit and install use cases.

    Args:
        config: Loaded gitpad configuration.
        platform: sys.platform value to build adapters for (default: current).
    """

    def __init__(self, config: GitpadConfig, platform: str | None = None) -> None:
        """Initialize factory with configuration.

        Args:
            config: Configuration for both use cases.
            platform: Platform to select adapters for.
        """
        self._config = config
        self._platform = platform or sys.platform

    @property
    def is_windows(self) -> bool:
        """True when building adapters for Windows."""
        return self._platform == "win32"

    def create_edit_usecase(self) -> EditUseCase:
        """Create the edit pipeline with platform adapters.

        Returns:
            EditUseCase ready to run.
        """
        from gitpad.adapters.editor import CommandEditorLauncher, ShellEditorLauncher
        from gitpad.adapters.fs.local import LocalFileSystem
        from gitpad.adapters.ui.console import ConsoleUserInterface
        from gitpad.core.edit_usecase import EditUseCase

        edit = self._config.edit
        return EditUseCase(
            fs=LocalFileSystem(),
            launcher=ShellEditorLauncher(platform=self._platform),
            fallback_launcher=CommandEditorLauncher(edit.fallback_editor or None),
            ui=ConsoleUserInterface(),
            editor_line_ending=edit.line_ending_type,
            emit_bom=edit.emit_bom,
            transient_dir=Path(edit.transient_dir) if edit.transient_dir else None,
        )

    def create_install_usecase(self, config_path: Path | None = None) -> InstallUseCase:
        """Create the installer with platform adapters.

        Args:
            config_path: Where to write a default config.toml if missing.

        Returns:
            InstallUseCase ready to run.
        """
        from gitpad.adapters.fs.local import LocalFileSystem
        from gitpad.core.install_usecase import InstallUseCase, running_program
        from gitpad.shared.config_io import get_app_data_dir

        return InstallUseCase(
            fs=LocalFileSystem(),
            privilege_checker=self.create_privilege_checker(),
            env_store=self.create_environment_store(),
            ui=self.create_install_ui(),
            program=running_program(),
            app_data=get_app_data_dir(),
            config=self._config.install,
            config_path=config_path,
        )

    def create_privilege_checker(self) -> PrivilegeChecker:
        """Token based checker on Windows, null checker elsewhere."""
        if self.is_windows:
            from gitpad.adapters.privilege.windows_token import WindowsTokenPrivilegeChecker

            return WindowsTokenPrivilegeChecker()

        from gitpad.adapters.privilege.null import NullPrivilegeChecker

        return NullPrivilegeChecker()

    def create_environment_store(self) -> EnvironmentStore:
        """Registry store on Windows, environment.d store elsewhere."""
        if self.is_windows:
            from gitpad.adapters.environment.windows_registry import (
                WindowsRegistryEnvironmentStore,
            )

            return WindowsRegistryEnvironmentStore()

        from gitpad.adapters.environment.environment_d import EnvironmentDStore

        return EnvironmentDStore()

    def create_install_ui(self) -> UserInterface:
        """Message boxes on Windows, the terminal elsewhere."""
        if self.is_windows:
            from gitpad.adapters.ui.message_box import MessageBoxUserInterface

            return MessageBoxUserInterface()

        from gitpad.adapters.ui.console import ConsoleUserInterface

        return ConsoleUserInterface()
