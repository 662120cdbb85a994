"""Windows environment store backed by HKEY_CURRENT_USER\\Environment.

User-scope variables written here are picked up by every new process the
user starts, after Explorer has been told the environment changed.
"""

import logging
import os

from gitpad.ports.environment import EnvScope

logger = logging.getLogger(__name__)

ENVIRONMENT_KEY = "Environment"
HWND_BROADCAST = 0xFFFF
WM_SETTINGCHANGE = 0x001A
SMTO_ABORTIFHUNG = 0x0002
BROADCAST_TIMEOUT_MS = 5000


def _broadcast_environment_change() -> None:
    """Tell running applications that user environment variables changed."""
    import ctypes
    from ctypes import wintypes

    user32 = ctypes.WinDLL("user32", use_last_error=True)
    result = wintypes.DWORD()
    sent = user32.SendMessageTimeoutW(
        wintypes.HWND(HWND_BROADCAST),
        WM_SETTINGCHANGE,
        0,
        ctypes.c_wchar_p(ENVIRONMENT_KEY),
        SMTO_ABORTIFHUNG,
        BROADCAST_TIMEOUT_MS,
        ctypes.byref(result),
    )
    if not sent:
        logger.warning(
            "Environment change broadcast failed; new value applies after next login"
        )


class WindowsRegistryEnvironmentStore:
    """EnvironmentStore for Windows.

    PROCESS scope maps to os.environ, USER scope to the registry.
    """

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

        import winreg

        try:
            with winreg.OpenKey(winreg.HKEY_CURRENT_USER, ENVIRONMENT_KEY) as reg:
                value, _ = winreg.QueryValueEx(reg, key)
        except FileNotFoundError:
            return None
        return str(value)

    def set(self, key: str, value: str, scope: EnvScope = EnvScope.USER) -> None:
        """Write a variable.

        Args:
            key: Variable name.
            value: Value to store.
            scope: Where to persist it.

        Raises:
            OSError: If the registry key cannot be written.
        """
        if scope is EnvScope.PROCESS:
            os.environ[key] = value
            return

        import winreg

        with winreg.CreateKey(winreg.HKEY_CURRENT_USER, ENVIRONMENT_KEY) as reg:
            winreg.SetValueEx(reg, key, 0, winreg.REG_SZ, value)
        logger.debug(f"Wrote HKCU\\{ENVIRONMENT_KEY}\\{key}")
        _broadcast_environment_change()
