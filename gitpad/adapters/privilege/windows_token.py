"""Elevation check based on the Windows process token.

Implements the PrivilegeChecker port by asking the current process token for
its elevation type. Windows releases before Vista (major version 6) have no
elevation model, so the check reports "not elevated" there without opening
the token.
"""

import logging
import sys
from collections.abc import Callable
from enum import IntEnum
from typing import Any, Protocol

from gitpad.domain.exceptions import PrivilegeCheckError

logger = logging.getLogger(__name__)

TOKEN_QUERY = 0x0008
# TOKEN_INFORMATION_CLASS.TokenElevationType
TOKEN_ELEVATION_TYPE_CLASS = 18
FIRST_ELEVATION_AWARE_MAJOR_VERSION = 6


class TokenElevationType(IntEnum):
    """Values of the Win32 TOKEN_ELEVATION_TYPE enumeration."""

    DEFAULT = 1
    FULL = 2
    LIMITED = 3


class TokenApi(Protocol):
    """The three token calls the elevation check needs."""

    def open_process_token(self) -> Any:
        """Open the current process token for query access.

        Raises:
            OSError: If the token cannot be opened.
        """
        ...

    def get_elevation_type(self, token: Any) -> int:
        """Read the token's elevation type.

        Raises:
            OSError: If the information cannot be read.
        """
        ...

    def close_handle(self, token: Any) -> None:
        """Release the token handle."""
        ...


class Win32TokenApi:
    """TokenApi backed by advapi32/kernel32 through ctypes."""

    def __init__(self) -> None:
        import ctypes
        from ctypes import wintypes

        self._ctypes = ctypes
        self._wintypes = wintypes
        self._advapi32 = ctypes.WinDLL("advapi32", use_last_error=True)
        self._kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)

        self._kernel32.GetCurrentProcess.restype = wintypes.HANDLE
        self._kernel32.CloseHandle.argtypes = [wintypes.HANDLE]
        self._advapi32.OpenProcessToken.argtypes = [
            wintypes.HANDLE,
            wintypes.DWORD,
            ctypes.POINTER(wintypes.HANDLE),
        ]
        self._advapi32.OpenProcessToken.restype = wintypes.BOOL
        self._advapi32.GetTokenInformation.argtypes = [
            wintypes.HANDLE,
            ctypes.c_int,
            ctypes.c_void_p,
            wintypes.DWORD,
            ctypes.POINTER(wintypes.DWORD),
        ]
        self._advapi32.GetTokenInformation.restype = wintypes.BOOL

    def open_process_token(self) -> Any:
        ctypes = self._ctypes
        token = self._wintypes.HANDLE()
        process = self._kernel32.GetCurrentProcess()
        if not self._advapi32.OpenProcessToken(process, TOKEN_QUERY, ctypes.byref(token)):
            raise ctypes.WinError(ctypes.get_last_error())
        return token

    def get_elevation_type(self, token: Any) -> int:
        ctypes = self._ctypes
        elevation = self._wintypes.DWORD()
        returned = self._wintypes.DWORD()
        ok = self._advapi32.GetTokenInformation(
            token,
            TOKEN_ELEVATION_TYPE_CLASS,
            ctypes.byref(elevation),
            ctypes.sizeof(elevation),
            ctypes.byref(returned),
        )
        if not ok:
            raise ctypes.WinError(ctypes.get_last_error())
        return elevation.value

    def close_handle(self, token: Any) -> None:
        self._kernel32.CloseHandle(token)


def _windows_major_version() -> int:
    return sys.getwindowsversion().major


class WindowsTokenPrivilegeChecker:
    """PrivilegeChecker that classifies the process token's elevation type.

    Only TokenElevationTypeFull counts as elevated; the default and limited
    (split token, UAC filtered) types do not.
    """

    def __init__(
        self,
        api: TokenApi | None = None,
        major_version: Callable[[], int] | None = None,
    ) -> None:
        """Initialize the checker.

        Args:
            api: Token API to call (default: Win32TokenApi, created lazily).
            major_version: Returns the Windows major version
                (default: sys.getwindowsversion().major).
        """
        self._api = api
        self._major_version = major_version or _windows_major_version

    def is_elevated(self) -> bool:
        """Check whether the current process is fully elevated.

        Returns:
            True for TokenElevationTypeFull, False otherwise.

        Raises:
            PrivilegeCheckError: If the token cannot be opened or queried.
        """
        if self._major_version() < FIRST_ELEVATION_AWARE_MAJOR_VERSION:
            # No UAC before Vista
            return False

        api = self._api or Win32TokenApi()
        try:
            token = api.open_process_token()
        except OSError as e:
            raise PrivilegeCheckError("OpenProcessToken failed", hint=str(e)) from e

        try:
            try:
                elevation = api.get_elevation_type(token)
            except OSError as e:
                raise PrivilegeCheckError("GetTokenInformation failed", hint=str(e)) from e
            logger.debug(f"Token elevation type: {elevation}")
            return elevation == TokenElevationType.FULL
        finally:
            api.close_handle(token)
