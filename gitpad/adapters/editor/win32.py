"""ShellExecuteEx bindings for launching the default editor on Windows.

Only imported on Windows.
"""

import ctypes
from ctypes import wintypes
from pathlib import Path

from gitpad.domain.exceptions import ProcessLaunchError

SEE_MASK_NOCLOSEPROCESS = 0x00000040
SEE_MASK_FLAG_NO_UI = 0x00000400
SW_SHOWNORMAL = 1
INFINITE = 0xFFFFFFFF
WAIT_FAILED = 0xFFFFFFFF


class SHELLEXECUTEINFOW(ctypes.Structure):
    _fields_ = [
        ("cbSize", wintypes.DWORD),
        ("fMask", wintypes.ULONG),
        ("hwnd", wintypes.HWND),
        ("lpVerb", wintypes.LPCWSTR),
        ("lpFile", wintypes.LPCWSTR),
        ("lpParameters", wintypes.LPCWSTR),
        ("lpDirectory", wintypes.LPCWSTR),
        ("nShow", ctypes.c_int),
        ("hInstApp", wintypes.HINSTANCE),
        ("lpIDList", ctypes.c_void_p),
        ("lpClass", wintypes.LPCWSTR),
        ("hkeyClass", wintypes.HKEY),
        ("dwHotKey", wintypes.DWORD),
        ("hIconOrMonitor", wintypes.HANDLE),
        ("hProcess", wintypes.HANDLE),
    ]


_shell32 = ctypes.WinDLL("shell32", use_last_error=True)
_kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)

_shell32.ShellExecuteExW.argtypes = [ctypes.POINTER(SHELLEXECUTEINFOW)]
_shell32.ShellExecuteExW.restype = wintypes.BOOL
_kernel32.WaitForSingleObject.argtypes = [wintypes.HANDLE, wintypes.DWORD]
_kernel32.WaitForSingleObject.restype = wintypes.DWORD
_kernel32.GetExitCodeProcess.argtypes = [wintypes.HANDLE, ctypes.POINTER(wintypes.DWORD)]
_kernel32.GetExitCodeProcess.restype = wintypes.BOOL
_kernel32.CloseHandle.argtypes = [wintypes.HANDLE]
_kernel32.CloseHandle.restype = wintypes.BOOL


class Win32ProcessHandle:
    """Process handle returned by ShellExecuteEx.

    The handle is closed once the process has been waited on.
    """

    def __init__(self, handle: int) -> None:
        self._handle = handle

    def wait(self) -> int:
        """Block until the process exits and return its exit code.

        Raises:
            OSError: If waiting or reading the exit code fails.
        """
        try:
            if _kernel32.WaitForSingleObject(self._handle, INFINITE) == WAIT_FAILED:
                raise ctypes.WinError(ctypes.get_last_error())
            exit_code = wintypes.DWORD()
            if not _kernel32.GetExitCodeProcess(self._handle, ctypes.byref(exit_code)):
                raise ctypes.WinError(ctypes.get_last_error())
            return exit_code.value
        finally:
            _kernel32.CloseHandle(self._handle)


def shell_execute(file_path: Path) -> Win32ProcessHandle | None:
    """Open file_path with its associated application.

    Args:
        file_path: File to open with the default verb.

    Returns:
        Handle of the started process, or None when the shell reused an
        existing process and returned no handle.

    Raises:
        ProcessLaunchError: If ShellExecuteEx fails.
    """
    info = SHELLEXECUTEINFOW()
    info.cbSize = ctypes.sizeof(info)
    info.fMask = SEE_MASK_NOCLOSEPROCESS | SEE_MASK_FLAG_NO_UI
    info.lpFile = str(file_path)
    info.nShow = SW_SHOWNORMAL

    if not _shell32.ShellExecuteExW(ctypes.byref(info)):
        error = ctypes.WinError(ctypes.get_last_error())
        raise ProcessLaunchError(f"ShellExecuteEx failed: {error.strerror}")

    if not info.hProcess:
        return None
    return Win32ProcessHandle(info.hProcess)
