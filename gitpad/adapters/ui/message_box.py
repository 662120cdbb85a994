"""Windows message box user interface.

Install prompts and error notices are shown as native dialogs, since the
installer is usually started by double-clicking the program. Everything else
still goes to the console.
"""

from gitpad.adapters.ui.console import ConsoleUserInterface

MB_OK = 0x00000000
MB_YESNO = 0x00000004
MB_ICONERROR = 0x00000010
IDYES = 6


def _message_box(message: str, title: str, style: int) -> int:
    import ctypes

    user32 = ctypes.WinDLL("user32", use_last_error=True)
    result = user32.MessageBoxW(None, message, title, style)
    if result == 0:
        raise ctypes.WinError(ctypes.get_last_error())
    return result


class MessageBoxUserInterface(ConsoleUserInterface):
    """UserInterface that uses MessageBoxW for prompts and error notices."""

    def confirm(self, message: str, title: str) -> bool:
        """Show a Yes/No dialog.

        Returns:
            True if the user clicked Yes.
        """
        return _message_box(message, title, MB_YESNO) == IDYES

    def show_error(self, message: str, title: str) -> None:
        """Show a blocking error dialog."""
        _message_box(message, title, MB_OK | MB_ICONERROR)
