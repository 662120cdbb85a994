"""Domain exceptions for gitpad.

These exceptions represent the failure modes of the edit pipeline and the
installer. They are caught at the use case or CLI boundary and turned into
an exit code plus a user-facing diagnostic.
"""


class GitpadDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class ConfigurationError(GitpadDomainError):
    """Raised for an invalid line ending request or invalid configuration."""

    pass


class ProcessLaunchError(GitpadDomainError):
    """Raised when an editor process could not be started."""

    pass


class EditorNonZeroExit(GitpadDomainError):
    """Raised when the editor exits with a non-zero status.

    Attributes:
        exit_code: Status reported by the editor process.
    """

    def __init__(self, exit_code: int) -> None:
        super().__init__(
            f"Editor exited with status {exit_code}",
            hint="The commit message was left unchanged",
        )
        self.exit_code = exit_code


class EditAborted(GitpadDomainError):
    """Raised when the user interrupts the manual confirmation gate."""

    pass


class UserDeclined(GitpadDomainError):
    """Raised when the user declines the install prompt."""

    pass


class PrivilegeError(GitpadDomainError):
    """Raised when install is attempted from an elevated process."""

    pass


class PrivilegeCheckError(GitpadDomainError):
    """Raised when the process token could not be queried."""

    pass
