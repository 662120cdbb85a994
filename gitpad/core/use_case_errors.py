"""Use case error handling utilities.

Provides consistent exception handling across the use cases. Use cases
return results carrying an exit code rather than raising (except for
KeyboardInterrupt/SystemExit).

Design principles:
1. KeyboardInterrupt and SystemExit are always re-raised (never caught)
2. GitpadDomainError subclasses carry user-friendly messages
3. Unexpected exceptions are logged with a traceback and get a generic message
"""

import logging

from gitpad.domain.exceptions import GitpadDomainError

logger = logging.getLogger(__name__)

# Exit code for every failure that is not a forwarded editor status
FAILURE_EXIT_CODE = -1


def format_error_message(exception: Exception, operation_name: str) -> str:
    """Format an exception into a user-friendly error message.

    Handles different exception types appropriately:
    - GitpadDomainError: Uses the error's message (and hint) directly
    - UnicodeDecodeError: Points at the UTF-8 requirement
    - OSError: Includes the failing path and OS reason
    - Other exceptions: Returns a generic "internal error" message

    Args:
        exception: The exception that was caught.
        operation_name: Name of the operation for error messages (e.g., "edit").

    Returns:
        User-friendly error message string.
    """
    if isinstance(exception, GitpadDomainError):
        if exception.hint:
            return f"{exception.message}\nHint: {exception.hint}"
        return exception.message
    elif isinstance(exception, UnicodeDecodeError):
        return f"{operation_name.capitalize()} error: file is not valid UTF-8 ({exception.reason})"
    elif isinstance(exception, OSError):
        return f"I/O error: {exception}"
    elif isinstance(exception, (ValueError, RuntimeError)):
        return f"{operation_name.capitalize()} error: {exception}"
    else:
        return f"Internal error during {operation_name}. Check logs for details."


def log_use_case_error(exception: Exception, operation_name: str) -> None:
    """Log an exception from a use case with appropriate severity.

    - GitpadDomainError: DEBUG level (the UI already shows the message)
    - OSError/ValueError/RuntimeError: DEBUG level
    - Other exceptions: EXCEPTION level (includes traceback)

    Args:
        exception: The exception that was caught.
        operation_name: Name of the operation for log messages.
    """
    if isinstance(exception, GitpadDomainError):
        logger.debug(exception.message)
    elif isinstance(exception, (OSError, ValueError, RuntimeError)):
        logger.debug(f"Error during {operation_name}: {exception}")
    else:
        logger.exception(f"Unexpected error during {operation_name}")
